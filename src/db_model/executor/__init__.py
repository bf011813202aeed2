# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Query execution against an engine or an open transaction."""

from db_model.executor.query_executor import (
    DEFAULT_TIMESTAMP_COLUMN,
    ExecutionContext,
    QueryModifier,
    Record,
    batch_insert,
    build_exec_sql,
    build_find_query,
    build_invoke_sql,
    execute_procedure,
    find,
    find_first,
    has_column,
    insert,
    invoke,
    is_valid_connection,
    raw_query,
    remove,
    resolve_execution_context,
    update,
)

__all__: list[str] = [
    "DEFAULT_TIMESTAMP_COLUMN",
    "ExecutionContext",
    "QueryModifier",
    "Record",
    "batch_insert",
    "build_exec_sql",
    "build_find_query",
    "build_invoke_sql",
    "execute_procedure",
    "find",
    "find_first",
    "has_column",
    "insert",
    "invoke",
    "is_valid_connection",
    "raw_query",
    "remove",
    "resolve_execution_context",
    "update",
]
