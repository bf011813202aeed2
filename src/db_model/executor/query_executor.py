# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
# ruff: noqa: S608
# S608 disabled: function/procedure names are validated against an identifier
# pattern before they are interpolated; all values are bound parameters.
"""Query executor.

Builds parameterized statements with SQLAlchemy Core and runs them against an
execution context, which is either the base connection (an AsyncEngine) or a
transaction (an AsyncConnection opened by ``engine.begin()``).

Every function takes the execution context as its first argument. Callers
pick it once with resolve_execution_context(connection, trx), so a supplied
transaction overrides the base connection without any branching on the
caller's side.

Case Normalization:
    Predicate and data keys are converted to snake_case before a statement is
    built. Result rows are converted to camelCase before they are returned.
    Both conversions are idempotent, so already-normalized input is safe.
    Raw SQL parameter names are bound as given.

Error Handling:
    SQLAlchemy and driver exceptions (constraint violations, lost
    connections, syntax errors) propagate unchanged. This module only raises
    InvalidProcedureNameError and ValueError for bad arguments, always before
    any SQL is issued.

Example:
    >>> ctx = resolve_execution_context(engine, trx)
    >>> jobs = await find(ctx, "jobs", {"status": "active"},
    ...                   [ModelOrderBy(field="id")])
"""

from __future__ import annotations

import logging
import re
from collections.abc import AsyncIterator, Callable, Iterable, Mapping, Sequence
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from itertools import groupby
from typing import Any, Optional, Union

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine
from sqlalchemy.sql.expression import Executable, Select
from sqlalchemy.types import TypeEngine

from db_model.enums import EnumOrderDirection
from db_model.errors import InvalidProcedureNameError, ModelDbErrorContext
from db_model.models import ModelOrderBy
from db_model.utils import to_camel_case, to_snake_case, to_snake_key

logger = logging.getLogger(__name__)

ExecutionContext = Union[AsyncEngine, AsyncConnection]
QueryModifier = Callable[[Select], Select]
Record = dict[str, Any]

DEFAULT_TIMESTAMP_COLUMN = "updated_at"

# "fn", "schema.fn", "db.schema.fn"
_ROUTINE_NAME_PATTERN = re.compile(
    r"^[A-Za-z_][A-Za-z0-9_$]*(\.[A-Za-z_][A-Za-z0-9_$]*){0,2}$"
)


def resolve_execution_context(
    connection: ExecutionContext, trx: Optional[AsyncConnection] = None
) -> ExecutionContext:
    """Return the transaction if one is supplied, else the base connection."""
    return trx if trx is not None else connection


@asynccontextmanager
async def acquire(ctx: ExecutionContext) -> AsyncIterator[AsyncConnection]:
    """Yield a connection to execute on.

    An AsyncEngine gets a short-lived connection that commits when the block
    exits cleanly. Anything else is treated as an already open connection
    (usually a transaction) and is yielded as-is, leaving commit/rollback to
    its owner.
    """
    if isinstance(ctx, AsyncEngine):
        async with ctx.begin() as conn:
            yield conn
    else:
        yield ctx


def dialect_name(ctx: ExecutionContext) -> str:
    return ctx.dialect.name


def _table(
    name: str,
    columns: Iterable[str] = (),
    column_types: Optional[Mapping[str, TypeEngine[Any]]] = None,
) -> sa.TableClause:
    schema, _, table_name = name.rpartition(".")
    unique_columns = dict.fromkeys(columns)
    types = column_types or {}
    return sa.table(
        table_name,
        *(sa.column(column, types.get(column)) for column in unique_columns),
        schema=schema or None,
    )


def _equality_predicate(where: Mapping[str, Any]) -> list[sa.ColumnElement[bool]]:
    return [sa.column(field) == value for field, value in where.items()]


def order_clause(order: ModelOrderBy) -> sa.UnaryExpression[Any]:
    column = sa.column(to_snake_key(order.field))
    if order.direction is EnumOrderDirection.DESC:
        return column.desc()
    return column.asc()


async def _fetch_rows(
    conn: AsyncConnection,
    statement: Executable,
    params: Optional[Mapping[str, Any]] = None,
) -> list[Record]:
    result = await conn.execute(statement, dict(params) if params else None)
    if not result.returns_rows:
        return []
    return [to_camel_case(dict(row)) for row in result.mappings().all()]


def build_find_query(
    table: str,
    where: Optional[Mapping[str, Any]] = None,
    order_by: Sequence[ModelOrderBy] = (),
    modifier: Optional[QueryModifier] = None,
) -> Select:
    """Build ``SELECT * FROM table WHERE k = v AND ... ORDER BY ...``.

    Only equality predicates are produced. Order entries are applied in the
    given sequence.
    """
    conditions = _equality_predicate(to_snake_case(dict(where or {})))
    query = sa.select(sa.literal_column("*")).select_from(_table(table))
    if conditions:
        query = query.where(*conditions)
    for order in order_by:
        query = query.order_by(order_clause(order))
    if modifier is not None:
        query = modifier(query)
    return query


async def run_query(ctx: ExecutionContext, query: Executable) -> list[Record]:
    """Execute a prepared builder statement and return camelCased rows."""
    async with acquire(ctx) as conn:
        return await _fetch_rows(conn, query)


async def find(
    ctx: ExecutionContext,
    table: str,
    where: Optional[Mapping[str, Any]] = None,
    order_by: Sequence[ModelOrderBy] = (),
    modifier: Optional[QueryModifier] = None,
) -> list[Record]:
    """Return every row of ``table`` matching ``where``, ordered by ``order_by``."""
    query = build_find_query(table, where, order_by, modifier)
    rows = await run_query(ctx, query)
    logger.debug(
        "find completed",
        extra={"table": table, "row_count": len(rows)},
    )
    return rows


async def find_first(
    ctx: ExecutionContext,
    table: str,
    where: Optional[Mapping[str, Any]] = None,
    order_by: Sequence[ModelOrderBy] = (),
    modifier: Optional[QueryModifier] = None,
) -> Optional[Record]:
    """Return the first matching row, or None when there is none."""
    query = build_find_query(table, where, order_by, modifier).limit(1)
    rows = await run_query(ctx, query)
    return rows[0] if rows else None


async def insert(
    ctx: ExecutionContext,
    table: str,
    data: Union[Mapping[str, Any], Sequence[Mapping[str, Any]]],
) -> list[Record]:
    """Insert one record or a list of records and return the persisted rows.

    Records may set different columns; columns a record leaves out get their
    database default. Consecutive records with the same column set share one
    multi-row statement, so results keep input order. An empty list issues
    no statement.
    """
    rows = [data] if isinstance(data, Mapping) else list(data)
    if not rows:
        return []
    values = [to_snake_case(dict(row)) for row in rows]

    inserted: list[Record] = []
    async with acquire(ctx) as conn:
        for columns, group in groupby(values, key=lambda row: frozenset(row)):
            statement = (
                sa.insert(_table(table, sorted(columns)))
                .values(list(group))
                .returning(sa.literal_column("*"))
            )
            inserted.extend(await _fetch_rows(conn, statement))
    logger.debug(
        "insert completed",
        extra={"table": table, "row_count": len(inserted)},
    )
    return inserted


async def has_column(ctx: ExecutionContext, table: str, column: str) -> bool:
    """Check through schema introspection whether ``table`` has ``column``."""
    schema, _, table_name = table.rpartition(".")

    def _column_names(sync_conn: sa.Connection) -> set[str]:
        inspector = sa.inspect(sync_conn)
        return {
            col["name"]
            for col in inspector.get_columns(table_name, schema=schema or None)
        }

    async with acquire(ctx) as conn:
        names = await conn.run_sync(_column_names)
    return column in names


async def update(
    ctx: ExecutionContext,
    table: str,
    where: Mapping[str, Any],
    data: Mapping[str, Any],
    timestamp_column: Optional[str] = DEFAULT_TIMESTAMP_COLUMN,
) -> list[Record]:
    """Update rows matching ``where`` and return them.

    When ``table`` has ``timestamp_column`` and ``data`` does not set it, the
    column is set to the current UTC time. The column check is schema
    introspection done once per call; it is not cached. Pass
    ``timestamp_column=None`` to skip it.
    """
    values = to_snake_case(dict(data))
    predicate = to_snake_case(dict(where))
    column_types: dict[str, TypeEngine[Any]] = {}

    if (
        timestamp_column
        and timestamp_column not in values
        and await has_column(ctx, table, timestamp_column)
    ):
        values[timestamp_column] = datetime.now(UTC)
        column_types[timestamp_column] = sa.DateTime(timezone=True)

    statement = (
        sa.update(_table(table, [*values, *predicate], column_types))
        .where(*_equality_predicate(predicate))
        .values(values)
        .returning(sa.literal_column("*"))
    )
    async with acquire(ctx) as conn:
        updated = await _fetch_rows(conn, statement)
    logger.debug(
        "update completed",
        extra={"table": table, "row_count": len(updated)},
    )
    return updated


async def remove(
    ctx: ExecutionContext, table: str, where: Mapping[str, Any]
) -> list[Record]:
    """Delete rows matching ``where`` and return them."""
    predicate = to_snake_case(dict(where))
    statement = (
        sa.delete(_table(table, predicate))
        .where(*_equality_predicate(predicate))
        .returning(sa.literal_column("*"))
    )
    async with acquire(ctx) as conn:
        removed = await _fetch_rows(conn, statement)
    logger.debug(
        "remove completed",
        extra={"table": table, "row_count": len(removed)},
    )
    return removed


async def raw_query(
    ctx: ExecutionContext,
    sql: str,
    params: Optional[Mapping[str, Any]] = None,
) -> list[Record]:
    """Execute literal SQL with optional ``:name`` parameters.

    Returns camelCased rows, or an empty list for statements that return no
    rows.
    """
    async with acquire(ctx) as conn:
        return await _fetch_rows(conn, sa.text(sql), params)


async def batch_insert(
    ctx: ExecutionContext,
    table: str,
    rows: Sequence[Mapping[str, Any]],
    chunk_size: int,
) -> list[Record]:
    """Insert ``rows`` in chunks of ``chunk_size``, one chunk at a time.

    Chunks are awaited sequentially so at most one insert is outstanding.
    Results are concatenated in input order.

    Raises:
        ValueError: If chunk_size is not positive.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    inserted: list[Record] = []
    for number, start in enumerate(range(0, len(rows), chunk_size), start=1):
        chunk = rows[start : start + chunk_size]
        inserted.extend(await insert(ctx, table, chunk))
        logger.debug(
            "batch_insert chunk completed",
            extra={"table": table, "chunk": number, "chunk_rows": len(chunk)},
        )
    return inserted


def _validate_routine_name(name: str, operation: str) -> str:
    stripped = (name or "").strip()
    if not stripped:
        raise InvalidProcedureNameError(
            "Function or procedure name must not be empty",
            context=ModelDbErrorContext(operation=operation),
        )
    if not _ROUTINE_NAME_PATTERN.match(stripped):
        raise InvalidProcedureNameError(
            f"Invalid function or procedure name: {stripped!r}",
            context=ModelDbErrorContext(operation=operation),
        )
    return stripped


def build_invoke_sql(name: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """``SELECT name(:k1, :k2, ...)`` with keys in mapping order."""
    routine = _validate_routine_name(name, "invoke")
    placeholders = ", ".join(f":{key}" for key in (params or {}))
    return f"SELECT {routine}({placeholders})"


def build_exec_sql(name: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """``EXEC name :k1, :k2, ...`` with keys in mapping order."""
    routine = _validate_routine_name(name, "exec")
    placeholders = ", ".join(f":{key}" for key in (params or {}))
    return f"EXEC {routine} {placeholders}".rstrip()


async def invoke(
    ctx: ExecutionContext,
    name: str,
    params: Optional[Mapping[str, Any]] = None,
) -> list[Record]:
    """Call a database function and return its rows."""
    return await raw_query(ctx, build_invoke_sql(name, params), params)


async def execute_procedure(
    ctx: ExecutionContext,
    name: str,
    params: Optional[Mapping[str, Any]] = None,
) -> list[Record]:
    """Execute a stored procedure and return its rows, if any."""
    return await raw_query(ctx, build_exec_sql(name, params), params)


async def is_valid_connection(ctx: ExecutionContext) -> bool:
    """Probe the connection with ``SELECT 1``.

    Returns False instead of raising so it can back health endpoints.
    """
    try:
        async with acquire(ctx) as conn:
            await conn.execute(sa.text("SELECT 1"))
    except (sa.exc.SQLAlchemyError, OSError) as e:
        logger.warning(
            "Cannot connect to database",
            extra={"error_type": type(e).__name__},
        )
        return False
    return True


__all__ = [
    "DEFAULT_TIMESTAMP_COLUMN",
    "ExecutionContext",
    "QueryModifier",
    "Record",
    "acquire",
    "batch_insert",
    "build_exec_sql",
    "build_find_query",
    "build_invoke_sql",
    "dialect_name",
    "execute_procedure",
    "find",
    "find_first",
    "has_column",
    "insert",
    "invoke",
    "is_valid_connection",
    "order_clause",
    "raw_query",
    "remove",
    "resolve_execution_context",
    "run_query",
    "update",
]
