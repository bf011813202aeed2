# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""db_model - Low-footprint relational data access layer.

This package binds a logical table to an async SQLAlchemy engine and exposes
uniform CRUD, raw-query and paginated-query operations, normalizing keys
between external camelCase and storage snake_case.

Key Components:
    - Model: per-table facade (get/find/insert/update/delete/paginate/...)
    - query_executor: statement building and execution against an engine or
      an open transaction
    - pagination: page windows plus raw-SQL and builder pagination
    - utils: case normalization and record helpers
    - DatabaseConnectionManager: engine configuration and lifecycle
"""

from db_model.enums import EnumDbModelErrorCode, EnumOrderDirection
from db_model.errors import (
    ConnectionUnresolvedError,
    DatabaseConnectionError,
    DbModelError,
    InvalidProcedureNameError,
    ModelDbErrorContext,
    ModelNotFoundError,
    RowNotFoundError,
)
from db_model.executor import ExecutionContext, QueryModifier, Record
from db_model.infrastructure import (
    DatabaseConnectionManager,
    ModelDatabaseConfig,
    create_engine,
)
from db_model.model import ConnectionResolver, Model
from db_model.models import (
    ModelOrderBy,
    ModelPageWindow,
    ModelPaginationParams,
    ModelPaginationResult,
    ModelTableDescriptor,
)
from db_model.pagination import build_page_window, paginate, paginate_query
from db_model.utils import from_json, to_camel_case, to_snake_case

__all__: list[str] = [
    "ConnectionResolver",
    "ConnectionUnresolvedError",
    "DatabaseConnectionError",
    "DatabaseConnectionManager",
    "DbModelError",
    "EnumDbModelErrorCode",
    "EnumOrderDirection",
    "ExecutionContext",
    "InvalidProcedureNameError",
    "Model",
    "ModelDatabaseConfig",
    "ModelDbErrorContext",
    "ModelNotFoundError",
    "ModelOrderBy",
    "ModelPageWindow",
    "ModelPaginationParams",
    "ModelPaginationResult",
    "ModelTableDescriptor",
    "QueryModifier",
    "Record",
    "RowNotFoundError",
    "build_page_window",
    "create_engine",
    "from_json",
    "paginate",
    "paginate_query",
    "to_camel_case",
    "to_snake_case",
]
