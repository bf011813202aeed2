# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""db_model Errors Module.

Exports:
    ModelDbErrorContext: Bundled structured context for errors
    DbModelError: Base error class
    ConnectionUnresolvedError: No bound connection and no resolver
    DatabaseConnectionError: Engine creation or verification failure
    ModelNotFoundError: Domain-tier lookup found nothing
    RowNotFoundError: Storage-tier absence, for callers that want to raise
    InvalidProcedureNameError: Empty or malformed function/procedure name

Tiers:
    Storage-tier reads (Model.get, Model.get_by_id, find_first) return None
    when nothing matches. Domain-tier reads (Model.find, Model.find_by_id)
    raise ModelNotFoundError. Pick the tier per call site; do not mix them
    for the same lookup.

Error Sanitization:
    NEVER include the DSN, passwords or row payloads in error messages.
    Table names, operation names, primary key values and correlation IDs
    are safe.
"""

from db_model.errors.db_model_errors import (
    ConnectionUnresolvedError,
    DatabaseConnectionError,
    DbModelError,
    InvalidProcedureNameError,
    ModelNotFoundError,
    RowNotFoundError,
)
from db_model.errors.model_db_error_context import ModelDbErrorContext

__all__: list[str] = [
    "ConnectionUnresolvedError",
    "DatabaseConnectionError",
    "DbModelError",
    "InvalidProcedureNameError",
    "ModelDbErrorContext",
    "ModelNotFoundError",
    "RowNotFoundError",
]
