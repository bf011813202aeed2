# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Data Access Error Classes.

Error Hierarchy:
    DbModelError (base)
    ├── ConnectionUnresolvedError
    ├── DatabaseConnectionError
    ├── ModelNotFoundError
    ├── RowNotFoundError
    └── InvalidProcedureNameError

All errors:
    - Carry an EnumDbModelErrorCode for classification
    - Accept ModelDbErrorContext for bundled context parameters
    - Accept arbitrary keyword extras for debugging context
    - Support proper error chaining with `raise ... from e`

Driver and SQLAlchemy exceptions (constraint violations, lost connections,
syntax errors) are deliberately NOT part of this hierarchy. They reach the
caller unchanged.
"""

from typing import Optional
from uuid import UUID

from db_model.enums import EnumDbModelErrorCode
from db_model.errors.model_db_error_context import ModelDbErrorContext


class DbModelError(Exception):
    """Base error class for db_model.

    Example:
        >>> context = ModelDbErrorContext(operation="find_by_id", table="jobs")
        >>> raise DbModelError("Operation failed", context=context, pk=42)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumDbModelErrorCode] = None,
        context: Optional[ModelDbErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize DbModelError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled context (operation, table, correlation_id)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or EnumDbModelErrorCode.OPERATION_FAILED
        self.context = context or ModelDbErrorContext()
        self.extra_context: dict[str, object] = dict(extra_context)

    @property
    def correlation_id(self) -> Optional[UUID]:
        """Correlation ID from the bundled context, if any."""
        return self.context.correlation_id

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message}"


class ConnectionUnresolvedError(DbModelError):
    """Raised when a model has no bound connection and no resolver."""

    def __init__(
        self,
        message: str = "Cannot resolve the database connection.",
        context: Optional[ModelDbErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumDbModelErrorCode.CONNECTION_UNRESOLVED,
            context=context,
            **extra_context,
        )


class DatabaseConnectionError(DbModelError):
    """Raised when an engine cannot be created or fails its initial probe.

    Example:
        >>> raise DatabaseConnectionError(
        ...     "Failed to initialize database engine",
        ...     context=ModelDbErrorContext(operation="initialize"),
        ... )
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelDbErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumDbModelErrorCode.CONNECTION_FAILED,
            context=context,
            **extra_context,
        )


class ModelNotFoundError(DbModelError):
    """Raised by domain-tier lookups (find, find_by_id) when nothing matches."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelDbErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumDbModelErrorCode.MODEL_NOT_FOUND,
            context=context,
            **extra_context,
        )


class RowNotFoundError(DbModelError):
    """Storage-tier absence.

    The storage tier signals absence by returning None; this class exists for
    callers that want to convert that None into an exception themselves.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelDbErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumDbModelErrorCode.ROW_NOT_FOUND,
            context=context,
            **extra_context,
        )


class InvalidProcedureNameError(DbModelError):
    """Raised before any SQL is built when a function/procedure name is unusable."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelDbErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumDbModelErrorCode.INVALID_PROCEDURE_NAME,
            context=context,
            **extra_context,
        )


__all__ = [
    "ConnectionUnresolvedError",
    "DatabaseConnectionError",
    "DbModelError",
    "InvalidProcedureNameError",
    "ModelNotFoundError",
    "RowNotFoundError",
]
