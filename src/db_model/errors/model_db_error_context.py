# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error Context Configuration Model.

Bundles the structured fields shared by every DbModelError so that error
constructors stay small while keeping strong typing.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ModelDbErrorContext(BaseModel):
    """Structured context attached to data access errors.

    Attributes:
        operation: Operation being performed (find_by_id, invoke, initialize, ...)
        table: Table the operation targeted, if any
        correlation_id: Request correlation ID for tracing

    Example:
        >>> context = ModelDbErrorContext(operation="find_by_id", table="jobs")
        >>> raise ModelNotFoundError("Job not found", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed",
    )
    table: Optional[str] = Field(
        default=None,
        description="Target table name",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Request correlation ID for tracing",
    )


__all__ = ["ModelDbErrorContext"]
