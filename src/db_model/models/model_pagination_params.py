# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pagination request parameters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from db_model.models.model_order_by import ModelOrderBy


class ModelPaginationParams(BaseModel):
    """Parameters for both pagination strategies.

    Attributes:
        max_rows: Page size
        current_page: 1-based page number; values below 1 are clamped to 1
            when paginating, not rejected
        bound_params: Named parameters shared by the count and page queries
            (raw-text strategy)
        total_count_query: SQL returning the total row count in its first
            column (raw-text strategy, required there)
        has_order_by: Whether the raw SQL already orders its rows. None means
            detect it from the SQL text.
        sort: Ordering overriding the query's own (builder strategy)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_rows: int = Field(default=10, gt=0)
    current_page: int = Field(default=1)
    bound_params: Optional[Mapping[str, Any]] = None
    total_count_query: Optional[str] = None
    has_order_by: Optional[bool] = None
    sort: Optional[tuple[ModelOrderBy, ...]] = None

    @property
    def page(self) -> int:
        """current_page clamped to 1."""
        return self.current_page if self.current_page >= 1 else 1

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.max_rows


__all__ = ["ModelPaginationParams"]
