# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pagination result returned by both pagination strategies."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from db_model.models.model_page_window import ModelPageWindow


class ModelPaginationResult(BaseModel):
    """One page of rows plus its page window.

    Serializes with external (camelCase) keys:

        >>> result.model_dump(by_alias=True)
        {'totalCount': 12, 'maxRows': 5, 'pages': {...}, 'results': [...]}
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    total_count: int = Field(ge=0)
    max_rows: int = Field(gt=0)
    pages: ModelPageWindow
    results: list[dict[str, Any]] = Field(default_factory=list)


__all__ = ["ModelPaginationResult"]
