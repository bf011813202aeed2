# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Structured ORDER BY entry."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from db_model.enums import EnumOrderDirection


class ModelOrderBy(BaseModel):
    """A single ORDER BY term.

    Entries are applied in sequence, so a list of ModelOrderBy gives stable
    multi-key ordering.

    Example:
        >>> ModelOrderBy(field="createdAt", direction="desc")
        ModelOrderBy(field='createdAt', direction=<EnumOrderDirection.DESC: 'desc'>)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    field: str = Field(min_length=1, description="Column to order by")
    direction: EnumOrderDirection = Field(
        default=EnumOrderDirection.ASC,
        description="Sort direction",
    )


__all__ = ["ModelOrderBy"]
