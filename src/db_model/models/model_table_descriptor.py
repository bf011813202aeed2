# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Table descriptor owned by a Model facade."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from db_model.models.model_order_by import ModelOrderBy

# Plain or schema-qualified identifier: "jobs", "public.jobs"
_TABLE_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")


class ModelTableDescriptor(BaseModel):
    """Table name, primary key and default ordering for one entity.

    Attributes:
        table: Table name, optionally schema-qualified
        primary_key: Primary key column (default "id")
        default_order_by: Ordering applied to reads; ascending by primary key
            when left empty
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    table: str = Field(description="Table name, optionally schema-qualified")
    primary_key: str = Field(default="id", min_length=1)
    default_order_by: tuple[ModelOrderBy, ...] = Field(default=())

    @field_validator("table")
    @classmethod
    def _validate_table(cls, value: str) -> str:
        if not _TABLE_NAME_PATTERN.match(value):
            raise ValueError(f"Invalid table name: {value!r}")
        return value

    @model_validator(mode="before")
    @classmethod
    def _default_order_by_primary_key(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("default_order_by"):
            primary_key = data.get("primary_key") or "id"
            data = {**data, "default_order_by": (ModelOrderBy(field=primary_key),)}
        return data


__all__ = ["ModelTableDescriptor"]
