# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Page window metadata."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ModelPageWindow(BaseModel):
    """Navigational metadata for one page.

    prev/next are None at the respective edges. last is never below 1,
    even for an empty result set.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    first: int = Field(default=1, ge=1)
    prev: Optional[int] = Field(default=None, ge=1)
    current: int = Field(ge=1)
    next: Optional[int] = Field(default=None, ge=1)
    last: int = Field(ge=1)


__all__ = ["ModelPageWindow"]
