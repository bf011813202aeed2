# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Sort Direction Enumeration.

Defines the directions accepted by ModelOrderBy entries.
"""

from enum import Enum


class EnumOrderDirection(str, Enum):
    """Direction of a single ORDER BY term.

    Attributes:
        ASC: Ascending order
        DESC: Descending order
    """

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def _missing_(cls, value: object) -> "EnumOrderDirection | None":
        # Accept "ASC", "Desc", etc.
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


__all__ = ["EnumOrderDirection"]
