# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations for db_model.

Exports:
    EnumDbModelErrorCode: Error classification codes
    EnumOrderDirection: ORDER BY direction (asc/desc)
"""

from db_model.enums.enum_db_model_error_code import EnumDbModelErrorCode
from db_model.enums.enum_order_direction import EnumOrderDirection

__all__: list[str] = [
    "EnumDbModelErrorCode",
    "EnumOrderDirection",
]
