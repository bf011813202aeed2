# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility modules for db_model.

    - util_case: camelCase/snake_case key normalization for nested records
    - util_object: attribute filtering and comparison helpers for records
"""

from db_model.utils.util_case import (
    from_json,
    to_camel_case,
    to_camel_key,
    to_snake_case,
    to_snake_key,
)
from db_model.utils.util_object import (
    get_keys_length,
    is_partially_equal,
    list_without_attrs,
    with_only_attrs,
    without_attrs,
)

__all__: list[str] = [
    "from_json",
    "get_keys_length",
    "is_partially_equal",
    "list_without_attrs",
    "to_camel_case",
    "to_camel_key",
    "to_snake_case",
    "to_snake_key",
    "with_only_attrs",
    "without_attrs",
]
