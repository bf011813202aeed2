# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Key case normalization between external and storage representations.

Records cross two boundaries. Inbound, externally camelCased keys
(``userId``) are turned into snake_case storage names (``user_id``) before a
statement is built. Outbound, result rows are turned back into camelCase.

Both directions walk nested mappings and sequences and leave every other
value untouched. Both are idempotent, so normalizing an already normalized
structure is a no-op.

Example:
    >>> to_camel_case({"user_id": 1, "address": {"zip_code": "X"}})
    {'userId': 1, 'address': {'zipCode': 'X'}}
    >>> to_snake_case([{"keyOne": {"keyTwo": 1}}])
    [{'key_one': {'key_two': 1}}]
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable, Mapping
from typing import Any

import inflection

# A run of separators and the character that follows it.
_SEPARATOR_PATTERN = re.compile(r"[_.\-\s]+(\w|$)")


def to_camel_key(key: str) -> str:
    """Convert a single name to camelCase (``user_id`` -> ``userId``).

    Only the character after each separator changes case, so names without
    separators (``ID``, ``Name``, ``userId``) are returned as they are.
    """
    return _SEPARATOR_PATTERN.sub(lambda match: match.group(1).upper(), key)


def to_snake_key(key: str) -> str:
    """Convert a single name to snake_case (``userId`` -> ``user_id``)."""
    return inflection.underscore(key)


def _convert_keys(value: Any, convert: Callable[[str], str]) -> Any:
    if isinstance(value, Mapping):
        return {
            (convert(key) if isinstance(key, str) and key else key): _convert_keys(
                item, convert
            )
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [_convert_keys(item, convert) for item in value]
    if isinstance(value, tuple):
        return tuple(_convert_keys(item, convert) for item in value)
    return value


def to_camel_case(value: Any) -> Any:
    """Recursively rename mapping keys to camelCase."""
    return _convert_keys(value, to_camel_key)


def to_snake_case(value: Any) -> Any:
    """Recursively rename mapping keys to snake_case."""
    return _convert_keys(value, to_snake_key)


def from_json(encoded: str | bytes) -> Any:
    """Parse a JSON document and camelCase its keys."""
    return to_camel_case(json.loads(encoded))


__all__ = [
    "from_json",
    "to_camel_case",
    "to_camel_key",
    "to_snake_case",
    "to_snake_key",
]
