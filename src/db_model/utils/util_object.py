# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Small helpers for shaping records before and after persistence."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def without_attrs(obj: Mapping[str, Any], attrs_to_exclude: Iterable[str]) -> dict[str, Any]:
    """Return a copy of ``obj`` without the given keys.

    Raises:
        TypeError: If ``obj`` is a list. Use list_without_attrs() for lists.
    """
    if isinstance(obj, (list, tuple)):
        raise TypeError(
            "without_attrs() expects a mapping, list given; use list_without_attrs()"
        )
    excluded = set(attrs_to_exclude)
    return {key: value for key, value in obj.items() if key not in excluded}


def list_without_attrs(
    items: Iterable[Mapping[str, Any]], attrs_to_exclude: Iterable[str]
) -> list[dict[str, Any]]:
    excluded = list(attrs_to_exclude)
    return [without_attrs(item, excluded) for item in items]


def with_only_attrs(obj: Mapping[str, Any], attrs: Iterable[str]) -> dict[str, Any]:
    """Return a copy of ``obj`` holding only the given keys that exist on it."""
    kept = set(attrs)
    return {key: value for key, value in obj.items() if key in kept}


def get_keys_length(value: Any) -> int:
    """Number of keys of a mapping or items of a list/tuple; 0 for anything else."""
    if isinstance(value, (Mapping, list, tuple)):
        return len(value)
    return 0


def is_partially_equal(a: Any, b: Any) -> bool:
    """True when every key/value pair of mapping ``a`` also appears in mapping ``b``.

    Example:
        >>> is_partially_equal({"id": 1}, {"id": 1, "name": "John Doe"})
        True
    """
    if not isinstance(a, Mapping) or not isinstance(b, Mapping):
        return False
    return all(key in b and b[key] == value for key, value in a.items())


__all__ = [
    "get_keys_length",
    "is_partially_equal",
    "list_without_attrs",
    "with_only_attrs",
    "without_attrs",
]
