# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for record shaping helpers."""

from __future__ import annotations

import pytest

from db_model.utils import (
    get_keys_length,
    is_partially_equal,
    list_without_attrs,
    with_only_attrs,
    without_attrs,
)

OBJ = {"a": 1, "b": 2}


class TestWithoutAttrs:
    def test_omits_single_key(self) -> None:
        assert without_attrs(OBJ, ["a"]) == {"b": 2}

    def test_omits_all_keys(self) -> None:
        assert without_attrs(OBJ, ["a", "b"]) == {}

    def test_no_matches_returns_copy(self) -> None:
        result = without_attrs(OBJ, ["c", "d"])

        assert result == OBJ
        assert result is not OBJ

    def test_rejects_list(self) -> None:
        with pytest.raises(TypeError, match="list_without_attrs"):
            without_attrs([OBJ], ["a"])  # type: ignore[arg-type]

    def test_list_variant(self) -> None:
        items = [{"a": 1, "b": 2}, {"c": 3, "d": 4}]

        assert list_without_attrs(items, ["a", "c"]) == [{"b": 2}, {"d": 4}]


class TestWithOnlyAttrs:
    @pytest.mark.parametrize(
        ("attrs", "expected"),
        [
            (["a"], {"a": 1}),
            (["a", "b"], {"a": 1, "b": 2}),
            (["c", "d"], {}),
            (["a", "c"], {"a": 1}),
            ([], {}),
        ],
    )
    def test_keeps_only_listed_keys(
        self, attrs: list[str], expected: dict[str, int]
    ) -> None:
        assert with_only_attrs(OBJ, attrs) == expected


class TestGetKeysLength:
    def test_mapping_and_list(self) -> None:
        assert get_keys_length({}) == 0
        assert get_keys_length(OBJ) == 2
        assert get_keys_length([]) == 0
        assert get_keys_length([1, 2]) == 2

    @pytest.mark.parametrize("value", [1, 1.1, True, None, False, "string"])
    def test_non_container_is_zero(self, value: object) -> None:
        assert get_keys_length(value) == 0


class TestIsPartiallyEqual:
    def test_subset_is_partially_equal(self) -> None:
        assert is_partially_equal({"a": 1, "c": 3}, {"a": 1, "b": 2, "c": 3}) is True

    def test_disjoint_keys(self) -> None:
        assert is_partially_equal({"x": 1, "y": 3}, {"a": 1, "b": 2}) is False

    def test_same_key_different_value(self) -> None:
        assert is_partially_equal({"a": 2}, {"a": 1}) is False

    def test_non_mapping_argument(self) -> None:
        assert is_partially_equal(None, {"a": 1}) is False
        assert is_partially_equal({"a": 1}, [("a", 1)]) is False
