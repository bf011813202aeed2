# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for camelCase/snake_case key normalization."""

from __future__ import annotations

import pytest

from db_model.utils import from_json, to_camel_case, to_snake_case


class TestToCamelCase:
    """Test suite for to_camel_case."""

    def test_nested_mapping(self) -> None:
        """Keys of nested mappings are converted, values kept."""
        value = {"user_id": 1, "address": {"zip_code": "X"}}

        assert to_camel_case(value) == {"userId": 1, "address": {"zipCode": "X"}}

    def test_numbered_keys(self) -> None:
        """Underscore before a digit is dropped."""
        value = {"key_1": {"key_2": 1, "key_3": 2}, "key_4": 3}

        assert to_camel_case(value) == {"key1": {"key2": 1, "key3": 2}, "key4": 3}

    def test_mappings_inside_lists(self) -> None:
        """Mappings nested in lists are converted."""
        value = {"key_1": [{"key_1": {"key_2": 1, "key_3": 2}}]}

        assert to_camel_case(value) == {"key1": [{"key1": {"key2": 1, "key3": 2}}]}

    def test_top_level_list(self) -> None:
        assert to_camel_case([{"first_name": "a"}, {"last_name": "b"}]) == [
            {"firstName": "a"},
            {"lastName": "b"},
        ]

    def test_tuple_type_preserved(self) -> None:
        assert to_camel_case(({"a_b": 1},)) == ({"aB": 1},)

    @pytest.mark.parametrize(
        "value",
        ['{"just": "test"}', 42, 1.5, None, True, b"raw_bytes"],
    )
    def test_scalars_returned_unchanged(self, value: object) -> None:
        """Strings and other scalars are never rewritten."""
        assert to_camel_case(value) == value

    def test_string_values_not_converted(self) -> None:
        """Only keys change; string values stay as they are."""
        assert to_camel_case({"status_code": "in_progress"}) == {
            "statusCode": "in_progress"
        }

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ({"ID": 1}, {"ID": 1}),
            ({"USER_ID": 1}, {"USERID": 1}),
            ({"Name": "x"}, {"Name": "x"}),
            ({"order-line.item_no": 2}, {"orderLineItemNo": 2}),
        ],
    )
    def test_keys_without_separators_untouched(self, value, expected) -> None:
        """Only the letter after a separator changes case."""
        assert to_camel_case(value) == expected

    def test_non_string_and_empty_keys_kept(self) -> None:
        assert to_camel_case({1: {"a_b": 2}, "": 3}) == {1: {"aB": 2}, "": 3}

    def test_idempotent(self) -> None:
        value = {"user_id": [{"zip_code": 1}], "createdAt": 2}

        once = to_camel_case(value)

        assert to_camel_case(once) == once


class TestToSnakeCase:
    """Test suite for to_snake_case."""

    def test_nested_mapping(self) -> None:
        value = {"keyOne": {"keyTwo": 1, "keyThree": 2}, "key4": 3}

        assert to_snake_case(value) == {
            "key_one": {"key_two": 1, "key_three": 2},
            "key4": 3,
        }

    def test_mappings_inside_lists(self) -> None:
        value = {"keyOne": [{"keyOne": {"keyTwo": 1, "keyThree": 2}}]}

        assert to_snake_case(value) == {
            "key_one": [{"key_one": {"key_two": 1, "key_three": 2}}]
        }

    def test_already_snake_case_unchanged(self) -> None:
        value = {"user_id": 1, "address": {"zip_code": "X"}}

        assert to_snake_case(value) == value

    def test_idempotent(self) -> None:
        value = {"userId": {"zipCode": [{"streetName": "x"}]}}

        once = to_snake_case(value)

        assert to_snake_case(once) == once


class TestRoundTrip:
    """camelCase structures survive a snake_case round trip."""

    @pytest.mark.parametrize(
        "value",
        [
            {"userId": 1, "address": {"zipCode": "X"}},
            [{"firstName": "a", "tags": ["x_y", {"tagName": "t"}]}],
            {"id": 1, "items": [], "meta": {}},
            "plain",
            7,
        ],
    )
    def test_camel_snake_camel(self, value: object) -> None:
        assert to_camel_case(to_snake_case(value)) == value


class TestFromJson:
    """Test suite for from_json."""

    def test_object(self) -> None:
        encoded = '{ "foo": "bar", "key_one": "value one", "key_two": "value two" }'

        assert from_json(encoded) == {
            "foo": "bar",
            "keyOne": "value one",
            "keyTwo": "value two",
        }

    def test_array(self) -> None:
        encoded = '[{ "key_one": "value one" }, { "key_two": "value two" }]'

        assert from_json(encoded) == [{"keyOne": "value one"}, {"keyTwo": "value two"}]
