"""Tests for path resolution."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from mappath.resolver import normalize_document, resolve, split_path


class TestSplitPath:
    def test_simple(self) -> None:
        assert split_path("a/b/c") == ["a", "b", "c"]

    def test_leading_separator_keeps_empty_segment(self) -> None:
        assert split_path("/a") == ["", "a"]

    def test_custom_separator(self) -> None:
        assert split_path("a.b", ".") == ["a", "b"]


class TestResolveExisting:
    @pytest.mark.parametrize(
        "path,expected",
        [
            ("hello", "world"),
            ("foo/bar", "baz"),
            ("foo/baz/bam", 42),
            ("foo/baz", {"bam": 42}),
            ("array/realints", [1, 2, 3, 4]),
            ("array/realints/0", 1),
            ("array/realints/3", 4),
            ("3d-array/0/0/0", 1),
            ("3d-array/1/0/0", 11),
            ("3d-array/1/1/2", 16),
            ("mixed/array1/0", 1),
            ("mixed/array2/0/foo/0", 1),
            ("mixed/array2/0/bar/1", "two"),
            ("mixed/array2/1/bar/1", "six"),
            ("scalar/nothing", None),
        ],
    )
    def test_found(self, document: dict[str, Any], path: str, expected: Any) -> None:
        value, found = resolve(document, path)
        assert found is True
        assert value == expected

    def test_sequence_of_maps(self) -> None:
        assert resolve({"a": [{"b": "x"}]}, "a/0/b") == ("x", True)

    def test_tuple_is_a_sequence(self) -> None:
        assert resolve({"a": (10, 20)}, "a/1") == (20, True)

    def test_non_string_keys_match_their_string_form(self) -> None:
        doc = {"ports": {8080: "http", True: "on", None: "off"}}
        assert resolve(doc, "ports/8080") == ("http", True)
        assert resolve(doc, "ports/true") == ("on", True)
        assert resolve(doc, "ports/null") == ("off", True)
        assert resolve(doc, "ports/True") == (None, False)

    def test_zero_padded_index(self) -> None:
        assert resolve({"a": [1, 2]}, "a/001") == (2, True)

    def test_empty_key(self) -> None:
        assert resolve({"": {"a": 1}}, "/a") == (1, True)

    def test_resolution_is_repeatable(self, document: dict[str, Any]) -> None:
        snapshot = copy.deepcopy(document)
        first = resolve(document, "mixed/array2/1")
        second = resolve(document, "mixed/array2/1")
        assert first == second
        assert first[0] is second[0]
        assert document == snapshot


class TestResolveMissing:
    @pytest.mark.parametrize(
        "path",
        [
            "bar",
            "foo/foo",
            "foo/bar/foo",
            "array/5",
            "3d-array/0/0/4",
            "3d-array/4/0/0",
            "3d-array/x",
            "3d-array/-1",
            "3d-array/+1",
            "3d-array/１",
            "a/1/b",
            "hello/",
            "/hello",
            "",
        ],
    )
    def test_not_found(self, document: dict[str, Any], path: str) -> None:
        document["a"] = [{"b": "x"}]
        assert resolve(document, path) == (None, False)

    def test_index_with_more_digits_than_int_allows(self) -> None:
        assert resolve({"a": [1]}, "a/" + "1" * 5000) == (None, False)

    def test_descend_into_scalar(self) -> None:
        assert resolve({"a": 1}, "a/b") == (None, False)

    def test_descend_into_none(self) -> None:
        assert resolve({"a": None}, "a/b") == (None, False)

    def test_string_is_not_indexed(self) -> None:
        assert resolve({"a": "abc"}, "a/0") == (None, False)


class TestNormalizeDocument:
    def test_stringifies_keys_recursively(self) -> None:
        doc = {1: {2: [{3: "x"}]}}
        assert normalize_document(doc) == {"1": {"2": [{"3": "x"}]}}

    def test_bool_and_null_keys_use_json_spelling(self) -> None:
        assert normalize_document({"flags": {True: "on", False: "off", None: "unset"}}) == {
            "flags": {"true": "on", "false": "off", "null": "unset"}
        }

    def test_tuples_become_lists(self) -> None:
        assert normalize_document({"a": (1, (2, 3))}) == {"a": [1, [2, 3]]}

    def test_input_is_not_modified(self) -> None:
        doc = {1: [1, 2]}
        normalize_document(doc)
        assert doc == {1: [1, 2]}
