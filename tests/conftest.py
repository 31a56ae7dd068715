"""Shared pytest fixtures for mappath tests."""

from __future__ import annotations

from typing import Any

import pytest

from mappath.mappath import MapPath


@pytest.fixture
def document() -> dict[str, Any]:
    """A nested document exercising every value kind."""
    return {
        "hello": "world",
        "bool": {
            "yes": True,
            "no": False,
            "stringyes1": "true",
            "stringyes2": "yes",
            "stringyes3": "notworking",
            "stringno1": "false",
            "stringno2": "no",
        },
        "foo": {
            "bar": "baz",
            "baz": {"bam": 42},
        },
        "array": {
            "empty": [],
            "realints": [1, 2, 3, 4],
            "realfloats": [1.01, 2.02, 3.03, 4.04],
            "realbools": [True, True, False, False],
            "stringints": ["1", "2", "3", "4"],
            "stringfloats": ["1.01", "2.02", "3.03", "4.04"],
            "stringbools": ["true", "yes", "false", "no"],
            "strings": ["foo", "bar", "baz"],
            "mixedbad": [1, "two", 3],
        },
        "3d-array": [
            [[1, 2, 3], [4, 5, 6]],
            [[11, 12, 13], [14, 15, 16]],
        ],
        "mixed": {
            "array1": [1, 2, 3, 4],
            "array2": [
                {"foo": [1, 2, 3, 4], "bar": ["one", "two"]},
                {"foo": [11, 12, 13, 14], "bar": ["five", "six"]},
            ],
        },
        "scalar": {
            "stringint": "123",
            "stringfloat": "123.456",
            "realint": 123,
            "realfloat": 123.456,
            "nothing": None,
        },
    }


@pytest.fixture
def mp(document: dict[str, Any]) -> MapPath:
    """A MapPath over the shared document."""
    return MapPath(document)
