"""Classification of decoded document values."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

__all__ = ["ValueKind", "kind_of", "is_sequence", "key_to_str"]


class ValueKind(str, Enum):
    """The closed set of value kinds a decoded document can hold."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    MAP = "map"
    SEQUENCE = "sequence"
    NULL = "null"
    OTHER = "other"


def is_sequence(value: Any) -> bool:
    """True for list-like nodes; strings and bytes are scalars."""
    return isinstance(value, (list, tuple))


def kind_of(value: Any) -> ValueKind:
    """Classify a value; ``bool`` is checked before ``int``."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, int):
        return ValueKind.INT
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, Mapping):
        return ValueKind.MAP
    if is_sequence(value):
        return ValueKind.SEQUENCE
    return ValueKind.OTHER


def key_to_str(key: Any) -> str:
    """String form of a mapping key, spelling bools and None as JSON does."""
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)
