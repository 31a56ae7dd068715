"""Path resolution through nested mappings and sequences."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mappath.kinds import is_sequence, key_to_str

__all__ = ["DEFAULT_SEPARATOR", "split_path", "resolve", "normalize_document"]

DEFAULT_SEPARATOR = "/"


def split_path(path: str, separator: str = DEFAULT_SEPARATOR) -> list[str]:
    """Split a path into segments.

    No escaping and no normalization: ``"/a"`` yields ``["", "a"]`` and the
    empty segment only matches an empty-string key.
    """
    return path.split(separator)


def resolve(document: Any, path: str, separator: str = DEFAULT_SEPARATOR) -> tuple[Any, bool]:
    """Walk ``path`` through ``document``.

    Returns ``(value, True)`` when every segment resolves, ``(None, False)``
    at the first dead end. Never raises.
    """
    segments = split_path(path, separator)
    if not segments:
        return None, False

    current = document
    for segment in segments:
        if isinstance(current, Mapping):
            found, current = _lookup_key(current, segment)
        elif is_sequence(current):
            found, current = _lookup_index(current, segment)
        else:
            found = False
        if not found:
            return None, False
    return current, True


def _lookup_key(node: Mapping[Any, Any], segment: str) -> tuple[bool, Any]:
    if segment in node:
        return True, node[segment]
    # Permissive decoders (YAML) can produce int, bool, float or null keys
    for key, value in node.items():
        if not isinstance(key, str) and key_to_str(key) == segment:
            return True, value
    return False, None


def _lookup_index(node: list[Any] | tuple[Any, ...], segment: str) -> tuple[bool, Any]:
    # Too many digits for any valid index; also keeps int() under its digit limit
    if not (segment.isascii() and segment.isdigit()) or len(segment.lstrip("0")) > len(str(len(node))):
        return False, None
    index = int(segment)
    if index >= len(node):
        return False, None
    return True, node[index]


def normalize_document(value: Any) -> Any:
    """Return a copy of ``value`` with string keys everywhere and tuples as lists.

    Bool and null keys become ``"true"``, ``"false"`` and ``"null"``.

    The input is never modified.
    """
    if isinstance(value, Mapping):
        return {key_to_str(k): normalize_document(v) for k, v in value.items()}
    if is_sequence(value):
        return [normalize_document(item) for item in value]
    return value
