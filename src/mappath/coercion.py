"""Conversion of resolved document values into requested Python types.

Each converter takes a raw value and either returns it in the target
representation or raises :class:`InvalidTypeError`. The rules per target:

- bool: numbers are true when non-zero; strings must be one of the
  configured true/false words.
- int: bools become 1/0, floats are truncated toward zero, strings are parsed
  as an int and then as a float that gets truncated.
- float: bools become 1.0/0.0, ints are widened, strings are parsed.
- str: bools become ``"true"``/``"false"``, ints are written in decimal and
  floats in fixed point with the configured number of fractional digits.
- dict: only mappings, with keys turned into strings.

Sequences and ``None`` never convert to a scalar or a map.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Mapping
from typing import Any

from mappath.config import DEFAULT_CONFIG, MapPathConfig
from mappath.errors import InvalidTypeError, UnsupportedTypeError
from mappath.kinds import ValueKind, key_to_str, kind_of

__all__ = [
    "to_bool",
    "to_int",
    "to_float",
    "to_str",
    "to_map",
    "coerce",
    "coerce_list",
    "target_name",
]

# ASCII only: no whitespace, digit separators or non-ASCII digits
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

_TARGET_NAMES: dict[type, str] = {
    bool: "bool",
    int: "int",
    float: "float",
    str: "string",
    dict: "map",
}


def target_name(target: Any) -> str:
    """Human readable name of a conversion target."""
    if target in _TARGET_NAMES:
        return _TARGET_NAMES[target]
    return getattr(target, "__name__", repr(target))


def _parse_float(value: str) -> float | None:
    if not _FLOAT_PATTERN.fullmatch(value):
        return None
    return float(value)


def to_bool(value: Any, config: MapPathConfig | None = None) -> bool:
    config = config or DEFAULT_CONFIG
    kind = kind_of(value)
    if kind is ValueKind.BOOL:
        return value
    if kind is ValueKind.INT:
        return value != 0
    if kind is ValueKind.FLOAT:
        return value != 0.0
    if kind is ValueKind.STRING:
        if value in config.true_strings:
            return True
        if value in config.false_strings:
            return False
    raise InvalidTypeError(actual=_describe(value, kind), expected="bool")


def to_int(value: Any, config: MapPathConfig | None = None) -> int:
    kind = kind_of(value)
    if kind is ValueKind.BOOL:
        return 1 if value else 0
    if kind is ValueKind.INT:
        return value
    if kind is ValueKind.FLOAT:
        if math.isfinite(value):
            return int(value)
    elif kind is ValueKind.STRING:
        if _INT_PATTERN.fullmatch(value):
            try:
                return int(value, 10)
            except ValueError:
                # past the int digit limit
                pass
        parsed = _parse_float(value)
        if parsed is not None and math.isfinite(parsed):
            return int(parsed)
    raise InvalidTypeError(actual=_describe(value, kind), expected="int")


def to_float(value: Any, config: MapPathConfig | None = None) -> float:
    kind = kind_of(value)
    if kind is ValueKind.BOOL:
        return 1.0 if value else 0.0
    if kind is ValueKind.INT:
        return float(value)
    if kind is ValueKind.FLOAT:
        return value
    if kind is ValueKind.STRING:
        parsed = _parse_float(value)
        if parsed is not None:
            return parsed
    raise InvalidTypeError(actual=_describe(value, kind), expected="float")


def to_str(value: Any, config: MapPathConfig | None = None) -> str:
    config = config or DEFAULT_CONFIG
    kind = kind_of(value)
    if kind is ValueKind.BOOL:
        return "true" if value else "false"
    if kind is ValueKind.INT:
        return str(value)
    if kind is ValueKind.FLOAT:
        return f"{value:.{config.float_precision}f}"
    if kind is ValueKind.STRING:
        return value
    raise InvalidTypeError(actual=_describe(value, kind), expected="string")


def to_map(value: Any, config: MapPathConfig | None = None) -> dict[str, Any]:
    """Return a shallow copy of a mapping with every key as a string."""
    if isinstance(value, Mapping):
        return {key_to_str(k): v for k, v in value.items()}
    raise InvalidTypeError(actual=_describe(value, kind_of(value)), expected="map")


_CONVERTERS: dict[type, Callable[[Any, MapPathConfig | None], Any]] = {
    bool: to_bool,
    int: to_int,
    float: to_float,
    str: to_str,
    dict: to_map,
}


def _converter_for(target: Any) -> Callable[[Any, MapPathConfig | None], Any]:
    converter = _CONVERTERS.get(target)
    if converter is None:
        raise UnsupportedTypeError(target=target_name(target))
    return converter


def coerce(value: Any, target: Any, config: MapPathConfig | None = None) -> Any:
    """Convert a single value to ``target`` (one of bool, int, float, str, dict)."""
    return _converter_for(target)(value, config)


def coerce_list(values: Any, target: Any, config: MapPathConfig | None = None) -> list[Any]:
    """Convert every element of a sequence to ``target``.

    An empty sequence converts to an empty list before the target is checked.
    The first element that fails aborts the whole conversion.
    """
    kind = kind_of(values)
    if kind is not ValueKind.SEQUENCE:
        raise InvalidTypeError(actual=_describe(values, kind), expected="list")
    if not values:
        return []

    converter = _converter_for(target)
    result: list[Any] = []
    for index, item in enumerate(values):
        try:
            result.append(converter(item, config))
        except InvalidTypeError as e:
            raise InvalidTypeError(
                actual=e.actual,
                expected=f"list of {e.expected}",
                index=index,
                cause=e,
            ) from e
    return result


def _describe(value: Any, kind: ValueKind) -> str:
    if kind is ValueKind.OTHER:
        return type(value).__name__
    return kind.value
