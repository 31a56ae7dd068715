"""MapPath: typed, path-based read access to decoded documents."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from mappath.coercion import coerce, coerce_list, to_bool, to_float, to_int, to_map, to_str
from mappath.config import DEFAULT_CONFIG, MapPathConfig
from mappath.errors import MapPathError, PathNotFoundError
from mappath.resolver import normalize_document, resolve

__all__ = ["MapPath"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MapPath:
    """Read-only accessor over one mapping node of a decoded document.

    Paths are segments joined by the configured separator (``/`` by default);
    a segment is either a mapping key or a zero-based sequence index::

        doc = MapPath({"servers": [{"port": "8080"}]})
        doc.get_int("servers/0/port")        # 8080
        doc.get_int("servers/1/port", 80)    # 80, the path does not exist

    Typed getters raise :class:`PathNotFoundError` when the path is absent and
    no fallback is given, and :class:`InvalidTypeError` when the value found
    cannot be converted. A fallback only replaces an absent value, never one of
    the wrong type. The ``*_or_default`` variants never raise.
    """

    def __init__(self, root: Mapping[Any, Any] | None = None, config: MapPathConfig | None = None) -> None:
        if root is None:
            root = {}
        if not isinstance(root, Mapping):
            raise TypeError(f"MapPath root must be a mapping, got {type(root).__name__}")
        self._root: dict[str, Any] = normalize_document(root)
        self._config: MapPathConfig = config or DEFAULT_CONFIG

    @classmethod
    def _from_branch(cls, branch: dict[str, Any], config: MapPathConfig) -> MapPath:
        """Wrap an already normalized branch without copying it again."""
        child = cls.__new__(cls)
        child._root = branch
        child._config = config
        return child

    @property
    def root(self) -> dict[str, Any]:
        """The underlying root mapping."""
        return self._root

    @property
    def config(self) -> MapPathConfig:
        return self._config

    def __repr__(self) -> str:
        return f"MapPath({self._root!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapPath):
            return NotImplemented
        return self._root == other._root and self._config == other._config

    __hash__ = None  # type: ignore[assignment]

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.has(path)

    # -- raw access --

    def has(self, path: str) -> bool:
        """Check whether the given path exists."""
        _, found = resolve(self._root, path, self._config.separator)
        return found

    def get(self, path: str, fallback: Any = None) -> Any:
        """Return the raw value at ``path``, or ``fallback`` if it does not exist."""
        value, found = resolve(self._root, path, self._config.separator)
        if found:
            return value
        return self._missing(path, fallback)

    def get_as(self, path: str, target: Any, fallback: Any = None) -> Any:
        """Return the value at ``path`` converted to ``target``.

        ``target`` is one of ``bool``, ``int``, ``float``, ``str``, ``dict`` or
        ``MapPath``; anything else raises :class:`UnsupportedTypeError`.
        """
        if target is MapPath:
            return self.get_child(path, fallback)
        return self._get_converted(path, lambda value: coerce(value, target, self._config), fallback)

    def _missing(self, path: str, fallback: Any) -> Any:
        if fallback is None:
            raise PathNotFoundError(path=path)
        logger.debug(f"Path '{path}' not found, using fallback")
        return fallback

    def _get_converted(self, path: str, convert: Callable[[Any], Any], fallback: Any) -> Any:
        value, found = resolve(self._root, path, self._config.separator)
        if not found:
            return self._missing(path, fallback)
        return convert(value)

    def _or_default(self, getter: Callable[[], T], path: str, fallback: Any, zero: Any) -> T:
        try:
            return getter()
        except MapPathError as e:
            logger.debug(f"Returning default for path '{path}': {e}")
            return fallback if fallback is not None else zero

    # -- scalars --

    def get_bool(self, path: str, fallback: bool | None = None) -> bool:
        return self._get_converted(path, lambda value: to_bool(value, self._config), fallback)

    def get_int(self, path: str, fallback: int | None = None) -> int:
        return self._get_converted(path, lambda value: to_int(value, self._config), fallback)

    def get_float(self, path: str, fallback: float | None = None) -> float:
        return self._get_converted(path, lambda value: to_float(value, self._config), fallback)

    def get_string(self, path: str, fallback: str | None = None) -> str:
        return self._get_converted(path, lambda value: to_str(value, self._config), fallback)

    def get_map(self, path: str, fallback: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._get_converted(path, lambda value: to_map(value, self._config), fallback)

    def get_child(self, path: str, fallback: MapPath | None = None) -> MapPath:
        """Return a MapPath over the mapping at ``path``.

        Raises InvalidTypeError if the value there is not a mapping.
        """
        return self._get_converted(
            path,
            lambda value: MapPath._from_branch(to_map(value, self._config), self._config),
            fallback,
        )

    def get_bool_or_default(self, path: str, fallback: bool | None = None) -> bool:
        return self._or_default(lambda: self.get_bool(path, fallback), path, fallback, False)

    def get_int_or_default(self, path: str, fallback: int | None = None) -> int:
        return self._or_default(lambda: self.get_int(path, fallback), path, fallback, 0)

    def get_float_or_default(self, path: str, fallback: float | None = None) -> float:
        return self._or_default(lambda: self.get_float(path, fallback), path, fallback, 0.0)

    def get_string_or_default(self, path: str, fallback: str | None = None) -> str:
        return self._or_default(lambda: self.get_string(path, fallback), path, fallback, "")

    def get_map_or_default(self, path: str, fallback: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._or_default(lambda: self.get_map(path, fallback), path, fallback, {})

    def get_child_or_default(self, path: str, fallback: MapPath | None = None) -> MapPath:
        return self._or_default(
            lambda: self.get_child(path, fallback),
            path,
            fallback,
            MapPath._from_branch({}, self._config),
        )

    # -- lists --

    def get_list(self, path: str, target: type[T], fallback: list[T] | None = None) -> list[T]:
        """Return the sequence at ``path`` with every element converted to ``target``.

        An empty sequence yields an empty list. A target without a conversion
        rule raises UnsupportedTypeError; the first element that cannot be
        converted raises InvalidTypeError carrying its index.
        """
        if target is MapPath:
            return self.get_children(path, fallback)  # type: ignore[arg-type,return-value]
        return self._get_converted(path, lambda value: coerce_list(value, target, self._config), fallback)

    def get_bools(self, path: str, fallback: list[bool] | None = None) -> list[bool]:
        return self.get_list(path, bool, fallback)

    def get_ints(self, path: str, fallback: list[int] | None = None) -> list[int]:
        return self.get_list(path, int, fallback)

    def get_floats(self, path: str, fallback: list[float] | None = None) -> list[float]:
        return self.get_list(path, float, fallback)

    def get_strings(self, path: str, fallback: list[str] | None = None) -> list[str]:
        return self.get_list(path, str, fallback)

    def get_maps(self, path: str, fallback: list[dict[str, Any]] | None = None) -> list[dict[str, Any]]:
        return self.get_list(path, dict, fallback)

    def get_children(self, path: str, fallback: list[MapPath] | None = None) -> list[MapPath]:
        """Return a MapPath for every mapping in the sequence at ``path``, in order."""
        return self._get_converted(
            path,
            lambda value: [
                MapPath._from_branch(branch, self._config) for branch in coerce_list(value, dict, self._config)
            ],
            fallback,
        )

    def get_list_or_default(self, path: str, target: type[T], fallback: list[T] | None = None) -> list[T]:
        return self._or_default(lambda: self.get_list(path, target, fallback), path, fallback, [])

    def get_bools_or_default(self, path: str, fallback: list[bool] | None = None) -> list[bool]:
        return self.get_list_or_default(path, bool, fallback)

    def get_ints_or_default(self, path: str, fallback: list[int] | None = None) -> list[int]:
        return self.get_list_or_default(path, int, fallback)

    def get_floats_or_default(self, path: str, fallback: list[float] | None = None) -> list[float]:
        return self.get_list_or_default(path, float, fallback)

    def get_strings_or_default(self, path: str, fallback: list[str] | None = None) -> list[str]:
        return self.get_list_or_default(path, str, fallback)

    def get_maps_or_default(
        self, path: str, fallback: list[dict[str, Any]] | None = None
    ) -> list[dict[str, Any]]:
        return self.get_list_or_default(path, dict, fallback)

    def get_children_or_default(self, path: str, fallback: list[MapPath] | None = None) -> list[MapPath]:
        return self._or_default(lambda: self.get_children(path, fallback), path, fallback, [])
