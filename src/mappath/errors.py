"""Error hierarchy for mappath."""

from __future__ import annotations

from typing import Any

__all__ = [
    "MapPathError",
    "PathNotFoundError",
    "InvalidTypeError",
    "UnsupportedTypeError",
    "DocumentNotFoundError",
    "DocumentParseError",
    "ConfigError",
    "ErrorCodes",
]


class MapPathError(Exception):
    """Base error for all mappath errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class PathNotFoundError(MapPathError):
    """Raised when no value exists at a path and no fallback was supplied."""

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(
            code="PATH_NOT_FOUND",
            message=f'The path "{path}" does not exist',
            details={"path": path},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The path that could not be resolved."""
        return self.details["path"]


class InvalidTypeError(MapPathError):
    """Raised when a found value cannot be converted to the requested type.

    Fallbacks never suppress this error: they cover absence, not a value of
    the wrong type.
    """

    def __init__(self, actual: str, expected: str, index: int | None = None, **kwargs: Any) -> None:
        if index is None:
            message = f"Could not cast {actual} into {expected}"
        else:
            message = f"Could not cast {actual} at index {index} into {expected}"
        super().__init__(
            code="INVALID_TYPE",
            message=message,
            details={"actual": actual, "expected": expected, "index": index},
            **kwargs,
        )

    @property
    def actual(self) -> str:
        """Kind of the value that was found."""
        return self.details["actual"]

    @property
    def expected(self) -> str:
        """Kind that was requested."""
        return self.details["expected"]

    @property
    def index(self) -> int | None:
        """Position of the failing element for list conversions."""
        return self.details["index"]


class UnsupportedTypeError(MapPathError):
    """Raised when a conversion target has no conversion rule."""

    def __init__(self, target: str, **kwargs: Any) -> None:
        super().__init__(
            code="UNSUPPORTED_TYPE",
            message=f"Type {target} is not supported",
            details={"target": target},
            **kwargs,
        )

    @property
    def target(self) -> str:
        """Name of the unsupported target type."""
        return self.details["target"]


class DocumentNotFoundError(MapPathError):
    """Raised when a document file cannot be found."""

    def __init__(self, file_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="DOCUMENT_NOT_FOUND",
            message=f"Document file not found: {file_path}",
            details={"file_path": file_path},
            **kwargs,
        )


class DocumentParseError(MapPathError):
    """Raised when a document cannot be decoded into a mapping."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="DOCUMENT_PARSE_ERROR", message=message, **kwargs)


class ConfigError(MapPathError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class ErrorCodes:
    """All mappath error codes as constants.

    Use these instead of hardcoding error code strings.

    Example:
        if error.code == ErrorCodes.PATH_NOT_FOUND:
            use_default()
    """

    PATH_NOT_FOUND = "PATH_NOT_FOUND"
    INVALID_TYPE = "INVALID_TYPE"
    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
    DOCUMENT_NOT_FOUND = "DOCUMENT_NOT_FOUND"
    DOCUMENT_PARSE_ERROR = "DOCUMENT_PARSE_ERROR"
    CONFIG_INVALID = "CONFIG_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
