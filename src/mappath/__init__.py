"""mappath - typed path access into decoded JSON and YAML documents."""

from __future__ import annotations

# Core
from mappath.mappath import MapPath
from mappath.resolver import normalize_document, resolve, split_path

# Coercion
from mappath.coercion import coerce, coerce_list
from mappath.kinds import ValueKind, kind_of

# Config
from mappath.config import MapPathConfig

# Loading
from mappath.loader import from_file, from_json, from_json_file, from_yaml, from_yaml_file

# Errors
from mappath.errors import (
    ConfigError,
    DocumentNotFoundError,
    DocumentParseError,
    ErrorCodes,
    InvalidTypeError,
    MapPathError,
    PathNotFoundError,
    UnsupportedTypeError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "MapPath",
    "resolve",
    "split_path",
    "normalize_document",
    # Coercion
    "coerce",
    "coerce_list",
    "ValueKind",
    "kind_of",
    # Config
    "MapPathConfig",
    # Loading
    "from_json",
    "from_json_file",
    "from_yaml",
    "from_yaml_file",
    "from_file",
    # Errors
    "ErrorCodes",
    "MapPathError",
    "PathNotFoundError",
    "InvalidTypeError",
    "UnsupportedTypeError",
    "DocumentNotFoundError",
    "DocumentParseError",
    "ConfigError",
]
