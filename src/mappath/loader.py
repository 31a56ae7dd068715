"""Construction of MapPath handles from JSON and YAML sources."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from mappath.config import MapPathConfig
from mappath.errors import DocumentNotFoundError, DocumentParseError
from mappath.mappath import MapPath

__all__ = ["from_json", "from_json_file", "from_yaml", "from_yaml_file", "from_file"]

logger = logging.getLogger(__name__)

_JSON_SUFFIXES = (".json",)
_YAML_SUFFIXES = (".yaml", ".yml")


def _wrap(data: Any, source: str, config: MapPathConfig | None) -> MapPath:
    if not isinstance(data, dict):
        raise DocumentParseError(
            message=f"Document {source} must decode to a mapping, got {type(data).__name__}"
        )
    return MapPath(data, config=config)


def from_json(data: str | bytes, config: MapPathConfig | None = None) -> MapPath:
    """Decode a JSON document into a MapPath."""
    try:
        parsed = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DocumentParseError(message=f"Invalid JSON: {e}", cause=e) from e
    return _wrap(parsed, "JSON", config)


def from_yaml(data: str | bytes, config: MapPathConfig | None = None) -> MapPath:
    """Decode a YAML document into a MapPath. An empty document yields an empty MapPath."""
    try:
        parsed = yaml.safe_load(data)
    except yaml.YAMLError as e:
        raise DocumentParseError(message=f"Invalid YAML: {e}", cause=e) from e
    if parsed is None:
        logger.warning("YAML document is empty")
        parsed = {}
    return _wrap(parsed, "YAML", config)


def _read(file_path: str | Path) -> bytes:
    path = Path(file_path)
    if not path.exists():
        raise DocumentNotFoundError(file_path=str(path))
    content = path.read_bytes()
    logger.debug(f"Read {len(content)} bytes from {path}")
    return content


def from_json_file(file_path: str | Path, config: MapPathConfig | None = None) -> MapPath:
    """Read and decode a JSON file into a MapPath."""
    content = _read(file_path)
    try:
        return from_json(content, config)
    except DocumentParseError as e:
        raise DocumentParseError(message=f"{file_path}: {e.message}", cause=e.cause) from e


def from_yaml_file(file_path: str | Path, config: MapPathConfig | None = None) -> MapPath:
    """Read and decode a YAML file into a MapPath."""
    content = _read(file_path)
    try:
        return from_yaml(content, config)
    except DocumentParseError as e:
        raise DocumentParseError(message=f"{file_path}: {e.message}", cause=e.cause) from e


def from_file(file_path: str | Path, config: MapPathConfig | None = None) -> MapPath:
    """Load a JSON or YAML file, chosen by its suffix."""
    suffix = Path(file_path).suffix.lower()
    if suffix in _JSON_SUFFIXES:
        return from_json_file(file_path, config)
    if suffix in _YAML_SUFFIXES:
        return from_yaml_file(file_path, config)
    raise DocumentParseError(message=f"Unsupported document type '{suffix}' for {file_path}")
