"""Configuration for path resolution and coercion."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError, model_validator

from mappath.errors import ConfigError

__all__ = ["MapPathConfig", "DEFAULT_CONFIG"]


class MapPathConfig(BaseModel):
    """Settings shared by a handle and every child handle derived from it.

    Attributes:
        separator: Delimiter between path segments.
        float_precision: Fractional digits used when formatting floats as strings.
        true_strings: Strings that coerce to ``True``.
        false_strings: Strings that coerce to ``False``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    separator: str = Field(default="/", min_length=1)
    float_precision: int = Field(default=9, ge=0)
    true_strings: tuple[str, ...] = ("true", "yes")
    false_strings: tuple[str, ...] = ("false", "no")

    @model_validator(mode="after")
    def check_bool_words(self) -> MapPathConfig:
        overlap = set(self.true_strings) & set(self.false_strings)
        if overlap:
            raise ValueError(f"Strings cannot be both true and false: {sorted(overlap)}")
        return self

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> MapPathConfig:
        """Build a config from a plain mapping. Raises ConfigError on invalid settings."""
        try:
            return cls.model_validate(dict(data or {}))
        except PydanticValidationError as e:
            problems = "; ".join(
                f"{'/'.join(str(part) for part in err.get('loc', ())) or '/'}: {err.get('msg', '')}"
                for err in e.errors()
            )
            raise ConfigError(message=f"Invalid mappath configuration: {problems}", cause=e) from e


DEFAULT_CONFIG = MapPathConfig()
