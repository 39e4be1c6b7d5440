"""Pydantic models for configuration formats and load errors."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class ConfigFormat(str, Enum):
    """Configuration formats understood by the loaders."""

    JSON = "json"
    TOML = "toml"
    YAML = "yaml"
    ENV = "env"
    EDN = "edn"


STRING_FORMATS: frozenset[ConfigFormat] = frozenset({ConfigFormat.JSON, ConfigFormat.TOML, ConfigFormat.YAML})


class ConfigEmptyInputError(BaseModel):
    """No file paths or an empty payload were given."""

    model_config = ConfigDict(extra="forbid")

    message: str


class ConfigFormatError(BaseModel):
    """Format tag or file extension has no decoder."""

    model_config = ConfigDict(extra="forbid")

    format: str
    path: Path | None = None
    message: str


class ConfigNotFoundError(BaseModel):
    """Configuration file not found at expected location."""

    model_config = ConfigDict(extra="forbid")

    expected_path: Path
    message: str


class ConfigIOError(BaseModel):
    """File I/O error reading configuration."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


class ConfigDecodeError(BaseModel):
    """Syntax error reported by a format decoder."""

    model_config = ConfigDict(extra="forbid")

    format: ConfigFormat
    path: Path | None = None
    line: int | None = None
    column: int | None = None
    message: str


class ConfigValidationError(BaseModel):
    """Decoded data does not fit the target model."""

    model_config = ConfigDict(extra="forbid")

    format: ConfigFormat | None = None
    path: Path | None = None
    field: str | None = None
    message: str


class ConfigArgumentError(BaseModel):
    """Command-line or environment parsing failed."""

    model_config = ConfigDict(extra="forbid")

    field: str | None = None
    message: str


type ConfigError = (
    ConfigEmptyInputError
    | ConfigFormatError
    | ConfigNotFoundError
    | ConfigIOError
    | ConfigDecodeError
    | ConfigValidationError
    | ConfigArgumentError
)
