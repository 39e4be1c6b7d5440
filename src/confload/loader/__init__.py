"""Configuration loaders: files, in-memory strings, command line and environment."""

from __future__ import annotations

from .cli import load_from_cli_flags_or_env
from .decoders import format_from_path
from .file import load_from_file
from .models import (
    STRING_FORMATS,
    ConfigArgumentError,
    ConfigDecodeError,
    ConfigEmptyInputError,
    ConfigError,
    ConfigFormat,
    ConfigFormatError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigValidationError,
)
from .text import load_from_string

__all__ = [
    "STRING_FORMATS",
    "ConfigArgumentError",
    "ConfigDecodeError",
    "ConfigEmptyInputError",
    "ConfigError",
    "ConfigFormat",
    "ConfigFormatError",
    "ConfigIOError",
    "ConfigNotFoundError",
    "ConfigValidationError",
    "format_from_path",
    "load_from_cli_flags_or_env",
    "load_from_file",
    "load_from_string",
]
