"""confload - load pydantic configuration models from files, strings, flags and environment.

By default, confload's internal logging is disabled when used as a library.
Library users can enable logging by calling confload.enable_logging().
"""

from confload.common import disable_library_logging, enable_library_logging
from confload.loader import (
    ConfigArgumentError,
    ConfigDecodeError,
    ConfigEmptyInputError,
    ConfigError,
    ConfigFormat,
    ConfigFormatError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigValidationError,
    load_from_cli_flags_or_env,
    load_from_file,
    load_from_string,
)

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "ConfigArgumentError",
    "ConfigDecodeError",
    "ConfigEmptyInputError",
    "ConfigError",
    "ConfigFormat",
    "ConfigFormatError",
    "ConfigIOError",
    "ConfigNotFoundError",
    "ConfigValidationError",
    "enable_logging",
    "load_from_cli_flags_or_env",
    "load_from_file",
    "load_from_string",
]
