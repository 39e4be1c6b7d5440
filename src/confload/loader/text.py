"""Decode an in-memory configuration payload into a model."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ValidationError
from result import Err, Ok, Result

from confload.common import create_logger
from confload.constants import FILE_ERROR_PREFIX, STRING_ERROR_PREFIX

from ._errors import root_mapping_error, validation_error
from .decoders import DecodeFailure, decode
from .models import (
    STRING_FORMATS,
    ConfigDecodeError,
    ConfigEmptyInputError,
    ConfigError,
    ConfigFormat,
    ConfigFormatError,
)
from .target import apply, validate

log = create_logger("loader.text")


def load_from_string[T: BaseModel](target: T, data: str, fmt: str | ConfigFormat) -> Result[T, ConfigError]:
    """Parse ``data`` as ``fmt`` (``json``, ``toml`` or ``yaml``) into ``target``.

    Example:
        config = AppConfig()
        result = load_from_string(config, payload, "json")
    """
    if not data:
        return Err(ConfigEmptyInputError(message=f"{FILE_ERROR_PREFIX}: config is empty"))

    config_format = _string_format(fmt)
    if config_format is None:
        tag = fmt.value if isinstance(fmt, ConfigFormat) else fmt
        return Err(
            ConfigFormatError(
                format=tag,
                message=f"{STRING_ERROR_PREFIX}: unknown/unsupported config format '{tag}'",
            ),
        )

    try:
        decoded = decode(data, config_format)
    except DecodeFailure as exc:
        return Err(
            ConfigDecodeError(
                format=config_format,
                line=exc.line,
                column=exc.column,
                message=f"{STRING_ERROR_PREFIX}: {exc.message}",
            ),
        )

    if not isinstance(decoded, Mapping):
        return Err(root_mapping_error(STRING_ERROR_PREFIX, config_format))

    try:
        validated = validate(target, decoded)
    except ValidationError as exc:
        return Err(validation_error(exc, STRING_ERROR_PREFIX, config_format))
    assigned = apply(target, validated)

    log.debug("Configuration string loaded", format=config_format.value, fields=sorted(assigned))
    return Ok(target)


def _string_format(fmt: str | ConfigFormat) -> ConfigFormat | None:
    try:
        config_format = ConfigFormat(fmt)
    except ValueError:
        return None
    return config_format if config_format in STRING_FORMATS else None
