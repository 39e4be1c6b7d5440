"""Load configuration files into a model, one file after another."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ValidationError
from pydantic_settings import SettingsError
from result import Err, Ok, Result

from confload.common import create_logger
from confload.constants import FILE_ERROR_PREFIX
from confload.settings import get_settings

from ._errors import root_mapping_error, validation_error
from .decoders import DecodeFailure, decode, file_extension, format_from_path
from .models import (
    ConfigDecodeError,
    ConfigEmptyInputError,
    ConfigError,
    ConfigFormatError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigValidationError,
)
from .sources import read_environment
from .target import aliased_fields, apply, validate

log = create_logger("loader.file")


def load_from_file[T: BaseModel](target: T, *paths: str | Path) -> Result[T, ConfigError]:
    """Read one or more configuration files into ``target``.

    Files are applied in order, so a later file overrides the fields it sets.
    After each file, environment variables named by a field alias (for
    example ``validation_alias="APP_PORT"``) override that field.
    The format of each file is inferred from its extension: YAML, JSON, TOML,
    ENV or EDN. Loading stops at the first failing file; fields assigned by
    earlier files are kept.

    Example:
        config = AppConfig()
        result = load_from_file(config, "base.yaml", "local.toml")
        if is_err(result):
            ...
    """
    if not paths:
        return Err(ConfigEmptyInputError(message=f"{FILE_ERROR_PREFIX}: file path not provided"))

    for raw_path in paths:
        result = _load_one(target, Path(raw_path))
        if result.is_err():
            log.warning("Configuration file rejected", path=str(raw_path), error=result.err_value.message)
            return result

    return Ok(target)


def _load_one[T: BaseModel](target: T, path: Path) -> Result[T, ConfigError]:
    fmt = format_from_path(path)
    if fmt is None:
        extension = file_extension(path)
        return Err(
            ConfigFormatError(
                format=extension,
                path=path,
                message=f"{FILE_ERROR_PREFIX}: file format '{extension}' is not supported by the parser",
            ),
        )

    if not path.exists() or not path.is_file():
        return Err(
            ConfigNotFoundError(
                expected_path=path,
                message=f"{FILE_ERROR_PREFIX}: configuration file '{path}' not found",
            ),
        )

    try:
        raw_text = path.read_text(encoding=get_settings().file_encoding)
    except OSError as exc:
        return Err(
            ConfigIOError(
                path=path,
                message=f"{FILE_ERROR_PREFIX}: {exc}",
            ),
        )

    try:
        data = decode(raw_text, fmt)
    except DecodeFailure as exc:
        return Err(
            ConfigDecodeError(
                format=fmt,
                path=path,
                line=exc.line,
                column=exc.column,
                message=f"{FILE_ERROR_PREFIX}: {exc.message}",
            ),
        )

    if not isinstance(data, Mapping):
        return Err(root_mapping_error(FILE_ERROR_PREFIX, fmt, path))

    try:
        decoded = validate(target, data)
    except ValidationError as exc:
        return Err(validation_error(exc, FILE_ERROR_PREFIX, fmt, path))
    assigned = apply(target, decoded)

    # Environment variables named by field aliases win over file values.
    try:
        environment = read_environment(target)
    except ValidationError as exc:
        return Err(validation_error(exc, FILE_ERROR_PREFIX, fmt, path))
    except SettingsError as exc:
        return Err(ConfigValidationError(format=fmt, path=path, message=f"{FILE_ERROR_PREFIX}: {exc}"))
    overridden = apply(target, environment, names=aliased_fields(type(target)))
    if overridden:
        log.debug("Environment overrides applied", path=str(path), fields=sorted(overridden))

    log.debug("Configuration file loaded", path=str(path), format=fmt.value, fields=sorted(assigned))
    return Ok(target)
