"""Conversion of library exceptions into structured load errors."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from .models import ConfigFormat, ConfigValidationError


def validation_error(
    exc: ValidationError,
    prefix: str,
    fmt: ConfigFormat | None = None,
    path: Path | None = None,
) -> ConfigValidationError:
    error_details = exc.errors()
    field = None
    message = str(exc)
    if error_details:
        first = error_details[0]
        loc = first.get("loc") or ()
        field = ".".join(str(part) for part in loc) or None
        message = first.get("msg", message)
        if field is not None:
            message = f"{field}: {message}"
    return ConfigValidationError(
        format=fmt,
        path=path,
        field=field,
        message=f"{prefix}: {message}",
    )


def root_mapping_error(prefix: str, fmt: ConfigFormat, path: Path | None = None) -> ConfigValidationError:
    return ConfigValidationError(
        format=fmt,
        path=path,
        field=None,
        message=f"{prefix}: Configuration root must be a mapping of keys to values.",
    )
