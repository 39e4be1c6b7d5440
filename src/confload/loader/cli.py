"""Populate a model from command-line flags and environment variables."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pydantic import BaseModel, ValidationError
from pydantic_settings import SettingsError
from result import Err, Ok, Result

from confload.common import create_logger

from .models import ConfigArgumentError, ConfigError
from .sources import settings_model
from .target import apply, overlay_model

log = create_logger("loader.cli")


def load_from_cli_flags_or_env[T: BaseModel](
    target: T,
    args: Sequence[str] | None = None,
    *,
    env_prefix: str | None = None,
) -> Result[T, ConfigError]:
    """Fill ``target`` from command-line flags, falling back to environment variables.

    Flag and variable names follow pydantic-settings: the field name or its
    aliases give ``--name`` flags, one-character aliases give ``-n`` flags, and
    the same names are looked up in the environment. ``env_prefix`` applies to
    fields without an alias; when it is ``None`` the model's own ``env_prefix``
    is used (empty for plain models). Values already on ``target`` act as
    defaults, so required fields set earlier need not be repeated. Field
    descriptions become the ``--help`` text. ``args`` defaults to
    ``sys.argv[1:]``.

    Example:
        config = AppConfig()
        result = load_from_cli_flags_or_env(config)
    """
    cli_args = list(sys.argv[1:] if args is None else args)
    settings_cls = settings_model(overlay_model(target), case_sensitive=False)

    try:
        parsed = settings_cls(
            _cli_parse_args=cli_args,
            _cli_exit_on_error=False,
            _env_prefix=env_prefix,
        )
    except SettingsError as exc:
        log.warning("Command-line parsing failed", error=str(exc))
        return Err(ConfigArgumentError(message=str(exc)))
    except ValidationError as exc:
        log.warning("Command-line or environment value rejected", error=str(exc))
        error_details = exc.errors()
        loc = error_details[0].get("loc") or () if error_details else ()
        field = ".".join(str(part) for part in loc) or None
        return Err(ConfigArgumentError(field=field, message=str(exc)))

    assigned = apply(target, parsed)

    log.debug("Command-line and environment configuration loaded", fields=sorted(assigned))
    return Ok(target)
