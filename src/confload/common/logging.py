"""Logging utilities for confload using Loguru.

Logging is disabled when confload is imported as a library. Callers opt in
with ``confload.enable_logging()``, which routes records to stderr.
"""

import sys
from typing import Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from confload.constants import APP_NAME


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    format: Literal["json", "text"] = Field(default="text")


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: str | None = None, config: LoggingConfig | None = None) -> int:
    if config is None:
        from confload.settings import get_settings

        config = get_settings().logging

    logger.enable(APP_NAME)
    logger.remove()

    if config.format == "json":
        return logger.add(
            sys.stderr,
            level=level or config.log_level,
            serialize=True,
        )

    return logger.add(
        sys.stderr,
        level=level or config.log_level,
        format=_get_text_format(),
        colorize=False,
    )


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)


def _get_text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"
