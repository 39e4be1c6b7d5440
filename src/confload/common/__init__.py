"""Logging helpers shared across confload modules."""

from .logging import LoggingConfig, create_logger, disable_library_logging, enable_library_logging

__all__ = [
    "LoggingConfig",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
]
