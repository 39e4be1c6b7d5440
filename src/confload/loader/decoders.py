"""Format dispatch: turn raw configuration text into plain Python data."""

from __future__ import annotations

import io
import json
import tomllib
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

import edn_format
import yaml
from dotenv import dotenv_values

from .models import ConfigFormat

_EXTENSIONS: dict[str, ConfigFormat] = {
    ".json": ConfigFormat.JSON,
    ".toml": ConfigFormat.TOML,
    ".yaml": ConfigFormat.YAML,
    ".yml": ConfigFormat.YAML,
    ".env": ConfigFormat.ENV,
    ".edn": ConfigFormat.EDN,
}


class DecodeFailure(Exception):
    """Raised when a format library rejects its input."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column


def file_extension(path: Path) -> str:
    """Return the extension of ``path``; a bare dotfile such as ``.env`` is its own extension."""
    if not path.suffix and path.name.startswith("."):
        return path.name
    return path.suffix


def format_from_path(path: Path) -> ConfigFormat | None:
    """Infer the configuration format from a file extension."""
    return _EXTENSIONS.get(file_extension(path).lower())


def decode(text: str, fmt: ConfigFormat) -> Any:
    """Decode ``text`` with the library registered for ``fmt``.

    Raises:
        DecodeFailure: the underlying library could not parse the text.
    """
    return _DECODERS[fmt](text)


def _decode_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeFailure(str(exc), line=exc.lineno, column=exc.colno) from exc


def _decode_toml(text: str) -> Any:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise DecodeFailure(
            str(exc),
            line=getattr(exc, "lineno", None),
            column=getattr(exc, "colno", None),
        ) from exc


def _decode_yaml(text: str) -> Any:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = getattr(mark, "line", None)
        column = getattr(mark, "column", None)
        raise DecodeFailure(
            str(exc),
            line=(line + 1) if line is not None else None,
            column=(column + 1) if column is not None else None,
        ) from exc
    return {} if data is None else data


def _decode_env(text: str) -> Any:
    values = dotenv_values(stream=io.StringIO(text))
    return {key: value for key, value in values.items() if value is not None}


def _decode_edn(text: str) -> Any:
    try:
        data = edn_format.loads(text)
    except edn_format.EDNDecodeError as exc:
        raise DecodeFailure(str(exc)) from exc
    return _plain_edn(data)


def _plain_edn(value: Any) -> Any:
    if isinstance(value, (edn_format.Keyword, edn_format.Symbol)):
        return value.name
    if isinstance(value, Mapping):
        return {_plain_edn(key): _plain_edn(item) for key, item in value.items()}
    if isinstance(value, (str, bytes)):
        return value
    if isinstance(value, Sequence):
        return [_plain_edn(item) for item in value]
    if isinstance(value, frozenset):
        return {_plain_edn(item) for item in value}
    return value


_DECODERS: dict[ConfigFormat, Callable[[str], Any]] = {
    ConfigFormat.JSON: _decode_json,
    ConfigFormat.TOML: _decode_toml,
    ConfigFormat.YAML: _decode_yaml,
    ConfigFormat.ENV: _decode_env,
    ConfigFormat.EDN: _decode_edn,
}
