from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from pydantic import BaseModel
from result import is_ok

from confload.loader import load_from_file
from confload.settings import Settings, get_settings, reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    reset_settings()
    yield
    reset_settings()


def test_defaults() -> None:
    settings = Settings()

    assert settings.file_encoding == "utf-8"
    assert settings.logging.log_level == "INFO"
    assert settings.logging.format == "text"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CONFLOAD_FILE_ENCODING", "latin-1")
    monkeypatch.setenv("CONFLOAD_LOGGING__LOG_LEVEL", "DEBUG")

    settings = get_settings()

    assert settings.file_encoding == "latin-1"
    assert settings.logging.log_level == "DEBUG"
    assert settings.logging.format == "text"


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_file_encoding_is_used_for_reads(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    class Greeting(BaseModel):
        text: str = ""

    path = tmp_path / "greeting.json"
    path.write_bytes('{"text": "café"}'.encode("latin-1"))

    monkeypatch.setenv("CONFLOAD_FILE_ENCODING", "latin-1")
    latin = Greeting()
    assert is_ok(load_from_file(latin, path))
    assert latin.text == "café"
