from __future__ import annotations

from pathlib import Path

import pytest

from confload.loader.decoders import DecodeFailure, decode, format_from_path
from confload.loader.models import ConfigFormat


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("app.json", ConfigFormat.JSON),
        ("app.toml", ConfigFormat.TOML),
        ("app.yaml", ConfigFormat.YAML),
        ("app.yml", ConfigFormat.YAML),
        ("app.YML", ConfigFormat.YAML),
        (".env", ConfigFormat.ENV),
        (".gitignore", None),
        ("prod.env", ConfigFormat.ENV),
        ("app.edn", ConfigFormat.EDN),
        ("app.ini", None),
        ("app", None),
    ],
)
def test_format_from_path(name: str, expected: ConfigFormat | None) -> None:
    assert format_from_path(Path(name)) is expected


def test_env_decoding_drops_keys_without_values() -> None:
    data = decode("# comment\nNAME=svc\nexport PORT=8080\nFLAG\nQUOTED='a b'\n", ConfigFormat.ENV)

    assert data == {"NAME": "svc", "PORT": "8080", "QUOTED": "a b"}


def test_edn_keywords_and_collections_become_plain_data() -> None:
    data = decode('{:name "svc" :tags ["a" "b"] :limits {:cpu 2}}', ConfigFormat.EDN)

    assert data == {"name": "svc", "tags": ["a", "b"], "limits": {"cpu": 2}}


def test_empty_yaml_is_an_empty_mapping() -> None:
    assert decode("", ConfigFormat.YAML) == {}


def test_json_failure_carries_position() -> None:
    with pytest.raises(DecodeFailure) as info:
        decode('{\n  "a": ,\n}', ConfigFormat.JSON)

    assert info.value.line == 2
    assert info.value.column is not None


def test_yaml_failure_carries_one_based_position() -> None:
    with pytest.raises(DecodeFailure) as info:
        decode("a: b\nc: [", ConfigFormat.YAML)

    assert info.value.line is not None
    assert info.value.line >= 2
    assert info.value.message


def test_toml_failure() -> None:
    with pytest.raises(DecodeFailure):
        decode("key = = 1", ConfigFormat.TOML)


def test_edn_failure() -> None:
    with pytest.raises(DecodeFailure):
        decode("{:name", ConfigFormat.EDN)
