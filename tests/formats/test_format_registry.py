# tests/formats/test_format_registry.py
"""
Testes do FormatRegistry.

Os testes asseguram que:
- o registry padrão reconhece JSON, YAML, TOML e INI pela extensão
- JSON é sempre o primeiro formato do fallback
- formatos e extensões duplicados são rejeitados
- formatos adicionais registrados pelo hospedeiro participam da detecção
"""

import json

import pytest

from config_secret.formats.loader import load_secret_file
from config_secret.formats.registry import (
    DuplicateFormatError,
    FileFormat,
    FormatRegistry,
    default_registry,
    parse_json,
    parse_yaml,
)


def test_default_registry_extensions():
    registry = default_registry()
    assert registry.for_extension(".json").name == "json"
    assert registry.for_extension(".YML").name == "yaml"
    assert registry.for_extension("yaml").name == "yaml"
    assert registry.for_extension(".toml").name == "toml"
    assert registry.for_extension(".ini").name == "ini"
    assert registry.for_extension(".ron") is None
    assert registry.for_extension("") is None


def test_json_is_first_in_fallback_even_when_registered_later():
    registry = FormatRegistry()
    registry.register(FileFormat("yaml", (".yaml",), parse_yaml))
    registry.register(FileFormat("json", (".json",), parse_json))
    assert [f.name for f in registry.fallback_order()] == ["json", "yaml"]
    assert registry.names() == ["yaml", "json"]


def test_duplicate_format_name_is_rejected():
    registry = default_registry()
    with pytest.raises(DuplicateFormatError):
        registry.register(FileFormat("json", (".json5",), parse_json))


def test_duplicate_extension_is_rejected():
    registry = default_registry()
    with pytest.raises(DuplicateFormatError):
        registry.register(FileFormat("jsonc", (".JSON",), parse_json))


def test_empty_format_name_is_rejected():
    with pytest.raises(ValueError):
        FormatRegistry().register(FileFormat(" ", (".x",), parse_json))


def test_host_registered_format_is_used_by_extension(write_secret):
    """
    Um formato registrado pelo hospedeiro (ex.: `.env` simples) é
    despachado pela extensão, como os formatos embutidos.
    """

    def parse_dotenv(data: bytes):
        pairs = {}
        for line in data.decode("utf-8").splitlines():
            if not line.strip():
                continue
            key, sep, value = line.partition("=")
            if not sep:
                raise ValueError(f"linha sem '=': {line!r}")
            pairs[key.strip()] = value.strip()
        return pairs

    registry = default_registry()
    registry.register(FileFormat("dotenv", (".env",), parse_dotenv))

    path = write_secret("db.env", "USER=app\nPASSWORD=s3cr3t\n")
    assert load_secret_file(path, registry) == {"USER": "app", "PASSWORD": "s3cr3t"}


def test_parsers_accept_bytes_with_bom():
    payload = "\ufeff" + json.dumps({"a": 1})
    assert parse_json(payload.encode("utf-8")) == {"a": 1}
