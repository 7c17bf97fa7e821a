# src/config_secret/formats/registry.py
"""
Registro de formatos de arquivo suportados pelo loader.

Este módulo define o `FormatRegistry`, uma tabela estática e ordenada de
pares (extensões, função de parse), usada para:
    - despachar o parse pela extensão do arquivo
    - definir a ordem de fallback quando a extensão é ausente ou desconhecida

Decisões arquiteturais:
    - Despacho por tabela, não por herança
    - JSON é sempre o primeiro formato do fallback (o mais estrito)
    - Demais formatos seguem a ordem de registro
    - O registry é configurável pelo hospedeiro (ex.: registrar RON)

Invariantes:
    - Nomes de formato são únicos
    - Cada extensão aponta para exatamente um formato
    - Extensões são armazenadas em minúsculas e com ponto inicial

Limites explícitos:
    - Não lê arquivos
    - Não decide o que fazer em caso de falha de parse
"""

from __future__ import annotations

import configparser
import json
import tomllib
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

import yaml  # PyYAML

ParseFn = Callable[[bytes], Any]

JSON = "json"
YAML = "yaml"
TOML = "toml"
INI = "ini"


class DuplicateFormatError(ValueError):
    """Formato ou extensão já registrados no `FormatRegistry`."""


@dataclass(frozen=True)
class FileFormat:
    """Formato suportado: nome estável, extensões reconhecidas e parser."""

    name: str
    extensions: Tuple[str, ...]
    parse: ParseFn


def _decode(data: bytes) -> str:
    # utf-8-sig tolera BOM gerado por editores no Windows
    return data.decode("utf-8-sig")


def parse_json(data: bytes) -> Any:
    return json.loads(_decode(data))


def parse_yaml(data: bytes) -> Any:
    return yaml.safe_load(_decode(data))


def parse_toml(data: bytes) -> Any:
    return tomllib.loads(_decode(data))


def parse_ini(data: bytes) -> Any:
    """
    Parse de INI: cada seção vira um mapa (herdando DEFAULT, como no
    configparser); chaves da seção DEFAULT também ficam na raiz.
    Todos os valores permanecem strings.
    """
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str  # preserva o case das chaves
    parser.read_string(_decode(data))

    result: Dict[str, Any] = dict(parser.defaults())
    for section in parser.sections():
        result[section] = dict(parser.items(section))
    return result


def _normalize_extension(extension: str) -> str:
    extension = extension.strip().lower()
    if not extension:
        raise ValueError("extension must be a non-empty string")
    return extension if extension.startswith(".") else f".{extension}"


@dataclass
class FormatRegistry:
    """
    Tabela ordenada de formatos de arquivo.

    `for_extension` resolve um formato por extensão (case-insensitive);
    `fallback_order` devolve JSON primeiro e os demais na ordem de registro.
    """

    _formats: Dict[str, FileFormat] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)
    _by_extension: Dict[str, str] = field(default_factory=dict, init=False, repr=False)

    def register(self, file_format: FileFormat) -> None:
        name = file_format.name
        if not isinstance(name, str) or not name.strip():
            raise ValueError("format name must be a non-empty string")
        if name in self._formats:
            raise DuplicateFormatError(f"Duplicate format: {name}")

        extensions = [_normalize_extension(ext) for ext in file_format.extensions]
        for ext in extensions:
            if ext in self._by_extension:
                raise DuplicateFormatError(
                    f"Extension {ext} already registered for {self._by_extension[ext]}"
                )

        self._formats[name] = file_format
        self._order.append(name)
        for ext in extensions:
            self._by_extension[ext] = name

    def get(self, name: str) -> FileFormat:
        return self._formats[name]

    def for_extension(self, extension: str) -> Optional[FileFormat]:
        if not extension:
            return None
        name = self._by_extension.get(_normalize_extension(extension))
        return self._formats[name] if name is not None else None

    def fallback_order(self) -> List[FileFormat]:
        names = [n for n in self._order if n == JSON] + [n for n in self._order if n != JSON]
        return [self._formats[n] for n in names]

    def names(self) -> List[str]:
        return list(self._order)


def default_registry() -> FormatRegistry:
    """Registry padrão com JSON, YAML, TOML e INI, nesta ordem."""
    registry = FormatRegistry()
    registry.register(FileFormat(JSON, (".json",), parse_json))
    registry.register(FileFormat(YAML, (".yaml", ".yml"), parse_yaml))
    registry.register(FileFormat(TOML, (".toml",), parse_toml))
    registry.register(FileFormat(INI, (".ini",), parse_ini))
    return registry
