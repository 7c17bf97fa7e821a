# src/config_secret/formats/loader.py
"""
Loader de secret files com detecção de formato.

Este módulo lê o arquivo referenciado por uma variável elegível e converte
seus bytes em um `Value`.

Política de detecção (v1):
    - extensão reconhecida (case-insensitive) → parser do formato, sem fallback
    - extensão ausente ou desconhecida → tentativa de cada formato na ordem
      de fallback do registry (JSON primeiro); o primeiro sucesso vence

Decisões arquiteturais:
    - O arquivo é lido por inteiro dentro de um `with`, liberando o handle
      em qualquer caminho de saída
    - Arquivo inexistente e demais falhas de I/O são erros distintos
    - Documentos vazios (só espaços) são interpretados como mapas vazios;
      `null` explícito é preservado
    - Parsers registrados sinalizam conteúdo inválido com `ValueError`

Invariantes:
    - No máximo um handle de arquivo aberto por vez
    - O retorno é sempre um `Value` normalizado

Limites explícitos:
    - Não decide onde o valor é mesclado
    - Não registra o conteúdo lido
"""

from __future__ import annotations

import configparser
from pathlib import Path
from typing import List, Optional, Tuple, Union

import yaml  # PyYAML

from ..core.errors import (
    FormatDetectionError,
    SecretFileNotFoundError,
    SecretFileReadError,
    SecretParseError,
)
from ..core.value import Value, to_value
from .registry import FileFormat, FormatRegistry, default_registry

# UnicodeDecodeError, JSONDecodeError e TOMLDecodeError são ValueError
PARSE_ERRORS = (ValueError, TypeError, yaml.YAMLError, configparser.Error)


def read_secret_bytes(path: Path) -> bytes:
    """
    Lê todos os bytes do arquivo.

    Raises:
        SecretFileNotFoundError: Se o arquivo não existir.
        SecretFileReadError: Para qualquer outra falha de I/O.
    """
    try:
        with path.open("rb") as handle:
            return handle.read()
    except FileNotFoundError as exc:
        raise SecretFileNotFoundError(str(path)) from exc
    except OSError as exc:
        raise SecretFileReadError(str(path), exc) from exc


def _is_blank(data: bytes) -> bool:
    return not data.decode("utf-8-sig", errors="replace").strip()


def _parse(file_format: FileFormat, data: bytes) -> Value:
    parsed = file_format.parse(data)
    if parsed is None and _is_blank(data):
        # documento vazio; um `null` explícito continua null
        return {}
    return to_value(parsed)


def detect_and_parse(
    path: Path,
    data: bytes,
    registry: FormatRegistry,
) -> Tuple[str, Value]:
    """
    Aplica a política de detecção sobre bytes já lidos.

    Returns:
        Tuple[str, Value]: Nome do formato aceito e valor parseado.

    Raises:
        SecretParseError: Se a extensão identifica o formato e o parse falha.
        FormatDetectionError: Se nenhum formato do fallback aceita o conteúdo.
    """
    explicit = registry.for_extension(path.suffix)

    if explicit is not None:
        try:
            return explicit.name, _parse(explicit, data)
        except PARSE_ERRORS as exc:
            raise SecretParseError(str(path), explicit.name, str(exc)) from exc

    attempted: List[str] = []
    for candidate in registry.fallback_order():
        attempted.append(candidate.name)
        try:
            return candidate.name, _parse(candidate, data)
        except PARSE_ERRORS:
            continue

    raise FormatDetectionError(str(path), attempted)


def load_secret_file(
    file_path: Union[str, Path],
    registry: Optional[FormatRegistry] = None,
) -> Value:
    """
    Carrega e parseia um secret file.

    Args:
        file_path (Union[str, Path]): Caminho absoluto ou relativo do arquivo.
        registry (Optional[FormatRegistry]): Formatos disponíveis; usa o
            registry padrão quando omitido.

    Returns:
        Value: Conteúdo do arquivo normalizado.

    Raises:
        SecretFileNotFoundError: Se o arquivo não existir.
        SecretFileReadError: Para demais falhas de I/O.
        SecretParseError: Se o formato explícito rejeitar o conteúdo.
        FormatDetectionError: Se nenhum formato aceitar o conteúdo.
    """
    path = Path(file_path)
    data = read_secret_bytes(path)
    _, value = detect_and_parse(path, data, registry or default_registry())
    return value
