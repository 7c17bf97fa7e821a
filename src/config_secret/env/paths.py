# src/config_secret/env/paths.py
"""
Resolução do path na árvore de configuração a partir do nome da variável.

Exemplos (prefixo `APP`, separador `_`):

    APP_FILE              → ()
    APP_REDIS_FILE        → ("REDIS",)
    APP_server_tls_FILE   → ("server", "tls")
    APP__FILE             → InvalidPathError
    APP_A__B_FILE         → InvalidPathError
"""

from __future__ import annotations

from typing import Tuple

from ..core.errors import InvalidPathError
from .convention import NamingConvention

KeyPath = Tuple[str, ...]


def resolve_key_path(name: str, convention: NamingConvention) -> KeyPath:
    """
    Converte o nome de uma variável elegível em um path da árvore.

    O case dos segmentos é preservado exatamente como escrito no nome,
    exceto quando `convention.lowercase_keys` está habilitado.

    Raises:
        InvalidPathError: Se o nome não for elegível ou produzir segmento vazio.
    """
    if not convention.matches(name):
        raise InvalidPathError(name, "nome não segue a convenção de secret file")

    prefix_segment = name[: len(convention.prefix)]

    if convention.is_whole_document(name):
        segments: KeyPath = ()
    else:
        remainder = name[len(convention.head) : len(name) - len(convention.tail)]
        if not remainder:
            raise InvalidPathError(name, "path vazio entre prefixo e sufixo")
        segments = tuple(remainder.split(convention.separator))
        if any(not segment for segment in segments):
            raise InvalidPathError(name, "segmento vazio no path")

    if convention.keep_prefix:
        segments = (prefix_segment,) + segments

    if convention.lowercase_keys:
        segments = tuple(segment.lower() for segment in segments)

    return segments
