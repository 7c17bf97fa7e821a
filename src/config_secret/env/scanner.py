# src/config_secret/env/scanner.py
"""
Descoberta de variáveis de ambiente que apontam para secret files.

O acesso ao ambiente do processo é injetado como um provider (callable sem
argumentos que devolve um `Mapping[str, str]`), permitindo que testes
forneçam ambientes sintéticos sem mutar o estado real do processo.

Decisões arquiteturais:
    - Variáveis não elegíveis são ignoradas por completo; pertencem ao
      source de variáveis de ambiente simples do agregador
    - Variáveis elegíveis com valor vazio são tratadas como não definidas
    - A saída é ordenada byte a byte pelo nome da variável

Invariantes:
    - O ambiente nunca é mutado
    - A ordem de saída independe da ordem de enumeração do sistema operacional
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional

from ..core.context import CollectContext
from .convention import NamingConvention

EnvironProvider = Callable[[], Mapping[str, str]]


@dataclass(frozen=True)
class EnvCandidate:
    """Variável elegível e o caminho de arquivo que ela referencia."""

    name: str
    file_path: str


def os_environ() -> Mapping[str, str]:
    """Provider padrão: snapshot de `os.environ` no momento da chamada."""
    return dict(os.environ)


def _sort_key(candidate: EnvCandidate) -> bytes:
    return candidate.name.encode("utf-8", "surrogateescape")


def scan_environment(
    convention: NamingConvention,
    environ: EnvironProvider = os_environ,
    *,
    ctx: Optional[CollectContext] = None,
) -> List[EnvCandidate]:
    """
    Enumera as variáveis elegíveis segundo `convention`.

    Args:
        convention (NamingConvention): Prefixo, separadores e sufixo.
        environ (EnvironProvider): Provider do ambiente.
        ctx (Optional[CollectContext]): Contexto para registrar variáveis
            elegíveis ignoradas por valor vazio.

    Returns:
        List[EnvCandidate]: Candidatos ordenados pelo nome (bytes).
    """
    candidates: List[EnvCandidate] = []

    for name, value in environ().items():
        if not convention.matches(name):
            continue
        if not value:
            if ctx is not None:
                ctx.add_warning(name=name, message="valor vazio; variável tratada como não definida")
                ctx.log(level="WARNING", message="secret.skip_empty", variable=name)
            continue
        candidates.append(EnvCandidate(name=name, file_path=value))

    return sorted(candidates, key=_sort_key)
