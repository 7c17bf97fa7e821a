# src/config_secret/core/context.py
"""
Contexto de uma coleta de secret files.

Este módulo define o `CollectContext`, a estrutura que acompanha uma única
chamada de `collect()` e registra, de forma explícita e rastreável, o que
foi feito durante a coleta.

Princípios fundamentais:
    - Isolamento por coleta (cada chamada possui seu próprio contexto)
    - Ausência de estado global compartilhado
    - Logs estruturados em memória, sem dependência de handlers externos

Invariantes:
    - Eventos sempre incluem `collect_id`, `level`, `message` e `timestamp`
    - Warnings são agrupados pelo nome da variável de ambiente
    - O conteúdo dos secrets nunca é registrado

Limites explícitos:
    - Não lê ambiente nem arquivos
    - Não persiste eventos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class CollectContext:
    """
    Contexto mutável de uma única coleta.

    O contexto é criado por `SecretFileSource` no início de cada coleta e
    descartado (ou devolvido no `CollectReport`) ao final. Coletas
    concorrentes nunca compartilham contexto.
    """

    collect_id: str
    created_at: datetime
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Logging & warnings
    # -----------------------------

    def log(self, *, level: str, message: str, **extra: Any) -> None:
        event = {
            "collect_id": self.collect_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, name: str, message: str) -> None:
        if name not in self.warnings:
            self.warnings[name] = []
        self.warnings[name].append(message)
