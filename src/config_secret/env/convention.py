# src/config_secret/env/convention.py
"""
Convenção de nomes das variáveis de secret file.

Uma variável elegível segue o padrão:

    <PREFIX><PSEP><SEG_1><SEP>...<SEP><SEG_N><SSEP><SUFFIX>   → path [SEG_1..SEG_N]
    <PREFIX><PSEP><SUFFIX>                                    → raiz

Por padrão PSEP e SSEP assumem o valor de SEP (`_`) e SUFFIX é `FILE`.
A comparação de prefixo e sufixo é case-insensitive.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_SEPARATOR = "_"
DEFAULT_SUFFIX = "FILE"


@dataclass(frozen=True)
class NamingConvention:
    """
    Parâmetros que reconhecem e decompõem nomes de variáveis elegíveis.

    Atributos:
        prefix: Prefixo obrigatório (ex.: `APP`).
        separator: Separador entre segmentos do path.
        prefix_separator: Separador entre prefixo e path; padrão `separator`.
        suffix: Sufixo gatilho; padrão `FILE`.
        suffix_separator: Separador antes do sufixo; padrão `separator`.
        keep_prefix: Preserva o prefixo como primeiro segmento do path.
        lowercase_keys: Converte os segmentos derivados para minúsculas.
    """

    prefix: str
    separator: str = DEFAULT_SEPARATOR
    prefix_separator: Optional[str] = None
    suffix: str = DEFAULT_SUFFIX
    suffix_separator: Optional[str] = None
    keep_prefix: bool = False
    lowercase_keys: bool = False

    def __post_init__(self) -> None:
        for attr in ("prefix", "separator", "suffix"):
            value = getattr(self, attr)
            if not isinstance(value, str) or not value:
                raise ValueError(f"{attr} must be a non-empty string")
        for attr in ("prefix_separator", "suffix_separator"):
            value = getattr(self, attr)
            if value is not None and (not isinstance(value, str) or not value):
                raise ValueError(f"{attr} must be a non-empty string when given")

    @property
    def head(self) -> str:
        """Prefixo + separador de prefixo, como deve aparecer no início do nome."""
        return self.prefix + (self.prefix_separator or self.separator)

    @property
    def tail(self) -> str:
        """Separador de sufixo + sufixo, como deve aparecer no fim do nome."""
        return (self.suffix_separator or self.separator) + self.suffix

    @property
    def whole_document_name(self) -> str:
        """Nome da variável cujo arquivo é mesclado na raiz (ex.: `APP_FILE`)."""
        return self.head + self.suffix

    def is_whole_document(self, name: str) -> bool:
        return name.lower() == self.whole_document_name.lower()

    def matches(self, name: str) -> bool:
        """Indica se `name` é elegível (comparação case-insensitive)."""
        if self.is_whole_document(name):
            return True
        lowered = name.lower()
        head, tail = self.head.lower(), self.tail.lower()
        return (
            len(lowered) >= len(head) + len(tail)
            and lowered.startswith(head)
            and lowered.endswith(tail)
        )
