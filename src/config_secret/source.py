# src/config_secret/source.py
"""
Source de configuração baseado na convenção de secret files do Docker/Kubernetes.

Este módulo expõe o `SecretFileSource`, o único ponto de entrada chamado pelo
agregador de configuração hospedeiro. Cada chamada de `collect()`:

    1. enumera as variáveis elegíveis (ordenadas pelo nome)
    2. resolve o path de destino de cada uma
    3. carrega e parseia o arquivo referenciado
    4. aplica o conteúdo em uma árvore acumuladora iniciada como `{}`

Princípios fundamentais:
    - A coleta é atômica: qualquer erro interrompe a chamada inteira
    - A mesma entrada sempre produz a mesma árvore
    - Nenhum estado mutável é compartilhado entre coletas

Limites explícitos:
    - Não decide precedência entre sources; apenas produz a contribuição
      deste source
    - Não interpreta variáveis de ambiente sem o sufixo gatilho
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable
from uuid import uuid4

from .core.context import CollectContext
from .core.hashing import compute_tree_hash
from .core.tree import apply_at_path
from .env.convention import DEFAULT_SEPARATOR, DEFAULT_SUFFIX, NamingConvention
from .env.paths import KeyPath, resolve_key_path
from .env.scanner import EnvironProvider, os_environ, scan_environment
from .formats.loader import detect_and_parse, read_secret_bytes
from .formats.registry import FormatRegistry, default_registry


@runtime_checkable
class Source(Protocol):
    """
    Contrato mínimo de um source de configuração.

    Qualquer objeto com `collect()` devolvendo um mapa (ou levantando um erro
    estruturado) é aceito pelo agregador hospedeiro. O protocolo não impõe
    herança, apenas conformidade estrutural.
    """

    def collect(self) -> Dict[str, Any]:
        """Produz a contribuição completa do source."""
        ...


@dataclass(frozen=True)
class SecretOrigin:
    """Proveniência de um path mesclado: variável e arquivo de origem."""

    variable: str
    file_path: str
    format: str


@dataclass
class CollectReport:
    """
    Resultado detalhado de uma coleta.

    Atributos:
        tree: Árvore final (idêntica ao retorno de `collect()`).
        origins: Path de destino → proveniência, na ordem de aplicação.
        context: Contexto com eventos e warnings da coleta.
        tree_hash: Hash canônico da árvore.
    """

    tree: Dict[str, Any]
    origins: Dict[KeyPath, SecretOrigin]
    context: CollectContext
    tree_hash: str

    @property
    def events(self) -> List[Dict[str, Any]]:
        return self.context.events

    @property
    def warnings(self) -> Dict[str, List[str]]:
        return self.context.warnings


@dataclass(frozen=True)
class SecretFileSource:
    """
    Source que coleta secret files referenciados por variáveis de ambiente.

    Exemplo:

        source = SecretFileSource.with_prefix("APP")
        tree = source.collect()

    Com `APP_REDIS_FILE=/run/secrets/redis.yaml`, o conteúdo do arquivo é
    mesclado sob a chave `REDIS`; com `APP_FILE=/run/secrets/app.json`, na raiz.

    O construtor direto recebe uma `NamingConvention` pronta; `registry=None`
    usa o registry padrão.
    """

    convention: NamingConvention
    environ: EnvironProvider = field(default=os_environ, compare=False)
    registry: Optional[FormatRegistry] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.convention, NamingConvention):
            raise TypeError(
                "convention deve ser NamingConvention "
                f"(recebido {type(self.convention).__name__}); "
                "use SecretFileSource.with_prefix(prefix, ...)"
            )
        if not callable(self.environ):
            raise TypeError("environ deve ser um provider chamável que devolve um mapa")
        if self.registry is None:
            object.__setattr__(self, "registry", default_registry())

    @classmethod
    def with_prefix(
        cls,
        prefix: str,
        separator: str = DEFAULT_SEPARATOR,
        *,
        prefix_separator: Optional[str] = None,
        suffix: str = DEFAULT_SUFFIX,
        suffix_separator: Optional[str] = None,
        keep_prefix: bool = False,
        lowercase_keys: bool = False,
        environ: EnvironProvider = os_environ,
        registry: Optional[FormatRegistry] = None,
    ) -> "SecretFileSource":
        convention = NamingConvention(
            prefix=prefix,
            separator=separator,
            prefix_separator=prefix_separator,
            suffix=suffix,
            suffix_separator=suffix_separator,
            keep_prefix=keep_prefix,
            lowercase_keys=lowercase_keys,
        )
        return cls(convention=convention, environ=environ, registry=registry)

    def collect(self) -> Dict[str, Any]:
        """
        Produz a contribuição deste source para o agregador.

        Returns:
            Dict[str, Any]: Árvore completa e totalmente mesclada.

        Raises:
            SecretSourceError: Primeira falha encontrada (path inválido, I/O,
                detecção de formato, parse ou conflito de merge).
        """
        return self.collect_report().tree

    def collect_report(self) -> CollectReport:
        """Executa a coleta e devolve árvore, proveniência, eventos e hash."""
        ctx = CollectContext(
            collect_id=uuid4().hex,
            created_at=datetime.now(timezone.utc),
            meta={"prefix": self.convention.prefix},
        )

        candidates = scan_environment(self.convention, self.environ, ctx=ctx)
        ctx.log(level="INFO", message="secret.scan", candidates=len(candidates))

        tree: Dict[str, Any] = {}
        origins: Dict[KeyPath, SecretOrigin] = {}

        for candidate in candidates:
            path = resolve_key_path(candidate.name, self.convention)
            file_path = Path(candidate.file_path)

            data = read_secret_bytes(file_path)
            format_name, value = detect_and_parse(file_path, data, self.registry)
            ctx.log(
                level="INFO",
                message="secret.load",
                variable=candidate.name,
                file=candidate.file_path,
                format=format_name,
                path=list(path),
            )

            tree = apply_at_path(tree, path, value)
            origins[path] = SecretOrigin(
                variable=candidate.name,
                file_path=candidate.file_path,
                format=format_name,
            )
            ctx.log(level="DEBUG", message="secret.merge", variable=candidate.name, path=list(path))

        tree_hash = compute_tree_hash(tree)
        ctx.log(level="INFO", message="secret.done", merged=len(origins), tree_hash=tree_hash)

        return CollectReport(tree=tree, origins=origins, context=ctx, tree_hash=tree_hash)

