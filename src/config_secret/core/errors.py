# src/config_secret/core/errors.py
"""
Exceções canônicas do source de secret files.

Este módulo define a hierarquia oficial de exceções levantadas durante a
descoberta de variáveis de ambiente, resolução de paths, carregamento de
arquivos e merge da árvore de configuração.

As exceções aqui definidas representam **falhas fatais de coleta**: qualquer
uma delas interrompe a chamada de `collect()` inteira, sem árvore parcial.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Cada exceção carrega um código estável (`code`) e dados estruturados
    - Mensagens são curtas e direcionadas ao operador

Responsabilidades do módulo:
    - Expressar falhas de path, I/O, detecção de formato, parse e merge
    - Converter exceções em payload serializável (`ErrorPayload`)

Invariantes:
    - Todas as exceções do source herdam de `SecretSourceError`
    - `details` contém apenas dados serializáveis
    - O conteúdo dos secrets nunca é incluído em mensagens ou details

Limites explícitos:
    - Não decide precedência entre sources
    - Não realiza fallback ou recovery
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple


# ---------------------------------------------------------------------------
# Catálogo canônico de códigos de erro
# ---------------------------------------------------------------------------

SECRET_INVALID_PATH = "SECRET_INVALID_PATH"
SECRET_FILE_NOT_FOUND = "SECRET_FILE_NOT_FOUND"
SECRET_FILE_READ_ERROR = "SECRET_FILE_READ_ERROR"
SECRET_FORMAT_DETECTION_FAILED = "SECRET_FORMAT_DETECTION_FAILED"
SECRET_PARSE_ERROR = "SECRET_PARSE_ERROR"
SECRET_MERGE_CONFLICT = "SECRET_MERGE_CONFLICT"


@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do source.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


class SecretSourceError(Exception):
    """
    Exceção base para erros do source de secret files.

    Todas as exceções levantadas durante `collect()` herdam desta classe,
    o que permite ao agregador hospedeiro capturar falhas deste source
    sem afetar contribuições de outros sources.

    Subclasses definem `code` e `hint`; instâncias carregam `message`
    e `details` estruturados.
    """

    code: str = "SECRET_SOURCE_ERROR"
    hint: Optional[str] = None

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(
            type=self.code,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )


class InvalidPathError(SecretSourceError):
    """
    Exceção levantada quando o nome de uma variável elegível produz um path
    com segmento vazio (ex.: `APP__FILE`, `APP_A__B_FILE`).

    Decisões arquiteturais:
        - Segmentos vazios nunca são descartados silenciosamente
        - A elegibilidade (scanner) e a estrutura (resolver) são validadas
          em etapas distintas
    """

    code = SECRET_INVALID_PATH
    hint = "Remova separadores duplicados ou o separador antes do sufixo no nome da variável."

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(
            f"Nome de variável inválido '{name}': {reason}",
            details={"variable": name, "reason": reason},
        )
        self.variable = name
        self.reason = reason


class SecretFileNotFoundError(SecretSourceError):
    """Arquivo referenciado pela variável não existe."""

    code = SECRET_FILE_NOT_FOUND
    hint = "Verifique se o secret foi montado no container e se o caminho está correto."

    def __init__(self, file_path: str) -> None:
        super().__init__(
            f"Arquivo de secret não encontrado: {file_path}",
            details={"file": file_path},
        )
        self.file_path = file_path


class SecretFileReadError(SecretSourceError):
    """
    Falha de I/O diferente de arquivo inexistente (permissão, diretório,
    erro de dispositivo). O erro do sistema operacional é preservado em
    `details` e encadeado via `__cause__`.
    """

    code = SECRET_FILE_READ_ERROR
    hint = "Verifique permissões de leitura e se o caminho aponta para um arquivo regular."

    def __init__(self, file_path: str, error: OSError) -> None:
        super().__init__(
            f"Falha ao ler arquivo de secret {file_path}: {error.strerror or error}",
            details={
                "file": file_path,
                "errno": error.errno,
                "strerror": error.strerror,
            },
        )
        self.file_path = file_path


class FormatDetectionError(SecretSourceError):
    """
    Exceção levantada quando nenhum parser da cadeia de fallback aceita o
    conteúdo de um arquivo sem extensão reconhecida.

    Invariantes:
        - `attempted` lista os formatos na ordem em que foram tentados
    """

    code = SECRET_FORMAT_DETECTION_FAILED
    hint = "Use uma extensão explícita (.json, .yaml, .toml, .ini) ou corrija o conteúdo do arquivo."

    def __init__(self, file_path: str, attempted: Sequence[str]) -> None:
        super().__init__(
            f"Nenhum formato reconhece o conteúdo de {file_path}",
            details={"file": file_path, "attempted": list(attempted)},
        )
        self.file_path = file_path
        self.attempted: Tuple[str, ...] = tuple(attempted)


class SecretParseError(SecretSourceError):
    """
    Exceção levantada quando a extensão identifica um formato de forma única
    e o parser desse formato rejeita o conteúdo.

    Decisões arquiteturais:
        - Extensão explícita é um sinal mais forte que heurística
        - Nenhum fallback para outros parsers é tentado
    """

    code = SECRET_PARSE_ERROR
    hint = "Corrija a sintaxe do arquivo ou ajuste a extensão para o formato real."

    def __init__(self, file_path: str, format: str, reason: str) -> None:
        super().__init__(
            f"Conteúdo inválido para o formato {format} em {file_path}: {reason}",
            details={"file": file_path, "format": format, "reason": reason},
        )
        self.file_path = file_path
        self.format = format
        self.reason = reason


class MergeConflictError(SecretSourceError):
    """
    Exceção levantada quando o path de destino colide com um valor existente
    que não é um mapa.

    Exemplo de conflito:
        - árvore:  {"server": "localhost"}
        - destino: ["server", "tls"]

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """

    code = SECRET_MERGE_CONFLICT
    hint = "Remova o valor escalar conflitante ou aponte o secret para outra chave."

    def __init__(self, path: Sequence[str], existing_type: str) -> None:
        dotted = ".".join(path) if path else "<root>"
        super().__init__(
            f"Conflito de merge em '{dotted}': valor existente do tipo {existing_type} não é um mapa",
            details={"path": list(path), "existing_type": existing_type},
        )
        self.path: Tuple[str, ...] = tuple(path)
        self.existing_type = existing_type
