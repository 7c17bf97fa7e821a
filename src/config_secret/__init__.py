# src/config_secret/__init__.py
"""
config-secret — source de configuração para secret files.

Implementa a convenção de secret files do Docker/Kubernetes: variáveis de
ambiente como `APP_REDIS_FILE=/run/secrets/redis.yaml` não carregam o valor
diretamente, mas o caminho de um arquivo cujo conteúdo é parseado e mesclado
na árvore de configuração sob um path derivado do nome da variável.

A contribuição produzida é entregue ao agregador de configuração hospedeiro,
que decide a precedência entre sources.
"""

from .core.errors import (
    ErrorPayload,
    FormatDetectionError,
    InvalidPathError,
    MergeConflictError,
    SecretFileNotFoundError,
    SecretFileReadError,
    SecretParseError,
    SecretSourceError,
)
from .core.tree import apply_at_path
from .core.value import Value, merge_values, to_value
from .env.convention import NamingConvention
from .env.paths import resolve_key_path
from .env.scanner import EnvCandidate, os_environ, scan_environment
from .formats.loader import load_secret_file
from .formats.registry import FileFormat, FormatRegistry, default_registry
from .source import CollectReport, SecretFileSource, SecretOrigin, Source

__all__ = [
    "CollectReport",
    "EnvCandidate",
    "ErrorPayload",
    "FileFormat",
    "FormatDetectionError",
    "FormatRegistry",
    "InvalidPathError",
    "MergeConflictError",
    "NamingConvention",
    "SecretFileNotFoundError",
    "SecretFileReadError",
    "SecretFileSource",
    "SecretOrigin",
    "SecretParseError",
    "SecretSourceError",
    "Source",
    "Value",
    "apply_at_path",
    "default_registry",
    "load_secret_file",
    "merge_values",
    "os_environ",
    "resolve_key_path",
    "scan_environment",
    "to_value",
]
