# tests/conftest.py
"""
Fixtures compartilhados para testes do config-secret.

Este módulo define fixtures reutilizáveis que fornecem:
- documentos de configuração determinísticos (JSON e YAML)
- caminhos para os assets versionados em `tests/assets`
- providers de ambiente sintéticos
- uma fábrica de secret files em diretório temporário

Decisões arquiteturais:
    - O ambiente do processo nunca é mutado por estas fixtures; o ambiente
      é injetado como provider (callable que devolve um dict)
    - Arquivos são sempre criados sob `tmp_path`
    - Imports do pacote são realizados de forma lazy

Invariantes:
    - Fixtures são determinísticas e isoladas
    - Todas as fixtures são seguras para execução em paralelo

Limites explícitos:
    - Não validar comportamento do source
    - Não conter lógica condicional complexa
"""

from pathlib import Path
from typing import Callable, Dict, Mapping

import pytest

ASSETS_DIR = Path(__file__).parent / "assets"


@pytest.fixture
def assets_dir() -> Path:
    """Diretório dos assets versionados (`config.json`, `config.yaml`)."""
    return ASSETS_DIR


@pytest.fixture
def server_config_json() -> str:
    """
    Fixture que fornece um documento JSON semelhante ao uso real.

    Returns:
        str: JSON com o bloco `server` (host e porta).
    """
    return '{"server": {"host": "0.0.0.0", "port": 5000}}'


@pytest.fixture
def redis_config_yaml() -> str:
    """
    Fixture que fornece o conteúdo YAML de um secret de Redis.

    Estrutura alinhada ao secret montado em produção:
    lista de nós, usuário e senha.

    Returns:
        str: YAML com `nodes`, `username` e `password`.
    """
    return """\
nodes:
  - redis://10.0.0.1:6379
  - redis://10.0.0.2:6379
username: redis
password: superpassword
"""


@pytest.fixture
def write_secret(tmp_path: Path) -> Callable[[str, str], Path]:
    """
    Fábrica de secret files em `tmp_path`.

    Usado por:
        - Testes do loader
        - Testes do source (ambiente sintético apontando para os arquivos)

    Returns:
        Callable[[str, str], Path]: Recebe nome e conteúdo; devolve o caminho.
    """

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_environ() -> Callable[..., Callable[[], Mapping[str, str]]]:
    """
    Fábrica de providers de ambiente sintéticos.

    O provider devolve uma cópia do dicionário a cada chamada, simulando um
    snapshot do ambiente do processo.
    """

    def _make(variables: Dict[str, object]) -> Callable[[], Mapping[str, str]]:
        snapshot = {name: str(value) for name, value in variables.items()}
        return lambda: dict(snapshot)

    return _make
