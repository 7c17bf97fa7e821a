# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do config-secret.

Este módulo contém testes mínimos cujo único objetivo é garantir que:
- o pacote pode ser importado sem falhas estruturais
- a API pública declarada em `__all__` existe

Limites explícitos:
    - Não testar lógica de coleta
    - Não acumular asserts funcionais
"""


def test_smoke():
    """
    Smoke test mínimo do repositório.

    Garante que o pacote é importável e que todos os nomes públicos
    declarados estão disponíveis.
    """
    import config_secret

    for name in config_secret.__all__:
        assert hasattr(config_secret, name), name
