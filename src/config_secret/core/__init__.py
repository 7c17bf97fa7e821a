# src/config_secret/core/__init__.py
"""
Núcleo do source de secret files.

Responsabilidades do pacote:
    - Modelo de valor hierárquico e política de merge
    - Aplicação de valores em paths da árvore
    - Hierarquia canônica de exceções
    - Contexto de coleta (eventos e warnings estruturados)
    - Hash canônico da contribuição

Invariantes:
    - Nenhum módulo do núcleo lê ambiente ou arquivos
    - Todas as operações de merge são determinísticas
"""
