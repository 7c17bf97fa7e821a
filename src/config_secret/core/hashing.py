# src/config_secret/core/hashing.py
"""
Hashing canônico da contribuição coletada.

O hash representa a **identidade estrutural** da árvore produzida por um
`collect()` e permite verificar, sem expor o conteúdo dos secrets, que duas
coletas sobre o mesmo ambiente produziram o mesmo resultado.

Política de hashing (v1):
    - Serialização JSON canônica
    - Ordenação estável de chaves
    - Separadores compactos
    - Codificação UTF-8
    - SHA-256

Invariantes:
    - Árvores estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""

import hashlib
import json
from typing import Any, Dict


def compute_tree_hash(tree: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico da árvore de configuração.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """
    if not isinstance(tree, dict):
        raise TypeError(
            f"Árvore para hashing deve ser dict, recebido: {type(tree).__name__}"
        )

    canonical_json = json.dumps(
        tree,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
