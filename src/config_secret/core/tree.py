# src/config_secret/core/tree.py
"""
Aplicação de um Value em um path da árvore de configuração.

Este módulo posiciona o conteúdo de um secret file na árvore acumulada,
criando mapas intermediários quando necessário e delegando a combinação
final para `merge_values`.

Decisões arquiteturais:
    - A raiz da árvore é sempre um mapa
    - Nenhum nó existente que não seja mapa pode estar no caminho,
      incluindo a chave final
    - Conflitos estruturais são tratados como falha fatal

Invariantes:
    - A árvore recebida nunca é mutada
    - Chaves irmãs já presentes no caminho são preservadas
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, Sequence

from .errors import MergeConflictError
from .value import Value, merge_values, type_name


def apply_at_path(tree: Dict[str, Any], path: Sequence[str], incoming: Value) -> Dict[str, Any]:
    """
    Realiza o merge de `incoming` na posição `path` da árvore.

    Política:
        - path vazio → `incoming` deve ser mapa e é combinado com a raiz
        - path não vazio → caminho percorrido a partir da raiz; chaves
          ausentes viram mapas vazios; a chave final recebe
          `merge_values(existente, incoming)`

    Args:
        tree (Dict[str, Any]): Árvore acumulada (raiz sempre mapa).
        path (Sequence[str]): Segmentos do destino; vazio denota a raiz.
        incoming (Value): Conteúdo parseado do secret file.

    Returns:
        Dict[str, Any]: Nova árvore resultante.

    Raises:
        MergeConflictError: Se um nó do caminho existir e não for mapa, ou se
            um valor não-mapa for aplicado na raiz.
    """
    if not path:
        if not isinstance(incoming, dict):
            raise MergeConflictError((), type_name(incoming))
        return merge_values(tree, incoming)

    result: Dict[str, Any] = deepcopy(tree)
    node = result

    for depth, segment in enumerate(path):
        # presença da chave, não o valor: um null existente também conflita
        if segment in node:
            current = node[segment]
            if not isinstance(current, dict):
                raise MergeConflictError(path[: depth + 1], type_name(current))
        else:
            current = {}
            node[segment] = current

        if depth == len(path) - 1:
            node[segment] = merge_values(current, incoming)
        else:
            node = current

    return result
