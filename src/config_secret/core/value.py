# src/config_secret/core/value.py
"""
Modelo de valor hierárquico e política canônica de merge.

O `Value` é a moeda comum entre o conteúdo parseado dos secret files e a
árvore de configuração entregue ao agregador hospedeiro. Ele é representado
pelos tipos nativos do Python:

    - None, bool, int, float, str
    - list de Value
    - dict de str para Value

Política de merge (v1):
    - dict + dict → merge recursivo por chave
    - list        → sobrescrita total (sem merge elemento a elemento)
    - escalar     → sobrescrita direta pelo valor recebido
    - tipos diferentes → o valor recebido substitui o existente

Invariantes:
    - O merge é puramente funcional (inputs não são mutados)
    - A mesma entrada sempre produz a mesma saída
    - Chaves de mapa são sempre strings
"""

from __future__ import annotations

import json
from copy import deepcopy
from datetime import date, datetime, time
from typing import Any, Dict, List, Union

Scalar = Union[None, bool, int, float, str]
Value = Union[Scalar, List[Any], Dict[str, Any]]

_SCALARS = (bool, int, float, str)


def _to_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, _SCALARS):
        # mesma grafia do JSON: 1, 1.5, true, null
        return json.dumps(key)
    raise TypeError(f"Chave de mapa não suportada: {type(key).__name__}")


def to_value(obj: Any) -> Value:
    """
    Normaliza a saída de um parser para o modelo `Value`.

    Conversões aplicadas:
        - tuple → list
        - datetime/date/time (TOML, YAML) → string ISO-8601
        - chaves escalares não-string (YAML) → grafia JSON

    Chaves que colidem após a conversão (`1` e `"1"` no mesmo mapa YAML)
    resultam em uma única chave; vence a última na ordem do documento.

    Raises:
        TypeError: Se algum nó não puder ser representado como Value.
    """
    if obj is None or isinstance(obj, _SCALARS):
        return obj
    if isinstance(obj, (datetime, date, time)):
        return obj.isoformat()
    if isinstance(obj, dict):
        return {_to_key(k): to_value(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_value(v) for v in obj]
    raise TypeError(f"Tipo não suportado no valor parseado: {type(obj).__name__}")


def type_name(value: Value) -> str:
    """Nome estável do tipo de um Value, usado em mensagens de erro."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "sequence"
    return "map"


def merge_values(base: Value, incoming: Value) -> Value:
    """
    Combina `incoming` sobre `base` segundo a política de merge (v1).

    Diferente do deep-merge de configuração com conflito tipado, aqui a
    divergência de tipos não é erro: o último valor aplicado vence.
    Listas nunca são concatenadas.

    Returns:
        Value: Nova estrutura; nenhum dos inputs é mutado.
    """
    if not isinstance(base, dict) or not isinstance(incoming, dict):
        return deepcopy(incoming)

    result: Dict[str, Any] = deepcopy(base)

    for key, incoming_value in incoming.items():
        if key in result:
            result[key] = merge_values(result[key], incoming_value)
        else:
            result[key] = deepcopy(incoming_value)

    return result
