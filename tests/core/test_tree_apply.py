# tests/core/test_tree_apply.py
"""
Testes da aplicação de valores em paths da árvore (apply_at_path).

Os testes asseguram que:
- o path vazio mescla o valor na raiz
- mapas intermediários são criados quando ausentes
- inserções em paths mais profundos preservam chaves irmãs
- nós existentes que não são mapas geram MergeConflictError
- a árvore recebida nunca é mutada
"""

import pytest

from config_secret.core.errors import MergeConflictError
from config_secret.core.tree import apply_at_path


def test_empty_path_merges_at_root():
    tree = {"server": {"host": "0.0.0.0"}}
    out = apply_at_path(tree, (), {"server": {"port": 5000}, "debug": True})
    assert out == {"server": {"host": "0.0.0.0", "port": 5000}, "debug": True}


def test_non_map_at_root_is_conflict():
    """
    A raiz da contribuição é sempre um mapa: um documento escalar ou lista
    aplicado sem path é rejeitado.
    """
    with pytest.raises(MergeConflictError) as exc_info:
        apply_at_path({}, (), ["a", "b"])
    assert exc_info.value.path == ()
    assert exc_info.value.existing_type == "sequence"


def test_missing_intermediate_maps_are_created():
    out = apply_at_path({}, ("a", "b", "c"), {"x": 1})
    assert out == {"a": {"b": {"c": {"x": 1}}}}


def test_scalar_secret_under_nested_path():
    out = apply_at_path({"db": {"user": "app"}}, ("db", "password"), "s3cr3t")
    assert out == {"db": {"user": "app", "password": "s3cr3t"}}


def test_deeper_path_keeps_siblings():
    """
    Verifica que inserir em ["a", "b"] depois de ["a"] (e vice-versa) não
    destrói chaves irmãs já presentes sob "a".
    """
    tree = apply_at_path({}, ("a",), {"x": 1, "b": {"keep": True}})
    tree = apply_at_path(tree, ("a", "b"), {"y": 2})
    assert tree == {"a": {"x": 1, "b": {"keep": True, "y": 2}}}

    tree = apply_at_path({}, ("a", "b"), {"y": 2})
    tree = apply_at_path(tree, ("a",), {"x": 1})
    assert tree == {"a": {"b": {"y": 2}, "x": 1}}


def test_final_key_holding_scalar_is_conflict():
    with pytest.raises(MergeConflictError) as exc_info:
        apply_at_path({"server": "localhost"}, ("server",), {"port": 5000})
    assert exc_info.value.path == ("server",)
    assert exc_info.value.existing_type == "string"


def test_intermediate_key_holding_sequence_is_conflict():
    with pytest.raises(MergeConflictError) as exc_info:
        apply_at_path({"redis": {"nodes": ["a"]}}, ("redis", "nodes", "primary"), "a")
    assert exc_info.value.path == ("redis", "nodes")
    assert exc_info.value.details == {"path": ["redis", "nodes"], "existing_type": "sequence"}


def test_apply_does_not_mutate_tree():
    tree = {"a": {"b": 1}}
    out = apply_at_path(tree, ("a", "c"), {"d": 2})
    assert tree == {"a": {"b": 1}}
    assert out == {"a": {"b": 1, "c": {"d": 2}}}


def test_intermediate_key_holding_null_is_conflict():
    """
    Um nó existente com valor null não é tratado como ausente.
    """
    with pytest.raises(MergeConflictError) as exc_info:
        apply_at_path({"a": None}, ("a", "b"), {"x": 1})
    assert exc_info.value.path == ("a",)
    assert exc_info.value.existing_type == "null"


def test_final_key_holding_null_is_conflict():
    with pytest.raises(MergeConflictError) as exc_info:
        apply_at_path({"server": None}, ("server",), {"port": 1})
    assert exc_info.value.path == ("server",)
    assert exc_info.value.existing_type == "null"
