from __future__ import annotations

import copy

import pytest

from values_schema.merging import deep_merge


@pytest.mark.unit
def test_disjoint_keys_are_unioned() -> None:
    assert deep_merge({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}


@pytest.mark.unit
def test_override_wins_for_scalars() -> None:
    assert deep_merge({"a": 1, "b": "x"}, {"a": 2})["a"] == 2


@pytest.mark.unit
def test_nested_mappings_are_merged() -> None:
    base = {"service": {"type": "ClusterIP", "port": 80}}
    override = {"service": {"port": 8080, "annotations": {"a": "b"}}}

    merged = deep_merge(base, override)

    assert merged == {"service": {"type": "ClusterIP", "port": 8080, "annotations": {"a": "b"}}}


@pytest.mark.unit
def test_lists_and_type_mismatches_are_replaced() -> None:
    base = {"hosts": ["a", "b"], "tls": {"enabled": True}, "port": 80}
    override = {"hosts": ["c"], "tls": False, "port": {"http": 80}}

    merged = deep_merge(base, override)

    assert merged["hosts"] == ["c"]
    assert merged["tls"] is False
    assert merged["port"] == {"http": 80}


@pytest.mark.unit
def test_explicit_null_overrides_base_value() -> None:
    assert deep_merge({"a": {"b": 1}}, {"a": None}) == {"a": None}


@pytest.mark.unit
def test_inputs_are_not_modified() -> None:
    base = {"a": {"b": 1, "c": [1, 2]}}
    override = {"a": {"b": 2, "d": 3}}
    base_before = copy.deepcopy(base)
    override_before = copy.deepcopy(override)

    deep_merge(base, override)

    assert base == base_before
    assert override == override_before
