from __future__ import annotations

import pytest

from values_schema.schema_utils import (
    count_schema_fields,
    is_blank_value,
    is_disabled_component,
    is_empty_value,
    is_null_value,
    strip_null_defaults,
    summarize_components,
)


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, "", "null"])
def test_null_values(value) -> None:
    assert is_null_value(value)


@pytest.mark.unit
@pytest.mark.parametrize("value", ["<nil>", "value", 0, False, {}])
def test_non_null_values(value) -> None:
    assert not is_null_value(value)


@pytest.mark.unit
def test_blank_value_ignores_zero_and_false() -> None:
    assert is_blank_value("")
    assert is_blank_value([])
    assert is_blank_value({})
    assert not is_blank_value(0)
    assert not is_blank_value(False)
    assert not is_blank_value("x")
    assert not is_blank_value({"k": None})


@pytest.mark.unit
def test_empty_value_includes_zero_and_false() -> None:
    assert is_empty_value(None)
    assert is_empty_value(0)
    assert is_empty_value(0.0)
    assert is_empty_value(False)
    assert is_empty_value(set())
    assert not is_empty_value(True)
    assert not is_empty_value(1)
    assert not is_empty_value([0])


@pytest.mark.unit
def test_disabled_component_requires_boolean_false() -> None:
    assert is_disabled_component({"enabled": False, "x": 1})
    assert not is_disabled_component({"enabled": True})
    assert not is_disabled_component({"enabled": "false"})
    assert not is_disabled_component({"enabled": 0})
    assert not is_disabled_component(False)


@pytest.mark.unit
def test_strip_null_defaults_is_recursive() -> None:
    value = {
        "a": 1,
        "b": None,
        "c": {"d": None, "e": {"f": None}},
        "g": {"h": None, "i": "x"},
        "j": [None, 1],
        "k": {},
    }

    assert strip_null_defaults(value) == {"a": 1, "g": {"i": "x"}, "j": [None, 1]}


@pytest.mark.unit
def test_count_schema_fields_counts_nested_properties() -> None:
    schema = {
        "type": "object",
        "properties": {
            "a": {"type": "string"},
            "b": {"type": "object", "properties": {"c": {"type": "integer"}}},
            "d": {"type": "array", "items": {"type": "object", "properties": {"e": {}}}},
        },
    }

    assert count_schema_fields(schema) == 4


@pytest.mark.unit
def test_summarize_components() -> None:
    values = {
        "a": {"enabled": True},
        "b": {"enabled": False},
        "c": {"enabled": "yes"},
        "d": 1,
    }

    assert summarize_components(values) == {"enabled": 1, "disabled": 1}
