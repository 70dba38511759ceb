from __future__ import annotations

from typing import Any, Dict

NULL_STRINGS = ("", "null", "<nil>")


def is_null_value(value: Any) -> bool:
    """True for a real null and for the ``"null"`` / empty string placeholders."""
    if value is None:
        return True
    if isinstance(value, str):
        return value in ("null", "")
    return False


def is_blank_value(value: Any) -> bool:
    """Narrow emptiness: null, empty string, empty list or empty mapping.

    Zero and ``False`` are real values here.
    """
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


def is_empty_value(value: Any) -> bool:
    """Broad emptiness used when pruning against the defaults tree.

    Everything :func:`is_blank_value` accepts, plus numeric zero and ``False``.
    """
    if is_blank_value(value):
        return True
    if isinstance(value, (set, frozenset)):
        return len(value) == 0
    if isinstance(value, (bool, int, float)):
        return value == 0
    return False


def is_disabled_component(value: Any) -> bool:
    """A mapping carrying a boolean ``enabled: false``."""
    return isinstance(value, dict) and value.get("enabled") is False


def strip_null_defaults(mapping: Dict[str, Any]) -> Dict[str, Any]:
    """Copy ``mapping`` dropping null leaves.

    Nested mappings are stripped recursively and omitted when nothing is left.
    """
    defaults: Dict[str, Any] = {}
    for key, val in mapping.items():
        if val is None:
            continue
        if isinstance(val, dict):
            nested = strip_null_defaults(val)
            if nested:
                defaults[key] = nested
        else:
            defaults[key] = val
    return defaults


def count_schema_fields(schema: Dict[str, Any]) -> int:
    """Count properties recursively (array item schemas are not descended)."""
    count = 0
    props = schema.get("properties")
    if isinstance(props, dict):
        count += len(props)
        for prop in props.values():
            if isinstance(prop, dict):
                count += count_schema_fields(prop)
    return count


def summarize_components(values: Dict[str, Any]) -> Dict[str, int]:
    """Count top-level blocks with a boolean ``enabled`` flag, by state."""
    enabled = 0
    disabled = 0
    for val in values.values():
        if isinstance(val, dict) and isinstance(val.get("enabled"), bool):
            if val["enabled"]:
                enabled += 1
            else:
                disabled += 1
    return {"enabled": enabled, "disabled": disabled}
