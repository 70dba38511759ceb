from __future__ import annotations

from typing import Any, Dict


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return a new dict with ``override`` merged into ``base``.

    Mappings present on both sides are merged recursively. Any other value in
    ``override`` (scalars, lists, type mismatches, explicit nulls) replaces
    the base value outright. Neither input is modified.
    """
    merged = dict(base)
    for key, val in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(val, dict):
            merged[key] = deep_merge(current, val)
        else:
            merged[key] = val
    return merged
