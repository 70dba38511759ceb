"""Schema fragment inference for decoded values trees.

Every node of the value tree becomes a fragment with a ``type`` and the
observed value as ``default``. Objects carry ``properties`` (and a
``required`` list derived from the baseline defaults), arrays carry an
``items`` schema inferred from their first element only.
"""
from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional

from .errors import SchemaDepthError
from .options import DEFAULT_OPTIONS, GenerationOptions
from .required import required_fields
from .schema_utils import NULL_STRINGS, strip_null_defaults

_UNCLASSIFIED = object()


def nullable_string_schema() -> Dict[str, Any]:
    return {"type": ["string", "null"], "default": None}


def infer_schema(
    value: Any,
    default_hint: Any = None,
    options: Optional[GenerationOptions] = None,
    depth: int = 0,
) -> Dict[str, Any]:
    """Build the schema fragment for ``value``.

    ``default_hint`` is the baseline value at the same position of the tree
    (None when the baseline has nothing there). It only decides ``required``;
    emitted defaults always come from ``value``.
    """
    options = options or DEFAULT_OPTIONS
    if options.max_depth is not None and depth > options.max_depth:
        raise SchemaDepthError(depth, options.max_depth)

    schema = _infer_known(value, default_hint, options, depth)
    if schema is not None:
        return schema

    coerced = coerce_value(value)
    if isinstance(coerced, dict):
        # mappings that are not dicts get no required list
        return infer_object_schema(coerced, default_hint, options, depth, with_required=False)
    if coerced is not _UNCLASSIFIED:
        schema = _infer_known(coerced, default_hint, options, depth)
        if schema is not None:
            return schema

    return {"type": "string", "default": str(value)}


def _infer_known(value: Any, default_hint: Any, options: GenerationOptions, depth: int):
    if value is None:
        return nullable_string_schema()
    if isinstance(value, dict):
        return infer_object_schema(value, default_hint, options, depth)
    if isinstance(value, list):
        return infer_array_schema(value, default_hint, options, depth)
    # bool before int: True/False are ints too
    if isinstance(value, bool):
        return {"type": "boolean", "default": value}
    if isinstance(value, int):
        return {"type": "integer", "default": value}
    if isinstance(value, float):
        return infer_number_schema(value)
    if isinstance(value, str):
        return infer_string_schema(value)
    return None


def infer_object_schema(
    value: Dict[str, Any],
    default_hint: Any,
    options: GenerationOptions = DEFAULT_OPTIONS,
    depth: int = 0,
    with_required: bool = True,
) -> Dict[str, Any]:
    def_map = default_hint if isinstance(default_hint, dict) else None

    props: Dict[str, Any] = {}
    for key, sub in value.items():
        sub_default = def_map.get(key) if def_map is not None else None
        props[key] = infer_schema(sub, sub_default, options, depth + 1)

    schema: Dict[str, Any] = {
        "type": "object",
        "properties": props,
        "default": strip_null_defaults(value),
    }

    if not with_required:
        return schema

    required = required_fields(value, def_map, options)
    if required:
        schema["required"] = required
    return schema


def infer_array_schema(
    value: list,
    default_hint: Any,
    options: GenerationOptions = DEFAULT_OPTIONS,
    depth: int = 0,
) -> Dict[str, Any]:
    def_item = None
    if isinstance(default_hint, list) and default_hint:
        def_item = default_hint[0]

    if value:
        items = infer_schema(value[0], def_item, options, depth + 1)
    else:
        items = {}

    return {"type": "array", "items": items, "default": value}


def infer_number_schema(value: float) -> Dict[str, Any]:
    if math.isfinite(value) and value.is_integer():
        return {"type": "integer", "default": int(value)}
    return {"type": "number", "default": value}


def infer_string_schema(value: str) -> Dict[str, Any]:
    if value in NULL_STRINGS:
        return nullable_string_schema()
    return {"type": "string", "default": value}


def coerce_value(value: Any) -> Any:
    """Unwrap one level of an object the loader did not produce.

    Returns the closest plain value (dict, list, int, float, str) or
    ``_UNCLASSIFIED`` when there is none. Mappings keep their string keys
    only and, like sequences, lose their null entries.
    """
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {k: v for k, v in value.items() if isinstance(k, str) and v is not None}
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, (tuple, set, frozenset, range)):
        return [item for item in value if item is not None]
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, (numbers.Real, Decimal)):
        return float(value)
    return _UNCLASSIFIED
