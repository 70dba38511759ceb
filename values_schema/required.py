from __future__ import annotations

from typing import Any, Dict, List, Optional

from .logging_config import get_logger
from .options import DEFAULT_OPTIONS, GenerationOptions
from .schema_utils import is_blank_value, is_disabled_component, is_null_value

logger = get_logger(__name__)


def required_fields(
    value: Dict[str, Any],
    default_hint: Any,
    options: Optional[GenerationOptions] = None,
) -> List[str]:
    """Keys of ``value`` that the baseline defaults make mandatory.

    Keys are taken in ``default_hint`` order; a key missing from ``value`` is
    never required. Returns an empty list when there is no baseline mapping.
    """
    if not isinstance(default_hint, dict):
        return []
    options = options or DEFAULT_OPTIONS

    required: List[str] = []
    for key, default in default_hint.items():
        if key not in value:
            continue
        if should_require(key, value[key], default, value, options):
            required.append(key)
    return required


def should_require(
    field: str,
    field_value: Any,
    default: Any,
    parent: Dict[str, Any],
    options: GenerationOptions = DEFAULT_OPTIONS,
) -> bool:
    if is_null_value(default):
        return False

    if is_blank_value(default):
        if options.verbose:
            logger.debug(
                "Skipping field with an empty default value",
                field=field,
                type=type(default).__name__,
            )
        return False

    if is_disabled_component(field_value):
        if options.verbose:
            logger.debug("Skipping disabled component", field=field)
        return False

    if is_disabled_component(parent):
        if options.verbose:
            logger.debug("Skipping field of a disabled component", field=field)
        return False

    return True
