from __future__ import annotations

from typing import Any, Dict, Optional

from .logging_config import get_logger
from .options import DEFAULT_OPTIONS, GenerationOptions
from .schema_utils import is_disabled_component, is_empty_value

logger = get_logger(__name__)


def prune_required(
    schema: Dict[str, Any],
    defaults: Any,
    options: Optional[GenerationOptions] = None,
) -> None:
    """Filter ``required`` lists in place against the baseline defaults tree.

    A disabled block (``enabled: false`` in its defaults) loses its whole
    list. Otherwise fields whose default is empty, zero, false or a disabled
    component are dropped, and an emptied list is removed. Properties whose
    defaults are mappings are then visited recursively. A fragment without a
    ``required`` list ends the walk for its subtree.
    """
    options = options or DEFAULT_OPTIONS
    properties = schema.get("properties")
    if not isinstance(properties, dict):
        return
    if not isinstance(defaults, dict):
        defaults = {}

    if "required" not in schema:
        return

    if is_disabled_component(defaults):
        if options.verbose:
            logger.debug("Removing required list of a component with enabled=false")
        del schema["required"]
    else:
        kept = [f for f in schema["required"] if _keep_required(f, defaults, options)]
        if kept:
            schema["required"] = kept
        else:
            del schema["required"]

    for name, prop in properties.items():
        nested = defaults.get(name)
        if isinstance(prop, dict) and isinstance(nested, dict):
            prune_required(prop, nested, options)


def _keep_required(field: str, defaults: Dict[str, Any], options: GenerationOptions) -> bool:
    if field not in defaults:
        return True

    default = defaults[field]
    if is_empty_value(default):
        if options.verbose:
            logger.debug("Removing required field with an empty default value", field=field)
        return False

    if is_disabled_component(default):
        if options.verbose:
            logger.debug("Removing required field of a disabled component", field=field)
        return False

    return True
