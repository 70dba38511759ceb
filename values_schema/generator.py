"""End-to-end schema generation: merge, infer, prune, serialize."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .errors import ChartContextError, ValuesFileError
from .inference import infer_schema
from .io_utils import load_yaml, render_schema
from .logging_config import get_logger
from .merging import deep_merge
from .options import DEFAULT_OPTIONS, GenerationOptions
from .postprocess import prune_required
from .schema_utils import count_schema_fields, summarize_components

logger = get_logger(__name__)

SCHEMA_URI = "http://json-schema.org/schema#"
SCHEMA_FILE_NAME = "values.schema.json"
VALUES_FILE_NAMES = ("values.yaml", "values.yml")


@dataclass
class GenerationResult:
    output_path: Path
    field_count: int
    message: str
    schema: Dict[str, Any] = field(repr=False, default_factory=dict)


def generate_schema(
    values: Dict[str, Any],
    overrides: Optional[Dict[str, Any]] = None,
    options: Optional[GenerationOptions] = None,
) -> Dict[str, Any]:
    """Build the complete schema document for ``values`` (+ ``overrides``).

    ``values`` doubles as the baseline that decides which keys are required.
    """
    options = options or DEFAULT_OPTIONS
    merged = deep_merge(values, overrides) if overrides is not None else values

    schema = infer_schema(merged, values, options)
    prune_required(schema, values, options)
    return {"$schema": SCHEMA_URI, **schema}


def find_values_file(context_dir: Union[str, Path]) -> Path:
    context = Path(context_dir)
    for name in VALUES_FILE_NAMES:
        candidate = context / name
        if candidate.is_file():
            return candidate
    raise ChartContextError(f"no values.yaml or values.yml found in {context}", context)


def generate_for_chart(
    context_dir: Union[str, Path],
    overrides_name: Optional[str] = None,
    output_name: str = SCHEMA_FILE_NAME,
    options: Optional[GenerationOptions] = None,
) -> GenerationResult:
    """Write ``values.schema.json`` next to the chart's values file.

    ``overrides_name`` and ``output_name`` are resolved against
    ``context_dir``.
    """
    options = options or DEFAULT_OPTIONS
    context = Path(context_dir)
    if not context.is_dir():
        raise ChartContextError(f"context directory {context} does not exist", context)

    values_path = find_values_file(context)
    overrides_path = None
    if overrides_name:
        overrides_path = context / overrides_name
        if not overrides_path.is_file():
            raise ChartContextError(
                f"overrides file {overrides_name} not found in {context}", overrides_path
            )

    values = load_yaml(values_path)
    log = logger.bind(values_file=str(values_path))
    if options.verbose:
        summary = summarize_components(values)
        log.debug(
            "Loaded values",
            top_level_keys=len(values),
            enabled_components=summary["enabled"],
            disabled_components=summary["disabled"],
        )

    overrides = load_yaml(overrides_path) if overrides_path is not None else None
    schema = generate_schema(values, overrides, options)
    field_count = count_schema_fields(schema)

    out_path = context / output_name
    text = render_schema(schema)
    try:
        out_path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise ValuesFileError(f"error writing {out_path}: {e}", out_path) from e

    log.info("Schema generated", output=str(out_path), fields=field_count)

    if overrides_path is not None:
        message = f"Generated {out_path} by merging {overrides_name} into {values_path.name}"
    else:
        message = f"Generated {out_path} from {values_path.name}"
    return GenerationResult(out_path, field_count, message, schema)
