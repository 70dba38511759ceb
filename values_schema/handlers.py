from __future__ import annotations

import os
import tempfile
from typing import Any, Dict, Optional

import gradio as gr

from .errors import ValuesSchemaError
from .generator import SCHEMA_FILE_NAME, generate_schema
from .io_utils import read_yaml_content, render_schema
from .logging_config import configure_logging, get_logger
from .options import GenerationOptions
from .schema_utils import count_schema_fields, summarize_components

logger = get_logger(__name__)


def prepare_values_payload(file_obj):
    if file_obj is None:
        return None, "No file uploaded."

    try:
        data = read_yaml_content(file_obj)
    except ValuesSchemaError as e:
        return None, f"Error parsing YAML: {str(e)}"

    summary = summarize_components(data)
    return data, (
        f"Successfully loaded. Found {len(data)} top-level keys "
        f"({summary['enabled']} enabled, {summary['disabled']} disabled components)."
    )


def load_values_handler(file_obj):
    data, message = prepare_values_payload(file_obj)
    return data, message, None, gr.update(value=None), ""


def load_overrides_handler(file_obj):
    if file_obj is None:
        return None, "No overrides file; the schema is generated from values only."
    try:
        data = read_yaml_content(file_obj)
    except ValuesSchemaError as e:
        return None, f"Error parsing overrides YAML: {str(e)}"
    return data, f"Overrides loaded. Found {len(data)} top-level keys."


def compute_field_count_text(schema: Optional[Dict[str, Any]]) -> str:
    if not schema:
        return ""
    return f"Fields: {count_schema_fields(schema)}"


def generate_schema_handler(values, overrides, verbose=False, file_name=None, max_depth=None):
    """Generate the schema preview and a downloadable JSON file."""
    if values is None:
        return None, gr.update(value=None), "No values file loaded.", ""

    configure_logging(bool(verbose))
    options = GenerationOptions(verbose=bool(verbose), max_depth=int(max_depth) if max_depth else None)
    try:
        schema = generate_schema(values, overrides, options)
        text = render_schema(schema)
    except ValuesSchemaError as e:
        return None, gr.update(value=None), f"Error generating schema: {str(e)}", ""

    if not file_name or not file_name.strip():
        file_name = SCHEMA_FILE_NAME
    if not file_name.lower().endswith(".json"):
        file_name += ".json"

    out_dir = tempfile.mkdtemp(prefix="values-schema-")
    path = os.path.join(out_dir, os.path.basename(file_name))

    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
    except OSError as e:
        return schema, gr.update(value=None), f"Error writing schema: {str(e)}", compute_field_count_text(schema)

    logger.info("Schema generated", output=path, fields=count_schema_fields(schema))
    merged_note = " (overrides merged)" if overrides is not None else ""
    return (
        schema,
        gr.update(value=path),
        f"Schema generated{merged_note}! Saved to {path}",
        compute_field_count_text(schema),
    )
