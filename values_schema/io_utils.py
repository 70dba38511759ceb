from __future__ import annotations

import base64
import datetime
import json
import os
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .errors import ValuesFileError


def normalize_value(value: Any) -> Any:
    """Coerce a ``yaml.safe_load`` result into plain JSON-compatible values.

    Mapping keys become strings, timestamps become ISO strings, binary
    scalars are kept as base64 text and sets become lists.
    """
    if isinstance(value, dict):
        return {normalize_key(k): normalize_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [normalize_value(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return [normalize_value(v) for v in sorted(value, key=str)]
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    return value


def normalize_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(normalize_value(key))


def load_yaml_text(text: str, source: str = "<text>") -> Dict[str, Any]:
    """Decode a YAML document whose top level must be a mapping (or empty)."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValuesFileError(f"error parsing {source}: {e}", source) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValuesFileError(
            f"{source} must contain a mapping at the top level, got {type(data).__name__}",
            source,
        )
    return normalize_value(data)


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a YAML file into a dict; a missing file reads as empty."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except (OSError, UnicodeDecodeError) as e:
        raise ValuesFileError(f"error loading {path}: {e}", path) from e
    return load_yaml_text(text, str(path))


def read_yaml_content(file_obj) -> Dict[str, Any]:
    """Read YAML content from an uploaded file or file path."""
    if file_obj is None:
        raise ValuesFileError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8')
        return load_yaml_text(content, getattr(file_obj, 'name', '<upload>'))

    if isinstance(file_obj, (str, os.PathLike)):
        path = file_obj
    else:
        path = file_obj.name
    if not Path(path).is_file():
        raise ValuesFileError(f"{path} not found", path)
    return load_yaml(path)


def render_schema(schema: Dict[str, Any]) -> str:
    """Serialize a schema as indented JSON text.

    Non-finite numbers (YAML ``.inf``/``.nan``) have no JSON form and raise
    ``ValuesFileError``.
    """
    try:
        return json.dumps(schema, indent=2, ensure_ascii=False, allow_nan=False)
    except ValueError as e:
        raise ValuesFileError(f"error marshaling schema to JSON: {e}") from e
