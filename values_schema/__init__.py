"""Core logic for the Values Schema Generator.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- merge an overrides tree into chart values
- infer JSON Schema fragments from decoded values
- decide which keys are required from the baseline defaults
- prune required lists of disabled or empty components
"""
from __future__ import annotations

__version__ = "0.1.0"

from .generator import generate_for_chart, generate_schema  # noqa: E402
from .inference import infer_schema  # noqa: E402
from .merging import deep_merge  # noqa: E402
from .options import GenerationOptions  # noqa: E402
from .postprocess import prune_required  # noqa: E402
from .required import required_fields  # noqa: E402

__all__ = [
    "GenerationOptions",
    "deep_merge",
    "generate_for_chart",
    "generate_schema",
    "infer_schema",
    "prune_required",
    "required_fields",
]
