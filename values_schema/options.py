from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GenerationOptions:
    """Per-call switches for the inference functions.

    - verbose: log every required-field and pruning decision at DEBUG level
    - max_depth: reject value trees nested deeper than this (None = unbounded)
    """

    verbose: bool = False
    max_depth: Optional[int] = None


DEFAULT_OPTIONS = GenerationOptions()
