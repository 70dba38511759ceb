from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class ValuesSchemaError(Exception):
    """Base class for errors raised around schema generation."""


class ValuesFileError(ValuesSchemaError):
    """A YAML values, overrides or config file could not be read or decoded."""

    def __init__(self, message: str, path: Optional[PathLike] = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class ChartContextError(ValuesSchemaError):
    """The chart directory is missing a file the generator needs."""

    def __init__(self, message: str, path: Optional[PathLike] = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class SchemaDepthError(ValuesSchemaError):
    def __init__(self, depth: int, limit: int):
        self.depth = depth
        self.limit = limit
        super().__init__(f"value tree nesting depth {depth} exceeds the limit of {limit}")
