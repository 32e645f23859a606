"""Core import block squashing pipeline."""

from __future__ import annotations

from .bounds import BlockBounds, find_import_bounds, slice_within
from .config import FormatSettings
from .exceptions import (
    GoimportsExecutionError,
    GoSyntaxError,
    ImportSquashError,
    MalformedImportBlockError,
    NonBlockImportError,
    NotApplicableError,
    SerializationError,
    TransformChainError,
)
from .formatter import FormatResult, format_source, transform
from .pipeline import Stage, Transform, stitch
from .squash import squash_blank_lines


__all__ = [
    "BlockBounds",
    "FormatResult",
    "FormatSettings",
    "GoSyntaxError",
    "GoimportsExecutionError",
    "ImportSquashError",
    "MalformedImportBlockError",
    "NonBlockImportError",
    "NotApplicableError",
    "SerializationError",
    "Stage",
    "Transform",
    "TransformChainError",
    "find_import_bounds",
    "format_source",
    "slice_within",
    "squash_blank_lines",
    "stitch",
    "transform",
]
