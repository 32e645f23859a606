"""Squash blank lines inside Go import blocks."""

from __future__ import annotations

from stripblankimports.api import FileOutcome, FormatReport, FormatService
from stripblankimports.core import (
    BlockBounds,
    FormatResult,
    FormatSettings,
    GoimportsExecutionError,
    GoSyntaxError,
    ImportSquashError,
    MalformedImportBlockError,
    NonBlockImportError,
    NotApplicableError,
    SerializationError,
    format_source,
    transform,
)
from stripblankimports.version import get_version


__version__ = get_version()

__all__ = [
    "BlockBounds",
    "FileOutcome",
    "FormatReport",
    "FormatResult",
    "FormatService",
    "FormatSettings",
    "GoSyntaxError",
    "GoimportsExecutionError",
    "ImportSquashError",
    "MalformedImportBlockError",
    "NonBlockImportError",
    "NotApplicableError",
    "SerializationError",
    "__version__",
    "format_source",
    "get_version",
    "transform",
]
