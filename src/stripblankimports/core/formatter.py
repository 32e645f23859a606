"""Remove blank-line runs from the import block of a Go file.

The transform parses the file, finds the parentheses of its first ``import``
declaration, restricts the import specs and comment groups to that block,
merges the lines of every run of blank lines between consecutive members, and
prints the file back. Everything outside the block is left byte-for-byte
untouched.
"""

from __future__ import annotations

from dataclasses import dataclass

from stripblankimports.golang import parse, render

from .bounds import BlockBounds, find_import_bounds, slice_within
from .exceptions import NotApplicableError
from .squash import squash_blank_lines


__all__ = ["FormatResult", "format_source", "transform"]


@dataclass(frozen=True, slots=True)
class FormatResult:
    """Outcome of a successful transform."""

    content: bytes
    bounds: BlockBounds
    imports: int
    comments: int
    merged_lines: int

    @property
    def changed(self) -> bool:
        return self.merged_lines > 0


def format_source(content: bytes) -> FormatResult:
    """Squash the import block of ``content`` and describe what happened.

    Raises :class:`~stripblankimports.core.exceptions.GoSyntaxError`,
    :class:`NotApplicableError`,
    :class:`~stripblankimports.core.exceptions.NonBlockImportError`,
    :class:`~stripblankimports.core.exceptions.MalformedImportBlockError` or
    :class:`~stripblankimports.core.exceptions.SerializationError`.
    """
    tree, table = parse(content)

    imports = tree.imports
    if len(imports) <= 1:
        raise NotApplicableError("doesn't contain multiple imports")

    bounds = find_import_bounds(tree.tokens)

    entries = slice_within(bounds, imports)
    comments = slice_within(bounds, tree.comments)
    merged = squash_blank_lines(table, entries, comments)

    return FormatResult(
        content=render(tree, table),
        bounds=bounds,
        imports=len(entries),
        comments=len(comments),
        merged_lines=merged,
    )


def transform(content: bytes) -> bytes:
    """Return ``content`` with blank-line runs removed from its import block."""
    return format_source(content).content
