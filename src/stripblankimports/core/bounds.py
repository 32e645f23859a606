"""Locate the import block and restrict positioned nodes to it."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TypeVar

from stripblankimports.golang.syntax import Lexeme, Positioned, Token

from .exceptions import MalformedImportBlockError, NonBlockImportError


__all__ = ["BlockBounds", "find_import_bounds", "slice_within"]


SpanT = TypeVar("SpanT", bound=Positioned)


@dataclass(frozen=True, slots=True)
class BlockBounds:
    """Offsets of the opening and closing parenthesis of the import block."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise ValueError(f"block start {self.start} must precede end {self.end}")

    def contains(self, offset: int) -> bool:
        return self.start < offset < self.end


def find_import_bounds(tokens: Iterable[Lexeme]) -> BlockBounds:
    """Find the parentheses of the first ``import`` declaration.

    The first ``(`` after the first ``import`` keyword opens the block and the
    first ``)`` after it closes the block. Bracket depth is not tracked, and
    any later ``import`` declaration is ignored.
    """
    found = False
    start: int | None = None
    for lexeme in tokens:
        if lexeme.kind is Token.EOF:
            break
        if not found:
            found = lexeme.kind is Token.IMPORT
            continue
        if start is None:
            if lexeme.kind is Token.STRING:
                raise NonBlockImportError("non-block import")
            if lexeme.kind is Token.LPAREN:
                start = lexeme.pos
        elif lexeme.kind is Token.RPAREN:
            return BlockBounds(start, lexeme.pos)

    if not found:
        raise MalformedImportBlockError("no import declaration found")
    if start is None:
        raise MalformedImportBlockError("import declaration has no opening parenthesis")
    raise MalformedImportBlockError("import block is not closed")


def slice_within(bounds: BlockBounds, spans: Sequence[SpanT]) -> Sequence[SpanT]:
    """Return the contiguous run of ``spans`` that start inside ``bounds``.

    ``spans`` must be sorted by position; the scan stops at the first span
    starting past the end of the block.
    """
    lower = upper = -1
    for index, span in enumerate(spans):
        if lower == -1 and bounds.contains(span.pos):
            lower = index
        if lower != -1 and span.pos < bounds.end:
            upper = index
        if span.pos > bounds.end:
            break

    if lower == -1:
        return ()
    return spans[lower : upper + 1]
