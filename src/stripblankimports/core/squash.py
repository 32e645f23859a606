"""Collapse blank-line gaps between the members of an import block."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from stripblankimports.golang.positions import PositionTable
from stripblankimports.golang.syntax import Positioned


__all__ = ["squash_blank_lines"]


logger = logging.getLogger(__name__)


class _MergeCursor:
    """Walk two position-sorted sequences as one, without building a merged list."""

    def __init__(self, entries: Sequence[Positioned], comments: Sequence[Positioned]) -> None:
        self.entries = entries
        self.comments = comments
        self.entry_index = 0
        self.comment_index = 0

    @property
    def exhausted(self) -> bool:
        return self.entry_index >= len(self.entries) and self.comment_index >= len(
            self.comments
        )

    def choose(self, *, advance: bool) -> Positioned:
        """Return the head with the smaller position, preferring entries on ties."""
        if self.entry_index >= len(self.entries):
            take_entry = False
        elif self.comment_index >= len(self.comments):
            take_entry = True
        else:
            entry = self.entries[self.entry_index]
            comment = self.comments[self.comment_index]
            take_entry = entry.pos <= comment.pos

        if take_entry:
            chosen = self.entries[self.entry_index]
            if advance:
                self.entry_index += 1
        else:
            chosen = self.comments[self.comment_index]
            if advance:
                self.comment_index += 1
        return chosen


def squash_blank_lines(
    table: PositionTable,
    entries: Sequence[Positioned],
    comments: Sequence[Positioned],
) -> int:
    """Merge away every gap of two or more blank lines between members.

    A single blank line between two members is left alone, as are blank lines
    inside a multi-line member, since only the end line of one member and the
    start line of the next are compared. Returns the number of merged lines.
    """
    if len(entries) < 2:
        return 0

    cursor = _MergeCursor(entries, comments)
    merged = 0
    while not cursor.exhausted:
        current = cursor.choose(advance=True)
        if cursor.exhausted:
            break
        following = cursor.choose(advance=False)

        end_line = table.line(current.end)
        start_line = table.line(following.pos)
        extra = start_line - end_line - 1
        if extra > 1:
            for _ in range(extra):
                table.merge_line(end_line)
            merged += extra

    if merged:
        logger.debug("merged %d blank line(s) across %d import(s)", merged, len(entries))
    return merged
