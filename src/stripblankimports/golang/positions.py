"""Offset to line/column bookkeeping for a single Go source file."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterator
from dataclasses import dataclass


__all__ = ["Position", "PositionTable"]


@dataclass(frozen=True, slots=True)
class Position:
    """A concrete source position.

    Offsets are 0-based byte offsets; line/column are 1-based for user-facing
    messages, with the column counted in bytes like the Go toolchain does.
    """

    offset: int
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class _LineEnds:
    """Fenwick tree counting the physical lines that still end a logical line."""

    def __init__(self, size: int) -> None:
        self._size = size
        self._tree = [0] * (size + 1)
        for index in range(1, size + 1):
            self._tree[index] += 1
            parent = index + (index & -index)
            if parent <= size:
                self._tree[parent] += self._tree[index]
        self._top = 1 << (size.bit_length() - 1) if size else 0

    def clear(self, index: int) -> None:
        while index <= self._size:
            self._tree[index] -= 1
            index += index & -index

    def count(self, index: int) -> int:
        """Return how many of the first ``index`` physical lines end a logical line."""
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total

    def find(self, rank: int) -> int:
        """Return the physical line that ends logical line ``rank``, or 0 past the end."""
        position = 0
        remaining = rank
        step = self._top
        while step:
            candidate = position + step
            if candidate <= self._size and self._tree[candidate] < remaining:
                position = candidate
                remaining -= self._tree[candidate]
            step >>= 1
        return position + 1 if position < self._size else 0


class PositionTable:
    """Map byte offsets onto lines, with support for merging lines.

    Physical line starts are recorded once from the source and never change.
    Merging records which physical line boundaries should be treated as
    contiguous, so logical line numbers shrink as boundaries are merged while
    the printer can still recover the original layout. Lookups and merges are
    logarithmic in the number of lines.
    """

    def __init__(self, source: bytes) -> None:
        self._size = len(source)
        starts = [0]
        index = source.find(b"\n")
        while index != -1:
            starts.append(index + 1)
            index = source.find(b"\n", index + 1)
        self._starts: tuple[int, ...] = tuple(starts)
        # _merged[i] is True when physical line i + 2 continues physical line i + 1.
        self._merged = [False] * len(starts)
        self._ends = _LineEnds(len(starts))

    @property
    def size(self) -> int:
        return self._size

    @property
    def physical_line_count(self) -> int:
        return len(self._starts)

    @property
    def line_count(self) -> int:
        """Return the number of logical lines after merges."""
        return self._ends.count(len(self._starts))

    def physical_line(self, offset: int) -> int:
        """Return the 1-based physical line containing ``offset``."""
        if offset < 0 or offset > self._size:
            raise ValueError(f"offset {offset} out of range [0, {self._size}]")
        return bisect_right(self._starts, offset)

    def line(self, offset: int) -> int:
        """Return the 1-based logical line containing ``offset``."""
        physical = self.physical_line(offset)
        return self._ends.count(physical - 1) + 1

    def position(self, offset: int) -> Position:
        physical = self.physical_line(offset)
        column = offset - self._starts[physical - 1] + 1
        return Position(offset=offset, line=self.line(offset), column=column)

    def merge_line(self, line: int) -> None:
        """Join logical ``line`` with the logical line that follows it.

        The last physical boundary of ``line`` is marked as merged. Merging the
        last line of the file, or a line past it, has no effect.
        """
        if line < 1:
            raise ValueError(f"invalid line number {line}")
        physical = self._ends.find(line)
        if not physical or physical == len(self._starts):
            return
        self._merged[physical - 1] = True
        self._ends.clear(physical)

    def is_merged(self, physical_line: int) -> bool:
        """Return True when ``physical_line`` continues onto the next one."""
        return self._merged[physical_line - 1]

    def logical_lines(self) -> Iterator[tuple[int, int]]:
        """Yield ``(first, last)`` physical line numbers for each logical line."""
        first = 1
        for physical in range(1, len(self._starts) + 1):
            if not self._merged[physical - 1]:
                yield first, physical
                first = physical + 1

    def line_span(self, physical_line: int) -> tuple[int, int]:
        """Return the ``[start, stop)`` offsets of a physical line, terminator included."""
        start = self._starts[physical_line - 1]
        if physical_line < len(self._starts):
            return start, self._starts[physical_line]
        return start, self._size
