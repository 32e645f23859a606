"""Render a syntax tree back to bytes, honouring merged lines."""

from __future__ import annotations

from stripblankimports.core.exceptions import SerializationError

from .positions import PositionTable
from .syntax import SyntaxTree


__all__ = ["render"]


def _terminator(line: bytes) -> bytes:
    if line.endswith(b"\r\n"):
        return b"\r\n"
    if line.endswith(b"\n"):
        return b"\n"
    return b""


def render(tree: SyntaxTree, table: PositionTable) -> bytes:
    """Print ``tree`` using the line layout recorded in ``table``.

    Lines that were never merged are copied verbatim. A logical line made of
    several physical lines keeps the content of its first physical line and
    the terminator of its last one, so the merged lines must be blank.
    """
    source = tree.source
    if table.size != len(source):
        raise SerializationError(
            f"position table covers {table.size} bytes, source has {len(source)}"
        )

    chunks: list[bytes] = []
    for first, last in table.logical_lines():
        start, stop = table.line_span(first)
        head = source[start:stop]
        if first == last:
            chunks.append(head)
            continue

        chunks.append(head[: len(head) - len(_terminator(head))])
        for physical in range(first + 1, last + 1):
            line_start, line_stop = table.line_span(physical)
            if source[line_start:line_stop].strip():
                raise SerializationError(
                    f"cannot merge line {physical} into line {first}: "
                    f"line {physical} is not blank"
                )
        tail_start, tail_stop = table.line_span(last)
        chunks.append(_terminator(source[tail_start:tail_stop]))

    return b"".join(chunks)
