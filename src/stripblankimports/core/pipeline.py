"""Compose byte-level transforms into a single callable."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .exceptions import TransformChainError, exception_hint


__all__ = ["Stage", "Transform", "stitch"]


Transform = Callable[[bytes], bytes]


@dataclass(frozen=True, slots=True)
class Stage:
    """A named transform step."""

    name: str
    fn: Transform

    def __call__(self, content: bytes) -> bytes:
        return self.fn(content)


def stitch(*stages: Stage) -> Transform:
    """Chain ``stages`` so each one consumes the output of the previous one.

    When a stage raises, the chain raises :class:`TransformChainError` chained
    to the original failure and carrying the input of the failing stage.
    """

    def run(content: bytes) -> bytes:
        for stage in stages:
            try:
                content = stage(content)
            except Exception as exc:
                message = f"{stage.name}: {exception_hint(exc) or type(exc).__name__}"
                raise TransformChainError(message, content=content, stage=stage.name) from exc
        return content

    return run
