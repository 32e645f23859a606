"""Custom exception hierarchy for the import squashing pipeline."""

from __future__ import annotations


__all__ = [
    "GoSyntaxError",
    "GoimportsExecutionError",
    "ImportSquashError",
    "MalformedImportBlockError",
    "NonBlockImportError",
    "NotApplicableError",
    "SerializationError",
    "TransformChainError",
    "exception_hint",
    "exception_messages",
    "is_pass_through",
]


class ImportSquashError(RuntimeError):
    """Base exception for import block formatting failures."""


class GoSyntaxError(ImportSquashError):
    """Raised when the source cannot be parsed as Go."""

    def __init__(self, message: str, *, line: int = 0, column: int = 0) -> None:
        self.message = message
        self.line = line
        self.column = column
        location = f"{line}:{column}: " if line else ""
        super().__init__(f"{location}{message}")


class NotApplicableError(ImportSquashError):
    """Raised when the file holds fewer than two imports."""


class NonBlockImportError(ImportSquashError):
    """Raised when the first import declaration is not parenthesised."""


class MalformedImportBlockError(ImportSquashError):
    """Raised when an import keyword has no complete parenthesis pair."""


class SerializationError(ImportSquashError):
    """Raised when the mutated syntax tree cannot be printed back."""


class GoimportsExecutionError(ImportSquashError):
    """Raised when the goimports executable fails to run properly."""


class TransformChainError(ImportSquashError):
    """Raised when one stage of a transform chain fails.

    ``content`` holds the input of the failing stage so callers can fall back
    to the last good version of the file.
    """

    def __init__(self, message: str, *, content: bytes, stage: str) -> None:
        super().__init__(message)
        self.content = content
        self.stage = stage


_PASS_THROUGH = (NotApplicableError, NonBlockImportError)


def is_pass_through(exc: BaseException) -> bool:
    """Return True when the failure means the input is fine as it is."""
    if isinstance(exc, TransformChainError):
        exc = exc.__cause__ or exc
    return isinstance(exc, _PASS_THROUGH)


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None
