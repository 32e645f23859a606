"""Diagnostic abstractions shared across the formatting pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DiagnosticEmitter(Protocol):
    """Interface the drivers report per-file errors and events through."""

    def error(self, message: str, exc: BaseException | None = None) -> None: ...

    def event(self, name: str, payload: Mapping[str, Any]) -> None: ...


class NullEmitter:
    """Emitter that ignores every diagnostic."""

    def error(self, message: str, exc: BaseException | None = None) -> None:
        return

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        return


def ensure_emitter(emitter: DiagnosticEmitter | None) -> DiagnosticEmitter:
    """Return a usable emitter, defaulting to the null implementation."""
    return emitter if emitter is not None else NullEmitter()


def format_event_message(name: str, payload: Mapping[str, Any]) -> str | None:
    """Return a one-line summary for the events worth showing at ``-v``.

    ``import_block_squashed``
        ``path``, ``merged_lines`` and ``imports``.

    ``file_skipped``
        ``path`` and ``reason``.

    ``goimports_run``
        ``executable`` and ``files``; nothing is shown for zero files.
    """
    path = payload.get("path") or "<stdin>"

    if name == "import_block_squashed":
        merged = int(payload.get("merged_lines") or 0)
        imports = payload.get("imports")
        if not merged:
            return f"Unchanged: {path} ({imports} imports)"
        plural = "" if merged == 1 else "s"
        return f"Squashed: {path} ({merged} blank line{plural} removed, {imports} imports)"

    if name == "file_skipped":
        return f"Skipped: {path} ({payload.get('reason') or 'no change needed'})"

    if name == "goimports_run" and payload.get("files"):
        executable = payload.get("executable") or "goimports"
        return f"Running {executable} on {payload['files']} file(s)"

    return None


__all__ = [
    "DiagnosticEmitter",
    "NullEmitter",
    "ensure_emitter",
    "format_event_message",
]
