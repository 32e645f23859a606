"""Diagnostic emitter that reports through the CLI console."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from stripblankimports.core.diagnostics import format_event_message

from .state import CLIState, emit_error, get_cli_state, render_message


class CliEmitter:
    """Print per-file errors always and event summaries from ``-v`` upwards."""

    def __init__(self, state: CLIState | None = None) -> None:
        self._state = state or get_cli_state()

    def error(self, message: str, exc: BaseException | None = None) -> None:
        emit_error(message, exception=exc)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        if self._state.verbosity < 1:
            return
        message = format_event_message(name, payload)
        if message:
            render_message(message)


__all__ = ["CliEmitter"]
