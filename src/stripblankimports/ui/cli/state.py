"""Per-invocation CLI state and the stderr rendering helpers built on it."""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text


__all__ = [
    "CLIState",
    "configure_logging",
    "emit_error",
    "get_cli_state",
    "render_message",
    "set_cli_state",
]

_LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


@dataclass(slots=True)
class CLIState:
    """Verbosity and traceback settings for the running command."""

    verbosity: int = 0
    show_tracebacks: bool = False
    _err_console: Console | None = field(default=None, init=False, repr=False)

    @property
    def err_console(self) -> Console:
        # Rebuilt whenever sys.stderr is swapped, as CliRunner does per invocation.
        if self._err_console is None or self._err_console.file is not sys.stderr:
            self._err_console = Console(file=sys.stderr, highlight=False)
        return self._err_console


_STATE_VAR: ContextVar[CLIState | None] = ContextVar("stripblankimports_cli_state", default=None)


def get_cli_state() -> CLIState:
    """Return the state of the running command, creating it on first use."""
    state = _STATE_VAR.get()
    if state is None:
        state = CLIState()
        _STATE_VAR.set(state)
    return state


def set_cli_state(*, verbosity: int | None = None, debug: bool | None = None) -> CLIState:
    state = get_cli_state()
    if verbosity is not None:
        state.verbosity = max(0, verbosity)
    if debug is not None:
        state.show_tracebacks = debug
    return state


def configure_logging(state: CLIState) -> logging.Handler:
    """Send the package loggers to stderr through Rich.

    ``-v`` enables INFO and ``-vv`` DEBUG. The installed handler is returned
    so the caller can detach it once the command finishes.
    """
    logger = logging.getLogger("stripblankimports")
    logger.setLevel(_LOG_LEVELS[min(state.verbosity, len(_LOG_LEVELS) - 1)])
    handler = RichHandler(console=state.err_console, show_path=False, show_time=False)
    logger.addHandler(handler)
    return handler


def render_message(message: str) -> None:
    """Print an informational line on stderr; stdout carries formatted sources."""
    get_cli_state().err_console.print(message, markup=False)


def _causes(exc: BaseException) -> list[str]:
    causes: list[str] = []
    seen: set[int] = set()
    current = exc.__cause__ or exc.__context__
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        causes.append(f"{type(current).__name__}: {current}")
        current = current.__cause__ or current.__context__
    return causes


def emit_error(message: str, *, exception: BaseException | None = None) -> None:
    """Print an error on stderr, with exception details from ``-v`` upwards."""
    state = get_cli_state()
    text = Text.assemble(("error: ", "bold red"), (message, "red"))

    details: list[str] = []
    if exception is not None and state.verbosity >= 1:
        detail = str(exception).strip()
        if detail and detail not in message:
            details.append(detail)
        details.append(f"type: {type(exception).__name__}")
        if state.verbosity >= 2:
            details.extend(f"caused by {cause}" for cause in _causes(exception))
    if details:
        text.append("\n" + "\n".join(details), style="red")

    state.err_console.print(text)
