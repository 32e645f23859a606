"""Typer application wiring for the stripblankimports CLI."""

from __future__ import annotations

from rich.traceback import Traceback
import typer

from .commands.format import format_command
from .state import emit_error, get_cli_state


app = typer.Typer(
    help="Strip blank lines from Go import blocks.",
    context_settings={"help_option_names": ["--help", "-h"]},
)
app.command()(format_command)


def main() -> None:
    """Console script entry point; unexpected failures exit with status 1."""
    try:
        app()
    except Exception as exc:
        state = get_cli_state()
        if state.show_tracebacks:
            state.err_console.print(
                Traceback.from_exception(
                    type(exc), exc, exc.__traceback__, show_locals=state.verbosity >= 2
                )
            )
        else:
            emit_error(str(exc), exception=exc)
        raise SystemExit(1) from exc


__all__ = ["app", "main"]
