"""Implementation of the `stripblankimports` formatting command."""

from __future__ import annotations

import logging
import sys
from typing import Annotated

from pydantic import ValidationError
import typer

from stripblankimports.api.service import FormatService
from stripblankimports.core.config import FormatSettings
from stripblankimports.version import get_version

from .._options import (
    DebugOption,
    GoimportsPathOption,
    LocalOption,
    PathsArgument,
    RunGoimportsOption,
    VerbosityOption,
    WriteBackOption,
)
from ..diagnostics import CliEmitter
from ..state import configure_logging, set_cli_state


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(get_version())
        raise typer.Exit()


def format_command(
    paths: PathsArgument,
    local: LocalOption = "",
    verbose: VerbosityOption = 0,
    write_back: WriteBackOption = False,
    goimports_path: GoimportsPathOption = "goimports",
    run_goimports: RunGoimportsOption = True,
    debug: DebugOption = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Remove blank lines between the imports of Go files, then run goimports."""
    _ = version
    state = set_cli_state(verbosity=verbose, debug=debug)
    try:
        settings = FormatSettings(
            local=local,
            goimports_path=goimports_path,
            write_back=write_back,
            run_goimports=run_goimports,
        )
    except ValidationError as exc:
        message = "; ".join(error["msg"] for error in exc.errors())
        raise typer.BadParameter(message) from exc

    handler = configure_logging(state)
    try:
        service = FormatService(settings, emitter=CliEmitter(state=state))
        report = service.run(paths, sys.stdout.buffer)
    finally:
        package_logger = logging.getLogger("stripblankimports")
        package_logger.removeHandler(handler)
        package_logger.setLevel(logging.NOTSET)

    if report.failed:
        raise typer.Exit(code=1)


__all__ = ["format_command"]
