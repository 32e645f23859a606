"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
OUTPUT_PANEL = "Output"
GOIMPORTS_PANEL = "goimports"
DIAGNOSTICS_PANEL = "Diagnostics"

PathsArgument = Annotated[
    list[Path],
    typer.Argument(
        metavar="PATH...",
        help="Go source files whose import blocks should be squashed.",
        dir_okay=False,
        rich_help_panel=INPUTS_PANEL,
    ),
]

WriteBackOption = Annotated[
    bool,
    typer.Option(
        "--write",
        "-w",
        help="Write the result back to each source file instead of stdout.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

LocalOption = Annotated[
    str,
    typer.Option(
        "--local",
        help="Local grouping prefix forwarded to goimports -local.",
        rich_help_panel=GOIMPORTS_PANEL,
    ),
]

GoimportsPathOption = Annotated[
    str,
    typer.Option(
        "--goimports-path",
        "-p",
        help="Path to the goimports executable.",
        rich_help_panel=GOIMPORTS_PANEL,
    ),
]

RunGoimportsOption = Annotated[
    bool,
    typer.Option(
        "--goimports/--no-goimports",
        help="Run goimports after squashing blank lines.",
        rich_help_panel=GOIMPORTS_PANEL,
    ),
]

VerbosityOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase diagnostic verbosity (repeat for more detail).",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks for unexpected failures.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]


__all__ = [
    "DebugOption",
    "GoimportsPathOption",
    "LocalOption",
    "PathsArgument",
    "RunGoimportsOption",
    "VerbosityOption",
    "WriteBackOption",
]
