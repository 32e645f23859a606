"""Abstractions for invoking the goimports executable."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
import subprocess

from stripblankimports.core.exceptions import GoimportsExecutionError


__all__ = ["GoimportsRunner"]


class GoimportsRunner:
    """Run goimports over stdin or over files in place."""

    def __init__(self, executable: str = "goimports", *, local: str = "") -> None:
        self.executable = executable
        self.local = local

    def base_command(self) -> list[str]:
        return [self.executable, "-local", self.local]

    def format_source(self, content: bytes) -> bytes:
        """Pipe ``content`` through goimports and return its stdout."""
        result = self._run(self.base_command(), stdin=content)
        return result.stdout

    def write_back(self, paths: Sequence[Path | str]) -> None:
        """Let goimports rewrite ``paths`` in place with a single invocation."""
        if not paths:
            return
        command = [*self.base_command(), "-w", *(str(path) for path in paths)]
        self._run(command, stdin=None)

    def _run(self, command: list[str], *, stdin: bytes | None) -> subprocess.CompletedProcess[bytes]:
        try:
            result = subprocess.run(
                command,
                input=stdin,
                check=False,
                capture_output=True,
            )
        except FileNotFoundError as exc:
            raise GoimportsExecutionError(
                f"goimports executable '{self.executable}' could not be located."
            ) from exc
        except OSError as exc:
            raise GoimportsExecutionError(f"Failed to invoke goimports: {exc}") from exc

        if result.returncode != 0:
            detail = (result.stderr or b"").decode("utf-8", "replace").strip()
            message = f"goimports failed with exit code {result.returncode}"
            if detail:
                message = f"{message}: {detail}"
            raise GoimportsExecutionError(message)

        return result
