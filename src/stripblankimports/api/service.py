"""Batch orchestration for the CLI and embedding integrations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import BinaryIO

from stripblankimports.adapters.goimports import GoimportsRunner
from stripblankimports.core.config import FormatSettings
from stripblankimports.core.diagnostics import DiagnosticEmitter, ensure_emitter
from stripblankimports.core.exceptions import (
    GoimportsExecutionError,
    TransformChainError,
    exception_hint,
    is_pass_through,
)
from stripblankimports.core.formatter import format_source
from stripblankimports.core.pipeline import Stage, Transform, stitch


__all__ = ["FileOutcome", "FormatReport", "FormatService"]


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FileOutcome:
    """What happened to a single input path."""

    path: Path
    content: bytes | None
    error: BaseException | None = None
    merged_lines: int = 0

    @property
    def reported(self) -> bool:
        """Return True when the failure deserves the user's attention."""
        return self.error is not None and not is_pass_through(self.error)


@dataclass(slots=True)
class FormatReport:
    """Captured outcome of a :class:`FormatService` run."""

    outcomes: list[FileOutcome] = field(default_factory=list)
    goimports_error: GoimportsExecutionError | None = None

    @property
    def failed(self) -> bool:
        return self.goimports_error is not None or any(
            outcome.reported for outcome in self.outcomes
        )

    @property
    def merged_lines(self) -> int:
        return sum(outcome.merged_lines for outcome in self.outcomes)


class FormatService:
    """High-level façade that reads, transforms and emits Go files."""

    def __init__(
        self,
        settings: FormatSettings | None = None,
        *,
        emitter: DiagnosticEmitter | None = None,
        runner: GoimportsRunner | None = None,
    ) -> None:
        self.settings = settings or FormatSettings()
        self.emitter = ensure_emitter(emitter)
        self.runner = runner or GoimportsRunner(
            self.settings.goimports_path, local=self.settings.local
        )

    def build_transform(self, path: Path, outcome: FileOutcome) -> Transform:
        """Return the per-file transform chain for ``path``."""

        def squash(content: bytes) -> bytes:
            result = format_source(content)
            outcome.merged_lines = result.merged_lines
            self.emitter.event(
                "import_block_squashed",
                {
                    "path": str(path),
                    "merged_lines": result.merged_lines,
                    "imports": result.imports,
                    "comments": result.comments,
                },
            )
            return result.content

        stages = [Stage("squash", squash)]
        if self.settings.run_goimports and not self.settings.write_back:
            stages.append(Stage("goimports", self.runner.format_source))
        return stitch(*stages)

    def process(self, path: Path) -> FileOutcome:
        """Read and transform ``path``; failures fall back to the last good content."""
        try:
            content = path.read_bytes()
        except OSError as exc:
            self.emitter.error(f"error reading file {path}: {exc}", exc)
            return FileOutcome(path=path, content=None, error=exc)

        outcome = FileOutcome(path=path, content=content)
        try:
            outcome.content = self.build_transform(path, outcome)(content)
        except TransformChainError as exc:
            outcome.content = exc.content
            outcome.error = exc
            if is_pass_through(exc):
                reason = exception_hint(exc) or exc.stage
                self.emitter.event("file_skipped", {"path": str(path), "reason": reason})
            else:
                self.emitter.error(f"error processing file {path}: {exc}", exc)
        return outcome

    def stream(self, paths: Iterable[Path], sink: BinaryIO) -> FormatReport:
        """Transform each path and write the results to ``sink`` in order."""
        report = FormatReport()
        for path in paths:
            outcome = self.process(Path(path))
            report.outcomes.append(outcome)
            if outcome.content is not None:
                sink.write(outcome.content)
        sink.flush()
        return report

    def write_back(self, paths: Iterable[Path]) -> FormatReport:
        """Rewrite each path in place, then run goimports once over them."""
        report = FormatReport()
        written: list[Path] = []
        for path in paths:
            outcome = self.process(Path(path))
            report.outcomes.append(outcome)
            if outcome.content is None:
                continue
            try:
                outcome.path.write_bytes(outcome.content)
            except OSError as exc:
                outcome.error = exc
                self.emitter.error(f"error writing file {outcome.path}: {exc}", exc)
                continue
            written.append(outcome.path)

        if self.settings.run_goimports and written:
            report.goimports_error = self._goimports_write_back(written)
        return report

    def run(self, paths: Sequence[Path], sink: BinaryIO) -> FormatReport:
        """Dispatch to :meth:`write_back` or :meth:`stream` based on the settings."""
        logger.debug("formatting %d path(s), write_back=%s", len(paths), self.settings.write_back)
        if self.settings.write_back:
            return self.write_back(paths)
        return self.stream(paths, sink)

    def _goimports_write_back(self, paths: list[Path]) -> GoimportsExecutionError | None:
        self.emitter.event(
            "goimports_run", {"executable": self.runner.executable, "files": len(paths)}
        )
        try:
            self.runner.write_back(paths)
        except GoimportsExecutionError as exc:
            self.emitter.error(f"goimports error: {exc}", exc)
            return exc
        return None
