"""Public orchestration API."""

from __future__ import annotations

from .service import FileOutcome, FormatReport, FormatService


__all__ = ["FileOutcome", "FormatReport", "FormatService"]
