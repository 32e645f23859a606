"""Settings models for a formatting run.

FormatSettings

`local` (`str`)
: Import path prefix forwarded to ``goimports -local``. Imports starting with
  it are grouped after third-party packages. An empty value is passed through
  as is.

`goimports_path` (`str`)
: Executable used for the post-pass. Either a bare command looked up on
  ``PATH`` or a path to a binary.

`write_back` (`bool`)
: Rewrite each input file in place instead of printing results to stdout.
  In this mode goimports runs once over every path after all rewrites.

`run_goimports` (`bool`)
: Toggle the goimports post-pass. Disable it to only squash blank lines.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


__all__ = ["FormatSettings"]


class FormatSettings(BaseModel):
    """Options shared by the stream and write-back drivers."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    local: str = Field(default="", description="goimports -local value")
    goimports_path: str = Field(default="goimports", description="goimports executable")
    write_back: bool = False
    run_goimports: bool = True

    @field_validator("goimports_path")
    @classmethod
    def _require_executable(cls, value: str) -> str:
        candidate = value.strip()
        if not candidate:
            raise ValueError("goimports path must not be empty")
        return candidate
