"""Adapters for external tools."""

from __future__ import annotations

from .goimports import GoimportsRunner


__all__ = ["GoimportsRunner"]
