"""Trailing-slash link checker for built static sites."""

from __future__ import annotations

__all__ = [
    "check",
    "config",
    "files",
    "links",
    "report",
]
