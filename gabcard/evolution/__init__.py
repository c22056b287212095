"""Evolution module for string-matching search."""

from __future__ import annotations

__all__ = [
    "genome",
    "population",
    "target",
]
