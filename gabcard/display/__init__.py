"""Display modules."""

from __future__ import annotations

from gabcard.display.card import CardDisplay

__all__ = [
    "CardDisplay",
]
