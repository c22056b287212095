"""Analysis module for gabcard runs."""

from __future__ import annotations

from gabcard.analysis.evolution_analysis import EvolutionAnalyzer

__all__ = [
    "EvolutionAnalyzer",
]
