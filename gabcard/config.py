"""Project-wide configuration constants."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar


@dataclass(frozen=True)
class Config:
    """Central configuration constants for gabcard."""

    # Target parameters
    TARGET: ClassVar[str] = "Wszystkiego najlepszego dla Wikipedii! :)"
    GENE_MIN: ClassVar[int] = 0  # Lowest random character code
    GENE_MAX: ClassVar[int] = 254  # Highest random character code

    # Genome parameters
    INITIAL_COST: ClassVar[int] = 10000  # Cost before the first calc_cost
    MUTATION_CHANCE: ClassVar[float] = 0.5  # Per-member mutation probability
    MUTATION_DIRECTION_BIAS: ClassVar[float] = 0.5  # Chance of a -1 step

    # Population parameters
    POPULATION_SIZE: ClassVar[int] = 20
    MIN_POPULATION_SIZE: ClassVar[int] = 2  # Breeding needs two parents

    # Scheduling parameters
    TICK_DELAY: ClassVar[float] = 0.0001  # Seconds between generations
    STATS_INTERVAL: ClassVar[int] = 100  # Generations between summaries

    # Display parameters (upper bounds on the character code)
    COLOR_THRESHOLDS: ClassVar[tuple[int, int, int]] = (100, 115, 120)
    COLOR_PALETTE: ClassVar[tuple[str, str, str, str]] = (
        "#C2DD6A",
        "#78BBB4",
        "#F7F3CE",
        "#F64989",
    )

    # Path parameters
    DATA_DIR: ClassVar[str] = "data"  # Base data directory
    ANALYSIS_DIR: ClassVar[str] = "data/analysis"  # Plot output path

    @classmethod
    def create_dirs(cls) -> None:
        """Create required data directories."""
        for path in (cls.DATA_DIR, cls.ANALYSIS_DIR):
            Path(path).mkdir(parents=True, exist_ok=True)
