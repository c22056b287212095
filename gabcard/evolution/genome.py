"""Genome definition for string-matching evolution."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.random import Generator

from gabcard.config import Config
from gabcard.evolution.target import decode_codes


class Genome:
    """Candidate solution encoding one character code per gene.

    ``cost`` is cached state: it holds whatever the last ``calc_cost``
    produced (``Config.INITIAL_COST`` before the first call) and goes stale
    as soon as the genes change.
    """

    def __init__(
        self,
        codes: Sequence[int] | np.ndarray | None = None,
        rng: Generator | None = None,
        config: type[Config] | None = None,
    ) -> None:
        self.config = config or Config
        self.rng = rng or np.random.default_rng()
        self.cost = self.config.INITIAL_COST
        self.chance_to_mutate = self.config.MUTATION_DIRECTION_BIAS

        if codes is None:
            self.genes = np.zeros(0, dtype=np.int64)
        else:
            arr = np.asarray(codes)
            if arr.ndim != 1:
                raise ValueError(f"codes must be one-dimensional, got shape {arr.shape}")
            if arr.size and not np.issubdtype(arr.dtype, np.integer):
                raise ValueError(f"codes must be integers, got dtype {arr.dtype}")
            self.genes = arr.astype(np.int64, copy=True)

    def __len__(self) -> int:
        return int(self.genes.size)

    def __repr__(self) -> str:
        return f"Genome({self.to_text()!r}, cost={self.cost})"

    def randomize(self, length: int) -> None:
        """Replace the genes with ``length`` uniform draws in [GENE_MIN, GENE_MAX]."""

        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        self.genes = self.rng.integers(
            self.config.GENE_MIN,
            self.config.GENE_MAX + 1,
            size=length,
            dtype=np.int64,
        )

    def mutate(self, chance: float) -> None:
        """Step one random gene by +/-1 with probability ``chance``.

        The new value is not clamped, so genes may drift outside the
        nominal code range.
        """

        if self.rng.random() > chance or not len(self):
            return

        index = int(self.rng.integers(0, len(self)))
        step = -1 if self.rng.random() <= self.chance_to_mutate else 1
        self.genes[index] += step

    def mate(self, other: "Genome") -> tuple["Genome", "Genome"]:
        """Single-point crossover returning two new children."""

        if len(self) != len(other):
            raise ValueError(
                f"cannot mate genomes of length {len(self)} and {len(other)}"
            )

        pivot = crossover_pivot(len(self))
        child1 = np.concatenate([self.genes[:pivot], other.genes[pivot:]])
        child2 = np.concatenate([other.genes[:pivot], self.genes[pivot:]])

        return (
            Genome(child1, rng=self.rng, config=self.config),
            Genome(child2, rng=self.rng, config=self.config),
        )

    def calc_cost(self, target: Sequence[int] | np.ndarray) -> int:
        """Recompute and store the squared distance to ``target``."""

        target_codes = np.asarray(target, dtype=np.int64)
        if target_codes.shape != self.genes.shape:
            raise ValueError(
                f"genome length {len(self)} does not match target length "
                f"{target_codes.size}"
            )
        diff = self.genes - target_codes
        self.cost = int(np.dot(diff, diff))
        return self.cost

    def matches(self, target: Sequence[int] | np.ndarray) -> bool:
        """Return True when the genes equal ``target`` exactly."""

        return bool(np.array_equal(self.genes, np.asarray(target)))

    def to_text(self) -> str:
        """Decode genes into the rendered string."""

        return decode_codes(self.genes)


def crossover_pivot(length: int) -> int:
    """Pivot index for single-point crossover.

    Rounds half up (``round(2.5) == 3``), unlike Python's banker's rounding.
    """

    return int(math.floor(length / 2 + 0.5)) - 1
