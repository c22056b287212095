"""Population management for string-matching runs."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

import numpy as np
from numpy.random import Generator

from gabcard.config import Config
from gabcard.evolution.genome import Genome
from gabcard.evolution.target import decode_codes, encode_target

RenderCallback = Callable[[str], None]
CompletionCallback = Callable[[int], None]
Scheduler = Callable[[Callable[[], bool]], None]


@dataclass
class PopulationHistory:
    """Summary history for a population."""

    generation: list[int] = field(default_factory=list)
    best_cost: list[int] = field(default_factory=list)
    avg_cost: list[float] = field(default_factory=list)
    worst_cost: list[int] = field(default_factory=list)
    genome_diversity: list[float] = field(default_factory=list)
    best_text: list[str] = field(default_factory=list)


class Population:
    """Population container and the generational tick.

    ``scheduler`` receives the bound ``generation`` method after every tick
    that did not find a winner; it decides when the next tick runs. Without
    one, the caller drives ticks itself.
    """

    def __init__(
        self,
        target: str | bytes | Sequence[int] | np.ndarray,
        size: int | None = None,
        on_complete: CompletionCallback | None = None,
        render: RenderCallback | None = None,
        rng: Generator | None = None,
        config: type[Config] | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        self.config = config or Config
        self.size = self.config.POPULATION_SIZE if size is None else size
        if self.size < self.config.MIN_POPULATION_SIZE:
            raise ValueError(
                f"population size must be at least {self.config.MIN_POPULATION_SIZE}, "
                f"got {self.size}"
            )

        self.target = encode_target(target, self.config)
        self.goal = decode_codes(self.target)
        self.rng = rng or np.random.default_rng()
        self.on_complete = on_complete
        self.render = render
        self.scheduler = scheduler

        self.generation_number = 0
        self.finished = False
        self.history = PopulationHistory()

        self.members: list[Genome] = []
        for _ in range(self.size):
            genome = Genome(rng=self.rng, config=self.config)
            genome.randomize(len(self.target))
            self.members.append(genome)

    def sort(self) -> None:
        """Order members by ascending cost."""
        self.members.sort(key=lambda genome: genome.cost)

    def generation(self) -> bool:
        """Run one generation; return True once a member equals the target."""
        if self.finished:
            raise RuntimeError("population already matched its target")

        for member in self.members:
            member.calc_cost(self.target)

        self.sort()
        children = self.members[0].mate(self.members[1])
        self.members[-2:] = children

        self._render(self.members[0])

        for member in self.members:
            member.mutate(self.config.MUTATION_CHANCE)
            member.calc_cost(self.target)

            if member.matches(self.target):
                self.sort()
                self._render(self.members[0])
                self.finished = True
                if self.on_complete is not None:
                    self.on_complete(self.generation_number)
                return True

        self.generation_number += 1
        if self.scheduler is not None:
            self.scheduler(self.generation)
        return False

    def best(self) -> Genome:
        """Return the lowest-cost member by its cached cost."""
        return min(self.members, key=lambda genome: genome.cost)

    def costs(self) -> list[int]:
        return [member.cost for member in self.members]

    def compute_diversity(self) -> float:
        """Average pairwise Hamming distance between members."""
        if len(self.members) < 2:
            return 0.0
        genomes = np.array([member.genes for member in self.members])
        distances = []
        for i in range(len(genomes)):
            for j in range(i + 1, len(genomes)):
                distances.append(int(np.count_nonzero(genomes[i] != genomes[j])))
        return float(np.mean(distances)) if distances else 0.0

    def record_generation(self, generation: int | None = None) -> None:
        """Record generation statistics from the cached costs."""
        costs = self.costs()
        self.history.generation.append(
            self.generation_number if generation is None else generation
        )
        self.history.best_cost.append(int(np.min(costs)))
        self.history.avg_cost.append(float(np.mean(costs)))
        self.history.worst_cost.append(int(np.max(costs)))
        self.history.genome_diversity.append(self.compute_diversity())
        self.history.best_text.append(self.best().to_text())

    def _render(self, genome: Genome) -> None:
        if self.render is not None:
            self.render(genome.to_text())
