"""Simulation driver scheduling generations on an event loop."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence

import numpy as np
from numpy.random import Generator

from gabcard.config import Config
from gabcard.evolution.population import (
    CompletionCallback,
    Population,
    RenderCallback,
)


class EvolutionSimulation:
    """Evolution simulation controller.

    The population's tick never loops on itself: after each generation
    without a winner it hands the next tick to this controller, which either
    defers it on the asyncio loop (``run``/``run_async``) or lets the
    explicit loop in ``run_sync`` pick it up.
    """

    def __init__(
        self,
        target: str | bytes | Sequence[int] | np.ndarray | None = None,
        size: int | None = None,
        config: type[Config] | None = None,
        rng: Generator | None = None,
        render: RenderCallback | None = None,
        on_complete: CompletionCallback | None = None,
        delay: float | None = None,
        stats_interval: int | None = None,
        verbose: bool = True,
    ) -> None:
        self.config = config or Config
        self.rng = rng or np.random.default_rng()
        self.delay = self.config.TICK_DELAY if delay is None else delay
        self.stats_interval = (
            self.config.STATS_INTERVAL if stats_interval is None else stats_interval
        )
        self.verbose = verbose
        self.user_on_complete = on_complete

        self.final_generation: int | None = None
        self.completions = 0

        self.population = Population(
            self.config.TARGET if target is None else target,
            size=size,
            on_complete=self._on_complete,
            render=render,
            rng=self.rng,
            config=self.config,
        )

        self._loop: asyncio.AbstractEventLoop | None = None
        self._done: asyncio.Future | None = None

    def step(self) -> bool:
        """Run one generation and record its statistics."""
        return self._advance(self.population.generation)

    def run_sync(self, max_generations: int | None = None) -> int | None:
        """Run generations in a plain loop.

        Returns the winning generation number, or None when
        ``max_generations`` ticks ran without a match.
        """
        self.population.scheduler = None
        ticks = 0
        while max_generations is None or ticks < max_generations:
            ticks += 1
            if self.step():
                self._print_final_summary()
                return self.final_generation
        return None

    async def run_async(self) -> int:
        """Run the deferred tick chain on the running loop until a match."""
        self._loop = asyncio.get_running_loop()
        self._done = self._loop.create_future()
        self.population.scheduler = self._schedule

        self._loop.call_soon(self._tick, self.population.generation)
        try:
            generation = await self._done
        finally:
            self.population.scheduler = None
            self._done = None

        self._print_final_summary()
        return generation

    def run(self) -> int:
        """Blocking entry point that owns its own event loop."""
        return asyncio.run(self.run_async())

    def _advance(self, next_tick: Callable[[], bool]) -> bool:
        generation = self.population.generation_number
        finished = next_tick()
        self.population.record_generation(generation)
        if (
            not finished
            and self.verbose
            and self.stats_interval > 0
            and (generation + 1) % self.stats_interval == 0
        ):
            self._print_generation_summary(generation)
        return finished

    def _schedule(self, next_tick: Callable[[], bool]) -> None:
        self._loop.call_later(self.delay, self._tick, next_tick)

    def _tick(self, next_tick: Callable[[], bool]) -> None:
        if self._done is None or self._done.done():
            return
        try:
            finished = self._advance(next_tick)
        except Exception as exc:
            if not self._done.done():
                self._done.set_exception(exc)
            return
        if finished and not self._done.done():
            self._done.set_result(self.final_generation)

    def _on_complete(self, generation: int) -> None:
        self.final_generation = generation
        self.completions += 1
        if self.user_on_complete is not None:
            self.user_on_complete(generation)

    def _print_generation_summary(self, gen: int) -> None:
        """Print generational summary."""
        history = self.population.history
        print("\n" + "=" * 60)
        print(f"Generation {gen}")
        print("=" * 60)
        print(f"  Best Cost:  {history.best_cost[-1]}")
        print(f"  Avg Cost:   {history.avg_cost[-1]:.1f}")
        print(f"  Worst Cost: {history.worst_cost[-1]}")
        print(f"  Diversity:  {history.genome_diversity[-1]:.2f}")
        print(f"  Best:       {history.best_text[-1]!r}")

    def _print_final_summary(self) -> None:
        """Print the closing summary."""
        if not self.verbose:
            return
        print("\n" + "=" * 60)
        print(f"Matched {self.population.goal!r}")
        print("=" * 60)
        print(f"  Generation: {self.final_generation}")
        print(f"  Population: {self.population.size}")
