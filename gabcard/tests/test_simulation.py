"""Tests for core/simulation.py."""

from __future__ import annotations

import asyncio

import numpy as np
import pytest

from gabcard.core.simulation import EvolutionSimulation


def _simulation(target: str = "HI", size: int = 10, seed: int = 42, **kwargs):
    kwargs.setdefault("verbose", False)
    kwargs.setdefault("delay", 0.0)
    return EvolutionSimulation(
        target=target, size=size, rng=np.random.default_rng(seed), **kwargs
    )


class TestRunSync:
    """Tests for the explicit loop."""

    def test_run_sync_completes(self):
        completed: list[int] = []
        sim = _simulation(on_complete=completed.append)
        generation = sim.run_sync(max_generations=5000)
        assert generation is not None
        assert completed == [generation]
        assert sim.completions == 1
        assert sim.population.best().to_text() == "HI"
        assert len(sim.population.history.generation) == generation + 1

    def test_run_sync_cap(self):
        sim = _simulation(target="Happy birthday to you")
        assert sim.run_sync(max_generations=3) is None
        assert sim.population.history.generation == [0, 1, 2]
        assert not sim.population.finished

    def test_best_cost_improves_over_runs(self):
        first, last = [], []
        for seed in range(5):
            sim = _simulation(target="Happy birthday", size=20, seed=seed)
            sim.run_sync(max_generations=150)
            best = sim.population.history.best_cost
            assert best[-1] <= best[0]
            first.append(best[0])
            last.append(best[-1])
        assert np.mean(last) < np.mean(first)

    def test_summary_printed(self, capsys):
        sim = _simulation(
            target="Happy birthday", verbose=True, stats_interval=1
        )
        sim.run_sync(max_generations=2)
        out = capsys.readouterr().out
        assert "Generation 0" in out
        assert "Generation 1" in out
        assert "Best Cost" in out


class TestRunAsync:
    """Tests for the deferred tick chain."""

    def test_run_completes(self):
        completed: list[int] = []
        rendered: list[str] = []
        sim = _simulation(on_complete=completed.append, render=rendered.append)
        generation = sim.run()
        assert completed == [generation]
        assert rendered[-1] == "HI"
        assert sim.population.scheduler is None

    def test_ticks_yield_to_loop(self):
        sim = _simulation(seed=3)
        interleaved = 0

        async def other_work():
            nonlocal interleaved
            while not sim.population.finished:
                interleaved += 1
                await asyncio.sleep(0)

        async def main():
            generation, _ = await asyncio.gather(sim.run_async(), other_work())
            return generation

        generation = asyncio.run(main())
        assert sim.population.finished
        assert generation >= 0
        assert interleaved >= 2

    def test_tick_error_propagates(self):
        def broken_render(_text: str) -> None:
            raise RuntimeError("display failed")

        sim = _simulation(render=broken_render)
        with pytest.raises(RuntimeError, match="display failed"):
            sim.run()

    def test_default_target(self):
        sim = EvolutionSimulation(size=4, verbose=False)
        assert sim.population.goal == sim.config.TARGET


def test_scheduled_tick_runs_handed_callable():
    sim = _simulation(seed=5)
    calls = []
    generation = sim.population.generation

    def counted_generation() -> bool:
        calls.append(sim.population.generation_number)
        return generation()

    sim.population.generation = counted_generation
    final = sim.run()
    assert len(calls) == final + 1
    assert calls == list(range(final + 1))
    assert sim.population.history.generation == calls
