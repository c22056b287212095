"""Tests for analysis/evolution_analysis.py."""

from __future__ import annotations

import numpy as np

from gabcard.analysis.evolution_analysis import EvolutionAnalyzer
from gabcard.core.simulation import EvolutionSimulation
from gabcard.evolution.population import PopulationHistory


def _history() -> PopulationHistory:
    sim = EvolutionSimulation(
        target="Happy birthday",
        size=10,
        rng=np.random.default_rng(0),
        verbose=False,
    )
    sim.run_sync(max_generations=20)
    return sim.population.history


def test_plots_written(tmp_path):
    analyzer = EvolutionAnalyzer(_history())
    cost_path = analyzer.plot_cost_curves(tmp_path)
    diversity_path = analyzer.plot_diversity(tmp_path)
    assert cost_path is not None and cost_path.is_file()
    assert diversity_path is not None and diversity_path.is_file()


def test_empty_history(tmp_path):
    analyzer = EvolutionAnalyzer(PopulationHistory())
    assert analyzer.plot_cost_curves(tmp_path) is None
    assert analyzer.plot_diversity(tmp_path) is None
    assert analyzer.summary() == {}
    assert analyzer.improvement_ratio() == 1.0


def test_summary_and_ratio():
    analyzer = EvolutionAnalyzer(
        {
            "generation": [0, 1, 2],
            "best_cost": [10, 4, 6],
            "avg_cost": [20.0, 10.0, 8.0],
            "worst_cost": [30, 20, 12],
            "genome_diversity": [2.0, 1.0, 0.0],
            "best_text": ["Ax", "Ay", "AB"],
        }
    )
    assert analyzer.improvement_ratio() == 0.5
    summary = analyzer.summary()
    assert summary["generations"] == 3
    assert summary["initial_best_cost"] == 10
    assert summary["final_best_cost"] == 6
    assert summary["improvement_ratio"] == 0.5
    assert summary["final_text"] == "AB"
