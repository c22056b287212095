"""Analysis utilities for string-matching runs."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from gabcard.evolution.population import PopulationHistory


class EvolutionAnalyzer:
    """Plot the recorded history of a population."""

    def __init__(self, history: PopulationHistory | dict) -> None:
        if isinstance(history, PopulationHistory):
            history = asdict(history)
        self.history: dict[str, list] = history

    def plot_cost_curves(self, output_dir: str | Path) -> Path | None:
        """Plot best, average and worst cost per generation."""
        if not self.history.get("generation"):
            return None
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        generations = self.history["generation"]
        fig, ax = plt.subplots(figsize=(10, 5))
        ax.plot(generations, self.history.get("avg_cost", []), label="Avg")
        ax.plot(generations, self.history.get("best_cost", []), label="Best")
        ax.plot(generations, self.history.get("worst_cost", []), label="Worst")
        ax.set_yscale("symlog")
        ax.set_xlabel("Generation")
        ax.set_ylabel("Cost")
        ax.set_title("Cost Curves")
        ax.legend()
        path = output_dir / "cost_curves.png"
        plt.tight_layout()
        plt.savefig(path, dpi=150)
        plt.close(fig)
        return path

    def plot_diversity(self, output_dir: str | Path) -> Path | None:
        """Plot genome diversity trend."""
        diversity = self.history.get("genome_diversity", [])
        if not diversity:
            return None
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        fig, ax = plt.subplots(figsize=(10, 5))
        ax.plot(self.history.get("generation", range(len(diversity))), diversity)
        ax.set_xlabel("Generation")
        ax.set_ylabel("Average Hamming distance")
        ax.set_title("Genome Diversity")
        path = output_dir / "genome_diversity.png"
        plt.tight_layout()
        plt.savefig(path, dpi=150)
        plt.close(fig)
        return path

    def improvement_ratio(self) -> float:
        """Fraction of generations whose best cost did not get worse."""
        best = np.asarray(self.history.get("best_cost", []), dtype=np.float64)
        if best.size < 2:
            return 1.0
        return float(np.mean(np.diff(best) <= 0))

    def summary(self) -> dict[str, float | int | str]:
        """Headline numbers of the run."""
        best = self.history.get("best_cost", [])
        if not best:
            return {}
        return {
            "generations": len(best),
            "initial_best_cost": int(best[0]),
            "final_best_cost": int(best[-1]),
            "mean_diversity": float(np.mean(self.history.get("genome_diversity", [0.0]))),
            "improvement_ratio": self.improvement_ratio(),
            "final_text": self.history.get("best_text", [""])[-1],
        }
