"""Run a string-matching evolution and reveal the card."""

from __future__ import annotations

import argparse

import numpy as np

from gabcard.analysis.evolution_analysis import EvolutionAnalyzer
from gabcard.config import Config
from gabcard.core.simulation import EvolutionSimulation
from gabcard.display.card import CardDisplay


def main() -> None:
    parser = argparse.ArgumentParser(description="Evolve a string until it matches")
    parser.add_argument("--target", type=str, default=None)
    parser.add_argument("--population", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--delay", type=float, default=None, help="Seconds between ticks")
    parser.add_argument("--sync", action="store_true", help="Run without the event loop")
    parser.add_argument("--max-generations", type=int, default=None)
    parser.add_argument("--stats-interval", type=int, default=None)
    parser.add_argument("--no-color", action="store_true")
    parser.add_argument("--output-dir", type=str, default=None, help="Cost plot directory")
    args = parser.parse_args()

    rng = np.random.default_rng(args.seed)

    class RunConfig(Config):
        TARGET = Config.TARGET if args.target is None else args.target
        POPULATION_SIZE = (
            Config.POPULATION_SIZE if args.population is None else args.population
        )
        STATS_INTERVAL = (
            Config.STATS_INTERVAL if args.stats_interval is None else args.stats_interval
        )
        ANALYSIS_DIR = Config.ANALYSIS_DIR if args.output_dir is None else args.output_dir

    display = CardDisplay(RunConfig, color=not args.no_color)
    sim = EvolutionSimulation(
        config=RunConfig,
        rng=rng,
        render=display.print,
        on_complete=lambda generation: display.show_info(
            generation, RunConfig.POPULATION_SIZE
        ),
        delay=args.delay,
        # Summaries would tear the single-line card.
        verbose=args.stats_interval is not None,
    )

    if args.sync or args.max_generations is not None:
        generation = sim.run_sync(max_generations=args.max_generations)
        if generation is None:
            print(f"\nNo match after {args.max_generations} generations")
    else:
        sim.run()

    RunConfig.create_dirs()
    analyzer = EvolutionAnalyzer(sim.population.history)
    analyzer.plot_cost_curves(RunConfig.ANALYSIS_DIR)
    analyzer.plot_diversity(RunConfig.ANALYSIS_DIR)
    for key, value in analyzer.summary().items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
