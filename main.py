"""
TSP Annealing - Main Application
Solve the six-city reference problem with Simulated Annealing.
"""

import argparse
import sys
from typing import List, Optional

from data_generator import romanian_cities
from simulated_annealing import (
    COOLING_RATE,
    INITIAL_TEMPERATURE,
    MIN_TEMPERATURE,
    SimulatedAnnealingSolver,
)
from tsp_core import City


def run(cities: List[City],
        initial_temperature: float = INITIAL_TEMPERATURE,
        cooling_rate: float = COOLING_RATE,
        min_temperature: float = MIN_TEMPERATURE,
        seed: Optional[int] = None,
        verbose: bool = False) -> SimulatedAnnealingSolver:
    """
    Anneal the given cities and print the initial and final tours.

    Returns the finished solver so callers can inspect its statistics.
    """
    solver = SimulatedAnnealingSolver(
        cities,
        initial_temperature=initial_temperature,
        cooling_rate=cooling_rate,
        min_temperature=min_temperature,
        seed=seed,
    )
    solver.initialize()

    initial = solver.initial_tour
    print(f"Total distance of initial solution: {initial.get_total_distance()} | Tour: {initial}")

    best, _ = solver.solve(verbose=verbose, progress=verbose)

    print(f"Final solution distance: {best.get_total_distance()} | Tour: {best}")

    if verbose:
        improvement = (initial.get_total_distance() - best.get_total_distance()) / initial.get_total_distance() * 100
        print(f"\nIterations:     {solver.iteration}")
        print(f"Accepted moves: {solver.accepted_moves}")
        print(f"Improvements:   {solver.improvements}")
        print(f"Improvement:    {improvement:.2f}%")

    return solver


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve a small TSP instance with Simulated Annealing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Reference run on the six Romanian cities
  python main.py

  # Reproducible run with progress bar and statistics
  python main.py --seed 42 --verbose

  # Faster cooling, then plot the result
  python main.py --cooling-rate 0.01 --plot
        """
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for the random stream (default: nondeterministic)'
    )

    parser.add_argument(
        '--temperature',
        type=float,
        default=INITIAL_TEMPERATURE,
        help=f'Initial temperature (default: {INITIAL_TEMPERATURE:g})'
    )

    parser.add_argument(
        '--cooling-rate',
        type=float,
        default=COOLING_RATE,
        help=f'Fraction of temperature removed per iteration (default: {COOLING_RATE})'
    )

    parser.add_argument(
        '--min-temperature',
        type=float,
        default=MIN_TEMPERATURE,
        help=f'Stop once the temperature drops to this value (default: {MIN_TEMPERATURE:g})'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Show a progress bar and run statistics'
    )

    parser.add_argument(
        '--plot',
        action='store_true',
        help='Plot the initial and best tours and the annealing progress'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the annealing demo."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        solver = run(
            romanian_cities(),
            initial_temperature=args.temperature,
            cooling_rate=args.cooling_rate,
            min_temperature=args.min_temperature,
            seed=args.seed,
            verbose=args.verbose,
        )
    except ValueError as e:
        parser.error(str(e))

    if args.plot:
        from visualization import TSPVisualizer

        visualizer = TSPVisualizer()
        visualizer.plot_comparison(
            [solver.initial_tour, solver.get_best_tour()],
            ["Initial Tour", "Best Tour"],
            show=False,
        )
        visualizer.plot_convergence(solver.best_distance_history, solver.temperature_history)

    return 0


if __name__ == "__main__":
    sys.exit(main())
