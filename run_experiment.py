"""
TSP Annealing Experiment Runner
-------------------------------
Runs the Simulated Annealing solver many times over consecutive seeds to
gather reliable statistics (Best, Average, Std. Deviation) on one problem.

All results are printed to the console; nothing is written to disk.
"""

import time
from typing import List

import numpy as np
import pandas as pd
from tqdm import tqdm

from data_generator import generate_circle_cities, generate_random_cities, romanian_cities
from simulated_annealing import (
    COOLING_RATE,
    INITIAL_TEMPERATURE,
    MIN_TEMPERATURE,
    SimulatedAnnealingSolver,
)
from tsp_core import City


# --- Experiment Configuration ---
N_RUNS = 20
BASE_SEED = 0
RANDOM_INSTANCE_SIZE = 12


def run_trials(cities: List[City], n_runs: int = N_RUNS, base_seed: int = BASE_SEED,
               show_progress: bool = False, **solver_params) -> pd.DataFrame:
    """
    Run the solver once per seed in [base_seed, base_seed + n_runs) and
    collect one row per run.
    """
    rows = []
    for seed in tqdm(range(base_seed, base_seed + n_runs), desc="Runs", disable=not show_progress):
        solver = SimulatedAnnealingSolver(cities, seed=seed, **solver_params)

        start = time.time()
        best, _ = solver.solve()
        elapsed = time.time() - start

        initial_dist = solver.initial_tour.get_total_distance()
        best_dist = best.get_total_distance()
        rows.append({
            "seed": seed,
            "initial_distance": initial_dist,
            "best_distance": best_dist,
            "improvement_pct": (initial_dist - best_dist) / initial_dist * 100 if initial_dist else 0.0,
            "iterations": solver.iteration,
            "accepted_moves": solver.accepted_moves,
            "improvements": solver.improvements,
            "time_s": elapsed,
        })

    return pd.DataFrame(rows)


def summarize(results: pd.DataFrame) -> dict:
    """Aggregate statistics over all runs."""
    distances = results["best_distance"].to_numpy()
    return {
        "runs": len(results),
        "best": float(np.min(distances)),
        "avg": float(np.mean(distances)),
        "std": float(np.std(distances)),
        "avg_improvement_pct": float(results["improvement_pct"].mean()),
        "avg_accepted": float(results["accepted_moves"].mean()),
        "avg_time_s": float(results["time_s"].mean()),
    }


def print_summary(name: str, stats: dict):
    print(f"| {name:<20} | {stats['best']:<12.4f} | {stats['avg']:<12.4f} | {stats['std']:<10.4f} "
          f"| {stats['avg_improvement_pct']:<10.2f} | {stats['avg_time_s']:<10.3f} |")


def main():
    print("Starting Simulated Annealing Experiment")
    print(f"Runs per problem: {N_RUNS} | T0 = {INITIAL_TEMPERATURE:g} | "
          f"cooling rate = {COOLING_RATE} | T_min = {MIN_TEMPERATURE:g}")
    print("=" * 92)

    problems = {
        "Romania (6)": romanian_cities(),
        f"Circle ({RANDOM_INSTANCE_SIZE})": generate_circle_cities(RANDOM_INSTANCE_SIZE),
        f"Random ({RANDOM_INSTANCE_SIZE})": generate_random_cities(RANDOM_INSTANCE_SIZE, seed=BASE_SEED),
    }

    summaries = {}
    for name, cities in problems.items():
        results = run_trials(cities, show_progress=True)
        summaries[name] = summarize(results)

    print("=" * 92)
    print(f"| {'Problem':<20} | {'Best':<12} | {'Average':<12} | {'Std. Dev.':<10} "
          f"| {'Improv. %':<10} | {'Avg Time':<10} |")
    print("-" * 92)
    for name, stats in summaries.items():
        print_summary(name, stats)
    print("=" * 92)


if __name__ == "__main__":
    main()
