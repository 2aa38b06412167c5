"""
Simulated Annealing Solver with step-wise execution + convergence logging
"""

import random
from collections import Counter
from typing import Callable, List, Optional, Tuple

from tqdm import tqdm

from annealing import AnnealingSchedule, acceptance_probability
from tsp_core import City, InvalidInputError, Tour


# ================================
# REFERENCE PARAMETERS
# ================================
INITIAL_TEMPERATURE = 10000.0
COOLING_RATE = 0.003
MIN_TEMPERATURE = 1.0


class SimulatedAnnealingSolver:
    """
    Simulated Annealing solver for TSP
    - swap-two-cities neighborhood
    - geometric cooling, stops once temperature <= min_temperature
    - candidates are judged against the best tour found so far
    - one random stream (seed or injected rng) for reproducible runs
    """

    def __init__(
        self,
        cities: List[City],
        initial_temperature: float = INITIAL_TEMPERATURE,
        cooling_rate: float = COOLING_RATE,
        min_temperature: float = MIN_TEMPERATURE,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None
    ):
        if not cities:
            raise InvalidInputError("Cannot anneal an empty list of cities")

        self.cities = list(cities)
        self.schedule = AnnealingSchedule(initial_temperature, cooling_rate, min_temperature)
        self.rng = rng if rng is not None else random.Random(seed)

        # SA state
        self.initial_tour: Optional[Tour] = None
        self.current_tour: Optional[Tour] = None
        self.best_tour: Optional[Tour] = None
        self.iteration = 0

        # Statistics
        self.accepted_moves = 0
        self.improvements = 0
        self.best_distance_history: List[float] = []
        self.temperature_history: List[float] = []

    # ---------------------------------------
    # Initialization
    # ---------------------------------------

    def initialize(self, seed_tour: Tour = None):
        if seed_tour is not None:
            if Counter(seed_tour.cities) != Counter(self.cities):
                raise InvalidInputError("Seed tour must visit exactly the solver's cities")
            self.current_tour = seed_tour.clone()
        else:
            self.current_tour = Tour(self.cities)
            self.current_tour.shuffle(self.rng)

        self.initial_tour = self.current_tour.clone()
        self.best_tour = self.current_tour.clone()
        self.schedule.reset()

        self.iteration = 0
        self.accepted_moves = 0
        self.improvements = 0
        self.best_distance_history = [self.best_tour.get_total_distance()]
        self.temperature_history = [self.schedule.temperature]

    # ---------------------------------------
    # Single annealing step
    # ---------------------------------------

    @property
    def temperature(self) -> float:
        return self.schedule.temperature

    @property
    def is_done(self) -> bool:
        return not self.schedule.is_running

    def step(self) -> bool:
        """
        Run one iteration of the annealing loop.

        Returns True while the schedule is still above its minimum
        temperature. Calling it after the run has finished does nothing.
        """
        if self.current_tour is None:
            self.initialize()
        if self.is_done:
            return False

        candidate = self.current_tour.clone()
        candidate.swap_two_random(self.rng)

        # the baseline is the best tour, not the current one
        p = acceptance_probability(
            self.best_tour.get_total_distance(),
            candidate.get_total_distance(),
            self.schedule.temperature,
        )
        if self.rng.random() < p:
            self.current_tour = candidate
            self.accepted_moves += 1

        if self.current_tour.get_total_distance() < self.best_tour.get_total_distance():
            self.best_tour = self.current_tour.clone()
            self.improvements += 1

        self.schedule.cool()
        self.iteration += 1

        self.best_distance_history.append(self.best_tour.get_total_distance())
        self.temperature_history.append(self.schedule.temperature)

        return not self.is_done

    # ---------------------------------------
    # Full run
    # ---------------------------------------

    def solve(
        self,
        verbose: bool = False,
        progress: bool = False,
        callback: Optional[Callable[['SimulatedAnnealingSolver', int], None]] = None
    ) -> Tuple[Tour, list]:
        """
        Returns:
            best_tour
            log = [(iteration, best_distance)]
        """
        if self.current_tour is None:
            self.initialize()

        best_dist = self.best_tour.get_total_distance()
        log = [(self.iteration, best_dist)]

        with tqdm(total=self.schedule.total_steps(),
                  initial=self.iteration,
                  desc="Annealing",
                  disable=not progress) as pbar:
            while not self.is_done:
                self.step()
                pbar.update(1)

                if callback:
                    callback(self, self.iteration)

                dist = self.best_tour.get_total_distance()
                if dist < best_dist:
                    best_dist = dist
                    log.append((self.iteration, best_dist))
                    if progress:
                        pbar.set_postfix(best=f"{best_dist:.4f}")

                if verbose and self.iteration % 500 == 0:
                    print(f"Iter {self.iteration} | T = {self.temperature:.2f} | Best = {best_dist:.4f}")

        if verbose:
            print(f"Finished after {self.iteration} iterations "
                  f"({self.accepted_moves} accepted, {self.improvements} improvements)")

        return self.best_tour, log

    def get_best_tour(self):
        return self.best_tour
