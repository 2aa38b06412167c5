"""
TSP Annealing - Cooling Schedule
Geometric temperature schedule and the Metropolis acceptance rule.
"""

import numpy as np


def acceptance_probability(current_distance: float,
                           candidate_distance: float,
                           temperature: float) -> float:
    """
    Metropolis acceptance probability for moving to a candidate tour.

    Strict improvements are always accepted. Otherwise the probability is
    exp((current - candidate) / T), which lies in [0, 1]: very large
    differences at low temperature underflow to exactly 0.0, i.e. never
    accepted.
    """
    if temperature <= 0:
        raise ValueError(f"Temperature must be positive, got {temperature}")

    if candidate_distance < current_distance:
        return 1.0

    return float(np.exp((current_distance - candidate_distance) / temperature))


def cool(temperature: float, cooling_rate: float) -> float:
    """One geometric cooling step."""
    return temperature * (1 - cooling_rate)


class AnnealingSchedule:
    """Tracks the temperature of a run and decides when it is finished."""

    def __init__(
        self,
        initial_temperature: float = 10000.0,
        cooling_rate: float = 0.003,
        min_temperature: float = 1.0
    ):
        if initial_temperature <= 0:
            raise ValueError(f"Initial temperature must be positive, got {initial_temperature}")
        if not 0 < cooling_rate < 1:
            raise ValueError(f"Cooling rate must be in (0, 1), got {cooling_rate}")
        if min_temperature <= 0:
            raise ValueError(f"Minimum temperature must be positive, got {min_temperature}")

        self.initial_temperature = initial_temperature
        self.cooling_rate = cooling_rate
        self.min_temperature = min_temperature

        self.temperature = initial_temperature
        self.steps = 0

    @property
    def is_running(self) -> bool:
        return self.temperature > self.min_temperature

    def cool(self) -> float:
        self.temperature = cool(self.temperature, self.cooling_rate)
        self.steps += 1
        return self.temperature

    def reset(self):
        self.temperature = self.initial_temperature
        self.steps = 0

    def total_steps(self) -> int:
        """
        Number of cooling steps from the initial temperature until the
        schedule stops, i.e. the smallest n with T0 * (1 - rate)^n <= T_min.
        Replays the cooling arithmetic so the count matches the loop exactly.
        """
        temperature = self.initial_temperature
        steps = 0
        while temperature > self.min_temperature:
            temperature = cool(temperature, self.cooling_rate)
            steps += 1
        return steps

    def __repr__(self):
        return (f"AnnealingSchedule(temperature={self.temperature:.4f}, "
                f"cooling_rate={self.cooling_rate}, steps={self.steps})")
