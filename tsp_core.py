"""
TSP Annealing - Core Module
Contains the fundamental data structures for representing the TSP problem.
"""

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np


class InvalidInputError(ValueError):
    """Raised when a tour is built from an unusable list of cities."""


@dataclass(frozen=True)
class City:
    """Represents a named city with x, y coordinates."""

    name: str
    x: float
    y: float

    def distance_to(self, city: 'City') -> float:
        """Calculate Euclidean distance to another city."""
        return distance(self, city)

    def __repr__(self):
        return f"('{self.name}',{self.x},{self.y})"


def distance(a: City, b: City) -> float:
    """Euclidean distance between two cities."""
    dx = a.x - b.x
    dy = a.y - b.y
    return float(np.sqrt(dx * dx + dy * dy))


class Tour:
    """Represents a tour (solution) as an ordered, closed sequence of cities."""

    def __init__(self, cities: Iterable[City]):
        self.cities: List[City] = list(cities)
        if not self.cities:
            raise InvalidInputError("A tour needs at least one city")
        self._distance: Optional[float] = None

    def get_total_distance(self) -> float:
        """Closed-loop length of the tour, including the edge back to the start."""
        if self._distance is not None:
            return self._distance

        n = len(self.cities)
        total = 0.0
        for i in range(n):
            from_city = self.cities[i]
            to_city = self.cities[(i + 1) % n]
            total += distance(from_city, to_city)

        self._distance = total
        return total

    def shuffle(self, rng=None):
        """Randomly permute the visiting order in place."""
        (rng or random).shuffle(self.cities)
        self.invalidate_cache()

    def swap_two_random(self, rng=None):
        """
        Swap the cities at two distinct random positions.

        Tours with fewer than two cities are left untouched.
        """
        n = len(self.cities)
        if n < 2:
            return

        rng = rng or random
        i = rng.randrange(n)
        j = rng.randrange(n)
        while i == j:
            j = rng.randrange(n)

        self.cities[i], self.cities[j] = self.cities[j], self.cities[i]
        self.invalidate_cache()

    def clone(self) -> 'Tour':
        """Create an independent copy of the tour."""
        copy = Tour(self.cities)
        copy._distance = self._distance
        return copy

    def invalidate_cache(self):
        """Forget the cached distance."""
        self._distance = None

    def render(self) -> str:
        return "->".join(repr(city) for city in self.cities)

    def __str__(self):
        return self.render()

    def __len__(self):
        return len(self.cities)

    def __iter__(self):
        return iter(self.cities)

    def __repr__(self):
        start = self.cities[0].name
        return f"<Tour from {start}: {len(self.cities)} cities, length {self.get_total_distance():.4f}>"
