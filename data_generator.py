"""
Reference city data and synthetic instance generators.
"""

from typing import List, Optional

import numpy as np

from tsp_core import City


# Six Romanian cities, (latitude, longitude)
ROMANIAN_CITIES = (
    City("Bucharest", 44.4268, 26.1025),
    City("Cluj-Napoca", 46.7712, 23.6236),
    City("Timisoara", 45.9432, 21.2356),
    City("Iasi", 47.1585, 27.6014),
    City("Constanta", 44.1810, 28.6348),
    City("Resita", 45.2970, 21.8867),
)


def romanian_cities() -> List[City]:
    """Fresh list of the reference cities."""
    return list(ROMANIAN_CITIES)


def generate_random_cities(n: int, width: float = 100, height: float = 100,
                           seed: Optional[int] = None) -> List[City]:
    """
    Generate uniformly placed random cities.

    Args:
        n: Number of cities to generate
        width: Width of the area
        height: Height of the area
        seed: Optional seed for numpy's generator

    Returns:
        List of randomly placed cities
    """
    rng = np.random.default_rng(seed)
    xs = rng.uniform(0, width, size=n)
    ys = rng.uniform(0, height, size=n)
    return [City(f"City_{i}", float(x), float(y)) for i, (x, y) in enumerate(zip(xs, ys))]


def generate_circle_cities(n: int, radius: float = 50, center_x: float = 50,
                           center_y: float = 50) -> List[City]:
    """
    Generate cities evenly spaced on a circle. The optimal tour follows the
    circle, with length close to 2 * pi * radius for large n.
    """
    angles = 2 * np.pi * np.arange(n) / n
    return [
        City(f"City_{i}", float(center_x + radius * np.cos(a)), float(center_y + radius * np.sin(a)))
        for i, a in enumerate(angles)
    ]
