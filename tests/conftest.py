import random

import matplotlib
import pytest

matplotlib.use("Agg")

from data_generator import romanian_cities  # noqa: E402


@pytest.fixture
def cities():
    return romanian_cities()


@pytest.fixture
def rng():
    return random.Random(1234)
