import dataclasses
import math
import random
from collections import Counter

import pytest

from tsp_core import City, InvalidInputError, Tour, distance


def closed_loop_length(cities):
    n = len(cities)
    return sum(
        math.hypot(cities[i].x - cities[(i + 1) % n].x, cities[i].y - cities[(i + 1) % n].y)
        for i in range(n)
    )


class TestCity:
    def test_is_immutable(self):
        city = City("A", 1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            city.x = 5.0

    def test_equality_uses_name_and_coordinates(self):
        assert City("A", 1.0, 2.0) == City("A", 1.0, 2.0)
        assert City("A", 1.0, 2.0) != City("B", 1.0, 2.0)
        assert len({City("A", 1.0, 2.0), City("A", 1.0, 2.0)}) == 1

    def test_repr(self):
        assert repr(City("Iasi", 47.1585, 27.6014)) == "('Iasi',47.1585,27.6014)"


class TestDistance:
    def test_three_four_five(self):
        assert distance(City("a", 0, 0), City("b", 3, 4)) == pytest.approx(5.0)

    def test_commutative(self, cities):
        for a in cities:
            for b in cities:
                assert distance(a, b) == distance(b, a)

    def test_zero_only_for_same_coordinates(self):
        assert distance(City("a", 2.5, -1.0), City("b", 2.5, -1.0)) == 0.0
        assert distance(City("a", 2.5, -1.0), City("b", 2.5, -1.1)) > 0.0

    def test_distance_to_delegates(self):
        a, b = City("a", 1, 1), City("b", 4, 5)
        assert a.distance_to(b) == distance(a, b)


class TestTour:
    def test_empty_tour_is_rejected(self):
        with pytest.raises(InvalidInputError):
            Tour([])

    def test_invalid_input_is_a_value_error(self):
        assert issubclass(InvalidInputError, ValueError)

    def test_copies_input(self, cities):
        tour = Tour(cities)
        cities.reverse()
        assert tour.cities[0].name == "Bucharest"

    def test_total_distance_includes_wrap_edge(self, cities):
        tour = Tour(cities)
        assert tour.get_total_distance() == pytest.approx(closed_loop_length(cities))

    def test_two_cities_go_there_and_back(self):
        tour = Tour([City("a", 0, 0), City("b", 0, 2)])
        assert tour.get_total_distance() == pytest.approx(4.0)

    def test_single_city(self):
        tour = Tour([City("solo", 3.0, 4.0)])
        assert tour.get_total_distance() == 0.0

    def test_rotation_and_reversal_invariant(self, cities):
        base = Tour(cities).get_total_distance()
        for k in range(len(cities)):
            rotated = Tour(cities[k:] + cities[:k])
            assert rotated.get_total_distance() == pytest.approx(base)
        assert Tour(cities[::-1]).get_total_distance() == pytest.approx(base)

    def test_distance_is_cached(self, cities):
        tour = Tour(cities)
        first = tour.get_total_distance()
        # Bypass the mutators: a cached value must not be recomputed
        tour.cities.reverse()
        tour.cities[0], tour.cities[1] = tour.cities[1], tour.cities[0]
        assert tour.get_total_distance() == first

    def test_zero_length_tour_is_cached(self):
        tour = Tour([City("a", 1, 1), City("b", 1, 1)])
        assert tour.get_total_distance() == 0.0
        assert tour._distance == 0.0

    def test_shuffle_keeps_cities_and_resets_cache(self, cities, rng):
        tour = Tour(cities)
        tour.get_total_distance()
        for _ in range(50):
            tour.shuffle(rng)
            assert tour._distance is None
            assert Counter(tour.cities) == Counter(cities)
            assert tour.get_total_distance() == pytest.approx(closed_loop_length(tour.cities))

    def test_swap_changes_exactly_two_positions(self, cities, rng):
        tour = Tour(cities)
        for _ in range(50):
            before = list(tour.cities)
            tour.get_total_distance()
            tour.swap_two_random(rng)
            changed = [i for i, (a, b) in enumerate(zip(before, tour.cities)) if a != b]
            assert len(changed) == 2
            assert Counter(tour.cities) == Counter(cities)
            assert tour._distance is None

    def test_swap_on_single_city_is_noop(self, rng):
        city = City("solo", 1.0, 1.0)
        tour = Tour([city])
        tour.swap_two_random(rng)
        assert tour.cities == [city]
        assert tour.get_total_distance() == 0.0

    def test_swap_retries_until_distinct(self):
        class ScriptedRandom(random.Random):
            def __init__(self, values):
                super().__init__(0)
                self.values = list(values)

            def randrange(self, n):
                return self.values.pop(0)

        tour = Tour([City("a", 0, 0), City("b", 1, 0), City("c", 2, 0)])
        tour.swap_two_random(ScriptedRandom([1, 1, 1, 2]))
        assert [c.name for c in tour] == ["a", "c", "b"]

    def test_default_random_source(self, cities):
        random.seed(7)
        tour = Tour(cities)
        tour.shuffle()
        tour.swap_two_random()
        assert Counter(tour.cities) == Counter(cities)

    def test_seeded_shuffle_is_reproducible(self, cities):
        a, b = Tour(cities), Tour(cities)
        a.shuffle(random.Random(99))
        b.shuffle(random.Random(99))
        assert a.cities == b.cities

    def test_clone_is_independent(self, cities, rng):
        tour = Tour(cities)
        copy = tour.clone()
        copy.swap_two_random(rng)
        assert tour.cities == cities
        assert copy.cities != tour.cities

    def test_positions_cannot_be_overwritten(self, cities):
        tour = Tour(cities)
        with pytest.raises(TypeError):
            tour[1] = cities[0]
        with pytest.raises(TypeError):
            tour[0]
        assert Counter(tour.cities) == Counter(cities)

    def test_render(self):
        tour = Tour([City("Bucharest", 44.4268, 26.1025), City("Iasi", 47.1585, 27.6014)])
        expected = "('Bucharest',44.4268,26.1025)->('Iasi',47.1585,27.6014)"
        assert tour.render() == expected
        assert str(tour) == expected

    def test_container_protocol(self, cities):
        tour = Tour(cities)
        assert len(tour) == 6
        assert list(tour) == cities
        assert repr(tour).startswith("<Tour from Bucharest: 6 cities, length ")
