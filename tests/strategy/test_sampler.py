import random
from collections import Counter

import numpy as np
import pytest

from core.exceptions import PolicyViolationError
from strategy.barriers import BarrierMap
from strategy.config import ATTACKER_CONFIG
from strategy.sampler import sample_direction
from strategy.weights import compute_move_weights, index_to_direction


def test_each_draw_maps_to_its_interval(scripted_random):
    weights = [[1, 0, 2], [0, 3, 0], [4, 0, 0]]
    rng = scripted_random(range(10))
    picks = Counter(sample_direction(weights, rng) for _ in range(10))
    assert picks == {
        (-1, -1): 1,
        (-1, 1): 2,
        (0, 0): 3,
        (1, -1): 4,
    }


def test_interval_boundaries(scripted_random):
    weights = np.array([[0, 0, 0], [0, 1, 0], [0, 0, 2]])
    rng = scripted_random([0, 1, 2])
    assert sample_direction(weights, rng) == (0, 0)
    assert sample_direction(weights, rng) == (1, 1)
    assert sample_direction(weights, rng) == (1, 1)


def test_draw_is_over_total(scripted_random):
    rng = scripted_random([0])
    sample_direction([[1, 2, 3], [4, 5, 6], [7, 8, 9]], rng)
    assert rng.calls == [(45, None)]


def test_frequencies_follow_weights():
    weights = np.array([[1, 0, 2], [0, 3, 0], [4, 0, 10]])
    total = weights.sum()
    rng = random.Random(2024)
    trials = 40000
    picks = Counter(sample_direction(weights, rng) for _ in range(trials))
    for i in range(3):
        for j in range(3):
            expected = weights[i, j] / total
            assert abs(picks[index_to_direction(i, j)] / trials - expected) < 0.01


def test_zero_total_fails_loudly(rng):
    with pytest.raises(PolicyViolationError):
        sample_direction(np.zeros((3, 3), dtype=np.int64), rng)


def test_single_live_cell_is_certain(rng):
    weights = np.zeros((3, 3), dtype=np.int64)
    weights[1, 2] = 37
    for _ in range(50):
        assert sample_direction(weights, rng) == (0, 1)


def test_boxed_in_except_right(scripted_random):
    barriers = BarrierMap()
    for di in (-1, 0, 1):
        for dj in (-1, 0, 1):
            if (di, dj) not in ((0, 0), (0, 1)):
                barriers.mark_blocked((10 + di, 10 + dj))

    weights = compute_move_weights((10, 10), barriers, (98, 10), False, ATTACKER_CONFIG)
    total = int(weights.sum())
    rng = scripted_random(range(total))
    picks = Counter(sample_direction(weights, rng) for _ in range(total))

    # Staying put is the only alternative to moving right.
    assert set(picks) == {(0, 0), (0, 1)}
    assert picks[(0, 1)] == weights[1, 2]
