import random

import pytest

from strategy.config import ATTACKER_CONFIG, DEFENDER_CONFIG
from strategy.priority import PriorityScheduler


class TestInterval:
    @pytest.mark.parametrize("config, expected", [
        (ATTACKER_CONFIG, set(range(5, 15))),
        (DEFENDER_CONFIG, set(range(5, 20))),
    ])
    def test_threshold_covers_side_range(self, config, expected):
        scheduler = PriorityScheduler(config, random.Random(3))
        seen = set()
        for _ in range(2000):
            scheduler._reset()
            seen.add(scheduler.moves_to_change)
        assert seen == expected

    def test_random_bias_is_drawn_before_interval(self, scripted_random):
        rng = scripted_random([1, 8])
        scheduler = PriorityScheduler.with_random_bias(ATTACKER_CONFIG, rng)
        assert scheduler.priority_is_up is True
        assert scheduler.moves_to_change == 8
        assert rng.calls == [(2, None), (5, 15)]


class TestStep:
    def test_no_change_before_threshold(self, scripted_random):
        scheduler = PriorityScheduler(ATTACKER_CONFIG, scripted_random([6]), priority_is_up=True)
        for _ in range(5):
            scheduler.record_move()
            assert scheduler.step() is True
        assert scheduler.moves_since_change == 5
        assert scheduler.moves_to_change == 6

    def test_flip_at_threshold(self, scripted_random):
        scheduler = PriorityScheduler(ATTACKER_CONFIG, scripted_random([7, 2, 9]))
        scheduler.moves_since_change = 7

        assert scheduler.step() is True
        assert scheduler.moves_since_change == 0
        assert scheduler.moves_to_change == 9

    def test_keep_at_threshold(self, scripted_random):
        scheduler = PriorityScheduler(DEFENDER_CONFIG, scripted_random([5, 0, 19]), priority_is_up=True)
        scheduler.moves_since_change = 5

        assert scheduler.step() is True
        assert scheduler.moves_since_change == 0
        assert scheduler.moves_to_change == 19

    def test_flip_draws_one_of_three(self, scripted_random):
        rng = scripted_random([5, 1, 5])
        scheduler = PriorityScheduler(ATTACKER_CONFIG, rng)
        scheduler.moves_since_change = 12
        scheduler.step()
        assert rng.calls[1] == (3, None)

    def test_flip_rate_is_two_thirds(self):
        scheduler = PriorityScheduler(ATTACKER_CONFIG, random.Random(11))
        flips = 0
        trials = 6000
        for _ in range(trials):
            before = scheduler.priority_is_up
            scheduler.moves_since_change = scheduler.moves_to_change
            if scheduler.step() != before:
                flips += 1
        assert abs(flips / trials - 2 / 3) < 0.03


class TestForce:
    def test_opponent_below_attacker_start(self, rng):
        scheduler = PriorityScheduler(ATTACKER_CONFIG, rng, priority_is_up=False)
        assert scheduler.force((9, 14), (5, 1)) is True

    def test_opponent_below_defender_start(self, rng):
        scheduler = PriorityScheduler(DEFENDER_CONFIG, rng, priority_is_up=True)
        assert scheduler.force((9, 14), (5, 20)) is False

    @pytest.mark.parametrize("row", [2, 5])
    def test_opponent_level_or_above(self, rng, row):
        attacker = PriorityScheduler(ATTACKER_CONFIG, rng, priority_is_up=True)
        defender = PriorityScheduler(DEFENDER_CONFIG, rng, priority_is_up=False)
        assert attacker.force((row, 3), (5, 1)) is False
        assert defender.force((row, 3), (5, 20)) is True

    def test_force_resets_counter_and_redraws(self, scripted_random):
        rng = scripted_random([10, 17])
        scheduler = PriorityScheduler(DEFENDER_CONFIG, rng)
        scheduler.moves_since_change = 4

        scheduler.force((1, 1), (5, 5))

        assert scheduler.moves_since_change == 0
        assert scheduler.moves_to_change == 17
        assert rng.calls[-1] == (5, 20)
