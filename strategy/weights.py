"""Scores for the nine candidate moves around an agent.

The weights form a 3x3 integer matrix indexed ``[i][j]`` where ``(1, 1)`` is
staying put and ``(i - 1, j - 1)`` is the relative move. Each factor multiplies
into the matrix, so a cell zeroed by a barrier stays zero.
"""

import numpy as np

from game.position import Direction, chebyshev_distance, move_position
from strategy.config import ProximityMode


def index_to_direction(i: int, j: int) -> Direction:
    return Direction(i - 1, j - 1)


def target_positions(position):
    """Absolute position reached by each of the nine moves."""
    return [[move_position(position, index_to_direction(i, j)) for j in range(3)] for i in range(3)]


def init_move_weights() -> np.ndarray:
    return np.ones((3, 3), dtype=np.int64)


def apply_barriers(weights: np.ndarray, position, barriers) -> np.ndarray:
    targets = target_positions(position)
    for i in range(3):
        for j in range(3):
            if barriers.is_blocked(targets[i][j]):
                weights[i, j] = 0
    return weights


def apply_enemy_proximity(weights: np.ndarray, position, opponent, config) -> np.ndarray:
    targets = target_positions(position)
    distances = np.array(
        [[chebyshev_distance(targets[i][j], opponent) for j in range(3)] for i in range(3)], dtype=np.int64
    )

    if config.proximity_mode is ProximityMode.DISTANCE:
        weights *= 1 + distances
        return weights

    # Extremes are taken over all nine targets, blocked ones included.
    closest, middle, farthest = config.proximity_weights
    factors = np.full((3, 3), middle, dtype=np.int64)
    factors[distances == distances.max()] = farthest
    factors[distances == distances.min()] = closest
    weights *= factors
    return weights


def apply_goal_distance(weights: np.ndarray, config) -> np.ndarray:
    table = np.array(config.goal_weights, dtype=np.int64)
    if config.goal_orientation < 0:
        table = table[::-1]
    weights *= table[np.newaxis, :]
    return weights


def apply_vertical_priority(weights: np.ndarray, priority_is_up: bool, config) -> np.ndarray:
    table = np.array(config.vertical_weights, dtype=np.int64)
    if priority_is_up:
        table = table[::-1]
    weights *= table[:, np.newaxis]
    return weights


def compute_move_weights(position, barriers, opponent, priority_is_up: bool, config) -> np.ndarray:
    weights = init_move_weights()
    apply_barriers(weights, position, barriers)
    apply_enemy_proximity(weights, position, opponent, config)
    apply_goal_distance(weights, config)
    apply_vertical_priority(weights, priority_is_up, config)
    return weights
