import random

import numpy as np

from core.exceptions import PolicyViolationError
from game.position import Direction
from strategy.weights import index_to_direction


def sample_direction(weights, rng: random.Random) -> Direction:
    """Pick a move with probability proportional to its weight.

    Cells are walked in row-major order; the cell whose cumulative interval
    ``[previous_sum, previous_sum + weight)`` holds the drawn value wins.
    """
    flat = np.asarray(weights, dtype=np.int64).reshape(-1)
    total = int(flat.sum())
    if total <= 0:
        raise PolicyViolationError(np.asarray(weights).tolist())

    chosen_value = rng.randrange(total)
    cumulative = np.cumsum(flat)
    index = int(np.searchsorted(cumulative, chosen_value, side="right"))
    return index_to_direction(*divmod(index, 3))
