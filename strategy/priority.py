import logging
import random

from game.position import PositionLike
from game.rules import PRIORITY_FLIP_OUTCOMES

logger = logging.getLogger(__name__)


class PriorityScheduler:
    """Vertical bias that is re-randomized every few moves."""

    def __init__(self, config, rng: random.Random, priority_is_up: bool = False):
        self.config = config
        self.rng = rng
        self.priority_is_up = priority_is_up
        self.moves_since_change = 0
        self.moves_to_change = self._draw_interval()

    @classmethod
    def with_random_bias(cls, config, rng: random.Random) -> "PriorityScheduler":
        # The bias is drawn before the first interval.
        priority_is_up = rng.randrange(2) == 1
        return cls(config, rng, priority_is_up)

    def _draw_interval(self) -> int:
        low, high = self.config.priority_interval
        return self.rng.randint(low, high)

    def _reset(self):
        self.moves_since_change = 0
        self.moves_to_change = self._draw_interval()

    def step(self) -> bool:
        if self.moves_since_change >= self.moves_to_change:
            if self.rng.randrange(PRIORITY_FLIP_OUTCOMES) > 0:
                self.priority_is_up = not self.priority_is_up
                logger.debug("Vertical priority flipped, up=%s", self.priority_is_up)
            self._reset()
        return self.priority_is_up

    def force(self, opponent: PositionLike, own_start: PositionLike) -> bool:
        """Point the bias according to where the opponent was revealed."""
        opponent_below = opponent[0] > own_start[0]
        self.priority_is_up = opponent_below == self.config.up_when_opponent_below
        self._reset()
        logger.info("Vertical priority forced, up=%s", self.priority_is_up)
        return self.priority_is_up

    def record_move(self):
        self.moves_since_change += 1
