"""Per-turn move selection shared by the attacker and the defender."""

import logging
import random
import time
from typing import Optional

from bots.bot_interface import BotInterface
from core.config import settings
from game.position import INVALID_POSITION, Direction, Position, move_position, to_position
from strategy.barriers import BarrierMap
from strategy.config import StrategyConfig, config_for_side
from strategy.locator import OpponentLocator
from strategy.priority import PriorityScheduler
from strategy.sampler import sample_direction
from strategy.weights import compute_move_weights

logger = logging.getLogger(__name__)


class StrategyController(BotInterface):
    """Owns one side's memory across turns and picks its moves.

    Nothing is set up until the first call to ``compute_next_move``; that call
    seeds the random source (unless one was injected), draws the spy countdown
    and the initial vertical priority, and records the start position.
    """

    def __init__(
        self,
        config: StrategyConfig,
        name: Optional[str] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self._name = name or f"{config.side.value.capitalize()} Bot"
        self._seed = seed
        self.rng = rng

        self.initialized = False
        self.number_of_moves = 0
        self.moves_to_spy = None
        self.barriers: Optional[BarrierMap] = None
        self.priority: Optional[PriorityScheduler] = None
        self.locator: Optional[OpponentLocator] = None
        self.initial_position: Optional[Position] = None
        self.intended_position = INVALID_POSITION
        self.last_weights = None

    @classmethod
    def for_side(cls, side, **kwargs) -> "StrategyController":
        return cls(config_for_side(side), **kwargs)

    @property
    def name(self):
        return self._name

    @property
    def side(self):
        return self.config.side.value

    @property
    def opponent_estimate(self) -> Optional[Position]:
        return self.locator.estimate if self.locator else None

    def _initialize(self, position: Position):
        if self.rng is None:
            seed = self._seed if self._seed is not None else settings.seed
            if seed is None:
                seed = int(time.time())
            logger.debug("%s seeded with %d", self.name, seed)
            self.rng = random.Random(seed)

        low, high = self.config.spy_countdown
        self.moves_to_spy = self.rng.randint(low, high)
        self.barriers = BarrierMap()
        self.priority = PriorityScheduler.with_random_bias(self.config, self.rng)
        self.initial_position = position
        self.locator = OpponentLocator.from_start(position, self.config)
        self.initialized = True

    def compute_next_move(self, position, opponent_spy) -> Direction:
        position = to_position(position)

        if not self.initialized:
            self._initialize(position)
        else:
            self.barriers.record_move_result(self.intended_position, position)

        if not self.locator.revealed and self.number_of_moves >= self.moves_to_spy:
            opponent = self.locator.update_if_revealed(opponent_spy)
            self.priority.force(opponent, self.initial_position)
        else:
            self.priority.step()

        weights = compute_move_weights(
            position, self.barriers, self.locator.estimate, self.priority.priority_is_up, self.config
        )
        direction = sample_direction(weights, self.rng)

        self.last_weights = weights
        self.intended_position = move_position(position, direction)
        self.number_of_moves += 1
        self.priority.record_move()

        logger.debug(
            "%s turn %d at %s: weights=%s -> %s",
            self.name,
            self.number_of_moves,
            tuple(position),
            weights.tolist(),
            tuple(direction),
        )
        return direction
