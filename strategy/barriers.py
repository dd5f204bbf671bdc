import logging
from typing import FrozenSet, Set

from game.position import Position, PositionLike, equal_positions, to_position
from game.rules import BORDER_INDEX

logger = logging.getLogger(__name__)


class BarrierMap:
    """Cells an agent has learned it cannot enter.

    Stored sparsely, so there is no upper bound on coordinates. Every cell with
    a coordinate at or below the border index is permanently blocked. Cells are
    only ever added.
    """

    def __init__(self):
        self._blocked: Set[Position] = set()

    def is_border(self, position: PositionLike) -> bool:
        i, j = position
        return i <= BORDER_INDEX or j <= BORDER_INDEX

    def is_blocked(self, position: PositionLike) -> bool:
        return self.is_border(position) or to_position(position) in self._blocked

    def mark_blocked(self, position: PositionLike) -> bool:
        """Block ``position``. Returns False when it was already blocked."""
        if self.is_blocked(position):
            return False
        self._blocked.add(to_position(position))
        return True

    def record_move_result(self, intended: PositionLike, actual: PositionLike) -> bool:
        """Infer a barrier when the agent did not reach where it meant to go."""
        if equal_positions(intended, actual):
            return False
        added = self.mark_blocked(intended)
        if added:
            logger.info("Barrier inferred at %s (agent stayed at %s)", tuple(intended), tuple(actual))
        return added

    @property
    def blocked_cells(self) -> FrozenSet[Position]:
        """Interior cells discovered so far (the border is implicit)."""
        return frozenset(self._blocked)

    def __contains__(self, position) -> bool:
        return self.is_blocked(position)

    def __len__(self) -> int:
        return len(self._blocked)
