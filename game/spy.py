from core.exceptions import SpyExhaustedError
from game.position import Position


class Spy:
    """Reports where an agent really is, a limited number of times.

    The spy is owned by the agent it watches and handed read-only to the
    opponent. Reading the position is what counts as a use.
    """

    def __init__(self, agent, max_uses=1):
        self._agent = agent
        self._max_uses = max_uses
        self._uses = 0

    def get_number_of_uses(self) -> int:
        return self._uses

    def get_position(self) -> Position:
        if self._uses >= self._max_uses:
            raise SpyExhaustedError(self._max_uses)
        self._uses += 1
        return Position(*self._agent.position)
