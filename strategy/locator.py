import logging

from game.position import Position, PositionLike

logger = logging.getLogger(__name__)


class OpponentLocator:
    """Best guess of where the opponent is.

    Starts from a static guess and adopts the spy's answer exactly once.
    """

    def __init__(self, estimate: PositionLike):
        self.estimate = Position(*estimate)
        self.revealed = False

    @staticmethod
    def initial_guess(own_start: PositionLike, config) -> Position:
        """Same column as ``own_start``, row anchored on the opponent's side."""
        return Position(config.guess_row, own_start[1])

    @classmethod
    def from_start(cls, own_start: PositionLike, config) -> "OpponentLocator":
        return cls(cls.initial_guess(own_start, config))

    def update_if_revealed(self, spy) -> Position:
        # Reading the spy consumes a use, so it is read at most once.
        if self.revealed:
            return self.estimate

        self.estimate = Position(*spy.get_position())
        self.revealed = True

        uses = spy.get_number_of_uses()
        if uses != 1:
            logger.warning("Spy reports %d uses after our first read", uses)
        logger.info("Opponent revealed at %s", tuple(self.estimate))
        return self.estimate
