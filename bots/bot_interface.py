from pydantic import BaseModel
from abc import ABC, abstractmethod


class BotRegistration(BaseModel):
    """Model for bot registration with the game engine."""
    name: str
    side: str


class BotInterface(ABC):
    """Abstract base class for the attacker and defender strategies."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the bot's name."""
        pass

    @property
    @abstractmethod
    def side(self) -> str:
        """Return "attacker" or "defender"."""
        pass

    @abstractmethod
    def compute_next_move(self, position, opponent_spy):
        """Return the direction to move this turn from ``position``.

        ``opponent_spy`` reports the opponent's true position; reading it
        counts as one of its limited uses.
        """
        pass

    def get_registration(self) -> BotRegistration:
        """Get bot registration data."""
        return BotRegistration(name=self.name, side=self.side)
