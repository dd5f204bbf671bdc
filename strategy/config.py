"""Per-side tuning for the shared strategy engine."""

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from core.exceptions import ConfigurationError
from game.rules import SIDES


class Side(str, Enum):
    ATTACKER = "attacker"
    DEFENDER = "defender"


class ProximityMode(str, Enum):
    """How the distance to the opponent estimate shapes the weights."""
    DISTANCE = "distance"    # heavier the farther the target cell is
    BUCKETED = "bucketed"    # closest / middle / farthest multipliers


class StrategyConfig(BaseModel):
    """Everything that differs between the attacker and the defender."""

    model_config = ConfigDict(frozen=True)

    side: Side
    goal_orientation: int = Field(default=1, description="+1 when the goal lies toward growing columns")
    guess_row: int = Field(..., description="Row of the initial opponent guess")
    proximity_mode: ProximityMode
    proximity_weights: Tuple[int, int, int] = Field(default=(1, 1, 1), description="Closest, middle, farthest")
    goal_weights: Tuple[int, int, int]
    vertical_weights: Tuple[int, int, int]
    spy_countdown: Tuple[int, int] = Field(..., description="Inclusive range of turns before spying")
    priority_interval: Tuple[int, int] = Field(..., description="Inclusive range of turns between priority changes")
    up_when_opponent_below: bool = Field(
        ..., description="Prioritize up once the revealed opponent row is greater than the start row"
    )

    @field_validator("goal_orientation")
    @classmethod
    def _check_orientation(cls, value: int) -> int:
        if value not in (-1, 1):
            raise ValueError("goal_orientation must be -1 or 1")
        return value

    @field_validator("proximity_weights", "goal_weights", "vertical_weights")
    @classmethod
    def _check_weights(cls, value: Tuple[int, int, int]) -> Tuple[int, int, int]:
        if any(w < 0 for w in value):
            raise ValueError("weights must be non-negative")
        return value

    @field_validator("spy_countdown", "priority_interval")
    @classmethod
    def _check_range(cls, value: Tuple[int, int]) -> Tuple[int, int]:
        low, high = value
        if low < 0 or low > high:
            raise ValueError(f"invalid inclusive range {value}")
        return value

    @model_validator(mode="after")
    def _check_stay_weight(self) -> "StrategyConfig":
        # The stay cell must survive every multiplication.
        if self.goal_weights[1] == 0 or self.vertical_weights[1] == 0 or 0 in self.proximity_weights:
            raise ValueError("weights that can apply to the stay cell must be positive")
        return self


ATTACKER_CONFIG = StrategyConfig(
    side=Side.ATTACKER,
    guess_row=SIDES["attacker"]["guess_row"],
    proximity_mode=ProximityMode.DISTANCE,
    goal_weights=SIDES["attacker"]["goal_weights"],
    vertical_weights=SIDES["attacker"]["vertical_weights"],
    spy_countdown=SIDES["attacker"]["spy_countdown"],
    priority_interval=SIDES["attacker"]["priority_interval"],
    up_when_opponent_below=True,
)

DEFENDER_CONFIG = StrategyConfig(
    side=Side.DEFENDER,
    guess_row=SIDES["defender"]["guess_row"],
    proximity_mode=ProximityMode.BUCKETED,
    proximity_weights=SIDES["defender"]["proximity_weights"],
    goal_weights=SIDES["defender"]["goal_weights"],
    vertical_weights=SIDES["defender"]["vertical_weights"],
    spy_countdown=SIDES["defender"]["spy_countdown"],
    priority_interval=SIDES["defender"]["priority_interval"],
    up_when_opponent_below=False,
)


def config_for_side(side) -> StrategyConfig:
    try:
        side = Side(side)
    except ValueError:
        raise ConfigurationError(f"unknown side {side!r}")
    return ATTACKER_CONFIG if side is Side.ATTACKER else DEFENDER_CONFIG
