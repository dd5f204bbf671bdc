"""Grid primitives shared by the strategies and the game engine."""

from typing import NamedTuple, Sequence, Union

from core.exceptions import InvalidMoveError


class Position(NamedTuple):
    """Cell coordinate: ``i`` is the row (growing downward), ``j`` the column."""
    i: int
    j: int


class Direction(NamedTuple):
    """Relative move with both components in {-1, 0, 1}."""
    di: int
    dj: int


PositionLike = Union[Position, Sequence[int]]

# Never produced by the board, so it never equals a real position.
INVALID_POSITION = Position(-1, -1)

STAY = Direction(0, 0)


def to_position(value: PositionLike) -> Position:
    if isinstance(value, Position):
        return value
    i, j = value
    return Position(int(i), int(j))


def to_direction(value) -> Direction:
    """Coerce ``value`` into a Direction, rejecting anything but the nine moves."""
    try:
        di, dj = value
    except (TypeError, ValueError):
        raise InvalidMoveError(value)
    if not all(isinstance(c, int) and -1 <= c <= 1 for c in (di, dj)):
        raise InvalidMoveError(value)
    return Direction(di, dj)


def move_position(position: PositionLike, direction) -> Position:
    i, j = position
    di, dj = direction
    return Position(i + di, j + dj)


def equal_positions(a: PositionLike, b: PositionLike) -> bool:
    return tuple(a) == tuple(b)


def chebyshev_distance(a: PositionLike, b: PositionLike) -> int:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))
