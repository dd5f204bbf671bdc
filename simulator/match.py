import random

from core.config import settings
from game.engine import DRAW, Board, GameEngine
from game.position import Position


def random_board(height=None, width=None, obstacle_count=None, rng=None):
    """Board with obstacles scattered away from both start cells."""
    height = height or settings.board_height
    width = width or settings.board_width
    obstacle_count = settings.obstacle_count if obstacle_count is None else obstacle_count
    rng = rng or random.Random()

    empty = Board(height, width)
    reserved = set(empty.start_positions())
    free_positions = [
        Position(i, j) for i in range(1, height + 1) for j in range(1, width + 1) if Position(i, j) not in reserved
    ]
    obstacles = rng.sample(free_positions, min(obstacle_count, len(free_positions)))
    return Board(height, width, frozenset(obstacles))


def run_match(attacker_bot, defender_bot, board=None, max_turns=None, verbose=False):
    engine = GameEngine(attacker_bot, defender_bot, board)
    max_turns = max_turns or settings.max_turns
    winner = None

    for _ in range(max_turns):
        winner = engine.run_turn()
        if winner:
            break

    engine.logger.finalize()

    if verbose:
        engine.logger.print_log()

    return winner or DRAW, engine.logger
