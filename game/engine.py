import logging
from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from core.config import settings
from core.exceptions import InvalidMoveError
from game.agent import Agent
from game.logger import GameLogger
from game.position import STAY, Position, move_position, to_direction
from game.spy import Spy

logger = logging.getLogger(__name__)

ATTACKER_WINS = "attacker"
DEFENDER_WINS = "defender"
DRAW = "Draw"


@dataclass(frozen=True)
class Board:
    """Rectangle of cells ``(1, 1)`` to ``(height, width)``; everything else is wall."""

    height: int
    width: int
    obstacles: FrozenSet[Position] = frozenset()

    def in_bounds(self, position) -> bool:
        i, j = position
        return 1 <= i <= self.height and 1 <= j <= self.width

    def is_free(self, position) -> bool:
        return self.in_bounds(position) and Position(*position) not in self.obstacles

    def start_positions(self) -> Tuple[Position, Position]:
        """Attacker starts on the first column, defender on the last, same row."""
        row = (self.height + 1) // 2
        return Position(row, 1), Position(row, self.width)


class GameEngine:
    def __init__(self, attacker_bot, defender_bot, board: Optional[Board] = None, spy_max_uses: Optional[int] = None):
        self.board = board or Board(settings.board_height, settings.board_width)
        attacker_start, defender_start = self.board.start_positions()
        self.attacker = Agent(attacker_bot.name, "attacker", attacker_start)
        self.defender = Agent(defender_bot.name, "defender", defender_start)
        self.bots = [attacker_bot, defender_bot]

        max_uses = settings.spy_max_uses if spy_max_uses is None else spy_max_uses
        # Each spy watches its own agent and is handed to the other side.
        self.attacker_spy = Spy(self.attacker, max_uses)
        self.defender_spy = Spy(self.defender, max_uses)

        self.turn = 0
        self.logger = GameLogger()

    def run_turn(self):
        self.log_turn()

        # Step 1: Ask both sides for a move, attacker first
        attacker_move = self.request_move(self.bots[0], self.attacker, self.defender, self.defender_spy)
        defender_move = self.request_move(self.bots[1], self.defender, self.attacker, self.attacker_spy)

        # Step 2: Resolve movement against walls and obstacles
        previous = (self.attacker.position, self.defender.position)
        attacker_next = self.calculate_next_position(self.attacker, attacker_move)
        defender_next = self.calculate_next_position(self.defender, defender_move)

        for agent, new_position in ((self.attacker, attacker_next), (self.defender, defender_next)):
            self.logger.log_event_agent_move(self.turn, agent, new_position)
            agent.move_to(new_position)
            self.logger.log(f"{agent.name} at {tuple(agent.position)}")

        self.logger.log_state(self.build_input())

        # Step 3: Winner
        winner = self.check_winner(*previous)
        if winner:
            self.logger.log(f"Game Over: {winner} wins!")
            self.logger.log_event_game_over(self.turn, winner)
            logger.info("Match over after %d turns: %s wins", self.turn, winner)

        return winner

    def log_turn(self):
        if self.turn == 0:
            self.logger.log_state(self.build_input())
        self.turn += 1
        self.logger.new_turn(self.turn)
        self.logger.log_event_turn_start(self.turn)

    def build_input(self):
        return {
            "turn": self.turn,
            "board_size": [self.board.height, self.board.width],
            "attacker": self.attacker.to_dict(),
            "defender": self.defender.to_dict(),
        }

    def request_move(self, bot, agent, opponent, opponent_spy):
        uses_before = opponent_spy.get_number_of_uses()
        move = bot.compute_next_move(agent.position, opponent_spy)
        if opponent_spy.get_number_of_uses() != uses_before:
            self.logger.log(f"{agent.name} spied on {opponent.name}")
            self.logger.log_event_spy_used(self.turn, opponent, agent)

        try:
            return to_direction(move)
        except InvalidMoveError:
            self.logger.log(f"Invalid move from {agent.name}: {move!r}")
            self.logger.log_event_invalid_move(self.turn, agent, move)
            return STAY

    def calculate_next_position(self, agent, move):
        target = move_position(agent.position, move)
        if self.board.is_free(target):
            return target

        agent.blocked_moves += 1
        self.logger.log(f"{agent.name} blocked at {tuple(target)}")
        self.logger.log_event_move_blocked(self.turn, agent, target)
        return agent.position

    def check_winner(self, attacker_before, defender_before):
        attacker_pos = self.attacker.position
        defender_pos = self.defender.position
        caught = attacker_pos == defender_pos or (
            attacker_pos == defender_before and defender_pos == attacker_before
        )
        if caught:
            return DEFENDER_WINS
        if attacker_pos.j == self.board.width:
            return ATTACKER_WINS
        return None
