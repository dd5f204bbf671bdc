import argparse
import logging
import random
from typing import Dict, Optional

from tqdm import tqdm

from core.config import settings
from game.engine import ATTACKER_WINS, DEFENDER_WINS, DRAW
from simulator.match import random_board, run_match
from strategy.config import Side
from strategy.controller import StrategyController

logger = logging.getLogger(__name__)


def create_bots(seed: Optional[int] = None):
    """Build a fresh attacker and defender; each owns its own random source."""
    defender_seed = None if seed is None else seed + 1
    attacker = StrategyController.for_side(Side.ATTACKER, seed=seed)
    defender = StrategyController.for_side(Side.DEFENDER, seed=defender_seed)
    return attacker, defender


def run_matches(count: int = 1, seed: Optional[int] = None, verbose: bool = False,
                obstacles: Optional[int] = None, max_turns: Optional[int] = None) -> Dict[str, float]:
    """
    Run a series of matches between fresh attacker and defender bots.

    Args:
        count (int): Number of matches to run
        seed (int): Base seed; match ``n`` uses ``seed + 2 * n`` and the next value
        verbose (bool): Whether to print detailed match logs
        obstacles (int): Obstacles per board (defaults to the configured count)
        max_turns (int): Turn limit per match

    Returns:
        Win counts and the average match length.
    """
    board_rng = random.Random(seed)
    stats = {ATTACKER_WINS: 0, DEFENDER_WINS: 0, DRAW: 0, "turns": 0}

    for n in tqdm(range(count), desc="Matches", disable=count == 1):
        match_seed = None if seed is None else seed + 2 * n
        attacker, defender = create_bots(match_seed)
        board = random_board(obstacle_count=obstacles, rng=board_rng)

        winner, match_logger = run_match(attacker, defender, board, max_turns=max_turns, verbose=verbose)
        stats[winner] += 1
        stats["turns"] += match_logger.get_snapshots()[-1]["turn"]
        logger.debug("Match %d: %s", n + 1, winner)

    stats["average_turns"] = stats["turns"] / count if count else 0.0
    return stats


def print_stats(stats, count):
    if count <= 0:
        return
    print(f"\n=== Results after {count} matches ===")
    for key in (ATTACKER_WINS, DEFENDER_WINS, DRAW):
        print(f"{key}: {stats[key]} ({stats[key] / count * 100:.1f}%)")
    print(f"Average match length: {stats['average_turns']:.1f} turns")


def parse_arguments():
    """
    Parse command line arguments for the application.
    """
    parser = argparse.ArgumentParser(description="Attacker vs defender grid chase")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    match_parser = subparsers.add_parser("match", help="Run matches between the attacker and the defender")
    match_parser.add_argument("--count", "-c", type=int, default=1, help="Number of matches to run")
    match_parser.add_argument("--seed", "-s", type=int, default=settings.seed, help="Seed for boards and bots")
    match_parser.add_argument("--obstacles", type=int, default=None, help="Obstacles per board")
    match_parser.add_argument("--max-turns", type=int, default=None, help="Turn limit per match")
    match_parser.add_argument("--verbose", "-v", action="store_true", help="Show detailed match logs")

    return parser.parse_args()


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    args = parse_arguments()

    if args.command == "match" or args.command is None:
        count = getattr(args, "count", 1)
        stats = run_matches(
            count=count,
            seed=getattr(args, "seed", settings.seed),
            verbose=getattr(args, "verbose", False),
            obstacles=getattr(args, "obstacles", None),
            max_turns=getattr(args, "max_turns", None),
        )
        print_stats(stats, count)
