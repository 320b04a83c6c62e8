"""
Main entry point for Wordle Solver application.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add src to path if running from project root
sys.path.insert(0, str(Path(__file__).parent))

from config import load_config
from dictionary import load_word_pools
from recommender import WordRecommender
from ui import WordleSolverCLI
from words import encode, is_valid_word

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Minimax solver for the five-letter word game. With a GOAL "
                    "the game is simulated locally; without one, type in the "
                    "colors the real game shows.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "goal", nargs="?",
        help="Hidden answer for simulation mode (five lowercase letters)")
    parser.add_argument(
        "--config", help="Settings JSON (default: config/settings.json)")
    parser.add_argument("--goals", help="Goal word list")
    parser.add_argument("--extra", help="Extra accepted guesses")
    parser.add_argument("--seed", type=int, help="Shuffle seed")
    parser.add_argument(
        "--workers", type=int, help="Processes used by the guess search")
    parser.add_argument(
        "--max-rounds", type=int, help="Stop after this many guesses (0 = no limit)")
    parser.add_argument(
        "--no-progress", action="store_true", help="Hide the search progress bar")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Launch the terminal solver."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s:%(name)s:%(message)s"
    )

    if args.goal is not None and not is_valid_word(args.goal):
        parser.error(f"goal must be five lowercase letters, got '{args.goal}'")
    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be >= 1")

    config = load_config(args.config)
    if args.goals:
        config.goals_path = args.goals
    if args.extra:
        config.extra_path = args.extra
    if args.seed is not None:
        config.seed = args.seed
    if args.workers is not None:
        config.workers = args.workers
    if args.max_rounds is not None:
        config.max_rounds = args.max_rounds
    if args.no_progress:
        config.show_progress = False

    try:
        pools = load_word_pools(config.goals_path, config.extra_path, seed=config.seed)
    except (FileNotFoundError, ValueError) as e:
        log.error(f"Failed to load word lists: {e}")
        return 1

    goal = encode(args.goal) if args.goal is not None else None
    if goal is not None and goal not in pools.goals:
        log.warning(f"Goal '{goal}' is not in the goal list; every goal word will eventually be ruled out")

    recommender = WordRecommender(
        pools.dictionary,
        workers=config.workers,
        show_progress=config.show_progress
    )
    app = WordleSolverCLI(recommender, pools.goals, config, goal=goal)
    state = app.run()
    return 0 if state.solved else 1


if __name__ == "__main__":
    sys.exit(main())
