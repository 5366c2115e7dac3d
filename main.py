"""
Chesslet - Entry Point

Solve, score and generate 4x4 capture-only chess puzzles from the command line.

Example:
    python main.py solve KQR1/2B1/N3/PP2
    python main.py evaluate 1Q2-2K1-1N1K-4
    python main.py generate --difficulty hard --seed 7
    python main.py levels --per-phase 5 --output levels.json
"""

import sys
import json
import logging
import argparse

from chesslet.fen import FenError, fen_to_board
from chesslet.settings import load_settings
from chesslet.solver import solve_puzzle, get_hint
from chesslet.generator import (
    DIFFICULTIES,
    GenerationContext,
    evaluate_puzzle,
    generate_puzzle,
    generate_level_set,
    get_starter_puzzle,
    get_strategy_names,
    describe_strategies,
    starter_board,
    write_levels_json,
)


# Configure logging - output to both console and file
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
    handlers=[
        logging.StreamHandler(),  # Console output
        logging.FileHandler("chesslet.log", mode='w', encoding='utf-8')  # File output
    ]
)
logger = logging.getLogger(__name__)


class Application:
    """
    Command dispatcher.

    Merges saved settings with CLI flags and runs one command.
    """

    def __init__(self, args: argparse.Namespace):
        self.args = args
        self.settings = load_settings(args.config)

        # CLI flags override saved settings
        self.seed = args.seed if args.seed is not None else self.settings.get("seed")
        self.debug_mode = args.debug or self.settings.get("debug_enabled", False)
        if self.debug_mode:
            logging.getLogger().setLevel(logging.DEBUG)

    def _save_snapshot(self, board, move=None, caption=""):
        if not self.debug_mode:
            return
        from chesslet.debug import save_debug_image
        path = save_debug_image(board, move, caption, self.settings.get("debug_dir", "debug"))
        logger.info(f"Debug image saved: {path}")

    def _parse_board(self, fen: str):
        try:
            return fen_to_board(fen)
        except FenError as e:
            logger.error(str(e))
            return None

    def cmd_solve(self) -> int:
        board = self._parse_board(self.args.fen)
        if board is None:
            return 2
        result = solve_puzzle(board, find_all=self.args.all,
                              max_solutions=self.args.max_solutions)
        if not result.solvable:
            print("Unsolvable")
            return 1

        print(f"Solutions found: {result.solution_count} "
              f"(moves {result.min_moves}-{result.max_moves}, dead ends {result.dead_ends})")
        for i, move in enumerate(result.first_solution, 1):
            print(f"  {i}. {move}")
        self._save_snapshot(board, result.first_solution[0] if result.first_solution else None)
        return 0

    def cmd_evaluate(self) -> int:
        board = self._parse_board(self.args.fen)
        if board is None:
            return 2
        puzzle = evaluate_puzzle(board)
        print(json.dumps(puzzle.to_dict(), indent=2))
        self._save_snapshot(board, caption=f"{puzzle.fen} score={puzzle.score}")
        return 0 if puzzle.solvable else 1

    def cmd_hint(self) -> int:
        board = self._parse_board(self.args.fen)
        if board is None:
            return 2
        hint = get_hint(board)
        if hint is None:
            print("No hint available")
            return 1
        print(hint)
        self._save_snapshot(board, hint)
        return 0

    def cmd_generate(self) -> int:
        timeout = self.args.timeout or self.settings.get("generation_timeout_sec")
        attempts = self.args.attempts or self.settings.get("max_attempts")
        context = GenerationContext.create(seed=self.seed, timeout_sec=timeout)

        puzzle = generate_puzzle(
            min_pieces=self.args.min_pieces,
            max_pieces=self.args.max_pieces,
            difficulty=self.args.difficulty,
            max_attempts=attempts,
            strategy=self.args.strategy,
            context=context,
        )
        if puzzle is None:
            starter = get_starter_puzzle(self.args.difficulty, context.rng)
            logger.warning(f"Generation found nothing, using starter puzzle {starter.fen}")
            puzzle = evaluate_puzzle(starter_board(starter))

        print(json.dumps(puzzle.to_dict(), indent=2))
        self._save_snapshot(puzzle.board, caption=f"{puzzle.fen} score={puzzle.score}")
        return 0

    def cmd_levels(self) -> int:
        per_phase = self.args.per_phase or self.settings.get("levels_per_phase")
        phase_timeout = self.args.phase_timeout or self.settings.get("phase_timeout_sec")
        context = GenerationContext.create(seed=self.seed)

        levels = generate_level_set(
            levels_per_phase=per_phase,
            phase_timeout_sec=phase_timeout,
            context=context,
        )
        if self.args.output:
            write_levels_json(levels, self.args.output)
        else:
            print(json.dumps([level.to_dict() for level in levels], indent=2))
        return 0

    def run(self) -> int:
        """
        Run the selected command.

        Returns:
            Exit code
        """
        handler = getattr(self, f"cmd_{self.args.command}")
        return handler()


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Chesslet - capture-only 4x4 chess puzzle solver and generator"
    )
    parser.add_argument("--config", "-c", default=None,
                        help="Settings file (default: config.json)")
    parser.add_argument("--seed", "-s", type=int, default=None,
                        help="Random seed for reproducible generation")
    parser.add_argument("--debug", "-d", action="store_true",
                        help="Enable debug logging and save board snapshots")

    sub = parser.add_subparsers(dest="command", required=True)

    solve = sub.add_parser("solve", help="Solve a board given as FEN")
    solve.add_argument("fen")
    solve.add_argument("--all", action="store_true", help="Find all solutions (capped)")
    solve.add_argument("--max-solutions", type=int, default=100)

    evaluate = sub.add_parser("evaluate", help="Score a board given as FEN")
    evaluate.add_argument("fen")

    hint = sub.add_parser("hint", help="Print the next winning move")
    hint.add_argument("fen")

    generate = sub.add_parser("generate", help="Generate a single puzzle")
    generate.add_argument("--difficulty", choices=DIFFICULTIES, default=None)
    generate.add_argument("--min-pieces", type=int, default=2)
    generate.add_argument("--max-pieces", type=int, default=8)
    generate.add_argument("--attempts", type=int, default=None)
    generate.add_argument("--timeout", type=float, default=None,
                          help="Time budget in seconds")
    generate.add_argument("--strategy", choices=get_strategy_names(), default=None,
                          help=describe_strategies())

    levels = sub.add_parser("levels", help="Generate an ordered level set")
    levels.add_argument("--per-phase", type=int, default=None)
    levels.add_argument("--phase-timeout", type=float, default=None)
    levels.add_argument("--output", "-o", default=None, help="Write levels to a JSON file")

    return parser.parse_args(argv)


def main():
    """Parse arguments and run one command."""
    args = parse_args()
    application = Application(args)
    sys.exit(application.run())


if __name__ == "__main__":
    main()
