"""
Search Module - Exhaustive backtracking solver for capture puzzles.

Two modes share one depth-first walk:
    - first-solution: stop at the first solved terminal (solvability, hints)
    - all-solutions: keep exploring until max_solutions paths are recorded

Recursion depth is bounded by the piece count because every capture
removes exactly one piece. No board states are memoized.
"""

import logging
import time
from typing import List, Optional

from .board import BoardState
from .context import SolutionContext
from .move import Move
from .rules import all_legal_moves, is_solved
from .solution import MoveAnalysis, Path, SolutionMetrics, SolveResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_SOLUTIONS = 100


class _BacktrackSearch:
    """Per-call search state; discarded after solve_puzzle returns."""

    def __init__(self, find_all: bool, max_solutions: int,
                 context: Optional[SolutionContext]):
        self.find_all = find_all
        self.max_solutions = max_solutions if find_all else 1
        self.context = context
        self.solutions: List[Path] = []
        self.dead_ends = 0
        self.total_branches = 0
        self.states_explored = 0
        self.cancelled = False

    def _should_stop(self) -> bool:
        if self.cancelled:
            return True
        if self.context is not None and self.context.is_cancelled():
            self.cancelled = True
            return True
        return len(self.solutions) >= self.max_solutions

    def run(self, board: BoardState, path: Path) -> None:
        if self._should_stop():
            return
        self.states_explored += 1

        if is_solved(board):
            self.solutions.append(path)
            return

        moves = all_legal_moves(board)
        self.total_branches += len(moves)

        if not moves:
            self.dead_ends += 1
            return

        for move in moves:
            if self._should_stop():
                return
            self.run(board.apply_move(move), path + (move,))


def solve_puzzle(
    board: BoardState,
    find_all: bool = False,
    max_solutions: int = DEFAULT_MAX_SOLUTIONS,
    context: Optional[SolutionContext] = None,
) -> SolveResult:
    """
    Solve a puzzle using recursive backtracking.

    Args:
        board: Starting board
        find_all: Keep searching after the first solution
        max_solutions: Cap on recorded solutions in find_all mode
        context: Optional deadline/cancellation context

    Returns:
        SolveResult; an unsolvable board is reported with solvable=False
    """
    start_time = time.perf_counter()
    search = _BacktrackSearch(find_all, max_solutions, context)
    search.run(board, ())

    elapsed_ms = (time.perf_counter() - start_time) * 1000
    mode = "all" if find_all else "first"
    if search.cancelled:
        logger.warning(
            f"[Solver] Search cancelled after {search.states_explored} states "
            f"({elapsed_ms:.1f}ms)"
        )
    logger.debug(
        f"[Solver] mode={mode} solutions={len(search.solutions)} "
        f"dead_ends={search.dead_ends} branches={search.total_branches} "
        f"time={elapsed_ms:.1f}ms"
    )

    return SolveResult(
        solvable=len(search.solutions) > 0,
        solutions=search.solutions,
        dead_ends=search.dead_ends,
        total_branches=search.total_branches,
        was_cancelled=search.cancelled,
        metrics=SolutionMetrics(
            computation_time_ms=elapsed_ms,
            states_explored=search.states_explored,
            mode=mode,
        ),
    )


def is_solvable(board: BoardState, context: Optional[SolutionContext] = None) -> bool:
    """Quick check if a puzzle is solvable (stops at first solution)."""
    return solve_puzzle(board, find_all=False, context=context).solvable


def get_solution(board: BoardState) -> Optional[Path]:
    """First solution found in deterministic move order, or None."""
    return solve_puzzle(board).first_solution


def get_hint(board: BoardState) -> Optional[Move]:
    """
    Get a hint for the next move.

    Returns:
        First move of a solution path, or None when the board is
        unsolvable or already solved
    """
    solution = get_solution(board)
    if solution:
        return solution[0]
    return None


def move_keeps_solvable(board: BoardState, move: Move) -> bool:
    """
    Check if a specific move keeps the puzzle solvable.

    Args:
        board: Board before the move
        move: Capture to try

    Returns:
        True if the resulting board is solved or still solvable
    """
    new_board = board.apply_move(move)
    if is_solved(new_board):
        return True
    return is_solvable(new_board)


def analyze_moves(board: BoardState) -> MoveAnalysis:
    """
    Categorize every legal move as winning or losing.

    Runs one first-solution search per legal move.
    """
    analysis = MoveAnalysis()
    for move in all_legal_moves(board):
        if move_keeps_solvable(board, move):
            analysis.winning.append(move)
        else:
            analysis.losing.append(move)
    return analysis
