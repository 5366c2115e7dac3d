"""
Difficulty Module - Intuitiveness-weighted scoring over every capture path.

Core idea:
    - Walk ALL move sequences from the starting board (no early exit,
      no memoization: the score depends on every path, not on the set
      of reachable states)
    - Weight each path by decay ** piece_changes, so single-piece chains
      dominate the sums
    - Difficulty = 1 - (weighted solutions / weighted total paths), scaled
      to 0-100 where 100 is hardest

Full enumeration grows quickly with piece count; callers keep boards
small (about 8 pieces) or pass a SolutionContext with a deadline.
"""

import logging
import math
import time
from typing import List, Optional

from .board import BoardState
from .constants import PIECE_CHANGE_DECAY, UNSOLVABLE_SCORE
from .context import SolutionContext
from .rules import all_legal_moves, is_solved
from .search import move_keeps_solvable, solve_puzzle
from .solution import DifficultyBreakdown, Path, PathRecord, PuzzleMetrics

logger = logging.getLogger(__name__)

METRICS_MAX_SOLUTIONS = 1000


class _PathWalker:
    """Accumulates decay-weighted terminal statistics during one walk."""

    def __init__(self, decay: float, context: Optional[SolutionContext],
                 collect_paths: bool):
        self.decay = decay
        self.context = context
        self.collect_paths = collect_paths
        self.paths: List[PathRecord] = []
        self.total_paths = 0
        self.total_solutions = 0
        self.weighted_paths = 0.0
        self.weighted_solutions = 0.0
        self.min_changes: Optional[int] = None
        self.max_changes: Optional[int] = None
        self.cancelled = False

    def _record(self, path: Path, piece_changes: int, is_solution: bool) -> None:
        weight = self.decay ** piece_changes
        self.total_paths += 1
        self.weighted_paths += weight

        if is_solution:
            self.total_solutions += 1
            self.weighted_solutions += weight
            if self.min_changes is None or piece_changes < self.min_changes:
                self.min_changes = piece_changes
            if self.max_changes is None or piece_changes > self.max_changes:
                self.max_changes = piece_changes

        if self.collect_paths:
            self.paths.append(PathRecord(path, piece_changes, is_solution))

    def walk(self, board: BoardState, path: Path,
             last_piece: Optional[str], piece_changes: int) -> None:
        if self.cancelled:
            return
        if self.context is not None and self.context.is_cancelled():
            self.cancelled = True
            return

        if is_solved(board):
            self._record(path, piece_changes, True)
            return

        moves = all_legal_moves(board)
        if not moves:
            self._record(path, piece_changes, False)
            return

        for move in moves:
            # First move never counts as a change
            changes = piece_changes
            if last_piece is not None and move.piece != last_piece:
                changes += 1
            self.walk(board.apply_move(move), path + (move,), move.piece, changes)
            if self.cancelled:
                return


def score_from_ratio(weighted_solution_ratio: float) -> int:
    """Round half up to an integer score clamped to [0, 100]."""
    score = int(math.floor((1 - weighted_solution_ratio) * 100 + 0.5))
    return max(0, min(100, score))


def enumerate_paths(board: BoardState,
                    context: Optional[SolutionContext] = None) -> List[PathRecord]:
    """List every path from the board to a terminal, with piece-change counts."""
    walker = _PathWalker(PIECE_CHANGE_DECAY, context, collect_paths=True)
    walker.walk(board, (), None, 0)
    return walker.paths


def calculate_weighted_difficulty(
    board: BoardState,
    context: Optional[SolutionContext] = None,
    decay: float = PIECE_CHANGE_DECAY,
) -> DifficultyBreakdown:
    """
    Calculate weighted difficulty from every path through the capture tree.

    Args:
        board: Starting board
        context: Optional deadline/cancellation context
        decay: Weight multiplier per piece change

    Returns:
        DifficultyBreakdown; weighted_difficulty is UNSOLVABLE_SCORE when
        no path solves the board or the walk was cancelled
    """
    start_time = time.perf_counter()
    walker = _PathWalker(decay, context, collect_paths=False)
    walker.walk(board, (), None, 0)
    elapsed_ms = (time.perf_counter() - start_time) * 1000

    if walker.cancelled:
        logger.warning(
            f"[Difficulty] Walk cancelled after {walker.total_paths} paths "
            f"({elapsed_ms:.1f}ms)"
        )
        return DifficultyBreakdown(total_paths=walker.total_paths, was_cancelled=True)

    weighted_ratio = (
        walker.weighted_solutions / walker.weighted_paths
        if walker.weighted_paths > 0 else 0.0
    )
    raw_ratio = (
        walker.total_solutions / walker.total_paths
        if walker.total_paths > 0 else 0.0
    )
    score = score_from_ratio(weighted_ratio) if walker.total_solutions > 0 else UNSOLVABLE_SCORE

    logger.debug(
        f"[Difficulty] paths={walker.total_paths} solutions={walker.total_solutions} "
        f"score={score} time={elapsed_ms:.1f}ms"
    )

    return DifficultyBreakdown(
        weighted_difficulty=score,
        weighted_solution_ratio=weighted_ratio,
        raw_solution_ratio=raw_ratio,
        total_paths=walker.total_paths,
        total_solutions=walker.total_solutions,
        total_weighted_paths=walker.weighted_paths,
        total_weighted_solutions=walker.weighted_solutions,
        min_piece_changes_for_solution=walker.min_changes,
        max_piece_changes_for_solution=walker.max_changes,
    )


def get_puzzle_metrics(board: BoardState,
                       context: Optional[SolutionContext] = None) -> PuzzleMetrics:
    """
    Calculate puzzle metrics for difficulty evaluation.

    Combines the capped all-solutions search, a winning/losing split of
    the first moves (trap ratio) and the weighted path breakdown.
    """
    result = solve_puzzle(board, find_all=True,
                          max_solutions=METRICS_MAX_SOLUTIONS, context=context)
    initial_moves = all_legal_moves(board)

    good_first_moves = 0
    bad_first_moves = 0
    for move in initial_moves:
        if move_keeps_solvable(board, move):
            good_first_moves += 1
        else:
            bad_first_moves += 1

    breakdown = calculate_weighted_difficulty(board, context=context)

    return PuzzleMetrics(
        piece_count=board.count_pieces(),
        solvable=result.solvable,
        solution_count=result.solution_count,
        min_moves=result.min_moves,
        max_moves=result.max_moves,
        dead_ends=result.dead_ends,
        total_branches=result.total_branches,
        initial_move_count=len(initial_moves),
        good_first_moves=good_first_moves,
        bad_first_moves=bad_first_moves,
        trap_ratio=bad_first_moves / len(initial_moves) if initial_moves else 0.0,
        difficulty=breakdown,
    )
