"""
Solver Package - Move rules, exhaustive search and difficulty scoring
for the 4x4 capture-only chess puzzle.

Public API:
    - BoardState: Immutable board representation
    - Move: Capture move definition
    - SolveResult / SolutionMetrics: Result of a backtracking search
    - PuzzleMetrics / DifficultyBreakdown: Difficulty statistics
    - SolutionContext: Deadline and cancellation for long searches
    - rules: valid_captures, is_legal_capture, execute, all_legal_moves,
      is_solved, is_stuck
    - search: solve_puzzle, is_solvable, get_hint, move_keeps_solvable,
      analyze_moves
    - difficulty: calculate_weighted_difficulty, get_puzzle_metrics

Usage:
    from chesslet.solver import BoardState, solve_puzzle, get_puzzle_metrics

    board = BoardState.from_pieces([(0, 0, "K"), (0, 1, "Q")])
    result = solve_puzzle(board, find_all=True)
    metrics = get_puzzle_metrics(board)

    print(result.min_moves, metrics.weighted_difficulty)
"""

# Core data structures
from .board import BoardState
from .move import Move
from .solution import (
    SolveResult,
    SolutionMetrics,
    PathRecord,
    MoveAnalysis,
    DifficultyBreakdown,
    PuzzleMetrics,
)
from .context import SolutionContext
from .constants import BOARD_SIZE, PIECES, PIECE_CHANGE_DECAY, UNSOLVABLE_SCORE

# Move generation
from .rules import (
    valid_captures,
    is_legal_capture,
    execute,
    all_legal_moves,
    is_solved,
    is_stuck,
)

# Search and scoring
from .search import (
    solve_puzzle,
    is_solvable,
    get_hint,
    get_solution,
    move_keeps_solvable,
    analyze_moves,
)
from .difficulty import (
    calculate_weighted_difficulty,
    enumerate_paths,
    get_puzzle_metrics,
)

__all__ = [
    # Data structures
    "BoardState",
    "Move",
    "SolveResult",
    "SolutionMetrics",
    "PathRecord",
    "MoveAnalysis",
    "DifficultyBreakdown",
    "PuzzleMetrics",
    "SolutionContext",
    "BOARD_SIZE",
    "PIECES",
    "PIECE_CHANGE_DECAY",
    "UNSOLVABLE_SCORE",
    # Rules
    "valid_captures",
    "is_legal_capture",
    "execute",
    "all_legal_moves",
    "is_solved",
    "is_stuck",
    # Search
    "solve_puzzle",
    "is_solvable",
    "get_hint",
    "get_solution",
    "move_keeps_solvable",
    "analyze_moves",
    # Difficulty
    "calculate_weighted_difficulty",
    "enumerate_paths",
    "get_puzzle_metrics",
]
