"""
Solution Module - Result records produced by the solver and difficulty calculator.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import UNSOLVABLE_SCORE
from .move import Move

Path = Tuple[Move, ...]


@dataclass
class SolutionMetrics:
    """
    Performance metrics for a search.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of board states expanded
        mode: Search mode that produced the result
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    mode: str = ""


@dataclass
class SolveResult:
    """
    Result of a backtracking search.

    Attributes:
        solvable: True if at least one solution was found
        solutions: Recorded solution paths (capped by max_solutions)
        dead_ends: Terminals reached with no legal move and no solution
        total_branches: Sum of legal-move counts over expanded boards
        was_cancelled: True if stopped by the context before finishing
        metrics: Performance statistics
    """
    solvable: bool = False
    solutions: List[Path] = field(default_factory=list)
    dead_ends: int = 0
    total_branches: int = 0
    was_cancelled: bool = False
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def solution_count(self) -> int:
        return len(self.solutions)

    @property
    def min_moves(self) -> int:
        """Shortest recorded solution length (0 when none)."""
        return min((len(s) for s in self.solutions), default=0)

    @property
    def max_moves(self) -> int:
        """Longest recorded solution length (0 when none)."""
        return max((len(s) for s in self.solutions), default=0)

    @property
    def first_solution(self) -> Optional[Path]:
        return self.solutions[0] if self.solutions else None


@dataclass(frozen=True)
class PathRecord:
    """
    One complete path through the capture tree.

    Attributes:
        moves: Moves from the starting board to the terminal
        piece_changes: Times the capturing piece kind changed along the path
        is_solution: True if the terminal is solved, False for a dead end
    """
    moves: Path
    piece_changes: int
    is_solution: bool

    @property
    def length(self) -> int:
        return len(self.moves)


@dataclass
class MoveAnalysis:
    """Legal moves split by whether they keep the puzzle solvable."""
    winning: List[Move] = field(default_factory=list)
    losing: List[Move] = field(default_factory=list)


@dataclass
class DifficultyBreakdown:
    """
    Decay-weighted path statistics for a board.

    weighted_difficulty is UNSOLVABLE_SCORE when no path solves the board.
    """
    weighted_difficulty: int = UNSOLVABLE_SCORE
    weighted_solution_ratio: float = 0.0
    raw_solution_ratio: float = 0.0
    total_paths: int = 0
    total_solutions: int = 0
    total_weighted_paths: float = 0.0
    total_weighted_solutions: float = 0.0
    min_piece_changes_for_solution: Optional[int] = None
    max_piece_changes_for_solution: Optional[int] = None
    was_cancelled: bool = False

    @property
    def solvable(self) -> bool:
        return self.total_solutions > 0


@dataclass
class PuzzleMetrics:
    """
    Combined solver and difficulty statistics for one board.

    Attributes:
        piece_count: Pieces on the starting board
        solvable: True if the board can be reduced to one piece
        solution_count: Solutions found by the capped all-solutions search
        min_moves: Shortest solution length
        max_moves: Longest solution length
        dead_ends: Dead-end terminals seen by the all-solutions search
        total_branches: Branch expansions seen by the all-solutions search
        initial_move_count: Legal first moves
        good_first_moves: First moves that keep the puzzle solvable
        bad_first_moves: First moves that lose
        trap_ratio: bad_first_moves / initial_move_count (0 when no moves)
        difficulty: Weighted path breakdown
    """
    piece_count: int
    solvable: bool
    solution_count: int
    min_moves: int
    max_moves: int
    dead_ends: int
    total_branches: int
    initial_move_count: int
    good_first_moves: int
    bad_first_moves: int
    trap_ratio: float
    difficulty: DifficultyBreakdown

    @property
    def weighted_difficulty(self) -> int:
        return self.difficulty.weighted_difficulty

    def to_dict(self) -> dict:
        return {
            "pieceCount": self.piece_count,
            "solvable": self.solvable,
            "solutionCount": self.solution_count,
            "minMoves": self.min_moves,
            "maxMoves": self.max_moves,
            "deadEnds": self.dead_ends,
            "totalBranches": self.total_branches,
            "initialMoveCount": self.initial_move_count,
            "goodFirstMoves": self.good_first_moves,
            "badFirstMoves": self.bad_first_moves,
            "trapRatio": self.trap_ratio,
            "weightedDifficulty": self.difficulty.weighted_difficulty,
            "weightedSolutionRatio": self.difficulty.weighted_solution_ratio,
            "rawSolutionRatio": self.difficulty.raw_solution_ratio,
            "totalPaths": self.difficulty.total_paths,
            "totalSolutions": self.difficulty.total_solutions,
            "minPieceChangesForSolution": self.difficulty.min_piece_changes_for_solution,
            "maxPieceChangesForSolution": self.difficulty.max_piece_changes_for_solution,
        }
