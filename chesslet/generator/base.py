"""
Base Strategy Module - Abstract base class for puzzle generation strategies.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

from ..solver import BoardState, BOARD_SIZE
from .context import GenerationContext
from .puzzle import Puzzle, ScoreBand, evaluate_puzzle


@dataclass(frozen=True)
class GenerationRequest:
    """
    Constraints a generated board must satisfy.

    Attributes:
        min_pieces: Fewest pieces on a sampled board
        max_pieces: Most pieces on a sampled board
        band: Acceptable score range and target (None = any solvable board)
        max_attempts: Cap on sampled candidates (or restarts); None = until timeout
        tolerance: Stop early once a candidate is this close to the target
        min_score: Optional floor on accepted scores
    """
    min_pieces: int = 2
    max_pieces: int = 8
    band: Optional[ScoreBand] = None
    max_attempts: Optional[int] = 100
    tolerance: float = 0
    min_score: Optional[float] = None

    def __post_init__(self):
        if not 1 <= self.min_pieces <= self.max_pieces <= BOARD_SIZE * BOARD_SIZE:
            raise ValueError(
                f"Invalid piece bounds: min={self.min_pieces}, max={self.max_pieces}"
            )

    def in_piece_range(self, piece_count: int) -> bool:
        return self.min_pieces <= piece_count <= self.max_pieces

    def accepts(self, score: int) -> bool:
        """True if a solvable board with this score satisfies the request."""
        if self.band is not None and not self.band.contains(score):
            return False
        if self.min_score is not None and score < self.min_score:
            return False
        return True

    def distance(self, score: int) -> float:
        """Distance from the band target (0 when there is no band)."""
        if self.band is None:
            return 0
        return abs(score - self.band.target)


class GenerationStrategy(ABC):
    """
    Abstract base class for all generation strategies.

    Subclasses must implement generate() and define name and
    description class attributes. Running out of attempts or time is a
    normal outcome reported by returning None.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for the CLI
        default_for: Difficulty names that select this strategy by default
    """
    name: str = "base"
    description: str = "Base strategy"
    default_for: Tuple[Optional[str], ...] = ()

    @abstractmethod
    def generate(self, request: GenerationRequest,
                 context: GenerationContext) -> Optional[Puzzle]:
        """
        Produce a solvable puzzle satisfying the request.

        Must periodically check context.is_cancelled() and return the
        best result so far (or None) if True.

        Args:
            request: Piece-count and score constraints
            context: Random stream and time budget

        Returns:
            An evaluated, solvable Puzzle, or None if nothing matched
        """
        pass

    def _finalize(self, board: Optional[BoardState]) -> Optional[Puzzle]:
        """Build the full Puzzle record for the chosen board."""
        if board is None:
            return None
        puzzle = evaluate_puzzle(board)
        return puzzle if puzzle.solvable else None
