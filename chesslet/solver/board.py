"""
Board State Module - Immutable 4x4 board representation for capture puzzles.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Optional, TYPE_CHECKING

from .constants import BOARD_SIZE, PIECES

if TYPE_CHECKING:
    from .move import Move


Grid = Tuple[Tuple[Optional[str], ...], ...]


@dataclass(frozen=True)
class BoardState:
    """
    Immutable board state representation.

    Uses tuple-of-tuples for hashability and immutability.
    Board cells contain a piece letter (K, Q, R, B, N, P) or None for
    empty cells. Every recursive search branch holds its own snapshot,
    so no board is ever shared-mutated.

    Attributes:
        grid: Tuple of BOARD_SIZE rows, each a tuple of BOARD_SIZE cells
    """
    grid: Grid

    def __post_init__(self):
        if len(self.grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in self.grid):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")
        for row in self.grid:
            for cell in row:
                if cell is not None and cell not in PIECES:
                    raise ValueError(f"Unknown piece: {cell!r}")

    @classmethod
    def empty(cls) -> 'BoardState':
        """Create a board with no pieces."""
        return cls(grid=tuple((None,) * BOARD_SIZE for _ in range(BOARD_SIZE)))

    @classmethod
    def from_2d_list(cls, grid: List[List[Optional[str]]]) -> 'BoardState':
        """
        Create BoardState from 2D list.

        Args:
            grid: 2D list of piece letters or None values

        Returns:
            BoardState instance with immutable grid
        """
        return cls(grid=tuple(tuple(row) for row in grid))

    @classmethod
    def from_pieces(cls, pieces: Iterable[Tuple[int, int, str]]) -> 'BoardState':
        """
        Create BoardState from (row, col, piece) placements on an empty board.

        Args:
            pieces: Iterable of (row, col, piece) tuples

        Returns:
            BoardState instance
        """
        grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        for row, col, piece in pieces:
            grid[row][col] = piece
        return cls.from_2d_list(grid)

    def diff(self, other: 'BoardState') -> List[Tuple[int, int]]:
        """
        Find cells that differ between this board and another.

        Args:
            other: Another BoardState to compare against

        Returns:
            List of (row, col) tuples where cells differ
        """
        if not isinstance(other, BoardState):
            raise TypeError("Can only diff against another BoardState")

        differences = []
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                if self.grid[r][c] != other.grid[r][c]:
                    differences.append((r, c))

        return differences

    def apply_move(self, move: 'Move') -> 'BoardState':
        """
        Apply a capture move to create a new board state.

        The moving piece lands on the target cell (replacing the captured
        piece) and its source cell becomes empty. Original board is unchanged.

        Args:
            move: Move to apply

        Returns:
            New BoardState after the capture
        """
        new_grid = [list(row) for row in self.grid]
        piece = new_grid[move.from_row][move.from_col]

        new_grid[move.from_row][move.from_col] = None
        new_grid[move.to_row][move.to_col] = piece

        return BoardState(grid=tuple(tuple(row) for row in new_grid))

    def with_cell(self, row: int, col: int, piece: Optional[str]) -> 'BoardState':
        """Return a copy with a single cell replaced."""
        new_grid = [list(r) for r in self.grid]
        new_grid[row][col] = piece
        return BoardState(grid=tuple(tuple(r) for r in new_grid))

    def count_pieces(self) -> int:
        """
        Count occupied cells on the board.

        Returns:
            Number of cells holding a piece
        """
        return sum(1 for row in self.grid for cell in row if cell is not None)

    def piece_positions(self) -> List[Tuple[int, int, str]]:
        """List (row, col, piece) for every occupied cell in row-major order."""
        return [
            (r, c, self.grid[r][c])
            for r in range(BOARD_SIZE)
            for c in range(BOARD_SIZE)
            if self.grid[r][c] is not None
        ]

    def empty_cells(self) -> List[Tuple[int, int]]:
        """List (row, col) for every empty cell in row-major order."""
        return [
            (r, c)
            for r in range(BOARD_SIZE)
            for c in range(BOARD_SIZE)
            if self.grid[r][c] is None
        ]

    def get_cell(self, row: int, col: int) -> Optional[str]:
        """
        Get piece at specific cell position.

        Args:
            row: Row index
            col: Column index

        Returns:
            Piece letter, or None if empty or out of range
        """
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            return self.grid[row][col]
        return None

    @property
    def rows(self) -> int:
        """Get number of rows in board."""
        return len(self.grid)

    @property
    def cols(self) -> int:
        """Get number of columns in board."""
        return len(self.grid[0]) if self.rows > 0 else 0

    @property
    def fen(self) -> str:
        """Compact text form of this board."""
        from ..fen import board_to_fen
        return board_to_fen(self)

    def to_list(self) -> List[List[Optional[str]]]:
        """
        Convert to mutable 2D list representation.

        Returns:
            2D list representation of the board
        """
        return [list(row) for row in self.grid]

    def __str__(self) -> str:
        return "\n".join(
            " ".join(cell or "." for cell in row) for row in self.grid
        )
