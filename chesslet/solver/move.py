"""
Move Module - Represents a single capture on the board.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Move:
    """
    Represents a capture move on the board.

    A move takes the piece on the source cell and lands it on an
    occupied destination cell, removing the piece that was there.

    Attributes:
        from_row: Source row index
        from_col: Source column index
        to_row: Destination row index
        to_col: Destination column index
        piece: Letter of the moving (capturing) piece
        captured: Letter of the piece removed, when known
    """
    from_row: int
    from_col: int
    to_row: int
    to_col: int
    piece: str
    captured: Optional[str] = None

    @property
    def source(self) -> Tuple[int, int]:
        """(row, col) of the moving piece."""
        return (self.from_row, self.from_col)

    @property
    def target(self) -> Tuple[int, int]:
        """(row, col) of the captured piece."""
        return (self.to_row, self.to_col)

    def to_dict(self) -> dict:
        return {
            "from": {"row": self.from_row, "col": self.from_col},
            "to": {"row": self.to_row, "col": self.to_col},
            "piece": self.piece,
            "captured": self.captured,
        }

    def __str__(self) -> str:
        return (
            f"{self.piece}({self.from_row},{self.from_col})"
            f"x({self.to_row},{self.to_col})"
        )
