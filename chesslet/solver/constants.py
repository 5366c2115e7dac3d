"""
Constants Module - Fixed board geometry and piece definitions.
"""

from typing import Dict, Tuple

BOARD_SIZE = 4
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

KING = "K"
QUEEN = "Q"
ROOK = "R"
BISHOP = "B"
KNIGHT = "N"
PAWN = "P"

PIECES: Tuple[str, ...] = (KING, QUEEN, ROOK, BISHOP, KNIGHT, PAWN)

PIECE_NAMES: Dict[str, str] = {
    KING: "King",
    QUEEN: "Queen",
    ROOK: "Rook",
    BISHOP: "Bishop",
    KNIGHT: "Knight",
    PAWN: "Pawn",
}

# Decay per piece change: linear=1.0, 1 change=0.2, 2 changes=0.04
PIECE_CHANGE_DECAY = 0.2

UNSOLVABLE_SCORE = -1
