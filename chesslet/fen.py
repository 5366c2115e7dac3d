"""
FEN Module - Compact text encoding for 4x4 capture-puzzle boards.

Format:
    - Four rows separated by '/' (or '-' in the URL-safe variant)
    - Pieces: K=King, Q=Queen, R=Rook, B=Bishop, N=Knight, P=Pawn
    - Digits 1-4 stand for that many consecutive empty cells

Example: "KQR1/2B1/N3/PP2"
    Row 0: King, Queen, Rook, empty
    Row 1: empty, empty, Bishop, empty
    Row 2: Knight, empty, empty, empty
    Row 3: Pawn, Pawn, empty, empty
"""

from typing import List, Optional

from .solver.board import BoardState
from .solver.constants import BOARD_SIZE, PIECES

ROW_SEPARATOR = "/"
URL_ROW_SEPARATOR = "-"


class FenError(ValueError):
    """Raised when board text cannot be decoded."""


def board_to_fen(board: BoardState) -> str:
    """
    Convert a board to its text form.

    Args:
        board: Board to encode

    Returns:
        FEN string with '/' separators
    """
    rows = []
    for row in board.grid:
        row_str = ""
        empty_count = 0
        for piece in row:
            if piece is None:
                empty_count += 1
                continue
            if empty_count:
                row_str += str(empty_count)
                empty_count = 0
            row_str += piece
        if empty_count:
            row_str += str(empty_count)
        rows.append(row_str)
    return ROW_SEPARATOR.join(rows)


def fen_to_board(fen: str) -> BoardState:
    """
    Convert text (standard or URL-safe) to a board.

    Every '-' is read as a row separator before decoding, so mixed
    separators such as "K3-4/4/4" decode like "K3/4/4/4".

    Args:
        fen: FEN string

    Returns:
        Decoded BoardState

    Raises:
        FenError: On wrong row count, unknown characters or a row that
            does not decode to exactly BOARD_SIZE cells
    """
    rows = url_to_fen(fen).split(ROW_SEPARATOR)
    if len(rows) != BOARD_SIZE:
        raise FenError(f"Invalid FEN: expected {BOARD_SIZE} rows, got {len(rows)}")

    grid: List[List[Optional[str]]] = []
    for index, row_str in enumerate(rows):
        cells: List[Optional[str]] = []
        for char in row_str:
            if char in PIECES:
                cells.append(char)
            elif char in "1234":
                cells.extend([None] * int(char))
            else:
                raise FenError(f"Invalid FEN character: {char!r}")
        if len(cells) != BOARD_SIZE:
            raise FenError(
                f"Invalid FEN: row {index} has {len(cells)} squares, expected {BOARD_SIZE}"
            )
        grid.append(cells)

    return BoardState.from_2d_list(grid)


def fen_to_url(fen: str) -> str:
    """Convert standard FEN to the URL-safe form."""
    return fen.replace(ROW_SEPARATOR, URL_ROW_SEPARATOR)


def url_to_fen(url_fen: str) -> str:
    """Convert URL-safe FEN back to the standard form."""
    return url_fen.replace(URL_ROW_SEPARATOR, ROW_SEPARATOR)


def is_valid_fen(fen: str) -> bool:
    try:
        fen_to_board(fen)
    except FenError:
        return False
    return True
