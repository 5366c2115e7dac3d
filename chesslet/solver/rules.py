"""
Rules Module - Capture-only move generation for every piece type.

Every move must capture: a destination is valid only when it holds a
piece. Sliding pieces (Queen, Rook, Bishop) stop at the first occupied
cell on each ray; that cell is the only capture in that direction.
"""

from typing import Callable, Dict, List, Tuple

from .board import BoardState
from .constants import BOARD_SIZE, KING, QUEEN, ROOK, BISHOP, KNIGHT, PAWN
from .move import Move

Cell = Tuple[int, int]

KING_STEPS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)
ORTHOGONAL_RAYS = ((-1, 0), (1, 0), (0, -1), (0, 1))
DIAGONAL_RAYS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
KNIGHT_JUMPS = (
    (-2, -1), (-2, 1), (-1, -2), (-1, 2),
    (1, -2), (1, 2), (2, -1), (2, 1),
)
# Pawns capture diagonally toward row 0 only
PAWN_CAPTURES = ((-1, -1), (-1, 1))


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def _step_captures(board: BoardState, row: int, col: int,
                   offsets: Tuple[Cell, ...]) -> List[Cell]:
    """Single-step (or jump) captures: target only needs to be occupied."""
    captures = []
    for d_row, d_col in offsets:
        r, c = row + d_row, col + d_col
        if in_bounds(r, c) and board.grid[r][c] is not None:
            captures.append((r, c))
    return captures


def _ray_captures(board: BoardState, row: int, col: int,
                  rays: Tuple[Cell, ...]) -> List[Cell]:
    """Sliding captures: first occupied cell along each ray."""
    captures = []
    for d_row, d_col in rays:
        r, c = row + d_row, col + d_col
        while in_bounds(r, c):
            if board.grid[r][c] is not None:
                captures.append((r, c))
                break
            r += d_row
            c += d_col
    return captures


_CAPTURE_RULES: Dict[str, Callable[[BoardState, int, int], List[Cell]]] = {
    KING: lambda b, r, c: _step_captures(b, r, c, KING_STEPS),
    QUEEN: lambda b, r, c: _ray_captures(b, r, c, ORTHOGONAL_RAYS + DIAGONAL_RAYS),
    ROOK: lambda b, r, c: _ray_captures(b, r, c, ORTHOGONAL_RAYS),
    BISHOP: lambda b, r, c: _ray_captures(b, r, c, DIAGONAL_RAYS),
    KNIGHT: lambda b, r, c: _step_captures(b, r, c, KNIGHT_JUMPS),
    PAWN: lambda b, r, c: _step_captures(b, r, c, PAWN_CAPTURES),
}


def valid_captures(board: BoardState, row: int, col: int) -> List[Cell]:
    """
    Get all valid capture destinations for the piece at a cell.

    Args:
        board: Current board state
        row: Source row
        col: Source column

    Returns:
        List of (row, col) destinations; empty if the cell is empty
        or out of range
    """
    piece = board.get_cell(row, col)
    if piece is None:
        return []
    return _CAPTURE_RULES[piece](board, row, col)


def is_legal_capture(board: BoardState, from_row: int, from_col: int,
                     to_row: int, to_col: int) -> bool:
    """Check whether moving from one cell to another is a valid capture."""
    return (to_row, to_col) in valid_captures(board, from_row, from_col)


def make_move(board: BoardState, from_row: int, from_col: int,
              to_row: int, to_col: int) -> Move:
    """Build a Move record for a capture on this board (no legality check)."""
    return Move(
        from_row=from_row, from_col=from_col,
        to_row=to_row, to_col=to_col,
        piece=board.grid[from_row][from_col],
        captured=board.grid[to_row][to_col],
    )


def execute(board: BoardState, from_row: int, from_col: int,
            to_row: int, to_col: int) -> BoardState:
    """
    Execute a capture and return the new board state.

    Pure transform: the input board is never modified. Legality is
    the caller's responsibility (see is_legal_capture).

    Returns:
        New BoardState with the destination holding the moving piece
        and the source emptied
    """
    return board.apply_move(make_move(board, from_row, from_col, to_row, to_col))


def all_legal_moves(board: BoardState) -> List[Move]:
    """
    Find every legal capture on the board.

    Sources are scanned in row-major order, so the result order is
    deterministic for a given board.

    Args:
        board: Current board state

    Returns:
        List of Move objects
    """
    moves = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if board.grid[row][col] is None:
                continue
            for to_row, to_col in valid_captures(board, row, col):
                moves.append(make_move(board, row, col, to_row, to_col))
    return moves


def is_solved(board: BoardState) -> bool:
    """Puzzle is solved when exactly one piece remains."""
    return board.count_pieces() == 1


def is_stuck(board: BoardState) -> bool:
    """No legal moves remain but more than one piece is on the board."""
    return board.count_pieces() > 1 and not all_legal_moves(board)
