"""
Sampling Module - Random boards, weighted piece selection and board mutations.

Low-mobility pieces are weighted higher so sampled boards lean toward
constrained, harder puzzles:
    Pawn: diagonal-forward captures only
    Knight: L-shape, often lands on empty cells
    King: single step
    Bishop: diagonal sliding
    Rook: orthogonal sliding
    Queen: reaches almost anything
"""

import logging
import random
from typing import Callable, Dict, List, Optional

from ..solver import (
    BoardState,
    BOARD_SIZE,
    SolutionContext,
    calculate_weighted_difficulty,
    is_solvable,
)
from .context import GenerationContext

logger = logging.getLogger(__name__)

PIECE_WEIGHTS: Dict[str, float] = {
    "P": 3.0,
    "N": 2.5,
    "K": 2.0,
    "B": 1.0,
    "R": 0.5,
    "Q": 0.2,
}

MIN_PIECES_AFTER_REMOVE = 2


def weighted_random_piece(rng: random.Random,
                          weights: Optional[Dict[str, float]] = None) -> str:
    """Select a piece letter using weighted probabilities."""
    weights = weights or PIECE_WEIGHTS
    pieces = list(weights)
    return rng.choices(pieces, weights=[weights[p] for p in pieces], k=1)[0]


def random_board(piece_count: int, rng: random.Random,
                 weights: Optional[Dict[str, float]] = None) -> BoardState:
    """
    Place piece_count weighted-random pieces on distinct random cells.

    Args:
        piece_count: Number of pieces (clamped to the cell count)
        rng: Random stream
        weights: Optional piece weights (defaults to PIECE_WEIGHTS)
    """
    cells = [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]
    rng.shuffle(cells)
    placements = [
        (r, c, weighted_random_piece(rng, weights))
        for r, c in cells[:min(piece_count, len(cells))]
    ]
    return BoardState.from_pieces(placements)


def random_piece_count(min_pieces: int, max_pieces: int, rng: random.Random) -> int:
    return rng.randint(min_pieces, max_pieces)


def random_solvable_board(min_pieces: int, max_pieces: int,
                          context: GenerationContext,
                          max_attempts: int = 100) -> Optional[BoardState]:
    """
    Sample boards from the context's random stream until one is solvable.

    Returns:
        A solvable board, or None when attempts or time run out
    """
    rng = context.rng
    for _ in range(max_attempts):
        if context.is_cancelled():
            return None
        board = random_board(random_piece_count(min_pieces, max_pieces, rng), rng)
        if is_solvable(board):
            return board
    logger.debug(f"No solvable board with {min_pieces}-{max_pieces} pieces in {max_attempts} attempts")
    return None


def score_board(board: BoardState,
                context: Optional[SolutionContext] = None) -> Optional[int]:
    """
    Weighted difficulty of a board, for use as a search objective.

    Returns:
        Score in [0, 100], or None if the board is unsolvable or the
        walk was cancelled
    """
    if not is_solvable(board):
        return None
    breakdown = calculate_weighted_difficulty(board, context=context)
    if breakdown.was_cancelled or not breakdown.solvable:
        return None
    return breakdown.weighted_difficulty


# Mutations for hill climbing. Each returns a new board; a mutation that
# does not apply (e.g. remove at the minimum) returns the board unchanged.

def swap_two_pieces(board: BoardState, rng: random.Random, max_pieces: int) -> BoardState:
    pieces = board.piece_positions()
    if len(pieces) < 2:
        return board
    (r1, c1, p1), (r2, c2, p2) = rng.sample(pieces, 2)
    return board.with_cell(r1, c1, p2).with_cell(r2, c2, p1)


def move_piece_to_empty(board: BoardState, rng: random.Random, max_pieces: int) -> BoardState:
    pieces = board.piece_positions()
    empty = board.empty_cells()
    if not pieces or not empty:
        return board
    row, col, piece = rng.choice(pieces)
    to_row, to_col = rng.choice(empty)
    return board.with_cell(row, col, None).with_cell(to_row, to_col, piece)


def change_piece_type(board: BoardState, rng: random.Random, max_pieces: int) -> BoardState:
    pieces = board.piece_positions()
    if not pieces:
        return board
    row, col, _ = rng.choice(pieces)
    return board.with_cell(row, col, weighted_random_piece(rng))


def add_piece(board: BoardState, rng: random.Random, max_pieces: int) -> BoardState:
    empty = board.empty_cells()
    if not empty or board.count_pieces() >= max_pieces:
        return board
    row, col = rng.choice(empty)
    return board.with_cell(row, col, weighted_random_piece(rng))


def remove_piece(board: BoardState, rng: random.Random, max_pieces: int) -> BoardState:
    pieces = board.piece_positions()
    if len(pieces) <= MIN_PIECES_AFTER_REMOVE:
        return board
    row, col, _ = rng.choice(pieces)
    return board.with_cell(row, col, None)


MUTATIONS: List[Callable[[BoardState, random.Random, int], BoardState]] = [
    swap_two_pieces,
    move_piece_to_empty,
    change_piece_type,
    add_piece,
    remove_piece,
]


def mutate_board(board: BoardState, rng: random.Random, max_pieces: int = 8) -> BoardState:
    """Apply one randomly chosen mutation."""
    mutation = rng.choice(MUTATIONS)
    return mutation(board, rng, max_pieces)
