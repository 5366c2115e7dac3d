"""
Test script for capture rules

Checks every piece type's capture pattern, blocking on sliding rays,
and the solved/stuck terminal checks.

Usage:
    python tests/test_rules.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from chesslet.fen import fen_to_board
from chesslet.solver import (
    BoardState,
    valid_captures,
    is_legal_capture,
    execute,
    all_legal_moves,
    is_solved,
    is_stuck,
)


def test_king_captures_all_neighbours():
    board = fen_to_board("PPP1/PKP1/PPP1/4")
    captures = valid_captures(board, 1, 1)
    assert len(captures) == 8
    assert (0, 0) in captures and (2, 2) in captures


def test_queen_stops_at_first_piece():
    board = fen_to_board("Q1RR/4/4/4")
    assert valid_captures(board, 0, 0) == [(0, 2)]


def test_rook_rays():
    # Rays are scanned up, down, left, right
    board = fen_to_board("R1N1/4/B3/4")
    assert valid_captures(board, 0, 0) == [(2, 0), (0, 2)]


def test_bishop_blocked_on_diagonal():
    board = fen_to_board("B3/1N2/2R1/4")
    assert valid_captures(board, 0, 0) == [(1, 1)]


def test_knight_jumps_over_pieces():
    board = fen_to_board("N3/K1P1/1Q2/4")
    assert valid_captures(board, 0, 0) == [(1, 2), (2, 1)]


def test_pawn_captures_forward_diagonals_only():
    board = fen_to_board("4/PPP1/1P2/P3")
    # Pawn at (2,1): up-left and up-right, not straight ahead or backwards
    assert valid_captures(board, 2, 1) == [(1, 0), (1, 2)]

    top_row = fen_to_board("P3/1P2/4/4")
    assert valid_captures(top_row, 0, 0) == []
    assert valid_captures(top_row, 1, 1) == [(0, 0)]


def test_empty_and_out_of_range_cells():
    board = fen_to_board("K3/4/4/3Q")
    assert valid_captures(board, 2, 2) == []
    assert valid_captures(board, 5, 5) == []
    assert not is_legal_capture(board, 0, 0, 1, 1)


def test_every_move_is_a_capture():
    board = fen_to_board("KQR1/2B1/N3/PP2")
    moves = all_legal_moves(board)
    assert moves
    for move in moves:
        assert board.get_cell(*move.target) is not None
        assert move.piece == board.get_cell(*move.source)
        assert move.captured == board.get_cell(*move.target)


def test_moves_are_row_major():
    board = fen_to_board("KQ2/4/4/4")
    moves = all_legal_moves(board)
    assert [(m.source, m.target) for m in moves] == [
        ((0, 0), (0, 1)),
        ((0, 1), (0, 0)),
    ]


def test_execute_is_pure():
    board = fen_to_board("KQ2/4/4/4")
    after = execute(board, 0, 0, 0, 1)

    assert board == fen_to_board("KQ2/4/4/4")
    assert after.get_cell(0, 1) == "K"
    assert after.get_cell(0, 0) is None
    assert after.count_pieces() == 1
    assert sorted(board.diff(after)) == [(0, 0), (0, 1)]


def test_solved_and_stuck():
    assert is_solved(fen_to_board("4/1K2/4/4"))
    assert not is_stuck(fen_to_board("4/1K2/4/4"))

    two_pawns = fen_to_board("P3/4/4/3P")
    assert not is_solved(two_pawns)
    assert is_stuck(two_pawns)

    empty = BoardState.empty()
    assert not is_solved(empty)
    assert not is_stuck(empty)


def main():
    """Run all tests."""
    tests = [(name, fn) for name, fn in globals().items() if name.startswith("test_")]
    failed = 0
    for name, fn in tests:
        try:
            fn()
            print(f"  {name}: [PASS]")
        except AssertionError as e:
            failed += 1
            print(f"  {name}: [FAIL] {e}")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
