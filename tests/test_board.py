"""
Test script for BoardState

Usage:
    python tests/test_board.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from chesslet.solver import BoardState, Move


def test_board_state():
    """BoardState creation, hashing and queries."""
    board = BoardState.from_pieces([(0, 0, "K"), (0, 1, "Q"), (3, 3, "P")])

    assert board.rows == 4 and board.cols == 4
    assert board.count_pieces() == 3
    assert board.get_cell(0, 1) == "Q"
    assert board.get_cell(2, 2) is None
    assert board.get_cell(7, 0) is None
    assert board.piece_positions() == [(0, 0, "K"), (0, 1, "Q"), (3, 3, "P")]
    assert len(board.empty_cells()) == 13

    same = BoardState.from_2d_list(board.to_list())
    assert board == same
    assert hash(board) == hash(same)
    assert len({board, same}) == 1


def test_board_rejects_bad_shape_and_pieces():
    for bad in ([[None] * 4] * 3, [[None] * 5] * 4):
        try:
            BoardState.from_2d_list(bad)
        except ValueError:
            pass
        else:
            raise AssertionError(f"accepted {bad}")

    try:
        BoardState.from_pieces([(0, 0, "X")])
    except ValueError:
        pass
    else:
        raise AssertionError("accepted unknown piece")


def test_apply_move_is_pure():
    board = BoardState.from_pieces([(0, 0, "K"), (0, 1, "Q"), (2, 2, "N")])
    move = Move(0, 0, 0, 1, "K", "Q")

    after = board.apply_move(move)

    assert board.get_cell(0, 0) == "K" and board.get_cell(0, 1) == "Q"
    assert after.get_cell(0, 0) is None
    assert after.get_cell(0, 1) == "K"
    assert sorted(board.diff(after)) == [(0, 0), (0, 1)]
    assert after.count_pieces() == board.count_pieces() - 1


def test_with_cell_returns_copy():
    board = BoardState.empty()
    placed = board.with_cell(1, 2, "B")
    assert board.count_pieces() == 0
    assert placed.get_cell(1, 2) == "B"


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
