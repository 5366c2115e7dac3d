"""
Test script for the board text format

Usage:
    python tests/test_fen.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from chesslet.fen import (
    FenError,
    board_to_fen,
    fen_to_board,
    fen_to_url,
    url_to_fen,
    is_valid_fen,
)
from chesslet.solver import BoardState


def test_fen_round_trip():
    for fen in ("KQR1/2B1/N3/PP2", "4/4/4/4", "K3/4/4/3Q", "QRNB/4/4/PPKP", "1N2/4/2R1/3K"):
        assert board_to_fen(fen_to_board(fen)) == fen


def test_fen_layout():
    board = fen_to_board("KQR1/2B1/N3/PP2")
    assert board.grid[0] == ("K", "Q", "R", None)
    assert board.grid[1] == (None, None, "B", None)
    assert board.grid[2] == ("N", None, None, None)
    assert board.grid[3] == ("P", "P", None, None)
    assert board.fen == "KQR1/2B1/N3/PP2"
    assert board_to_fen(BoardState.empty()) == "4/4/4/4"


def test_url_safe_variant():
    assert fen_to_url("KQR1/2B1/N3/PP2") == "KQR1-2B1-N3-PP2"
    assert url_to_fen("KQR1-2B1-N3-PP2") == "KQR1/2B1/N3/PP2"
    assert fen_to_board("KQR1-2B1-N3-PP2") == fen_to_board("KQR1/2B1/N3/PP2")


def test_mixed_separators_decode():
    assert fen_to_board("K3-4/4/4") == fen_to_board("K3/4/4/4")
    assert is_valid_fen("KQR1/2B1-N3/PP2")
    assert not is_valid_fen("K3-4/4")


def test_fen_rejects_malformed_text():
    cases = {
        "4/4/4": "expected 4 rows",
        "4/4/4/4/4": "expected 4 rows",
        "4/4/4/X3": "character",
        "4/4/4/k3": "character",
        "4/4/4/5": "character",
        "KQRBN/4/4/4": "has 5 squares",
        "2/4/4/4": "has 2 squares",
        "/4/4/4": "has 0 squares",
    }
    for fen, reason in cases.items():
        try:
            fen_to_board(fen)
        except FenError as e:
            assert reason in str(e), (fen, str(e))
        else:
            raise AssertionError(f"accepted {fen}")
        assert not is_valid_fen(fen)

    assert is_valid_fen("KQR1/2B1/N3/PP2")


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
