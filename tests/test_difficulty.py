"""
Test script for weighted difficulty scoring and puzzle metrics

Usage:
    python tests/test_difficulty.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from chesslet.fen import fen_to_board
from chesslet.solver import (
    SolutionContext,
    UNSOLVABLE_SCORE,
    all_legal_moves,
    calculate_weighted_difficulty,
    enumerate_paths,
    get_puzzle_metrics,
)
from chesslet.solver.difficulty import score_from_ratio

THREE_PATHS_FEN = "RKN1/4/4/4"


def test_trivial_board_scores_zero():
    breakdown = calculate_weighted_difficulty(fen_to_board("KQ2/4/4/4"))
    # King takes Queen and Queen takes King both win
    assert breakdown.total_paths == 2
    assert breakdown.total_solutions == 2
    assert breakdown.weighted_solution_ratio == 1.0
    assert breakdown.weighted_difficulty == 0
    assert breakdown.min_piece_changes_for_solution == 0


def test_single_piece_scores_zero():
    breakdown = calculate_weighted_difficulty(fen_to_board("4/4/2B1/4"))
    assert breakdown.total_paths == 1
    assert breakdown.weighted_difficulty == 0


def test_unsolvable_board_gets_sentinel():
    breakdown = calculate_weighted_difficulty(fen_to_board("P3/4/4/3P"))
    assert breakdown.weighted_difficulty == UNSOLVABLE_SCORE
    assert breakdown.total_solutions == 0
    assert breakdown.total_paths == 1
    assert not breakdown.solvable


def test_piece_changes_are_counted_per_path():
    paths = enumerate_paths(fen_to_board(THREE_PATHS_FEN))
    summary = [(p.length, p.piece_changes, p.is_solution) for p in paths]
    assert summary == [
        (2, 0, True),   # RxK, RxN
        (1, 0, False),  # KxR
        (2, 1, True),   # KxN, RxK
    ]


def test_weighted_score():
    breakdown = calculate_weighted_difficulty(fen_to_board(THREE_PATHS_FEN))
    # Weights: 1 + 1 (dead end) + 0.2 = 2.2 total, 1.2 solving
    assert abs(breakdown.total_weighted_paths - 2.2) < 1e-9
    assert abs(breakdown.total_weighted_solutions - 1.2) < 1e-9
    assert abs(breakdown.raw_solution_ratio - 2 / 3) < 1e-9
    assert breakdown.weighted_difficulty == 45
    assert breakdown.min_piece_changes_for_solution == 0
    assert breakdown.max_piece_changes_for_solution == 1


def test_decay_parameter():
    # With no decay every path weighs 1: 2 of 3 solve
    breakdown = calculate_weighted_difficulty(fen_to_board(THREE_PATHS_FEN), decay=1.0)
    assert breakdown.weighted_difficulty == 33


def test_score_rounding_and_clamping():
    assert score_from_ratio(1.0) == 0
    assert score_from_ratio(0.0) == 100
    assert score_from_ratio(0.5) == 50
    assert score_from_ratio(0.125) == 88
    assert score_from_ratio(-0.5) == 100
    assert score_from_ratio(1.5) == 0


def test_scores_stay_in_range():
    for fen in ("KQR1/2B1/N3/PP2", "RB2/4/4/2QK", "N2B/4/K3/3R", "Q3/2N1/4/B2K"):
        score = calculate_weighted_difficulty(fen_to_board(fen)).weighted_difficulty
        assert score == UNSOLVABLE_SCORE or 0 <= score <= 100, (fen, score)


def test_cancelled_walk():
    context = SolutionContext()
    context.cancel()
    breakdown = calculate_weighted_difficulty(fen_to_board(THREE_PATHS_FEN), context=context)
    assert breakdown.was_cancelled
    assert breakdown.weighted_difficulty == UNSOLVABLE_SCORE


def test_puzzle_metrics():
    metrics = get_puzzle_metrics(fen_to_board(THREE_PATHS_FEN))
    assert metrics.piece_count == 3
    assert metrics.solvable
    assert metrics.solution_count == 2
    assert metrics.initial_move_count == 3
    assert metrics.good_first_moves == 2
    assert metrics.bad_first_moves == 1
    assert abs(metrics.trap_ratio - 1 / 3) < 1e-9
    assert metrics.weighted_difficulty == 45

    data = metrics.to_dict()
    assert data["weightedDifficulty"] == 45
    assert data["goodFirstMoves"] == 2


def test_first_moves_partition():
    for fen in ("KQR1/2B1/N3/PP2", "1Q2/2K1/1N1K/4", "P3/4/4/3P"):
        board = fen_to_board(fen)
        metrics = get_puzzle_metrics(board)
        assert metrics.good_first_moves + metrics.bad_first_moves == len(all_legal_moves(board))


def test_unsolvable_metrics():
    metrics = get_puzzle_metrics(fen_to_board("P3/4/4/3P"))
    assert not metrics.solvable
    assert metrics.initial_move_count == 0
    assert metrics.trap_ratio == 0.0
    assert metrics.weighted_difficulty == UNSOLVABLE_SCORE


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
