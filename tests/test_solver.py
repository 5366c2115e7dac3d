"""
Test script for the backtracking solver

Tests:
1. First-solution and all-solutions search
2. Unsolvable and trivially solved boards
3. Hints and move analysis
4. Cancellation through SolutionContext

Usage:
    python tests/test_solver.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from chesslet.fen import fen_to_board
from chesslet.solver import (
    Move,
    SolutionContext,
    all_legal_moves,
    analyze_moves,
    get_hint,
    get_solution,
    is_solvable,
    is_solved,
    move_keeps_solvable,
    solve_puzzle,
)

# Rook takes King then Knight (solved), King takes Rook (dead end),
# or King takes Knight then Rook takes King (solved)
THREE_PATHS_FEN = "RKN1/4/4/4"


def test_king_queen_solves_in_one():
    result = solve_puzzle(fen_to_board("KQ2/4/4/4"))
    assert result.solvable
    assert result.min_moves == 1
    assert len(result.first_solution) == 1
    assert result.metrics.mode == "first"


def test_multi_step_solution():
    board = fen_to_board("Q3/1K2/4/3P")
    result = solve_puzzle(board, find_all=True)
    assert result.solvable
    assert result.min_moves == 2
    for solution in result.solutions:
        assert len(solution) == board.count_pieces() - 1


def test_unsolvable_board():
    result = solve_puzzle(fen_to_board("P3/4/4/3P"), find_all=True)
    assert not result.solvable
    assert result.solution_count == 0
    assert result.dead_ends == 1
    assert result.first_solution is None
    assert result.min_moves == 0


def test_single_piece_is_already_solved():
    board = fen_to_board("4/2K1/4/4")
    result = solve_puzzle(board)
    assert result.solvable
    assert result.min_moves == 0
    assert get_hint(board) is None


def test_empty_board_is_not_solvable():
    assert not is_solvable(fen_to_board("4/4/4/4"))


def test_all_solutions_counts():
    result = solve_puzzle(fen_to_board(THREE_PATHS_FEN), find_all=True)
    assert result.solution_count == 2
    assert result.dead_ends == 1
    # 3 root moves, 1 after RxK, 0 after KxR, 1 after KxN
    assert result.total_branches == 5
    assert result.min_moves == 2 and result.max_moves == 2
    assert result.metrics.mode == "all"


def test_solution_cap():
    board = fen_to_board(THREE_PATHS_FEN)
    assert solve_puzzle(board, find_all=True, max_solutions=1).solution_count == 1
    # First-solution mode ignores the cap
    assert solve_puzzle(board, find_all=False, max_solutions=50).solution_count == 1


def test_solution_lengths_match_piece_count():
    board = fen_to_board("KQR1/2B1/N3/PP2")
    result = solve_puzzle(board, find_all=True, max_solutions=20)
    for solution in result.solutions:
        assert len(solution) == board.count_pieces() - 1


def test_solution_replays_to_single_piece():
    board = fen_to_board("Q3/2N1/4/B2K")
    solution = get_solution(board)
    assert solution is not None
    for move in solution:
        board = board.apply_move(move)
    assert is_solved(board)


def test_hint_is_first_solution_move():
    board = fen_to_board(THREE_PATHS_FEN)
    hint = get_hint(board)
    assert hint == Move(0, 0, 0, 1, "R", "K")
    assert move_keeps_solvable(board, hint)


def test_analyze_moves_partitions_first_moves():
    board = fen_to_board(THREE_PATHS_FEN)
    analysis = analyze_moves(board)
    assert len(analysis.winning) == 2
    assert len(analysis.losing) == 1
    assert analysis.losing[0].source == (0, 1) and analysis.losing[0].target == (0, 0)

    other = fen_to_board("1Q2/2K1/1N1K/4")
    analysis = analyze_moves(other)
    assert len(analysis.winning) + len(analysis.losing) == len(all_legal_moves(other))
    for move in analysis.winning:
        assert is_solvable(other.apply_move(move)) or is_solved(other.apply_move(move))


def test_cancelled_search():
    context = SolutionContext()
    context.cancel()
    result = solve_puzzle(fen_to_board("KQ2/4/4/4"), context=context)
    assert result.was_cancelled
    assert not result.solvable


def test_context_timeout():
    context = SolutionContext(timeout_sec=0.0, start_time=0.0)
    assert context.is_cancelled()
    assert SolutionContext().remaining_time() is None
    assert not SolutionContext(timeout_sec=60).is_cancelled()


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
