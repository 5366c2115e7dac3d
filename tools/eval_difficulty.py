"""
Diagnostic script to check difficulty scores against expected labels.

Scores a reference table of boards and prints the computed label next
to the expected one, to see whether scores track human difficulty.

Usage:
    python tools/eval_difficulty.py
    python tools/eval_difficulty.py "N2N/1PP1/1PP1/N2N"   # Score specific boards
"""

import sys
import time
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from chesslet.fen import FenError, fen_to_board
from chesslet.generator import evaluate_puzzle, get_difficulty_label

# (fen, expected label, description)
TEST_CASES = [
    ("N2N/1PP1/1PP1/N2N", "very-hard", "4 knights + 4 pawns"),
    ("Q3/4/P3/4", "very-easy", "2 pieces"),
    ("1N2/4/2R1/3K", "very-easy", "3 pieces"),
    ("4/2QR/4/2BN", "very-easy", "4 pieces"),
    ("4/4/Q1K1/3Q", "easy", "queens and king"),
    ("1K2/R2Q/4/4", "medium", "rook, queen, king"),
    ("2R1/1Q2/3Q/N3", "hard", "queens with knight"),
    ("3B/2KK/1K1N/3R", "very-hard", "three kings"),
    ("B1B1/3P/1BR1/N2P", "very-hard", "bishops and pawns"),
    ("PPPP/PPPP/4/4", None, "8 pawns"),
    ("K3/4/4/3K", None, "2 kings diagonal"),
    ("QQQQ/4/4/4", None, "4 queens row"),
]


def evaluate_case(fen: str, expected, label: str) -> dict:
    """
    Score a single board.

    Args:
        fen: Board text
        expected: Expected five-band label, or None if unknown
        label: Description for the table

    Returns:
        Dictionary with the row to print
    """
    try:
        board = fen_to_board(fen)
    except FenError as e:
        return {"fen": fen, "label": label, "error": str(e)}

    start = time.perf_counter()
    puzzle = evaluate_puzzle(board)
    elapsed = (time.perf_counter() - start) * 1000

    if not puzzle.solvable:
        return {"fen": fen, "label": label, "error": "Not solvable"}

    computed = get_difficulty_label(puzzle.score)
    if expected is None:
        match = "N/A"
    else:
        match = "yes" if computed == expected else "no"

    breakdown = puzzle.metrics.difficulty
    return {
        "fen": fen,
        "label": label,
        "score": puzzle.score,
        "computed": computed,
        "expected": expected or "unknown",
        "match": match,
        "min_changes": breakdown.min_piece_changes_for_solution,
        "solutions": breakdown.total_solutions,
        "paths": breakdown.total_paths,
        "time_ms": elapsed,
    }


def print_table(results) -> None:
    print("\n" + "=" * 110)
    print("DIFFICULTY EVALUATION RESULTS")
    print("=" * 110)
    print(f"{'Label':<28}{'FEN':<20}{'Score':<7}{'Computed':<11}{'Expected':<11}"
          f"{'Match':<7}{'MinChg':<8}{'Solns':<8}{'Paths':<8}")
    print("-" * 110)

    for row in results:
        if "error" in row:
            print(f"{row['label']:<28}{row['fen']:<20}{'N/A':<7}{row['error']}")
            continue
        print(f"{row['label']:<28}{row['fen']:<20}{row['score']:<7}{row['computed']:<11}"
              f"{row['expected']:<11}{row['match']:<7}{str(row['min_changes']):<8}"
              f"{row['solutions']:<8}{row['paths']:<8}")

    checked = [r for r in results if r.get("match") in ("yes", "no")]
    matched = sum(1 for r in checked if r["match"] == "yes")
    print("-" * 110)
    print(f"Matched {matched}/{len(checked)} expected labels")


def main():
    if len(sys.argv) > 1:
        cases = [(fen, None, "custom") for fen in sys.argv[1:]]
    else:
        cases = TEST_CASES

    results = [evaluate_case(fen, expected, label) for fen, expected, label in cases]
    print_table(results)


if __name__ == "__main__":
    main()
