"""
Puzzle Module - Puzzle records, difficulty labels and curated starter boards.
"""

import random
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..fen import board_to_fen, fen_to_board
from ..solver import (
    BoardState,
    PuzzleMetrics,
    SolutionContext,
    UNSOLVABLE_SCORE,
    get_puzzle_metrics,
)


VERY_EASY = "very-easy"
EASY = "easy"
MEDIUM = "medium"
HARD = "hard"
VERY_HARD = "very-hard"

DIFFICULTIES = (VERY_EASY, EASY, MEDIUM, HARD, VERY_HARD)


@dataclass(frozen=True)
class ScoreBand:
    """Inclusive score range with the score a generator aims for."""
    min: int
    max: int
    target: int

    def contains(self, score: int) -> bool:
        return self.min <= score <= self.max


TARGET_BANDS: Dict[str, ScoreBand] = {
    VERY_EASY: ScoreBand(0, 19, 10),
    EASY: ScoreBand(0, 29, 15),
    MEDIUM: ScoreBand(30, 59, 45),
    HARD: ScoreBand(60, 100, 80),
    VERY_HARD: ScoreBand(70, 100, 90),
}


def get_target_band(difficulty: str) -> ScoreBand:
    try:
        return TARGET_BANDS[difficulty]
    except KeyError as exc:
        available = ", ".join(TARGET_BANDS)
        raise ValueError(f"Unknown difficulty: {difficulty}. Available: {available}") from exc


def get_difficulty_level(score: int) -> str:
    """Three-band label used for single generated puzzles."""
    if score < 30:
        return EASY
    if score < 60:
        return MEDIUM
    return HARD


def get_difficulty_label(score: int) -> str:
    """Five-band label used for level sets."""
    if score < 20:
        return VERY_EASY
    if score < 35:
        return EASY
    if score < 50:
        return MEDIUM
    if score < 70:
        return HARD
    return VERY_HARD


@dataclass(frozen=True)
class Puzzle:
    """
    An evaluated starting board.

    Attributes:
        board: Starting board
        fen: Text form of the board
        solvable: True if the board can be reduced to one piece
        score: Weighted difficulty, or UNSOLVABLE_SCORE
        difficulty: Three-band label (None when unsolvable or unscored)
        metrics: Full solver/difficulty statistics
    """
    board: BoardState
    fen: str
    solvable: bool
    score: int
    difficulty: Optional[str]
    metrics: PuzzleMetrics

    @property
    def piece_count(self) -> int:
        return self.metrics.piece_count

    def to_dict(self) -> dict:
        return {
            "fen": self.fen,
            "solvable": self.solvable,
            "score": self.score,
            "difficulty": self.difficulty,
            "metrics": self.metrics.to_dict(),
        }


def evaluate_puzzle(board: BoardState,
                    context: Optional[SolutionContext] = None) -> Puzzle:
    """
    Evaluate the difficulty of an existing board.

    Unsolvable boards are a valid outcome: solvable=False,
    score=UNSOLVABLE_SCORE, difficulty=None. A board whose difficulty
    walk was cancelled keeps its solvable flag but gets no score or label.
    """
    metrics = get_puzzle_metrics(board, context)
    scored = metrics.solvable and not metrics.difficulty.was_cancelled
    score = metrics.weighted_difficulty if scored else UNSOLVABLE_SCORE
    return Puzzle(
        board=board,
        fen=board_to_fen(board),
        solvable=metrics.solvable,
        score=score,
        difficulty=get_difficulty_level(score) if scored else None,
        metrics=metrics,
    )


@dataclass(frozen=True)
class StarterPuzzle:
    fen: str
    difficulty: str


# Known-good boards used when generation finds nothing in its budget
STARTER_PUZZLES: List[StarterPuzzle] = [
    # Easy (2-3 pieces)
    StarterPuzzle("K3/4/4/3Q", EASY),
    StarterPuzzle("R3/4/4/R3", EASY),
    StarterPuzzle("N3/4/1N2/4", EASY),
    StarterPuzzle("Q3/4/4/3P", EASY),
    # Medium (3-4 pieces)
    StarterPuzzle("RB2/4/4/2QK", MEDIUM),
    StarterPuzzle("N2B/4/K3/3R", MEDIUM),
    StarterPuzzle("Q3/2N1/4/B2K", MEDIUM),
    StarterPuzzle("K2R/4/2B1/N3", MEDIUM),
    # Hard (5+ pieces)
    StarterPuzzle("QRNB/4/4/PPKP", HARD),
    StarterPuzzle("K2Q/NB2/2R1/P2P", HARD),
    StarterPuzzle("RNB1/P3/2Q1/K2P", HARD),
    StarterPuzzle("QKRB/P3/2N1/3P", HARD),
]


def get_starter_puzzle(difficulty: Optional[str] = None,
                       rng: Optional[random.Random] = None) -> StarterPuzzle:
    """
    Pick a curated starter puzzle, optionally filtered by difficulty.

    Very-easy and very-hard requests map to the easy and hard presets.
    """
    rng = rng or random.Random()
    if difficulty == VERY_EASY:
        difficulty = EASY
    elif difficulty == VERY_HARD:
        difficulty = HARD

    candidates = STARTER_PUZZLES
    if difficulty:
        candidates = [p for p in STARTER_PUZZLES if p.difficulty == difficulty] or STARTER_PUZZLES
    return rng.choice(candidates)


def starter_board(starter: StarterPuzzle) -> BoardState:
    return fen_to_board(starter.fen)
