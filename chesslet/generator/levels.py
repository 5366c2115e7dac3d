"""
Levels Module - Assemble an ordered set of unique puzzles of rising difficulty.

Five phases run in order, each with its own piece-count bounds, score
band and time budget. Within a phase the target score ramps linearly
across the band. Hard phases start each level with hill climbing and
refine with random sampling in the remaining time.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Set, Union

from .base import GenerationRequest
from .context import GenerationContext
from .factory import create_strategy
from .puzzle import Puzzle, ScoreBand, get_difficulty_label

logger = logging.getLogger(__name__)

MAX_TRIES_PER_LEVEL = 5
HILL_CLIMB_TIME_SHARE = 0.7
HILL_CLIMB_MAX_SEC = 20.0
# Scores must reach this share of the target to be accepted
MIN_SCORE_SHARE = 0.8
TARGET_TOLERANCE = 2


@dataclass(frozen=True)
class LevelPhase:
    """
    One difficulty phase of a level set.

    Attributes:
        name: Difficulty label of the phase
        min_score: Target score of the first level
        max_score: Target score approached by the last level
        min_pieces: Fewest pieces per board
        max_pieces: Most pieces per board
        time_scale: Multiplier on the base phase timeout
        use_hill_climbing: Seed each level with hill climbing
    """
    name: str
    min_score: int
    max_score: int
    min_pieces: int
    max_pieces: int
    time_scale: float = 1.0
    use_hill_climbing: bool = False


DEFAULT_PHASES = (
    LevelPhase("very-easy", 0, 25, 2, 4),
    LevelPhase("easy", 20, 45, 3, 5),
    LevelPhase("medium", 40, 65, 4, 6),
    LevelPhase("hard", 60, 85, 5, 7, time_scale=1.2, use_hill_climbing=True),
    LevelPhase("very-hard", 80, 100, 6, 8, time_scale=1.5, use_hill_climbing=True),
)


@dataclass(frozen=True)
class Level:
    level: int
    fen: str
    difficulty: str
    score: int
    piece_count: int

    def to_dict(self) -> dict:
        return {
            "level": self.level,
            "fen": self.fen,
            "difficulty": self.difficulty,
            "score": self.score,
            "pieceCount": self.piece_count,
        }


def _closer(candidate: Optional[Puzzle], best: Optional[Puzzle], target: float) -> bool:
    if candidate is None:
        return False
    if best is None:
        return True
    return abs(candidate.score - target) < abs(best.score - target)


def generate_for_target(target: float, phase: LevelPhase,
                        context: GenerationContext) -> Optional[Puzzle]:
    """
    Generate one puzzle aiming at a target score within the context budget.

    Args:
        target: Score to aim for
        phase: Phase supplying piece bounds and strategy choice
        context: Budget for this level

    Returns:
        Best puzzle scoring at least MIN_SCORE_SHARE * target, or None
    """
    min_score = target * MIN_SCORE_SHARE
    best: Optional[Puzzle] = None

    if phase.use_hill_climbing and target >= 70:
        remaining = context.remaining_time()
        budget = HILL_CLIMB_MAX_SEC if remaining is None else min(
            remaining * HILL_CLIMB_TIME_SHARE, HILL_CLIMB_MAX_SEC
        )
        climber = create_strategy("hill_climb")
        best = climber.generate(
            GenerationRequest(
                min_pieces=phase.min_pieces,
                max_pieces=phase.max_pieces,
                max_attempts=None,
                min_score=min_score,
            ),
            context.child(budget),
        )

    sampler = create_strategy("random")
    refined = sampler.generate(
        GenerationRequest(
            min_pieces=phase.min_pieces,
            max_pieces=phase.max_pieces,
            band=ScoreBand(0, 100, target),
            max_attempts=None if context.timeout_sec is not None else 200,
            tolerance=TARGET_TOLERANCE,
            min_score=min_score,
        ),
        context,
    )
    if _closer(refined, best, target):
        best = refined
    return best


def generate_phase(phase: LevelPhase, count: int, phase_timeout_sec: float,
                   used_fens: Set[str], context: GenerationContext) -> List[Puzzle]:
    """
    Generate up to count unique puzzles for one phase.

    Args:
        phase: Phase definition
        count: Levels wanted from this phase
        phase_timeout_sec: Time budget for the whole phase
        used_fens: FENs already taken by the set (updated in place)
        context: Parent budget and random stream

    Returns:
        Puzzles found, possibly fewer than count on timeout
    """
    if count <= 0:
        return []
    phase_context = context.child(phase_timeout_sec)
    per_puzzle_timeout = phase_timeout_sec / count
    puzzles: List[Puzzle] = []

    for i in range(count):
        if phase_context.is_cancelled():
            logger.warning(
                f"[{phase.name}] Timeout reached, got {len(puzzles)}/{count} puzzles"
            )
            break

        target = phase.min_score + (phase.max_score - phase.min_score) * (i / count)
        remaining = max(0.0, phase_context.remaining_time() or 0.0)
        puzzle_timeout = min(per_puzzle_timeout * 2, remaining / (count - i))

        puzzle = None
        for _ in range(MAX_TRIES_PER_LEVEL):
            if phase_context.is_cancelled():
                break
            puzzle = generate_for_target(target, phase, phase_context.child(puzzle_timeout))
            if puzzle is not None and puzzle.fen in used_fens:
                puzzle = None
            if puzzle is not None:
                break

        if puzzle is not None:
            used_fens.add(puzzle.fen)
            puzzles.append(puzzle)
            logger.info(
                f"[{phase.name}] Generated {len(puzzles)}/{count} "
                f"(target: {round(target)}, got: {puzzle.score})"
            )
            context.report_progress(len(puzzles) / count, f"{phase.name}: {puzzle.fen}")

    return puzzles


def generate_level_set(
    levels_per_phase: int = 20,
    phase_timeout_sec: float = 50.0,
    phases=DEFAULT_PHASES,
    context: Optional[GenerationContext] = None,
) -> List[Level]:
    """
    Generate an ordered level set across all phases.

    FENs are unique across the whole set. Accepted puzzles are sorted by
    ascending score and numbered from 1.

    Args:
        levels_per_phase: Levels wanted from each phase
        phase_timeout_sec: Base time budget per phase (scaled per phase)
        phases: Phase definitions, easiest first
        context: Overall budget and random stream

    Returns:
        List of Level records
    """
    context = context or GenerationContext.create()
    used_fens: Set[str] = set()
    puzzles: List[Puzzle] = []

    for phase in phases:
        if context.is_cancelled():
            logger.warning(f"Overall timeout reached before phase {phase.name}")
            break
        logger.info(
            f"Phase {phase.name}: scores {phase.min_score}-{phase.max_score}, "
            f"{phase.min_pieces}-{phase.max_pieces} pieces"
            + (" [hill climbing]" if phase.use_hill_climbing else "")
        )
        puzzles.extend(
            generate_phase(phase, levels_per_phase, phase_timeout_sec * phase.time_scale,
                           used_fens, context)
        )

    puzzles.sort(key=lambda p: p.score)
    levels = [
        Level(
            level=index + 1,
            fen=puzzle.fen,
            difficulty=get_difficulty_label(puzzle.score),
            score=puzzle.score,
            piece_count=puzzle.piece_count,
        )
        for index, puzzle in enumerate(puzzles)
    ]
    logger.info(f"Generated {len(levels)} levels")
    return levels


def get_level(levels: List[Level], level_number: int) -> Optional[Level]:
    """Get a level by its 1-based number, or None if out of range."""
    if level_number < 1 or level_number > len(levels):
        return None
    return levels[level_number - 1]


def write_levels_json(levels: List[Level], path: Union[str, Path]) -> Path:
    """Write levels to a JSON file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps([level.to_dict() for level in levels], indent=2),
                    encoding="utf-8")
    logger.info(f"Saved {len(levels)} levels to {path}")
    return path


def load_levels_json(path: Union[str, Path]) -> List[Level]:
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return [
        Level(
            level=item["level"],
            fen=item["fen"],
            difficulty=item["difficulty"],
            score=item["score"],
            piece_count=item["pieceCount"],
        )
        for item in raw
    ]
