"""
Generator Module - Entry point for producing a single puzzle.
"""

import logging
from typing import Optional

from .base import GenerationRequest
from .context import GenerationContext
from .factory import create_strategy
from .puzzle import Puzzle, get_target_band

logger = logging.getLogger(__name__)


def generate_puzzle(
    min_pieces: int = 2,
    max_pieces: int = 8,
    difficulty: Optional[str] = None,
    max_attempts: Optional[int] = 100,
    strategy: Optional[str] = None,
    context: Optional[GenerationContext] = None,
) -> Optional[Puzzle]:
    """
    Generate a solvable puzzle.

    Args:
        min_pieces: Minimum pieces on the board
        max_pieces: Maximum pieces on the board
        difficulty: Target difficulty name (None = first solvable board)
        max_attempts: Cap on sampled candidates (restarts for hill climbing)
        strategy: Strategy name; defaults by difficulty
        context: Random stream and time budget (default: unseeded, unbounded)

    Returns:
        A solvable Puzzle, or None when nothing matched within the budget;
        callers fall back to get_starter_puzzle()
    """
    context = context or GenerationContext.create()
    band = get_target_band(difficulty) if difficulty else None
    request = GenerationRequest(
        min_pieces=min_pieces,
        max_pieces=max_pieces,
        band=band,
        max_attempts=max_attempts,
    )
    generator = create_strategy(strategy, difficulty=difficulty)

    logger.debug(
        f"Generating puzzle: difficulty={difficulty} pieces={min_pieces}-{max_pieces} "
        f"strategy={generator.name}"
    )
    puzzle = generator.generate(request, context)

    if puzzle is None:
        logger.warning(f"No {difficulty or 'solvable'} puzzle found within budget")
    else:
        logger.info(f"Generated {puzzle.fen} (score {puzzle.score}, {puzzle.difficulty})")
    return puzzle
