"""
Random Sampling Strategy - Independent weighted-random boards, best match wins.
"""

import logging
from typing import Optional

from ..base import GenerationRequest, GenerationStrategy
from ..context import GenerationContext
from ..factory import register_strategy
from ..puzzle import EASY, MEDIUM, VERY_EASY, Puzzle
from ..sampling import random_board, random_piece_count, score_board
from ...solver import BoardState

logger = logging.getLogger(__name__)


@register_strategy
class RandomSamplingStrategy(GenerationStrategy):
    """
    Sample random boards and keep the one closest to the target score.

    Unsolvable candidates are rejected by a first-solution search before
    any scoring. Stops on a match within the request tolerance, when
    attempts run out, or at the context deadline.
    """
    name = "random"
    description = "Random sampling - weighted random boards, keep closest score"
    default_for = (None, VERY_EASY, EASY, MEDIUM)

    def generate(self, request: GenerationRequest,
                 context: GenerationContext) -> Optional[Puzzle]:
        rng = context.rng
        best_board: Optional[BoardState] = None
        best_distance = float("inf")
        attempts = 0

        while request.max_attempts is None or attempts < request.max_attempts:
            if context.is_cancelled():
                logger.debug(f"[Random] Budget exhausted after {attempts} attempts")
                break
            attempts += 1

            board = random_board(
                random_piece_count(request.min_pieces, request.max_pieces, rng), rng
            )
            score = score_board(board, context)
            if score is None:
                continue

            if request.band is None and request.min_score is None:
                logger.debug(f"[Random] First solvable board after {attempts} attempts")
                return self._finalize(board)

            if not request.accepts(score):
                continue

            distance = request.distance(score)
            if distance < best_distance:
                best_distance = distance
                best_board = board

            if best_distance <= request.tolerance:
                break

        if best_board is None:
            logger.debug(f"[Random] No match in {attempts} attempts")
        return self._finalize(best_board)
