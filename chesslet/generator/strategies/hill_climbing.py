"""
Hill Climbing Strategy - Greedy local search with random restarts for hard boards.

Algorithm:
    1. Start from a random solvable board
    2. Apply one random mutation (swap, relocate, retype, add, remove)
    3. Keep the neighbour only if it is solvable, stays inside the
       requested piece range and scores at least as high as the current
       board (no downhill moves, no temperature)
    4. After local_steps mutations, restart from a fresh random board
    5. Track the best board across restarts until the budget runs out
"""

import logging
from typing import Optional, Tuple

from ..base import GenerationRequest, GenerationStrategy
from ..context import GenerationContext
from ..factory import register_strategy
from ..puzzle import HARD, VERY_HARD, Puzzle
from ..sampling import mutate_board, random_solvable_board, score_board
from ...solver import BoardState

logger = logging.getLogger(__name__)

# Restart cap used when neither a deadline nor max_attempts bounds the run
DEFAULT_MAX_RESTARTS = 20


@register_strategy
class HillClimbingStrategy(GenerationStrategy):
    """
    Hill climbing with random restarts, maximizing weighted difficulty.

    Parameters:
        local_steps: Mutations tried per restart (default 50)
        restart_attempts: Sampling attempts to find a solvable start (default 50)
        early_exit_score: Stop once the best score reaches this (default 95)

    request.max_attempts caps the number of restarts.
    """
    name = "hill_climb"
    description = "Hill climbing - greedy mutations with random restarts"
    default_for = (HARD, VERY_HARD)

    def __init__(self, local_steps: int = 50, restart_attempts: int = 50,
                 early_exit_score: int = 95):
        self.local_steps = local_steps
        self.restart_attempts = restart_attempts
        self.early_exit_score = early_exit_score

    def _accept_neighbor(self, current_score: int, neighbor: BoardState,
                         neighbor_score: Optional[int],
                         request: GenerationRequest) -> bool:
        """
        Greedy acceptance: solvable, inside the piece range and scoring at
        least as high as the current board.
        """
        if neighbor_score is None:
            return False
        if not request.in_piece_range(neighbor.count_pieces()):
            return False
        return neighbor_score >= current_score

    def _climb(self, board: BoardState, score: int, request: GenerationRequest,
               context: GenerationContext) -> Tuple[BoardState, int, int]:
        """
        Run local_steps mutations from one starting board.

        Returns:
            (final board, final score, number of strict improvements)
        """
        improvements = 0
        for _ in range(self.local_steps):
            if context.is_cancelled():
                break
            neighbor = mutate_board(board, context.rng, request.max_pieces)
            neighbor_score = score_board(neighbor, context)
            if self._accept_neighbor(score, neighbor, neighbor_score, request):
                if neighbor_score > score:
                    improvements += 1
                board = neighbor
                score = neighbor_score
        return board, score, improvements

    def generate(self, request: GenerationRequest,
                 context: GenerationContext) -> Optional[Puzzle]:
        max_restarts = request.max_attempts
        if max_restarts is None and context.timeout_sec is None:
            max_restarts = DEFAULT_MAX_RESTARTS

        best_board: Optional[BoardState] = None
        best_score = -1
        restarts = 0
        improvements = 0

        while max_restarts is None or restarts < max_restarts:
            if context.is_cancelled():
                break
            restarts += 1

            current = random_solvable_board(
                request.min_pieces, request.max_pieces, context, self.restart_attempts
            )
            if current is None:
                continue
            current_score = score_board(current, context)
            if current_score is None:
                continue

            current, current_score, gained = self._climb(current, current_score, request, context)
            improvements += gained

            if best_board is None or current_score > best_score:
                best_board = current
                best_score = current_score
                logger.debug(f"[HillClimb] Restart {restarts}: new best score {best_score}")
                if best_score >= self.early_exit_score:
                    break

        logger.info(
            f"[HillClimb] {restarts} restarts, {improvements} improvements, "
            f"best score {best_score if best_board is not None else 'n/a'}"
        )

        if best_board is None or not request.accepts(best_score):
            return None
        return self._finalize(best_board)
