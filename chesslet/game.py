"""
Game Module - Play-session state machine for one capture puzzle.

Tracks the current board, move history and outcome while a player
makes captures. Illegal requests are rejected by returning False (or
None for hints) with no state change; they are not exceptions.

State Flow:
    load/new_puzzle --solvable--> PLAYING --last capture--> WON
                   \\                  \\--no capture left--> STUCK
                    \\--unsolvable--> IMPOSSIBLE
    undo/reset return WON/STUCK sessions to PLAYING.
"""

import logging
from enum import Enum
from typing import List, Optional

from .fen import FenError, board_to_fen, fen_to_board
from .generator import (
    GenerationContext,
    Puzzle,
    evaluate_puzzle,
    generate_puzzle,
    get_starter_puzzle,
    starter_board,
)
from .solver import (
    BoardState,
    Move,
    all_legal_moves,
    get_hint,
    get_solution,
    is_legal_capture,
    is_solved,
    is_stuck,
)
from .solver.rules import make_move as build_move

logger = logging.getLogger(__name__)


__all__ = [
    "GameState",
    "GameSession",
]


class GameState(Enum):
    """
    Session states.

    States:
        PLAYING: Moves are accepted
        WON: One piece left
        STUCK: No capture available with more than one piece left
        IMPOSSIBLE: Starting board has no solution
    """
    PLAYING = "playing"
    WON = "won"
    STUCK = "stuck"
    IMPOSSIBLE = "impossible"


class GameSession:
    """
    Interactive session over a single puzzle.

    Example:
        session = GameSession()
        session.load("K3/4/4/3Q")
        session.make_move(3, 3, 0, 0)   # Queen takes King
        assert session.state is GameState.WON
    """

    # Generation bounds for new_puzzle()
    NEW_PUZZLE_MIN_PIECES = 3
    NEW_PUZZLE_MAX_PIECES = 6
    NEW_PUZZLE_ATTEMPTS = 50

    def __init__(self, context: Optional[GenerationContext] = None):
        """
        Initialize an empty session.

        Args:
            context: Random stream and budget used by new_puzzle()
        """
        self._context = context or GenerationContext.create()
        self._board: Optional[BoardState] = None
        self._initial_board: Optional[BoardState] = None
        self._puzzle: Optional[Puzzle] = None
        self._state = GameState.PLAYING
        self._history: List[Move] = []

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Optional[BoardState]:
        return self._board

    @property
    def puzzle(self) -> Optional[Puzzle]:
        """Evaluation of the starting board."""
        return self._puzzle

    @property
    def move_history(self) -> List[Move]:
        return list(self._history)

    @property
    def last_move(self) -> Optional[Move]:
        return self._history[-1] if self._history else None

    @property
    def pieces_remaining(self) -> int:
        return self._board.count_pieces() if self._board else 0

    @property
    def valid_moves_count(self) -> int:
        return len(all_legal_moves(self._board)) if self._board else 0

    @property
    def current_fen(self) -> Optional[str]:
        return board_to_fen(self._board) if self._board else None

    def _start(self, board: BoardState, puzzle: Puzzle) -> None:
        self._board = board
        self._initial_board = board
        self._puzzle = puzzle
        self._history = []
        self._state = GameState.PLAYING if puzzle.solvable else GameState.IMPOSSIBLE
        logger.info(f"Loaded {puzzle.fen}: state={self._state.value}, score={puzzle.score}")

    def load(self, fen: str) -> bool:
        """
        Load a puzzle from FEN (standard or URL-safe).

        Returns:
            False if the text is malformed (session unchanged)
        """
        try:
            board = fen_to_board(fen)
        except FenError as e:
            logger.warning(f"Failed to load puzzle: {e}")
            return False
        self._start(board, evaluate_puzzle(board))
        return True

    def new_puzzle(self, difficulty: Optional[str] = None) -> str:
        """
        Generate a new puzzle, falling back to a starter preset.

        Returns:
            FEN of the loaded puzzle
        """
        puzzle = generate_puzzle(
            min_pieces=self.NEW_PUZZLE_MIN_PIECES,
            max_pieces=self.NEW_PUZZLE_MAX_PIECES,
            difficulty=difficulty,
            max_attempts=self.NEW_PUZZLE_ATTEMPTS,
            context=self._context,
        )
        if puzzle is None:
            starter = get_starter_puzzle(difficulty, self._context.rng)
            logger.info(f"Falling back to starter puzzle {starter.fen}")
            board = starter_board(starter)
            puzzle = evaluate_puzzle(board)

        self._start(puzzle.board, puzzle)
        return puzzle.fen

    def make_move(self, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
        """
        Attempt a capture.

        Returns:
            True if the capture was applied; False when the session is not
            PLAYING or the capture is illegal
        """
        if self._board is None or self._state is not GameState.PLAYING:
            return False
        if not is_legal_capture(self._board, from_row, from_col, to_row, to_col):
            return False

        move = build_move(self._board, from_row, from_col, to_row, to_col)
        self._board = self._board.apply_move(move)
        self._history.append(move)

        if is_solved(self._board):
            self._state = GameState.WON
        elif is_stuck(self._board):
            self._state = GameState.STUCK
        logger.debug(f"Move {move}: state={self._state.value}")
        return True

    def undo(self) -> bool:
        """
        Undo the last move by replaying history from the starting board.

        Returns:
            False if there is nothing to undo
        """
        if not self._history:
            return False

        self._history.pop()
        board = self._initial_board
        for move in self._history:
            board = board.apply_move(move)
        self._board = board
        self._state = GameState.PLAYING
        return True

    def reset(self) -> None:
        """Return to the starting board."""
        if self._initial_board is None:
            return
        self._board = self._initial_board
        self._history = []
        self._state = (
            GameState.PLAYING if self._puzzle and self._puzzle.solvable
            else GameState.IMPOSSIBLE
        )

    def request_hint(self) -> Optional[Move]:
        """Next move of a solution from the current board, if any."""
        if self._board is None or self._state is not GameState.PLAYING:
            return None
        return get_hint(self._board)

    def get_solution(self) -> Optional[List[Move]]:
        """Full solution from the starting board, or None."""
        if self._initial_board is None:
            return None
        solution = get_solution(self._initial_board)
        return list(solution) if solution is not None else None
