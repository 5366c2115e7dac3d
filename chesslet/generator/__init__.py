"""
Generator Package - Manufacture capture puzzles of a target difficulty.

Public API:
    - generate_puzzle(): Single puzzle for a difficulty band
    - generate_level_set(): Ordered, unique level set across five phases
    - GenerationContext: Seeded random stream plus time budget
    - Puzzle / evaluate_puzzle(): Evaluated board record
    - get_starter_puzzle(): Curated fallback when generation finds nothing
    - create_strategy() / get_strategy_names(): Strategy registry

Usage:
    from chesslet.generator import GenerationContext, generate_puzzle

    context = GenerationContext.create(seed=7, timeout_sec=10)
    puzzle = generate_puzzle(difficulty="medium", context=context)
    if puzzle is None:
        starter = get_starter_puzzle("medium", context.rng)
"""

from .context import GenerationContext
from .puzzle import (
    Puzzle,
    ScoreBand,
    StarterPuzzle,
    STARTER_PUZZLES,
    TARGET_BANDS,
    DIFFICULTIES,
    VERY_EASY,
    EASY,
    MEDIUM,
    HARD,
    VERY_HARD,
    evaluate_puzzle,
    get_difficulty_level,
    get_difficulty_label,
    get_starter_puzzle,
    get_target_band,
    starter_board,
)
from .base import GenerationRequest, GenerationStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    describe_strategies,
    strategy_for_difficulty,
    register_strategy,
)
from .generator import generate_puzzle
from .levels import (
    Level,
    LevelPhase,
    DEFAULT_PHASES,
    generate_level_set,
    get_level,
    write_levels_json,
    load_levels_json,
)

# Import strategies to register them
from . import strategies

__all__ = [
    "GenerationContext",
    "Puzzle",
    "ScoreBand",
    "StarterPuzzle",
    "STARTER_PUZZLES",
    "TARGET_BANDS",
    "DIFFICULTIES",
    "VERY_EASY",
    "EASY",
    "MEDIUM",
    "HARD",
    "VERY_HARD",
    "evaluate_puzzle",
    "get_difficulty_level",
    "get_difficulty_label",
    "get_starter_puzzle",
    "get_target_band",
    "starter_board",
    "GenerationRequest",
    "GenerationStrategy",
    "create_strategy",
    "get_strategy_names",
    "describe_strategies",
    "strategy_for_difficulty",
    "register_strategy",
    "generate_puzzle",
    "Level",
    "LevelPhase",
    "DEFAULT_PHASES",
    "generate_level_set",
    "get_level",
    "write_levels_json",
    "load_levels_json",
]
