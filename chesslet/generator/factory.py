"""
Strategy Factory Module - Registry of generation strategies keyed by name
and by the difficulties they serve by default.
"""

from typing import Any, Dict, List, Optional, Type

from .base import GenerationStrategy
from .puzzle import DIFFICULTIES


_STRATEGIES: Dict[str, Type[GenerationStrategy]] = {}
# Difficulty name (None = no target) -> strategy name
_DEFAULTS: Dict[Optional[str], str] = {}


def register_strategy(cls: Type[GenerationStrategy]) -> Type[GenerationStrategy]:
    """
    Decorator to register a strategy class.

    Each difficulty in cls.default_for may be claimed by one strategy only.

    Usage:
        @register_strategy
        class MyStrategy(GenerationStrategy):
            name = "my_strategy"
            default_for = ("medium",)

    Raises:
        ValueError: On an unknown difficulty or a difficulty already claimed
    """
    for difficulty in cls.default_for:
        if difficulty is not None and difficulty not in DIFFICULTIES:
            raise ValueError(f"{cls.name}: unknown difficulty {difficulty!r}")
        owner = _DEFAULTS.get(difficulty)
        if owner is not None and owner != cls.name:
            raise ValueError(
                f"{cls.name}: difficulty {difficulty!r} already defaults to {owner}"
            )

    _STRATEGIES[cls.name] = cls
    for difficulty in cls.default_for:
        _DEFAULTS[difficulty] = cls.name
    return cls


def strategy_for_difficulty(difficulty: Optional[str]) -> str:
    """
    Name of the default strategy for a difficulty (None = any solvable board).

    Raises:
        ValueError: If no registered strategy serves the difficulty
    """
    try:
        return _DEFAULTS[difficulty]
    except KeyError as exc:
        raise ValueError(f"No default strategy for difficulty: {difficulty}") from exc


def create_strategy(name: Optional[str] = None, difficulty: Optional[str] = None,
                    **kwargs: Any) -> GenerationStrategy:
    """
    Create a strategy instance by name, or the default for a difficulty.

    Args:
        name: Strategy name (e.g., "random", "hill_climb"); None picks
            the default for difficulty
        difficulty: Target difficulty used when name is None
        **kwargs: Additional arguments passed to strategy constructor

    Raises:
        ValueError: If the strategy name is not registered
    """
    name = name or strategy_for_difficulty(difficulty)
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES)
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")
    return _STRATEGIES[name](**kwargs)


def get_strategy_names() -> List[str]:
    return list(_STRATEGIES)


def describe_strategies() -> str:
    """One line per strategy with the difficulties it serves, for CLI help."""
    lines = []
    for name, cls in _STRATEGIES.items():
        served = ", ".join(d or "any" for d in cls.default_for) or "none"
        lines.append(f"{name}: {cls.description} (default for {served})")
    return "; ".join(lines)
