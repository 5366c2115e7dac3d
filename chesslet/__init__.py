"""
Chesslet - Solver and generator for a capture-only chess puzzle on a 4x4 board.

Every move must capture a piece; a puzzle is solved when one piece remains.

Subpackages:
    - chesslet.solver: board model, move rules, exhaustive search, difficulty
    - chesslet.generator: random sampling, hill climbing, level sets
"""

__version__ = "1.0.0"
