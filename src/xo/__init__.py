"""xo package.

Tic-tac-toe state and rules: marks, squares, boards with win detection and
symmetry transforms, and games with undo/redo history.

Convenience imports are exposed for common workflows.
"""

from .board import Board
from .game import ApplyMarkError, Game, HasWinnerError, NonEmptySquareError
from .mark import Mark
from .square import ALL_SQUARES, CORNERS, EDGES, Square
from .symmetry import canonical_form, symmetry_info, transform_board

__all__ = [
    "Mark",
    "Square",
    "ALL_SQUARES",
    "CORNERS",
    "EDGES",
    "Board",
    "Game",
    "ApplyMarkError",
    "NonEmptySquareError",
    "HasWinnerError",
    "canonical_form",
    "symmetry_info",
    "transform_board",
]
