"""
Squares of the 3x3 grid.
Teaching notes:
- Squares are numbered 0..8 in row-major order: index = x + 3 * y.
- Names read column letter then row letter, so AA is the top-left corner
  and BB the center.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Optional, Tuple

_LETTERS = 'abc'


class Square(IntEnum):
    AA = 0
    BA = 1
    CA = 2
    AB = 3
    BB = 4
    CB = 5
    AC = 6
    BC = 7
    CC = 8

    def __str__(self) -> str:
        return _LETTERS[self.x] + _LETTERS[self.y]

    @property
    def x(self) -> int:
        return self.value % 3

    @property
    def y(self) -> int:
        return self.value // 3

    @property
    def is_corner(self) -> bool:
        return self.x != 1 and self.y != 1

    @property
    def is_center(self) -> bool:
        return self is Square.BB

    @property
    def is_edge(self) -> bool:
        return (self.x == 1) != (self.y == 1)

    @classmethod
    def from_xy(cls, x: int, y: int) -> Optional["Square"]:
        if not (0 <= x < 3 and 0 <= y < 3):
            return None
        return cls(x + y * 3)

    @classmethod
    def parse(cls, text: str) -> Optional["Square"]:
        """Parse a two-letter name such as ``"bb"`` or a single index digit."""
        raw = text.strip().lower()
        if len(raw) == 1 and raw in "012345678":
            return cls(int(raw))
        if len(raw) == 2 and raw[0] in _LETTERS and raw[1] in _LETTERS:
            return cls.from_xy(_LETTERS.index(raw[0]), _LETTERS.index(raw[1]))
        return None


ALL_SQUARES: Tuple[Square, ...] = tuple(Square)
CORNERS: Tuple[Square, ...] = (Square.AA, Square.CA, Square.AC, Square.CC)
EDGES: Tuple[Square, ...] = (Square.BA, Square.AB, Square.CB, Square.BC)
