"""
Marks placed by the two players.
Teaching notes:
- There is no "empty" mark. An empty square holds None.
- Parsing never raises: unknown symbols give None.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

_EMOJI = {'x': '\u274c', 'o': '\u2b55'}


class Mark(Enum):
    X = 'x'
    O = 'o'

    def __str__(self) -> str:
        return self.value

    def __invert__(self) -> "Mark":
        return self.inverse()

    def inverse(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X

    @property
    def emoji(self) -> str:
        return _EMOJI[self.value]

    @classmethod
    def parse(cls, text: str) -> Optional["Mark"]:
        """Return the mark for ``"x"``/``"X"`` or ``"o"``/``"O"``, else None."""
        if text in ('X', 'x'):
            return cls.X
        if text in ('O', 'o'):
            return cls.O
        return None

    @classmethod
    def from_emoji(cls, char: str) -> Optional["Mark"]:
        for mark in cls:
            if _EMOJI[mark.value] == char:
                return mark
        return None
