"""
Board: the 3x3 grid of optional marks.
Teaching notes:
- Slot i holds the mark on Square(i), or None when the square is empty.
- Rotations and flips are fixed permutations of the 9 slots. Every
  transform has a returning form (``rotated_left``, ``flipped_vertically``,
  ``inverse``...) that leaves the board alone and an in-place verb form.
- The integer hash packs each slot into 2 bits (X=00, O=01, empty=10), slot i
  at bits 2i..2i+1. It is also the value of ``hash(board)``.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from .mark import Mark
from .square import ALL_SQUARES, Square

Slot = Optional[Mark]
Key = Union[Square, Tuple[int, int]]

# Checked in order; the first complete line decides the winner.
WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 4, 8), (2, 4, 6),
    (0, 3, 6), (0, 1, 2),
    (1, 4, 7), (3, 4, 5),
    (2, 5, 8), (6, 7, 8),
)

# _LEFT_TURNS[k][i] is the slot that lands on slot i after k left turns.
_LEFT_TURNS: Tuple[Tuple[int, ...], ...] = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8),
    (2, 5, 8, 1, 4, 7, 0, 3, 6),
    (8, 7, 6, 5, 4, 3, 2, 1, 0),
    (6, 3, 0, 7, 4, 1, 8, 5, 2),
)

_HASH_CODES = {Mark.X: 0, Mark.O: 1, None: 2}
_DIGITS = {None: '0', Mark.X: '1', Mark.O: '2'}
_FROM_DIGIT = {'0': None, '1': Mark.X, '2': Mark.O}


class Board:
    """A tic-tac-toe board.

    Boards compare and hash by their slots, so two boards reached by
    different routes are interchangeable. Use ``copy()`` before mutating a
    board that is shared, or prefer the returning transform methods.
    """

    __slots__ = ('_marks',)

    def __init__(self, marks: Optional[Iterable[Slot]] = None) -> None:
        if marks is None:
            self._marks: List[Slot] = [None] * 9
            return
        self._marks = list(marks)
        if len(self._marks) != 9:
            raise ValueError(f"A board needs 9 slots, got {len(self._marks)}")
        if any(mark is not None and not isinstance(mark, Mark) for mark in self._marks):
            raise ValueError("Board slots must hold a Mark or None")

    # -- construction -----------------------------------------------------

    @classmethod
    def from_hash(cls, value: int) -> "Board":
        marks: List[Slot] = [None] * 9
        for i in range(9):
            code = (value >> (i << 1)) & 0b11
            if code == 0:
                marks[i] = Mark.X
            elif code == 1:
                marks[i] = Mark.O
        return cls(marks)

    @classmethod
    def from_grid(cls, rows: Sequence[Sequence[str]]) -> "Board":
        """Build a board from rows of symbols such as ``["x.o", "...", "o.x"]``.

        Only the top-left 3x3 block is read; unknown symbols leave the slot
        empty.
        """
        board = cls()
        for y, row in enumerate(rows[:3]):
            for x, symbol in enumerate(row[:3]):
                board._marks[x + y * 3] = Mark.parse(symbol)
        return board

    @classmethod
    def from_emoji(cls, text: str) -> "Board":
        board = cls()
        lines = [line for line in text.split('\n') if line]
        for y, line in enumerate(lines[:3]):
            for x, char in enumerate(line[:3]):
                board._marks[x + y * 3] = Mark.from_emoji(char)
        return board

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """Parse the 9-digit form (0=empty, 1=X, 2=O), e.g. ``"100020000"``."""
        raw = text.strip()
        if len(raw) != 9 or any(c not in _FROM_DIGIT for c in raw):
            raise ValueError("Invalid board string. Must be 9 chars of 0/1/2.")
        return cls(_FROM_DIGIT[c] for c in raw)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Board":
        flat = np.asarray(array).reshape(-1)
        if flat.shape[0] != 9:
            raise ValueError("array must hold exactly 9 cells")
        digits = [str(int(v)) for v in flat]
        if any(d not in _FROM_DIGIT for d in digits):
            raise ValueError("array cells must be 0, 1 or 2")
        return cls(_FROM_DIGIT[d] for d in digits)

    def copy(self) -> "Board":
        return Board(self._marks)

    # -- access -----------------------------------------------------------

    def __getitem__(self, key: Key) -> Slot:
        if isinstance(key, tuple):
            square = Square.from_xy(*key)
            return None if square is None else self._marks[square]
        return self._marks[Square(key)]

    def __setitem__(self, key: Key, mark: Slot) -> None:
        if isinstance(key, tuple):
            square = Square.from_xy(*key)
            if square is None:
                return
            self._marks[square] = mark
            return
        self._marks[Square(key)] = mark

    def __iter__(self) -> Iterator[Tuple[Square, Slot]]:
        for square in ALL_SQUARES:
            yield square, self._marks[square]

    def has_mark(self, square: Square) -> bool:
        return self._marks[Square(square)] is not None

    def has_mark_at_any(self, squares: Iterable[Square]) -> bool:
        return any(self.has_mark(square) for square in squares)

    # -- queries ----------------------------------------------------------

    @property
    def winner(self) -> Optional[Mark]:
        m = self._marks
        for a, b, c in WIN_LINES:
            mark = m[a]
            if mark is not None and m[b] is mark and m[c] is mark:
                return mark
        return None

    @property
    def is_empty(self) -> bool:
        return all(mark is None for mark in self._marks)

    @property
    def is_full(self) -> bool:
        return all(mark is not None for mark in self._marks)

    @property
    def is_finished(self) -> bool:
        return self.winner is not None or self.is_full

    @property
    def mark_counts(self) -> Tuple[int, int]:
        return self._marks.count(Mark.X), self._marks.count(Mark.O)

    @staticmethod
    def counts_are_valid(x: int, o: int) -> bool:
        # X moves first and the players alternate.
        return x == o or x == o + 1

    @property
    def is_valid(self) -> bool:
        return Board.counts_are_valid(*self.mark_counts)

    @property
    def reflects_horizontally(self) -> bool:
        m = self._marks
        return all(m[row] is m[row + 2] for row in (0, 3, 6))

    @property
    def reflects_vertically(self) -> bool:
        m = self._marks
        return all(m[i] is m[i + 6] for i in range(3))

    @property
    def reflects_horizontally_and_vertically(self) -> bool:
        m = self._marks
        return all(m[i] is m[8 - i] for i in range(4))

    def empty_squares(self) -> Iterator[Square]:
        return (square for square in ALL_SQUARES if self._marks[square] is None)

    def available_squares(self) -> Optional[Iterator[Square]]:
        """Empty squares, or None once the board has a winner."""
        if self.winner is not None:
            return None
        return self.empty_squares()

    def next_boards(self, mark: Mark) -> Iterator["Board"]:
        return (board for board, _ in self.next_boards_with_square(mark))

    def next_boards_with_square(self, mark: Mark) -> Iterator[Tuple["Board", Square]]:
        for square in self.empty_squares():
            board = self.copy()
            board._marks[square] = mark
            yield board, square

    def next_available_boards(self, mark: Mark) -> Optional[Iterator["Board"]]:
        if self.winner is not None:
            return None
        return self.next_boards(mark)

    def next_available_boards_with_square(
        self, mark: Mark
    ) -> Optional[Iterator[Tuple["Board", Square]]]:
        if self.winner is not None:
            return None
        return self.next_boards_with_square(mark)

    # -- transforms -------------------------------------------------------

    def _permuted(self, perm: Sequence[int]) -> "Board":
        m = self._marks
        return Board([m[i] for i in perm])

    def rotated_left(self, count: int = 1) -> "Board":
        # Python's modulo already maps negative counts into 0..3.
        return self._permuted(_LEFT_TURNS[count % 4])

    def rotated_right(self, count: int = 1) -> "Board":
        return self.rotated_left(-count)

    def rotate_left(self, count: int = 1) -> None:
        self._marks = self.rotated_left(count)._marks

    def rotate_right(self, count: int = 1) -> None:
        self._marks = self.rotated_right(count)._marks

    def flip_horizontally(self) -> None:
        m = self._marks
        for row in (0, 3, 6):
            m[row], m[row + 2] = m[row + 2], m[row]

    def flipped_horizontally(self) -> "Board":
        board = self.copy()
        board.flip_horizontally()
        return board

    def flip_vertically(self) -> None:
        m = self._marks
        for i in range(3):
            m[i], m[i + 6] = m[i + 6], m[i]

    def flipped_vertically(self) -> "Board":
        board = self.copy()
        board.flip_vertically()
        return board

    def flip_horizontally_and_vertically(self) -> None:
        m = self._marks
        for i in range(4):
            m[i], m[8 - i] = m[8 - i], m[i]

    def flipped_horizontally_and_vertically(self) -> "Board":
        board = self.copy()
        board.flip_horizontally_and_vertically()
        return board

    def invert(self) -> None:
        self._marks = [None if mark is None else mark.inverse() for mark in self._marks]

    def inverse(self) -> "Board":
        board = self.copy()
        board.invert()
        return board

    # -- encodings --------------------------------------------------------

    @property
    def hash_value(self) -> int:
        result = 0
        for i, mark in enumerate(self._marks):
            result |= _HASH_CODES[mark] << (i << 1)
        return result

    def serialize(self) -> str:
        return ''.join(_DIGITS[mark] for mark in self._marks)

    def to_array(self) -> np.ndarray:
        """Return a (3, 3) int8 array, 0=empty, 1=X, 2=O."""
        return np.array([int(_DIGITS[mark]) for mark in self._marks], dtype=np.int8).reshape(3, 3)

    def render(self, x: str, o: str, none: str, padding: int = 0) -> str:
        symbols = {Mark.X: x, Mark.O: o, None: none}
        sep = ' ' * padding
        rows = []
        for y in range(3):
            rows.append(sep.join(symbols[self._marks[i]] for i in range(y * 3, y * 3 + 3)))
        return '\n'.join(rows)

    @property
    def ascii(self) -> str:
        return self.render('x', 'o', '.', padding=2)

    @property
    def emoji(self) -> str:
        return self.render(Mark.X.emoji, Mark.O.emoji, '\u2b1c')

    # -- dunder -----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        if self._marks is other._marks:
            return True
        return self._marks == other._marks

    def __hash__(self) -> int:
        return self.hash_value

    def __repr__(self) -> str:
        return f"Board.from_string({self.serialize()!r})"

    def __str__(self) -> str:
        return self.ascii
