"""
Game: a board plus turn tracking and undo/redo history.
Teaching notes:
- X always moves first; the mark to play follows from the number of moves.
- The board is only changed through the game, so it always equals the undo
  history replayed from an empty board.
- A new move after an undo discards the redo history.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from .board import Board
from .mark import Mark
from .square import Square

logger = logging.getLogger(__name__)


class ApplyMarkError(Exception):
    """Raised by ``Game.apply_mark`` when a move is not legal."""


class NonEmptySquareError(ApplyMarkError):
    def __init__(self, square: Square) -> None:
        super().__init__(f"Square {square!s} is already marked")
        self.square = square


class HasWinnerError(ApplyMarkError):
    def __init__(self, mark: Mark) -> None:
        super().__init__(f"Game already won by {mark!s}")
        self.mark = mark


class Game:
    """A tic-tac-toe game.

    Not safe for concurrent mutation; callers sharing a game across threads
    must serialize access themselves.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._board = Board()
        self._undo_history: List[Square] = []
        self._redo_history: List[Square] = []

    @classmethod
    def from_history(cls, history: Iterable[Square]) -> "Game":
        """Replay ``history``, raising the first ``ApplyMarkError`` met."""
        game = cls()
        for square in history:
            game.apply_mark(square)
        return game

    @classmethod
    def from_unchecked_history(cls, history: Iterable[Square]) -> "Game":
        game = cls()
        for square in history:
            game.apply_unchecked_mark(square)
        return game

    @property
    def board(self) -> Board:
        return self._board.copy()

    @property
    def undo_history(self) -> Tuple[Square, ...]:
        return tuple(self._undo_history)

    @property
    def redo_history(self) -> Tuple[Square, ...]:
        return tuple(self._redo_history)

    @property
    def current_mark(self) -> Mark:
        return Mark.X if len(self._undo_history) % 2 == 0 else Mark.O

    @property
    def winner(self) -> Optional[Mark]:
        return self._board.winner

    @property
    def is_finished(self) -> bool:
        return self._board.is_finished

    def available_squares(self) -> List[Square]:
        squares = self._board.available_squares()
        return [] if squares is None else list(squares)

    def apply_unchecked_mark(self, square: Square) -> None:
        mark = self.current_mark
        self._board[square] = mark
        self._undo_history.append(square)
        self._redo_history.clear()
        logger.debug("applied %s at %s", mark, square)

    def apply_mark(self, square: Square) -> None:
        # Occupancy is reported before a stale winner.
        if self._board.has_mark(square):
            raise NonEmptySquareError(square)
        winner = self._board.winner
        if winner is not None:
            raise HasWinnerError(winner)
        self.apply_unchecked_mark(square)

    def square_for_undo(self) -> Optional[Square]:
        return self._undo_history[-1] if self._undo_history else None

    def square_for_redo(self) -> Optional[Square]:
        return self._redo_history[-1] if self._redo_history else None

    def undo(self) -> Optional[Square]:
        """Take back the last move and return its square, or None."""
        if not self._undo_history:
            return None
        square = self._undo_history.pop()
        self._board[square] = None
        self._redo_history.append(square)
        logger.debug("undid %s", square)
        return square

    def redo(self) -> Optional[Square]:
        """Replay the last undone move and return its square, or None."""
        if not self._redo_history:
            return None
        square = self._redo_history.pop()
        self._board[square] = self.current_mark
        self._undo_history.append(square)
        logger.debug("redid %s", square)
        return square

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        if self is other:
            return True
        return (
            self._board == other._board
            and self._undo_history == other._undo_history
            and self._redo_history == other._redo_history
        )

    def __repr__(self) -> str:
        moves = ','.join(str(square) for square in self._undo_history)
        return f"Game(moves={moves!r}, next={self.current_mark})"
