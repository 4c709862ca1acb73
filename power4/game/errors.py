"""
errors.py - Exceptions raised by the Power4 game core

MoveError subclasses are recoverable: the move loop reports them and asks
the same player again. Everything else ends the game.
"""

from power4.utils import COLS


class Power4Error(Exception):
    """Base class for all game errors."""


class MoveError(Power4Error):
    """A rejected move; the same player should be asked again."""


class InvalidInput(MoveError):
    """The move token is not a column number."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"\"{token}\" is an invalid proposition.")


class OutOfRange(MoveError):
    """The column number is outside the grid."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(
            f"{column} is not a correct column number.\n"
            f"You should choose a number between 1 and {COLS} (included)."
        )


class ColumnFull(MoveError):
    """The target column has no empty cell left."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Column {column} is full. You have to choose another one.")


class IOFailure(Power4Error):
    """The input or output channel failed. Never retried."""


class GameOverError(Power4Error):
    """A move was attempted after the game reached a terminal state."""


class DecisionUnavailable(Power4Error):
    """An automated player could not produce a move."""
