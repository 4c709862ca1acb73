"""
utils.py - Constants, enumerations and small helpers shared by Power4

This module holds the board dimensions, player identities, positions and
the ASCII board rendering used by the text presenter.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, List, Optional

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
NB_TURNS = ROWS * COLS


class PlayerId(Enum):
    """Enumeration representing player identities and cell states."""
    EMPTY = 0
    P1 = 1    # First player
    P2 = 2    # Second player

    def other(self) -> 'PlayerId':
        """Get the other player."""
        if self == PlayerId.P1:
            return PlayerId.P2
        elif self == PlayerId.P2:
            return PlayerId.P1
        return PlayerId.EMPTY

    def __str__(self):
        return self.name


class PlayerKind(Enum):
    """Who provides the moves for a player."""
    USER = auto()
    COMPUTER = auto()


class GameStatus(Enum):
    """State of the turn controller."""
    AWAITING_MOVE = auto()
    WON = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameStatus.AWAITING_MOVE


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # Diagonal from top-left to bottom-right
    DIAGONAL_UP = auto()  # Diagonal from bottom-left to top-right


# Direction vectors (dx, dy) for each direction
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (1, 0),
    Direction.VERTICAL: (0, 1),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (1, -1),
}


@dataclass(frozen=True)
class Player:
    """A player identity together with the kind of actor playing it."""
    nb: PlayerId
    kind: PlayerKind = PlayerKind.USER

    @property
    def is_computer(self) -> bool:
        return self.kind == PlayerKind.COMPUTER


@dataclass(frozen=True)
class Position:
    """
    A cell on the grid, x being the column and y the row (0 = top).

    Nothing stops a Position from pointing outside the grid, so callers
    producing one must check `within_bounds` first.
    """
    x: int
    y: int

    def within_bounds(self) -> bool:
        return is_valid_position(self.y, self.x)

    def shifted(self, dx: int, dy: int, steps: int = 1) -> 'Position':
        return Position(self.x + dx * steps, self.y + dy * steps)


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS


def empty_grid() -> np.ndarray:
    """Create a fully empty ROWS x COLS grid."""
    return np.zeros((ROWS, COLS), dtype=np.int8)


def grid_from_rows(rows: Iterable[Iterable[Optional[PlayerId]]]) -> np.ndarray:
    """
    Build a grid from row literals of PlayerId / None values, top row first.

    Args:
        rows: ROWS sequences of COLS cells each

    Returns:
        The grid as a numpy array
    """
    values = [[PlayerId.EMPTY.value if cell is None else cell.value for cell in row]
              for row in rows]
    grid = np.array(values, dtype=np.int8)
    if grid.shape != (ROWS, COLS):
        raise ValueError(f"Grid must be {ROWS}x{COLS}, got {grid.shape[0]}x"
                         f"{grid.shape[1] if grid.ndim > 1 else 0}")
    return grid


PIECES = {
    PlayerId.P1.value: "O",
    PlayerId.P2.value: "X",
}


def render_board_ascii(board: np.ndarray, highlight: Iterable[Position] = ()) -> str:
    """
    Render the board as ASCII art.

    Args:
        board: The game board
        highlight: Positions drawn in brackets (e.g. a winning line)

    Returns:
        ASCII representation of the board
    """
    marked = {(p.y, p.x) for p in highlight}
    separator = "|" + "+".join(["---"] * COLS) + "|"

    result: List[str] = []
    result.append("  " + "   ".join(str(i + 1) for i in range(COLS)) + "  ")
    result.append(separator)
    for row in range(ROWS):
        line = "|"
        for col in range(COLS):
            piece = PIECES.get(int(board[row, col]), " ")
            if (row, col) in marked:
                line += f"[{piece}]|"
            else:
                line += f" {piece} |"
        result.append(line)
        result.append(separator)

    return "\n".join(result)
