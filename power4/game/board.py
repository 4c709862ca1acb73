"""
board.py - Board representation and move validation for Power4

This module implements the Board class which owns the grid and the move
counter, turns raw column selections into drop positions and exposes
read-only snapshots for presenters and automated players.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

import numpy as np

from power4.debug import debug
from power4.game.errors import ColumnFull, InvalidInput, OutOfRange
from power4.utils import (ROWS, COLS, NB_TURNS, GameStatus, PlayerId, Position,
                          empty_grid, render_board_ascii)


@dataclass(frozen=True)
class BoardSnapshot:
    """
    Read-only view of a game at one point in time.

    `grid` is a copy flagged non-writeable, so holding on to a snapshot never
    lets anyone mutate the live board.
    """
    grid: np.ndarray
    move_count: int
    current: Optional[PlayerId] = None
    status: Optional[GameStatus] = None
    winner: Optional[PlayerId] = None
    winning_line: Tuple[Position, ...] = field(default_factory=tuple)

    def cell(self, position: Position) -> PlayerId:
        if not position.within_bounds():
            raise ValueError(f"Position {position} is outside the grid")
        return PlayerId(int(self.grid[position.y, position.x]))

    def valid_columns(self) -> List[int]:
        """1-based columns that still accept a piece."""
        return [col + 1 for col in range(COLS) if self.grid[0, col] == PlayerId.EMPTY.value]

    def render(self) -> str:
        return render_board_ascii(self.grid, self.winning_line)


class Board:
    """
    Represents a Power4 game board.

    Cells fill bottom-up per column and are never cleared once occupied.
    """

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a board.

        Args:
            grid: Optional starting grid (mostly for tests); empty by default
        """
        debug.debug("Initializing new Board", "board")
        if grid is None:
            self.grid = empty_grid()
        else:
            if grid.shape != (ROWS, COLS):
                raise ValueError(f"Grid must be {ROWS}x{COLS}")
            self.grid = grid.astype(np.int8, copy=True)
        self.move_count = int(np.count_nonzero(self.grid != PlayerId.EMPTY.value))

    @staticmethod
    def parse_column(column: Union[str, int]) -> int:
        """
        Turn a raw move token into a column number without range checks.

        Raises:
            InvalidInput: the token is not an unsigned decimal integer (one
                leading "+" is allowed)
        """
        if isinstance(column, (int, np.integer)) and not isinstance(column, bool):
            return int(column)

        token = str(column).strip()
        digits = token[1:] if token.startswith("+") else token
        if not digits.isascii() or not digits.isdigit():
            raise InvalidInput(token)
        return int(digits)

    def drop(self, column: Union[str, int]) -> Position:
        """
        Find where a piece dropped in a column would land.

        Args:
            column: 1-based column number, as typed by the player or as an int

        Returns:
            The lowest empty cell of that column

        Raises:
            InvalidInput: the token cannot be parsed as a column number
            OutOfRange: the column is not in [1, COLS]
            ColumnFull: every row of the column is occupied
        """
        col = self.parse_column(column)
        if col < 1 or col > COLS:
            debug.debug(f"Invalid move: column {col} out of bounds", "board")
            raise OutOfRange(col)

        for row in range(ROWS - 1, -1, -1):
            if self.grid[row, col - 1] == PlayerId.EMPTY.value:
                debug.trace(f"Column {col} lands at row {row}", "board")
                return Position(col - 1, row)

        debug.debug(f"Invalid move: column {col} is full", "board")
        raise ColumnFull(col)

    def place(self, identity: PlayerId, position: Position) -> None:
        """
        Mark a cell as occupied by a player.

        Args:
            identity: The player taking the cell
            position: A position previously returned by `drop`
        """
        if identity == PlayerId.EMPTY:
            raise ValueError("Cannot place an empty piece")
        if not position.within_bounds():
            raise ValueError(f"Position {position} is outside the grid")
        if self.grid[position.y, position.x] != PlayerId.EMPTY.value:
            raise ValueError(f"Cell {position} is already occupied")

        self.grid[position.y, position.x] = identity.value
        self.move_count += 1
        debug.trace(f"{identity} placed at ({position.y}, {position.x}), "
                    f"move {self.move_count}", "board")

    def is_full(self) -> bool:
        """True once every cell has been played."""
        return self.move_count == NB_TURNS

    def valid_columns(self) -> List[int]:
        """1-based columns that still accept a piece."""
        return [col + 1 for col in range(COLS) if self.grid[0, col] == PlayerId.EMPTY.value]

    def snapshot(self, **metadata) -> BoardSnapshot:
        """
        Get a read-only snapshot of the board.

        Args:
            **metadata: current, status, winner and winning_line, filled in by
                the game master

        Returns:
            A BoardSnapshot holding a frozen copy of the grid
        """
        grid = self.grid.copy()
        grid.flags.writeable = False
        return BoardSnapshot(grid=grid, move_count=self.move_count, **metadata)

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            String representation of the board
        """
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
