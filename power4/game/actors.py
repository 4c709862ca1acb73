"""
actors.py - Where moves come from

A game asks the actor of the player whose turn it is for a position.
Humans answer through an InputProvider, automated players through a
Decider. Rejected moves are reported and asked again in a loop.
"""

from typing import Optional, Protocol

from power4.debug import debug
from power4.game.board import Board, BoardSnapshot
from power4.game.errors import DecisionUnavailable, MoveError
from power4.utils import COLS, Player, Position


class InputProvider(Protocol):
    def read_move(self, player: Player) -> str:
        """Return the raw token typed for `player`. Raises IOFailure."""
        ...


class Decider(Protocol):
    def decide(self, snapshot: BoardSnapshot) -> int:
        """Return a 1-based column for the player to move in `snapshot`."""
        ...


class Presenter(Protocol):
    def show(self, snapshot: BoardSnapshot) -> None:
        ...

    def prompt(self, player: Player) -> None:
        ...

    def report_error(self, error: MoveError) -> None:
        ...

    def announce(self, result: BoardSnapshot) -> None:
        ...


class Actor(Protocol):
    def next_move(self, board: Board, snapshot: BoardSnapshot, player: Player) -> Position:
        ...


class HumanActor:
    """Reads tokens until one of them is a playable column."""

    def __init__(self, input_provider: InputProvider, presenter: Optional[Presenter] = None):
        self.input_provider = input_provider
        self.presenter = presenter

    def next_move(self, board: Board, snapshot: BoardSnapshot, player: Player) -> Position:
        if self.presenter is not None:
            self.presenter.prompt(player)
        while True:
            token = self.input_provider.read_move(player)
            try:
                return board.drop(token)
            except MoveError as e:
                debug.debug(f"{player.nb} rejected move {token!r}: {e}", "game")
                if self.presenter is not None:
                    self.presenter.report_error(e)


class ComputerActor:
    """
    Asks a decider for a column.

    A decider that keeps proposing unplayable columns is given up on after
    COLS attempts so a broken strategy cannot hang the game.
    """

    def __init__(self, decider: Decider, max_attempts: int = COLS):
        self.decider = decider
        self.max_attempts = max_attempts

    def next_move(self, board: Board, snapshot: BoardSnapshot, player: Player) -> Position:
        for attempt in range(1, self.max_attempts + 1):
            column = self.decider.decide(snapshot)
            try:
                position = board.drop(column)
            except MoveError as e:
                debug.warning(f"{type(self.decider).__name__} proposed an illegal move "
                              f"(attempt {attempt}): {e}", "ai")
                continue
            debug.info(f"{player.nb} (computer) plays column {position.x + 1}", "ai")
            return position

        raise DecisionUnavailable(
            f"{type(self.decider).__name__} gave no playable column in "
            f"{self.max_attempts} attempts"
        )
