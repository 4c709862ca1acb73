"""
rules.py - Win detection, turn sequencing and Gymnasium environment for Power4

This module provides:
1. The point win check run after every move
2. GameMaster, the turn controller that drives a game to a win or a draw
3. A gymnasium-compatible environment over the same rules for automated players
"""

from typing import Dict, List, Mapping, Optional, Tuple, Union

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from power4.debug import debug
from power4.game.actors import Actor, Presenter
from power4.game.board import Board, BoardSnapshot
from power4.game.config import Config
from power4.game.errors import GameOverError
from power4.utils import (ROWS, COLS, CONNECT_N, DIRECTION_VECTORS, GameStatus,
                          Player, PlayerId, Position)


def _window(position: Position, dx: int, dy: int, start: int) -> List[Position]:
    """The CONNECT_N cells along (dx, dy) beginning `start` cells before `position`."""
    return [position.shifted(dx, dy, i - start) for i in range(CONNECT_N)]


def _owned(grid: np.ndarray, identity: PlayerId, cells: List[Position]) -> bool:
    return all(cell.within_bounds() and grid[cell.y, cell.x] == identity.value
               for cell in cells)


def winning_line(grid: np.ndarray, identity: PlayerId, position: Position) -> List[Position]:
    """
    Find a run of CONNECT_N cells owned by `identity` that goes through `position`.

    Every direction is tried with each of the CONNECT_N window alignments that
    contain the position. Windows running off the grid never count.

    Args:
        grid: The game grid
        identity: The player who just moved
        position: Where that player's piece landed

    Returns:
        The cells of the first complete window, or an empty list
    """
    for dx, dy in DIRECTION_VECTORS.values():
        for start in range(CONNECT_N):
            cells = _window(position, dx, dy, start)
            if _owned(grid, identity, cells):
                return cells
    return []


def wins_at(grid: np.ndarray, identity: PlayerId, position: Position) -> bool:
    """
    Check whether the piece at `position` completes a run for `identity`.

    Only runs through the given position are looked at, since a move can only
    create a new win through its own cell.
    """
    return bool(winning_line(grid, identity, position))


class GameMaster:
    """
    Turn controller for one game.

    States go AWAITING_MOVE -> WON | DRAW. The board is mutated exactly once
    per accepted move and never after the game is over.
    """

    def __init__(self, config: Config, board: Optional[Board] = None,
                 first: PlayerId = PlayerId.P1):
        debug.debug(f"Initializing GameMaster ({config.mode.name})", "game")
        self.board = board if board is not None else Board()
        self.p1 = config.p1
        self.p2 = config.p2
        self.config = config
        self.turn = first
        self.status = GameStatus.AWAITING_MOVE
        self.winner: Optional[PlayerId] = None
        self.winning_line: Tuple[Position, ...] = ()
        self.last_move: Optional[Position] = None

    @property
    def move_count(self) -> int:
        return self.board.move_count

    @property
    def current_player(self) -> Player:
        return self.config.player(self.turn)

    def is_game_over(self) -> bool:
        return self.status.is_game_over()

    def snapshot(self) -> BoardSnapshot:
        """Read-only view of the board plus whose turn it is and the outcome."""
        return self.board.snapshot(
            current=None if self.is_game_over() else self.turn,
            status=self.status,
            winner=self.winner,
            winning_line=self.winning_line,
        )

    def play(self, position: Position) -> GameStatus:
        """
        Place the current player's piece and advance the state machine.

        Args:
            position: A position obtained from `board.drop`

        Returns:
            The status after the move

        Raises:
            GameOverError: the game already ended
        """
        if self.is_game_over():
            raise GameOverError(f"Game is over ({self.status.name}), no more moves")

        self.board.place(self.turn, position)
        self.last_move = position

        debug.start_timer("win_check")
        line = winning_line(self.board.grid, self.turn, position)
        debug.end_timer("win_check", "rules")

        if line:
            self.status = GameStatus.WON
            self.winner = self.turn
            self.winning_line = tuple(line)
            debug.info(f"{self.turn} wins after move at ({position.y}, {position.x})", "rules")
        elif self.board.is_full():
            self.status = GameStatus.DRAW
            debug.info("Game ends in a draw", "rules")
        else:
            self.turn = self.turn.other()
            debug.debug(f"Switching to player {self.turn}", "rules")

        return self.status

    def play_column(self, column: Union[str, int]) -> Position:
        """
        Drop the current player's piece in a 1-based column.

        Raises:
            MoveError: the column is not playable
            GameOverError: the game already ended
        """
        if self.is_game_over():
            raise GameOverError(f"Game is over ({self.status.name}), no more moves")
        position = self.board.drop(column)
        self.play(position)
        return position

    def run(self, actors: Mapping[PlayerId, Actor],
            presenter: Optional[Presenter] = None) -> BoardSnapshot:
        """
        Play the game to the end.

        Args:
            actors: The actor answering for each identity
            presenter: Receives the board before every move and the result

        Returns:
            The final snapshot, with status WON or DRAW
        """
        debug.info("Here the game begins", "game")
        while not self.is_game_over():
            snapshot = self.snapshot()
            if presenter is not None:
                presenter.show(snapshot)
            player = self.current_player
            position = actors[self.turn].next_move(self.board, snapshot, player)
            self.play(position)

        result = self.snapshot()
        if presenter is not None:
            presenter.show(result)
            presenter.announce(result)
        debug.info(f"Game over after {self.move_count} moves: {self.status.name}", "game")
        return result


class Power4Env(gym.Env):
    """
    Power4 environment following the Gymnasium interface.

    Actions are 0-based columns. The environment plays both sides, so the
    reward is always from the point of view of the player who just moved.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None):
        """
        Initialize the environment.

        Args:
            render_mode: Mode for rendering the environment
        """
        debug.debug("Initializing Power4Env", "env")

        self.action_space = spaces.Discrete(COLS)
        # 6x7 board with 3 possible values (0, 1, 2)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(ROWS, COLS), dtype=np.int8
        )

        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")
        self.render_mode = render_mode
        self.game = GameMaster(Config.multi())

        self.reward_win = 1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Start a new game.

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)
        self.game = GameMaster(Config.multi())

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a piece for the player to move.

        Args:
            action: Column to place a piece (0-indexed)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")

        if (action + 1) not in self.game.board.valid_columns():
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        self.game.play_column(int(action) + 1)

        reward = self.reward_step
        terminated = self.game.is_game_over()
        if self.game.status == GameStatus.WON:
            reward = self.reward_win
        elif self.game.status == GameStatus.DRAW:
            reward = self.reward_draw

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.game.snapshot().render()
        if self.render_mode == "human":
            print(self.game.snapshot().render())
        return None

    def valid_actions(self) -> List[int]:
        """0-based columns that still accept a piece."""
        return [col - 1 for col in self.game.board.valid_columns()]

    def _get_observation(self) -> np.ndarray:
        return self.game.board.grid.copy()

    def _get_info(self) -> Dict:
        valid_moves = self.valid_actions()
        last = self.game.last_move
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.game.turn.value,
            'game_status': self.game.status.name,
            'moves_made': self.game.move_count,
            'winning_line': [(p.y, p.x) for p in self.game.winning_line],
            'last_move': None if last is None else (last.y, last.x),
        }
