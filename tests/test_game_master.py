import numpy as np
import pytest

from power4.game.board import Board
from power4.game.config import Config, Mode
from power4.game.errors import GameOverError, OutOfRange
from power4.game.rules import GameMaster
from power4.utils import NB_TURNS, GameStatus, PlayerId, PlayerKind, Position, grid_from_rows

# A full-board order with no four-in-a-row anywhere: every column is filled
# with alternating pieces, and the B-first columns are slotted in after one
# move of an A-first column.
DRAW_MOVES = (
    [1] + [3] * 6 + [1] * 5
    + [2] + [4] * 6 + [2] * 5
    + [5] + [7] * 6 + [5] * 5
    + [6] * 6
)


@pytest.fixture
def game():
    return GameMaster(Config.multi())


def test_initial_state(game):
    assert game.turn == PlayerId.P1
    assert game.status == GameStatus.AWAITING_MOVE
    assert game.move_count == 0
    assert game.current_player.nb == PlayerId.P1
    snapshot = game.snapshot()
    assert snapshot.current == PlayerId.P1
    assert snapshot.winner is None


def test_turns_alternate_and_moves_are_counted(game):
    previous = None
    for n, column in enumerate([4, 4, 3, 5, 1, 7], start=1):
        mover = game.turn
        assert mover != previous
        game.play_column(column)
        assert game.move_count == n
        assert game.move_count == np.count_nonzero(game.board.grid)
        assert game.turn == mover.other()
        previous = mover


def test_vertical_win(game):
    for column in [1, 2, 1, 2, 1, 2]:
        assert game.play_column(column) is not None
        assert game.status == GameStatus.AWAITING_MOVE
    position = game.play_column(1)
    assert position == Position(0, 2)
    assert game.status == GameStatus.WON
    assert game.winner == PlayerId.P1
    assert game.turn == PlayerId.P1
    assert len(game.winning_line) == 4

    result = game.snapshot()
    assert result.status == GameStatus.WON
    assert result.winner == PlayerId.P1
    assert result.current is None


def test_second_player_can_win(game):
    for column in [1, 2, 1, 2, 1, 2, 3]:
        game.play_column(column)
    game.play_column(2)
    assert game.status == GameStatus.WON
    assert game.winner == PlayerId.P2


def test_no_moves_after_game_over(game):
    for column in [1, 2, 1, 2, 1, 2, 1]:
        game.play_column(column)
    grid = game.board.grid.copy()
    with pytest.raises(GameOverError):
        game.play_column(3)
    with pytest.raises(GameOverError):
        game.play(Position(4, 5))
    assert (game.board.grid == grid).all()
    assert game.move_count == 7


def test_rejected_move_does_not_advance(game):
    with pytest.raises(OutOfRange):
        game.play_column("8")
    assert game.turn == PlayerId.P1
    assert game.move_count == 0


def test_full_board_without_winner_is_a_draw(game):
    assert len(DRAW_MOVES) == NB_TURNS
    for n, column in enumerate(DRAW_MOVES, start=1):
        mover = game.turn
        status = game.play_column(column)
        if n < NB_TURNS:
            assert status == GameStatus.AWAITING_MOVE
            assert game.turn == mover.other()
    assert game.status == GameStatus.DRAW
    assert game.winner is None
    assert game.board.is_full()


def test_win_on_last_cell_beats_draw():
    A, B = PlayerId.P1, PlayerId.P2
    grid = grid_from_rows([
        [None, A, A, A, B, B, A],
        [A, A, B, B, A, A, B],
        [B, B, A, A, B, B, A],
        [A, A, B, B, A, A, B],
        [B, B, A, A, B, B, A],
        [A, A, B, B, A, A, B],
    ])
    game = GameMaster(Config.multi(), board=Board(grid))
    assert game.move_count == NB_TURNS - 1
    game.play_column(1)
    assert game.board.is_full()
    assert game.status == GameStatus.WON
    assert game.winner == A


def test_config_records():
    multi = Config.multi()
    assert multi.mode == Mode.MULTI
    assert not multi.p1.is_computer and not multi.p2.is_computer

    solo = Config.solo(PlayerId.P2)
    assert solo.mode == Mode.SOLO
    assert solo.p1.kind == PlayerKind.COMPUTER
    assert solo.p2.kind == PlayerKind.USER
    assert solo.player(PlayerId.P2) is solo.p2
    with pytest.raises(ValueError):
        Config.solo(PlayerId.EMPTY)
