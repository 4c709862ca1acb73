import pytest

from power4.ai import FirstAvailableDecider
from power4.game.actors import ComputerActor, HumanActor
from power4.game.board import Board
from power4.game.config import Config
from power4.game.errors import (ColumnFull, DecisionUnavailable, InvalidInput,
                                IOFailure, OutOfRange)
from power4.game.rules import GameMaster
from power4.utils import ROWS, GameStatus, Player, PlayerId, Position


class ScriptedInput:
    """Hands out prepared tokens, then fails like a closed terminal."""

    def __init__(self, tokens):
        self.tokens = list(tokens)
        self.asked = []

    def read_move(self, player):
        self.asked.append(player.nb)
        if not self.tokens:
            raise IOFailure("Input closed")
        return self.tokens.pop(0)


class RecordingPresenter:
    def __init__(self):
        self.shown = []
        self.prompts = []
        self.errors = []
        self.results = []

    def show(self, snapshot):
        self.shown.append(snapshot)

    def prompt(self, player):
        self.prompts.append(player.nb)

    def report_error(self, error):
        self.errors.append(error)

    def announce(self, result):
        self.results.append(result)


class FixedDecider:
    def __init__(self, *columns):
        self.columns = list(columns)

    def decide(self, snapshot):
        return self.columns.pop(0) if len(self.columns) > 1 else self.columns[0]


P1 = Player(PlayerId.P1)


def test_human_is_asked_again_until_the_move_is_valid():
    board = Board()
    for row in range(ROWS):
        board.place(PlayerId.P1, Position(1, row))
    provider = ScriptedInput(["x", "0", "9", "2", "4"])
    presenter = RecordingPresenter()

    position = HumanActor(provider, presenter).next_move(board, board.snapshot(), P1)

    assert position == Position(3, ROWS - 1)
    assert [type(e) for e in presenter.errors] == [InvalidInput, OutOfRange, OutOfRange,
                                                   ColumnFull]
    assert presenter.prompts == [PlayerId.P1]
    assert provider.asked == [PlayerId.P1] * 5


def test_human_input_failure_propagates():
    board = Board()
    with pytest.raises(IOFailure):
        HumanActor(ScriptedInput(["x"])).next_move(board, board.snapshot(), P1)


def test_computer_retries_after_illegal_column():
    board = Board()
    actor = ComputerActor(FixedDecider(0, 8, 3))
    assert actor.next_move(board, board.snapshot(), P1) == Position(2, ROWS - 1)


def test_computer_gives_up_on_broken_decider():
    board = Board()
    with pytest.raises(DecisionUnavailable):
        ComputerActor(FixedDecider(9)).next_move(board, board.snapshot(), P1)


def test_run_plays_to_a_win():
    presenter = RecordingPresenter()
    provider = ScriptedInput(["1", "2", "x", "1", "2", "1", "2", "1"])
    human = HumanActor(provider, presenter)
    game = GameMaster(Config.multi())

    result = game.run({PlayerId.P1: human, PlayerId.P2: human}, presenter)

    assert result.status == GameStatus.WON
    assert result.winner == PlayerId.P1
    assert result.move_count == 7
    assert presenter.results == [result]
    assert len(presenter.errors) == 1
    assert presenter.prompts == [PlayerId.P1, PlayerId.P2] * 3 + [PlayerId.P1]
    assert [s.move_count for s in presenter.shown] == list(range(8))


def test_run_against_computer():
    provider = ScriptedInput(["4", "4", "4", "4"])
    human = HumanActor(provider)
    computer = ComputerActor(FirstAvailableDecider())
    game = GameMaster(Config.solo(PlayerId.P1))

    result = game.run({PlayerId.P1: human, PlayerId.P2: computer})

    assert result.winner == PlayerId.P1
    assert result.grid[ROWS - 1, 0] == PlayerId.P2.value
    assert provider.asked == [PlayerId.P1] * 4


def test_run_stops_on_input_failure():
    provider = ScriptedInput(["1", "2"])
    human = HumanActor(provider)
    game = GameMaster(Config.multi())
    with pytest.raises(IOFailure):
        game.run({PlayerId.P1: human, PlayerId.P2: human})
    assert game.move_count == 2
    assert game.status == GameStatus.AWAITING_MOVE
