"""
cli.py - Command-line interface for playing Power4

This module provides the terminal side of a game: the setup prompts that
choose the mode and the players, line-based move input and the board
display. The game core never prints; everything user visible is here.
"""

import argparse
import sys
from typing import Dict, List, Optional, TextIO

from power4.ai import make_decider
from power4.debug import debug, DebugLevel, LEVEL_NAMES
from power4.game.actors import Actor, ComputerActor, HumanActor
from power4.game.board import BoardSnapshot
from power4.game.config import Config, Mode
from power4.game.errors import IOFailure, MoveError, Power4Error
from power4.game.rules import GameMaster
from power4.utils import GameStatus, Player, PlayerId

# ANSI color codes for terminal output
COLORS = {
    PlayerId.P1: "\033[1;31m",  # Bold red
    PlayerId.P2: "\033[1;34m",  # Bold blue
    "RESET": "\033[0m"
}

PIECE_CHARS = {"O": PlayerId.P1, "X": PlayerId.P2}


class TerminalInput:
    """Reads one line per request from a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin

    def read_line(self) -> str:
        try:
            line = self.stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise IOFailure(f"Could not read input: {e}") from e
        if not line:
            raise IOFailure("Input closed")
        return line.strip()

    def read_move(self, player: Player) -> str:
        return self.read_line()


class TerminalPresenter:
    """Writes the board, prompts and results to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None, color: bool = False):
        self.stream = stream if stream is not None else sys.stdout
        self.color = color

    def write(self, text: str = "") -> None:
        try:
            self.stream.write(text + "\n")
            self.stream.flush()
        except OSError as e:
            raise IOFailure(f"Could not write output: {e}") from e

    def paint(self, text: str, identity: PlayerId) -> str:
        if not self.color:
            return text
        return f"{COLORS[identity]}{text}{COLORS['RESET']}"

    def show(self, snapshot: BoardSnapshot) -> None:
        board = snapshot.render()
        if self.color:
            lines = []
            for line in board.split("\n"):
                if line.startswith("|") and "+" not in line:
                    line = "".join(self.paint(ch, PIECE_CHARS[ch]) if ch in PIECE_CHARS else ch
                                   for ch in line)
                lines.append(line)
            board = "\n".join(lines)
        self.write()
        self.write(board)
        self.write(" ")

    def prompt(self, player: Player) -> None:
        self.write(f"{self.paint(str(player.nb), player.nb)}, it's your turn.\n"
                   f"Please choose a column.\n")

    def report_error(self, error: MoveError) -> None:
        self.write(f"{error}\nPlease try again.\n")

    def announce(self, result: BoardSnapshot) -> None:
        if result.status == GameStatus.WON:
            self.write(f"Congrats {self.paint(str(result.winner), result.winner)}, you won !\n")
        elif result.status == GameStatus.DRAW:
            self.write("It's a draw !\n")


def ask_mode(terminal: TerminalInput, presenter: TerminalPresenter) -> Mode:
    """Ask for the game mode until a valid answer is given."""
    while True:
        presenter.write("Please, choose your game mode\n"
                        "s: solo player\n"
                        "m: multiplayer\n")
        answer = terminal.read_line()
        try:
            return Mode(answer.lower())
        except ValueError:
            presenter.write(f"\"{answer}\" is an invalid input. Please try again.\n")


def ask_human_player(terminal: TerminalInput, presenter: TerminalPresenter) -> PlayerId:
    """Ask which player number the human takes in solo mode."""
    choices = {"1": PlayerId.P1, "2": PlayerId.P2}
    while True:
        presenter.write("What player do you want to be?\n"
                        "1: player 1\n"
                        "2: player 2\n")
        answer = terminal.read_line()
        if answer in choices:
            return choices[answer]
        presenter.write(f"\"{answer}\" is an invalid input. Please try again.\n")


def run_setup(terminal: TerminalInput, presenter: TerminalPresenter,
              mode: Optional[Mode] = None, human: Optional[PlayerId] = None) -> Config:
    """
    Collect the game configuration, asking only for what was not given.

    Args:
        terminal: Where answers are read from
        presenter: Where questions are written to
        mode: Mode chosen on the command line, if any
        human: Identity of the human in solo mode, if given

    Returns:
        The game configuration
    """
    presenter.write("Welcome to Power4!\n")
    if mode is None:
        mode = ask_mode(terminal, presenter)
    if mode == Mode.MULTI:
        return Config.multi()
    if human is None:
        human = ask_human_player(terminal, presenter)
    return Config.solo(human)


def build_actors(config: Config, terminal: TerminalInput, presenter: TerminalPresenter,
                 ai: str = "first", seed: Optional[int] = None) -> Dict[PlayerId, Actor]:
    """Pair every identity with the actor that provides its moves."""
    human = HumanActor(terminal, presenter)
    actors: Dict[PlayerId, Actor] = {}
    for player in (config.p1, config.p2):
        if player.is_computer:
            actors[player.nb] = ComputerActor(make_decider(ai, seed))
        else:
            actors[player.nb] = human
    return actors


class SimpleCLI:
    """Command-line interface for a Power4 game."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.terminal = TerminalInput(stdin)
        self.stdout = stdout if stdout is not None else sys.stdout
        self.args: Optional[argparse.Namespace] = None

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog='power4',
            description='Power4 - two players, one grid, four in a row wins')
        parser.add_argument('--debug', action='store_true',
                            help='Enable debug mode (equivalent to --debug_level debug)')
        parser.add_argument('--debug_level', choices=list(LEVEL_NAMES), default='error',
                            help='Set debug level: none (silent), error, warning, info, '
                                 'debug, trace (most verbose)')
        parser.add_argument('--log_file', type=str, default=None,
                            help='Also write log records to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')
        play_parser = subparsers.add_parser('play', help='Play a game interactively')
        play_parser.add_argument('--mode', choices=[m.name.lower() for m in Mode],
                                 help='solo (against the computer) or multi (two humans); '
                                      'asked interactively when omitted')
        play_parser.add_argument('--human', type=int, choices=[1, 2],
                                 help='Player number of the human in solo mode')
        play_parser.add_argument('--ai', choices=['first', 'random', 'none'], default='first',
                                 help='Computer strategy: first (leftmost free column), '
                                      'random, none (unavailable)')
        play_parser.add_argument('--seed', type=int, default=None,
                                 help='Seed for the random computer strategy')
        play_parser.add_argument('--color', action='store_true',
                                 help='Color the pieces with ANSI escapes')
        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the CLI.

        Returns:
            Process exit status
        """
        if self.args is None:
            self.parse_args(argv)

        if self.args.command != 'play':
            self.build_parser().print_help(self.stdout)
            return 2

        try:
            self.play_game()
        except IOFailure as e:
            debug.error(f"Fatal I/O failure: {e}", "cli")
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except Power4Error as e:
            debug.error(f"Game aborted: {e}", "cli")
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    def play_game(self) -> BoardSnapshot:
        """Set up and play one game."""
        args = self.args
        presenter = TerminalPresenter(self.stdout, color=getattr(args, 'color', False))
        mode = Mode[args.mode.upper()] if getattr(args, 'mode', None) else None
        human = PlayerId(args.human) if getattr(args, 'human', None) else None

        config = run_setup(self.terminal, presenter, mode, human)
        debug.info(f"Starting {config.mode.name} game", "cli")
        actors = build_actors(config, self.terminal, presenter,
                              ai=getattr(args, 'ai', 'first'), seed=getattr(args, 'seed', None))

        presenter.write("\nHere the game begins !\n")
        return GameMaster(config).run(actors, presenter)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
