"""
cli.py - Command-line interface for playing Connect Four

Provides the console input provider and display used by human games, the
session menu (human vs human, human vs computer, exit) and argument parsing.
"""

import argparse
import sys
from typing import Callable, List, Optional, TextIO

from connect4.debug import debug, DebugLevel
from connect4.exceptions import SessionClosed, TurnLimitError
from connect4.game.board import Board
from connect4.game.engine import GameEngine
from connect4.players import ComputerPlayer, HumanPlayer, MoveStatus
from connect4.utils import DEFAULT_SYMBOLS, MAX_TURN_ERRORS, GameResult

MENU_TEXT = """
=== Connect Four ===
1. Human vs Human
2. Human vs Computer
3. Exit"""

MODES = {'1': 'hvh', '2': 'hvc', '3': 'exit'}


def non_negative_int(value: str) -> int:
    """argparse type for counts where 0 means unlimited."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


class ConsoleInput:
    """Reads column choices from a console-like input function."""

    def __init__(self, input_fn: Callable[[str], str] = input, out: Optional[TextIO] = None):
        self.input_fn = input_fn
        self.out = out or sys.stdout

    def request_column(self, prompt: str) -> str:
        try:
            return self.input_fn(prompt)
        except EOFError as e:
            raise SessionClosed("Input closed") from e

    def reject(self, status: MoveStatus, message: str) -> None:
        print(message, file=self.out)


class ConsoleDisplay:
    """Prints boards and announcements."""

    def __init__(self, out: Optional[TextIO] = None):
        self.out = out or sys.stdout

    def render(self, board: Board) -> None:
        print(file=self.out)
        print(board.render(), file=self.out)

    def announce(self, message: str) -> None:
        print(message, file=self.out)


class SimpleCLI:
    """Command-line front end: picks a pairing and runs games."""

    def __init__(self, input_fn: Callable[[str], str] = input, out: Optional[TextIO] = None):
        self.input_fn = input_fn
        self.out = out or sys.stdout
        self.console_input = ConsoleInput(input_fn, self.out)
        self.display = ConsoleDisplay(self.out)
        self.args: Optional[argparse.Namespace] = None

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level')
        parser.add_argument('--log-file', default=None, help='Also write logs to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a game')
        play_parser.add_argument('--mode', choices=['menu', 'hvh', 'hvc'], default='menu',
                                 help='Pairing to play; "menu" asks interactively')
        play_parser.add_argument('--name1', default='Player 1', help='Name of the first player')
        play_parser.add_argument('--name2', default=None, help='Name of the second player')
        play_parser.add_argument('--seed', type=int, default=None,
                                 help='Random seed for the computer player')
        play_parser.add_argument('--max-turn-errors', type=non_negative_int,
                                 default=MAX_TURN_ERRORS,
                                 help='Abort after this many failed turns in a row (0 = never)')

        # Running with no command opens the menu
        parser.set_defaults(command='play', mode='menu', name1='Player 1', name2=None,
                            seed=None, max_turn_errors=MAX_TURN_ERRORS)
        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments and configure logging."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

        return self.args

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI; returns a process exit code."""
        if argv is not None or self.args is None:
            self.parse_args(argv)

        try:
            if self.args.mode == 'menu':
                self.menu_loop()
            else:
                self.play(self.args.mode)
        except SessionClosed:
            print("\nInput closed. Goodbye!", file=self.out)
        except TurnLimitError as e:
            debug.error(str(e), "cli")
            print(f"Game aborted: {e}", file=self.out)
            return 1
        return 0

    def menu_loop(self) -> None:
        """Offer pairings until the user chooses to exit."""
        while True:
            print(MENU_TEXT, file=self.out)
            try:
                choice = self.input_fn("Select an option: ").strip()
            except EOFError as e:
                raise SessionClosed("Input closed") from e

            mode = MODES.get(choice)
            if mode is None:
                print("Invalid choice. Please enter 1, 2 or 3.", file=self.out)
            elif mode == 'exit':
                print("Goodbye!", file=self.out)
                return
            else:
                self.play(mode)

    def create_engine(self, mode: str) -> GameEngine:
        """Build an engine for 'hvh' or 'hvc'."""
        name1 = self.args.name1
        name2 = self.args.name2
        seed = self.args.seed
        max_errors = self.args.max_turn_errors

        first = HumanPlayer(name1, DEFAULT_SYMBOLS[0], self.console_input)
        if mode == 'hvh':
            second = HumanPlayer(name2 or 'Player 2', DEFAULT_SYMBOLS[1], self.console_input)
        elif mode == 'hvc':
            second = ComputerPlayer(name2 or 'Computer', DEFAULT_SYMBOLS[1], seed=seed)
        else:
            raise ValueError(f"Unknown mode: {mode}")

        return GameEngine(first, second, self.display,
                          max_turn_errors=max_errors if max_errors else None)

    def play(self, mode: str) -> GameResult:
        engine = self.create_engine(mode)
        debug.info(f"Starting {mode} game", "cli")
        return engine.run()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
