"""
human.py - Human-controlled Connect Four player

The human player never reads the console itself. It asks an InputProvider
for raw text, validates it, reports any rejection back to the provider and
asks again until it gets a playable column.
"""

from enum import Enum, auto
from typing import NamedTuple, Optional, Protocol

from connect4.debug import debug
from connect4.game.board import Board
from connect4.players.base import Player
from connect4.utils import COLS


class MoveStatus(Enum):
    """Outcome of validating a human's raw column entry."""
    VALID = auto()
    NOT_A_NUMBER = auto()
    OUT_OF_RANGE = auto()
    COLUMN_FULL = auto()


class MoveCheck(NamedTuple):
    status: MoveStatus
    column: Optional[int] = None  # 0-indexed, set only when VALID


class InputProvider(Protocol):
    """Source of raw column choices for a human player."""

    def request_column(self, prompt: str) -> str:
        ...

    def reject(self, status: MoveStatus, message: str) -> None:
        ...


REJECTION_MESSAGES = {
    MoveStatus.NOT_A_NUMBER: "Please enter a number.",
    MoveStatus.OUT_OF_RANGE: f"Column must be between 1 and {COLS}.",
    MoveStatus.COLUMN_FULL: "That column is full. Choose another.",
}


def validate_column(raw: str, board: Board) -> MoveCheck:
    """
    Classify a 1-based column entry typed by a user.

    Args:
        raw: Text as entered
        board: Board the move would be played on

    Returns:
        MoveCheck carrying the 0-indexed column when the entry is playable
    """
    try:
        number = int(str(raw).strip())
    except ValueError:
        return MoveCheck(MoveStatus.NOT_A_NUMBER)

    if not 1 <= number <= COLS:
        return MoveCheck(MoveStatus.OUT_OF_RANGE)

    column = number - 1
    if not board.is_valid_move(column):
        return MoveCheck(MoveStatus.COLUMN_FULL)

    return MoveCheck(MoveStatus.VALID, column)


class HumanPlayer(Player):
    """A player whose moves come from an interactive input provider."""

    def __init__(self, name: str, symbol: str, input_provider: InputProvider):
        super().__init__(name, symbol)
        self.input_provider = input_provider

    def prompt(self) -> str:
        return f"{self.name} ({self.symbol}), choose a column (1-{COLS}): "

    def get_move(self, board: Board) -> int:
        """Ask until the provider supplies a playable column; no retry limit."""
        while True:
            raw = self.input_provider.request_column(self.prompt())
            check = validate_column(raw, board)
            if check.status is MoveStatus.VALID:
                debug.debug(f"{self.name} chose column {check.column}", "player")
                return check.column

            debug.debug(f"{self.name} entry {raw!r} rejected: {check.status.name}", "player")
            self.input_provider.reject(check.status, REJECTION_MESSAGES[check.status])
