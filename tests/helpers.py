"""Scripted stand-ins for the console used across the test suite."""

from typing import Iterable, List, Tuple

from connect4.game.board import Board
from connect4.players import MoveStatus, Player

# Column order that fills the board without ever producing four in a row.
# Columns 0, 1, 4 and 5 end up X/O/X/O... from the bottom, columns 2, 3 and 6
# O/X/O/X..., which leaves at most two equal symbols next to each other.
DRAW_SEQUENCE = [0, 2, 1, 3, 4, 6, 5] * 6


class ScriptedInput:
    """InputProvider that replays canned answers and records rejections."""

    def __init__(self, answers: Iterable[str]):
        self.answers = list(answers)
        self.prompts: List[str] = []
        self.rejections: List[Tuple[MoveStatus, str]] = []

    def request_column(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.answers.pop(0)

    def reject(self, status: MoveStatus, message: str) -> None:
        self.rejections.append((status, message))


class RecordingDisplay:
    def __init__(self):
        self.renders: List[Board] = []
        self.messages: List[str] = []

    def render(self, board: Board) -> None:
        self.renders.append(board)

    def announce(self, message: str) -> None:
        self.messages.append(message)


class ScriptedPlayer(Player):
    """Plays a fixed list of columns; entries that are exceptions get raised."""

    def __init__(self, name, symbol, moves):
        super().__init__(name, symbol)
        self.moves = list(moves)
        self.calls = 0

    def get_move(self, board):
        self.calls += 1
        move = self.moves.pop(0)
        if isinstance(move, BaseException):
            raise move
        return move
