"""
computer.py - Automated Connect Four player

A deliberately weak baseline: take the center column while it is open,
otherwise play a random open column. There is no lookahead.
"""

import random
from typing import Optional

from connect4.debug import debug
from connect4.game.board import Board
from connect4.players.base import Player
from connect4.utils import CENTER_COLUMN


class ComputerPlayer(Player):
    """Center-first, otherwise uniformly random, move selection."""

    def __init__(self, name: str, symbol: str, seed: Optional[int] = None,
                 rng: Optional[random.Random] = None):
        super().__init__(name, symbol)
        self.rng = rng if rng is not None else random.Random(seed)

    def get_move(self, board: Board) -> int:
        if board.is_valid_move(CENTER_COLUMN):
            debug.debug(f"{self.name} takes the center column", "player")
            return CENTER_COLUMN

        valid_moves = board.get_valid_moves()
        if not valid_moves:
            raise ValueError("No valid moves.")

        column = self.rng.choice(valid_moves)
        debug.debug(f"{self.name} picked column {column} from {valid_moves}", "player")
        return column
