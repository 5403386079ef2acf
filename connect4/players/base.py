"""
base.py - Common interface for Connect Four players
"""

from abc import ABC, abstractmethod

from connect4.game.board import Board
from connect4.utils import EMPTY


class Player(ABC):
    """
    A named participant that chooses columns.

    Name and symbol are fixed when the player is created.
    """

    def __init__(self, name: str, symbol: str):
        if not isinstance(symbol, str) or len(symbol) != 1 or symbol == EMPTY:
            raise ValueError(f"Symbol must be a single non-blank character, got {symbol!r}")
        self._name = name
        self._symbol = symbol

    @property
    def name(self) -> str:
        return self._name

    @property
    def symbol(self) -> str:
        return self._symbol

    @abstractmethod
    def get_move(self, board: Board) -> int:
        """
        Choose a column to play.

        Args:
            board: The current game board (must not be modified)

        Returns:
            A 0-indexed column for which board.is_valid_move() is True
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, symbol={self._symbol!r})"
