"""
utils.py - Constants, enumerations and helper functions for Connect Four

This module provides the fixed board dimensions, the game result and
direction enumerations, and the ASCII renderer shared by the board,
the engine and the console interface.
"""

from enum import Enum, auto
from typing import Dict, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
CENTER_COLUMN = COLS // 2

EMPTY = " "
DEFAULT_SYMBOLS = ("X", "O")

# Consecutive failed turns tolerated before a game is aborted
MAX_TURN_ERRORS = 10


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col) for each direction
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid of symbols as ASCII art.

    Rows are drawn top to bottom, followed by a legend of 1-based
    column numbers, which is what a human player types.

    Args:
        grid: The board grid of one-character symbols

    Returns:
        ASCII representation of the board
    """
    border = "|" + "-" * (COLS * 2 - 1) + "|"
    result = [border]

    for row in range(ROWS):
        result.append("|" + " ".join(str(cell) for cell in grid[row]) + "|")

    result.append(border)
    result.append("|" + " ".join(str(col + 1) for col in range(COLS)) + "|")

    return "\n".join(result)
