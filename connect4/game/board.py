"""
board.py - Board representation and core game mechanics for Connect Four

This module implements the Board class which holds the grid of player
symbols and provides methods for validating and making moves, checking
win conditions, and detecting a full board.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from connect4.debug import debug
from connect4.utils import (ROWS, COLS, CONNECT_N, EMPTY, DIRECTION_VECTORS,
                            is_valid_position, render_board_ascii)


class Board:
    """
    Represents a Connect Four game board.

    Cells hold either EMPTY or a player's one-character symbol. Row 0 is the
    top of the board and pieces always settle onto the lowest empty row, so
    a column's pieces form an unbroken stack from the bottom up.
    """

    def __init__(self):
        """Initialize an empty Connect Four board."""
        debug.debug("Initializing new Board", "board")
        self.grid = np.full((ROWS, COLS), EMPTY, dtype='<U1')
        self.moves_made: List[int] = []
        self.last_move: Optional[Tuple[int, int]] = None

    def copy(self) -> 'Board':
        """
        Create a deep copy of the current board.

        Returns:
            A new Board instance with the same state
        """
        debug.trace("Creating board copy", "board")
        new_board = Board()
        new_board.grid = self.grid.copy()
        new_board.moves_made = self.moves_made.copy()
        new_board.last_move = self.last_move
        return new_board

    def is_valid_move(self, column: int) -> bool:
        """
        Check if a piece can be dropped into a column.

        The top cell is the only one that needs checking: columns fill from
        the bottom without gaps.

        Args:
            column: The column to place a piece (0-indexed)

        Returns:
            True if the move is valid, False otherwise
        """
        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            debug.debug(f"Invalid move: column {column!r} is not an integer", "board")
            return False

        if not (0 <= column < COLS):
            debug.debug(f"Invalid move: column {column} out of bounds", "board")
            return False

        if self.grid[0, column] != EMPTY:
            debug.debug(f"Invalid move: column {column} is full", "board")
            return False

        return True

    def get_valid_moves(self) -> List[int]:
        """
        Get a list of valid columns where a piece can be placed.

        Returns:
            List of valid column indices
        """
        return [col for col in range(COLS) if self.grid[0, col] == EMPTY]

    def make_move(self, column: int, symbol: str) -> bool:
        """
        Drop a piece into the specified column.

        Calling this on a full or out-of-range column is safe: nothing
        changes and False is returned.

        Args:
            column: The column to place a piece (0-indexed)
            symbol: The mover's one-character symbol

        Returns:
            True if the piece was placed, False otherwise
        """
        _check_symbol(symbol)
        debug.debug(f"Attempting move in column {column} for {symbol!r}", "board")

        if not self.is_valid_move(column):
            return False

        for row in range(ROWS - 1, -1, -1):
            if self.grid[row, column] == EMPTY:
                debug.trace(f"Placing {symbol!r} at position ({row}, {column})", "board")
                self.grid[row, column] = symbol
                self.last_move = (row, int(column))
                self.moves_made.append(int(column))
                return True

        return False

    def get_winning_line(self, symbol: str) -> List[Tuple[int, int]]:
        """
        Find a run of CONNECT_N cells holding the given symbol.

        Every anchor from which a full run fits on the board is tried in all
        four directions; the first complete run found is returned.

        Args:
            symbol: The symbol to look for

        Returns:
            List of (row, col) positions forming the run, or an empty list
        """
        if symbol == EMPTY:
            return []

        for dr, dc in DIRECTION_VECTORS.values():
            for row in range(ROWS):
                for col in range(COLS):
                    end_row = row + dr * (CONNECT_N - 1)
                    end_col = col + dc * (CONNECT_N - 1)
                    if not is_valid_position(end_row, end_col):
                        continue

                    line = [(row + dr * i, col + dc * i) for i in range(CONNECT_N)]
                    if all(self.grid[r, c] == symbol for r, c in line):
                        return line

        return []

    def check_win(self, symbol: str) -> bool:
        """
        Check whether the given symbol has four in a row anywhere.

        Args:
            symbol: The symbol of the player who just moved

        Returns:
            True if there is a win, False otherwise
        """
        debug.start_timer("win_check")
        won = bool(self.get_winning_line(symbol))
        debug.end_timer("win_check", "board")
        return won

    def is_full(self) -> bool:
        """Return True when no column can take another piece."""
        return not self.get_valid_moves()

    def to_array(self, symbols: Sequence[str]) -> np.ndarray:
        """
        Encode the board numerically.

        Args:
            symbols: Player symbols in order; the first maps to 1, the second to 2

        Returns:
            int8 array with 0 for empty cells
        """
        state = np.zeros((ROWS, COLS), dtype=np.int8)
        for value, symbol in enumerate(symbols, start=1):
            state[self.grid == symbol] = value
        return state

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            String representation of the board
        """
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()


def _check_symbol(symbol: str) -> None:
    if not isinstance(symbol, str) or len(symbol) != 1 or symbol == EMPTY:
        raise ValueError(f"Symbol must be a single non-blank character, got {symbol!r}")
