"""
connect4.players - Move-selection strategies for Connect Four

A player pairs a display name and symbol with a single capability,
get_move(board), which returns a valid 0-indexed column.
"""

from connect4.players.base import Player
from connect4.players.human import HumanPlayer, InputProvider, MoveCheck, MoveStatus, validate_column
from connect4.players.computer import ComputerPlayer

__all__ = ['Player', 'HumanPlayer', 'ComputerPlayer', 'InputProvider',
           'MoveCheck', 'MoveStatus', 'validate_column']
