"""
connect4.game - Core game mechanics for Connect Four

This package contains the board representation, the turn engine
(connect4.game.engine) and a Gymnasium environment built on the same
rules (connect4.game.env).
"""

# Only the board is imported here; players depend on it and the engine
# depends on players.
from connect4.game.board import Board

__all__ = ['Board']
