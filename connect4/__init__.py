"""
connect4 - Connect Four game implementation

This package provides the board, the turn engine, human and computer
players, a console interface and a Gymnasium environment.
"""

# Version number
__version__ = '0.2.0'
