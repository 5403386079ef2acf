"""
exceptions.py - Exception types raised by the Connect Four engine
"""


class Connect4Error(Exception):
    """Base class for Connect Four errors."""


class GameOverError(Connect4Error):
    """A turn was requested after the game reached a terminal state."""


class TurnLimitError(Connect4Error):
    """Too many consecutive turns failed with internal errors."""

    def __init__(self, attempts: int, last_error: BaseException):
        super().__init__(f"Giving up after {attempts} failed turns: {last_error!r}")
        self.attempts = attempts
        self.last_error = last_error


class SessionClosed(Connect4Error):
    """The input stream feeding a human player was closed."""
