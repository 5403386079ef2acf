"""
engine.py - Turn loop for a two-player Connect Four game

The GameEngine owns one Board and two players. Each turn it shows the
board, asks the current player for a column, applies it, and checks
whether the mover has won or the board has filled up.
"""

from enum import Enum, auto
from typing import List, Optional, Protocol, Tuple

from connect4.debug import debug
from connect4.exceptions import GameOverError, SessionClosed, TurnLimitError
from connect4.game.board import Board
from connect4.players.base import Player
from connect4.utils import GameResult, MAX_TURN_ERRORS


class TurnResult(Enum):
    """Outcome of a single call to GameEngine.play_turn."""
    SUCCESS = auto()
    INVALID_MOVE = auto()
    INTERNAL_ERROR = auto()


class Display(Protocol):
    """Receives board snapshots and game messages."""

    def render(self, board: Board) -> None:
        ...

    def announce(self, message: str) -> None:
        ...


class GameEngine:
    """
    Drives one game between two players until a win or a draw.

    The first player passed in moves first and maps to
    GameResult.PLAYER_ONE_WIN.
    """

    def __init__(self, player_one: Player, player_two: Player, display: Display,
                 max_turn_errors: Optional[int] = MAX_TURN_ERRORS):
        """
        Args:
            player_one: Player who moves first
            player_two: Player who moves second
            display: Sink for board renders and announcements
            max_turn_errors: Consecutive failed turns (internal errors or
                unplayable columns) tolerated before TurnLimitError is
                raised; None retries forever
        """
        if player_one.symbol == player_two.symbol:
            raise ValueError(f"Players must use different symbols, both use {player_one.symbol!r}")

        self.board = Board()
        self.players: Tuple[Player, Player] = (player_one, player_two)
        self.display = display
        self.max_turn_errors = max_turn_errors
        self.current_player = player_one
        self.result = GameResult.IN_PROGRESS
        self.history: List[Tuple[str, int]] = []
        self._failed_turns = 0

        debug.info(f"New game: {player_one!r} vs {player_two!r}", "engine")

    def is_game_over(self) -> bool:
        return self.result.is_game_over()

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            The winning player, or None if no winner yet or draw
        """
        if self.result == GameResult.PLAYER_ONE_WIN:
            return self.players[0]
        elif self.result == GameResult.PLAYER_TWO_WIN:
            return self.players[1]
        return None

    def other_player(self) -> Player:
        return self.players[1] if self.current_player is self.players[0] else self.players[0]

    def play_turn(self) -> TurnResult:
        """
        Play one turn for the current player.

        Only a SUCCESS result changes the game state. After INVALID_MOVE or
        INTERNAL_ERROR the same player is asked again on the next call.

        Returns:
            The outcome of the turn

        Raises:
            GameOverError: if the game has already finished
            TurnLimitError: if failed turns keep repeating
        """
        if self.is_game_over():
            raise GameOverError(f"Game is over ({self.result.name})")

        mover = self.current_player

        try:
            self.display.render(self.board.copy())
            debug.start_timer("decision")
            column = mover.get_move(self.board.copy())
            debug.end_timer("decision", "engine")
        except SessionClosed:
            raise
        except Exception as e:
            return self._internal_error(mover, e)

        if not self.board.make_move(column, mover.symbol):
            return self._invalid_move(mover, column)

        self._failed_turns = 0
        self.history.append((mover.name, column))
        debug.debug(f"{mover.name} played column {column}", "engine")

        if self.board.check_win(mover.symbol):
            if mover is self.players[0]:
                self.result = GameResult.PLAYER_ONE_WIN
            else:
                self.result = GameResult.PLAYER_TWO_WIN
            debug.info(f"{mover.name} wins after {len(self.history)} moves", "engine")
            self._finish(f"{mover.name} wins!")
        elif self.board.is_full():
            self.result = GameResult.DRAW
            debug.info("Game ends in a draw", "engine")
            self._finish("It's a draw!")
        else:
            self.current_player = self.other_player()

        return TurnResult.SUCCESS

    def run(self) -> GameResult:
        """Play turns until the game reaches a terminal state."""
        while not self.is_game_over():
            self.play_turn()
        return self.result

    def _finish(self, message: str) -> None:
        self.display.render(self.board.copy())
        self.display.announce(message)

    def _internal_error(self, mover: Player, error: Exception) -> TurnResult:
        self._failed_turns += 1
        debug.error(f"Turn for {mover.name} failed ({self._failed_turns} in a row): {error!r}",
                    "engine", exc_info=True)
        self.display.announce(f"Internal error during {mover.name}'s turn: {error}")

        if self.max_turn_errors is not None and self._failed_turns >= self.max_turn_errors:
            raise TurnLimitError(self._failed_turns, error) from error

        return TurnResult.INTERNAL_ERROR

    def _invalid_move(self, mover: Player, column) -> TurnResult:
        # Both built-in players only return playable columns, so a rejected
        # column counts toward the same limit as an internal error
        self._failed_turns += 1
        debug.warning(f"{mover.name} chose unplayable column {column!r} "
                      f"({self._failed_turns} in a row)", "engine")
        self.display.announce(f"{mover.name} cannot play column {column!r}. Try again.")

        if self.max_turn_errors is not None and self._failed_turns >= self.max_turn_errors:
            raise TurnLimitError(self._failed_turns, ValueError(f"unplayable column {column!r}"))

        return TurnResult.INVALID_MOVE
