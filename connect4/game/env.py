"""
env.py - Gymnasium environment for Connect Four

Lets an automated agent play as the first player against a ComputerPlayer
opponent, using the same Board rules as interactive games.
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connect4.debug import debug
from connect4.game.board import Board
from connect4.players.computer import ComputerPlayer
from connect4.utils import ROWS, COLS, DEFAULT_SYMBOLS, GameResult


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Observations encode the agent's pieces as 1, the opponent's as 2 and
    empty cells as 0. An action is a 0-indexed column.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    reward_win = 1.0
    reward_lose = -1.0
    reward_draw = 0.1
    reward_invalid_move = -0.5
    reward_step = -0.01

    def __init__(self, render_mode: Optional[str] = None,
                 opponent: Optional[ComputerPlayer] = None):
        debug.debug("Initializing ConnectFourEnv", "env")

        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.action_space = spaces.Discrete(COLS)
        self.observation_space = spaces.Box(low=0, high=2, shape=(ROWS, COLS), dtype=np.int8)

        self.render_mode = render_mode
        self.agent_symbol = DEFAULT_SYMBOLS[0]
        self._opponent_arg = opponent
        self.opponent = opponent or ComputerPlayer("Computer", DEFAULT_SYMBOLS[1])
        if self.opponent.symbol == self.agent_symbol:
            raise ValueError(f"Opponent cannot use the agent's symbol {self.agent_symbol!r}")

        self.board = Board()
        self.result = GameResult.IN_PROGRESS

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """Start a fresh game; a seed also reseeds the default opponent."""
        super().reset(seed=seed)

        if seed is not None and self._opponent_arg is None:
            self.opponent.rng.seed(seed)

        self.board = Board()
        self.result = GameResult.IN_PROGRESS

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play the agent's move, then the opponent's reply.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        if self.result.is_game_over():
            raise RuntimeError("step() called on a finished game; call reset()")

        action = int(action)
        debug.debug(f"Environment step with action {action}", "env")

        if not self.board.make_move(action, self.agent_symbol):
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = False

        if self.board.check_win(self.agent_symbol):
            self.result = GameResult.PLAYER_ONE_WIN
            reward, terminated = self.reward_win, True
        elif self.board.is_full():
            self.result = GameResult.DRAW
            reward, terminated = self.reward_draw, True
        else:
            reply = self.opponent.get_move(self.board.copy())
            self.board.make_move(reply, self.opponent.symbol)
            if self.board.check_win(self.opponent.symbol):
                self.result = GameResult.PLAYER_TWO_WIN
                reward, terminated = self.reward_lose, True
            elif self.board.is_full():
                self.result = GameResult.DRAW
                reward, terminated = self.reward_draw, True

        if terminated:
            debug.info(f"Game over: {self.result.name}", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.board.render()
        if self.render_mode == "human":
            print(self.board.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.board.to_array((self.agent_symbol, self.opponent.symbol))

    def _get_info(self) -> Dict[str, Any]:
        valid_moves = self.board.get_valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'game_result': self.result.name,
            'moves_made': len(self.board.moves_made),
            'last_move': self.board.last_move,
        }
