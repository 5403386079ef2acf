# tests/test_env.py

import unittest

import numpy as np

from connect4.game.env import ConnectFourEnv
from connect4.players import ComputerPlayer
from connect4.utils import COLS, ROWS


class TestConnectFourEnv(unittest.TestCase):
    def setUp(self):
        self.env = ConnectFourEnv()

    def test_reset(self):
        observation, info = self.env.reset(seed=0)
        self.assertEqual(observation.shape, (ROWS, COLS))
        self.assertEqual(observation.dtype, np.int8)
        self.assertFalse(observation.any())
        self.assertEqual(info['valid_moves'], list(range(COLS)))
        self.assertTrue(self.env.observation_space.contains(observation))

    def test_step_plays_agent_and_opponent(self):
        self.env.reset()
        observation, reward, terminated, truncated, info = self.env.step(0)

        self.assertEqual(observation[ROWS - 1, 0], 1)
        self.assertEqual(observation[ROWS - 1, 3], 2)  # computer takes the center
        self.assertAlmostEqual(reward, self.env.reward_step)
        self.assertFalse(terminated)
        self.assertFalse(truncated)
        self.assertEqual(info['moves_made'], 2)

    def test_invalid_action_truncates(self):
        self.env.reset()
        observation, reward, terminated, truncated, info = self.env.step(COLS)
        self.assertEqual(reward, self.env.reward_invalid_move)
        self.assertTrue(truncated)
        self.assertFalse(terminated)
        self.assertTrue(info['invalid_move'])
        self.assertFalse(observation.any())

    def test_agent_wins(self):
        self.env.reset()
        for _ in range(3):
            _, reward, terminated, _, _ = self.env.step(0)
            self.assertFalse(terminated)

        _, reward, terminated, _, info = self.env.step(0)
        self.assertTrue(terminated)
        self.assertEqual(reward, self.env.reward_win)
        self.assertEqual(info['game_result'], 'PLAYER_ONE_WIN')

        with self.assertRaises(RuntimeError):
            self.env.step(1)

    def test_opponent_wins(self):
        self.env.reset()
        for col in (0, 1, 0):
            self.env.step(col)
        _, reward, terminated, _, info = self.env.step(1)
        self.assertTrue(terminated)
        self.assertEqual(reward, self.env.reward_lose)
        self.assertEqual(info['game_result'], 'PLAYER_TWO_WIN')

    def test_ascii_render(self):
        env = ConnectFourEnv(render_mode="ascii")
        env.reset()
        env.step(2)
        self.assertEqual(env.render(), env.board.render())

    def test_custom_opponent_symbol_clash(self):
        with self.assertRaises(ValueError):
            ConnectFourEnv(opponent=ComputerPlayer("CPU", "X"))


if __name__ == '__main__':
    unittest.main()
