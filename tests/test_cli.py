# tests/test_cli.py

import io
import unittest

from connect4.interfaces.cli import SimpleCLI, main


def scripted(answers):
    answers = list(answers)

    def input_fn(prompt):
        if not answers:
            raise EOFError
        return answers.pop(0)

    return input_fn


class TestSimpleCLI(unittest.TestCase):
    def run_cli(self, answers, argv):
        out = io.StringIO()
        cli = SimpleCLI(input_fn=scripted(answers), out=out)
        code = cli.run(argv)
        return code, out.getvalue()

    def test_menu_exit(self):
        code, output = self.run_cli(["3"], [])
        self.assertEqual(code, 0)
        self.assertIn("1. Human vs Human", output)
        self.assertIn("Goodbye!", output)

    def test_menu_invalid_choice(self):
        code, output = self.run_cli(["9", "3"], [])
        self.assertEqual(code, 0)
        self.assertIn("Invalid choice", output)

    def test_menu_human_vs_computer_then_exit(self):
        code, output = self.run_cli(["2", "1", "1", "1", "1", "3"], ["play"])
        self.assertEqual(code, 0)
        self.assertIn("Player 1 wins!", output)
        self.assertIn("|1 2 3 4 5 6 7|", output)
        self.assertTrue(output.rstrip().endswith("Goodbye!"))

    def test_human_vs_human(self):
        answers = ["1", "2", "1", "2", "oops", "1", "2", "1"]
        code, output = self.run_cli(answers, ["play", "--mode", "hvh", "--name2", "Bea"])
        self.assertEqual(code, 0)
        self.assertIn("Please enter a number.", output)
        self.assertIn("Player 1 wins!", output)

    def test_computer_can_win(self):
        answers = ["1", "2", "1", "2"]
        code, output = self.run_cli(answers, ["play", "--mode", "hvc", "--seed", "5"])
        self.assertEqual(code, 0)
        self.assertIn("Computer wins!", output)

    def test_end_of_input(self):
        code, output = self.run_cli([], ["play", "--mode", "hvh"])
        self.assertEqual(code, 0)
        self.assertIn("Input closed", output)

    def test_parse_args_defaults(self):
        cli = SimpleCLI(input_fn=scripted([]), out=io.StringIO())
        args = cli.parse_args([])
        self.assertEqual(args.command, 'play')
        self.assertEqual(args.mode, 'menu')
        self.assertIsNone(args.seed)

    def test_negative_turn_error_limit_rejected(self):
        cli = SimpleCLI(input_fn=scripted([]), out=io.StringIO())
        with self.assertRaises(SystemExit):
            cli.parse_args(["play", "--max-turn-errors", "-1"])

    def test_zero_turn_error_limit_means_unbounded(self):
        cli = SimpleCLI(input_fn=scripted([]), out=io.StringIO())
        cli.parse_args(["play", "--mode", "hvc", "--max-turn-errors", "0"])
        self.assertIsNone(cli.create_engine("hvc").max_turn_errors)

    def test_second_run_uses_new_arguments(self):
        out = io.StringIO()
        cli = SimpleCLI(input_fn=scripted(["3", "1", "1", "1", "1"]), out=out)
        self.assertEqual(cli.run([]), 0)
        self.assertEqual(cli.run(["play", "--mode", "hvc", "--name1", "Ann"]), 0)
        self.assertEqual(cli.args.name1, "Ann")
        self.assertIn("Ann wins!", out.getvalue())

    def test_main_rejects_unknown_mode(self):
        with self.assertRaises(SystemExit):
            main(["play", "--mode", "cvc"])


if __name__ == '__main__':
    unittest.main()
