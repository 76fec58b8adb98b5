from __future__ import annotations

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from ludo_core.cli import (
    ask_player_count,
    build_parser,
    describe_turn,
    main,
    parse_play_args,
    run,
    seat_strategies,
)
from ludo_core.exceptions import GameAborted
from ludo_core.player import Player
from ludo_core.strategies import HumanStrategy, RandomStrategy, RusherStrategy, available
from ludo_core.types import MoveResult, TurnOutcome


def scripted_input(answers):
    answers = list(answers)

    def _input(prompt: str) -> str:
        return answers.pop(0)

    return _input


class ParseArgsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = parse_play_args([])
        self.assertIsNone(cfg.players)
        self.assertEqual(cfg.strategies, ["human"])
        self.assertEqual(cfg.names, [])
        self.assertFalse(cfg.verbose)

    def test_values(self) -> None:
        cfg = parse_play_args(
            ["--players", "3", "--names", "A", "B", "--strategies", "random", "--seed", "5"]
        )
        self.assertEqual(cfg.players, 3)
        self.assertEqual(cfg.names, ["A", "B"])
        self.assertEqual(cfg.strategies, ["random"])
        self.assertEqual(cfg.seed, 5)

    def test_every_registered_strategy_is_accepted(self) -> None:
        for name in available(ignore_human=False):
            with self.subTest(strategy=name):
                self.assertEqual(parse_play_args(["--strategies", name]).strategies, [name])

    def test_unknown_strategy_is_rejected(self) -> None:
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            parse_play_args(["--strategies", "cheater"])

    def test_help_lists_bot_strategies(self) -> None:
        text = build_parser().format_help()
        for name in available():
            self.assertIn(name, text)


class SeatingTests(unittest.TestCase):
    def test_single_strategy_fills_every_seat(self) -> None:
        seats = seat_strategies(["rusher"], 3, seed=None)
        self.assertEqual(len(seats), 3)
        self.assertTrue(all(isinstance(s, RusherStrategy) for s in seats))

    def test_mixed_seats(self) -> None:
        seats = seat_strategies(["human", "random"], 2, seed=1)
        self.assertIsInstance(seats[0], HumanStrategy)
        self.assertIsInstance(seats[1], RandomStrategy)

    def test_wrong_number_of_strategies(self) -> None:
        with self.assertRaises(ValueError):
            seat_strategies(["random", "rusher"], 3, seed=None)


class PromptTests(unittest.TestCase):
    def test_player_count_reprompts(self) -> None:
        with redirect_stdout(io.StringIO()) as out:
            count = ask_player_count(scripted_input(["1", "five", "3"]))
        self.assertEqual(count, 3)
        self.assertEqual(out.getvalue().count("Please enter a number between 2 and 4."), 2)

    def test_quit(self) -> None:
        with self.assertRaises(GameAborted):
            ask_player_count(scripted_input(["quit"]))


class DescribeTurnTests(unittest.TestCase):
    def test_skipped(self) -> None:
        lines = describe_turn(TurnOutcome(player_id=0, dice_roll=3), Player(0))
        self.assertEqual(
            lines, ["Player 1 rolled a 3.", "No valid moves available. Turn skipped."]
        )

    def test_capture_with_extra_turn(self) -> None:
        outcome = TurnOutcome(
            player_id=1, dice_roll=4, piece=2, result=MoveResult.CAPTURED, extra_turn=True
        )
        lines = describe_turn(outcome, Player(1, "Bob"))
        self.assertEqual(lines[1], "Bob's piece 2 captured an opponent's piece")
        self.assertEqual(lines[-1], "Extra turn!")

    def test_skipped_six_keeps_the_turn(self) -> None:
        outcome = TurnOutcome(player_id=0, dice_roll=6, extra_turn=True)
        self.assertEqual(
            describe_turn(outcome, Player(0)),
            [
                "Player 1 rolled a 6.",
                "No valid moves available. Turn skipped.",
                "Extra turn!",
            ],
        )


class RunTests(unittest.TestCase):
    def test_bad_seating_exits_with_error(self) -> None:
        with redirect_stdout(io.StringIO()):
            code = main(["--players", "3", "--strategies", "random", "rusher"])
        self.assertEqual(code, 2)

    def test_bot_game_runs_to_completion(self) -> None:
        cfg = parse_play_args(["--players", "2", "--strategies", "rusher", "random", "--seed", "9"])
        with redirect_stdout(io.StringIO()) as out:
            code = run(cfg)
        self.assertEqual(code, 0)
        self.assertIn("=== GAME OVER ===", out.getvalue())

    def test_turn_cap(self) -> None:
        cfg = parse_play_args(
            ["--players", "4", "--strategies", "random", "--seed", "2", "--max-turns", "3"]
        )
        with redirect_stdout(io.StringIO()) as out:
            code = run(cfg)
        self.assertEqual(code, 0)
        self.assertIn("No winner after 3 turns.", out.getvalue())

    def test_human_quits(self) -> None:
        cfg = parse_play_args(["--strategies", "human"])
        with redirect_stdout(io.StringIO()) as out:
            code = run(cfg, input_fn=scripted_input(["2", "Ada", "", "q"]))
        self.assertEqual(code, 1)
        self.assertIn("Quitting game. Goodbye!", out.getvalue())
        self.assertIn("Ada's turn", out.getvalue())


if __name__ == "__main__":
    unittest.main()
