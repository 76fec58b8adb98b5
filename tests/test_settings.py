from __future__ import annotations

import os
import unittest
from unittest import mock

from ludo_core.config import Config, config
from ludo_core.player import Player


class ConfigTests(unittest.TestCase):
    def test_board_constants(self) -> None:
        self.assertEqual(config.MAIN_TRACK_SIZE, 52)
        self.assertEqual(config.HOME_TRACK_SIZE, 6)
        self.assertEqual(config.PIECES_PER_PLAYER, 4)
        self.assertEqual(config.EXIT_YARD_ROLL, 6)
        self.assertEqual(config.HOME_ENTRY_DISTANCE, 46)

    def test_seat_colours(self) -> None:
        colours = [Player(player_id=i).color for i in range(4)]
        self.assertEqual(colours, ["red", "green", "blue", "yellow"])

    def test_custom_values(self) -> None:
        cfg = Config(NUM_PLAYERS=2, MAX_TURNS=100)
        self.assertEqual(cfg.NUM_PLAYERS, 2)
        self.assertEqual(cfg.MAX_TURNS, 100)

    def test_rejects_bad_player_count(self) -> None:
        with self.assertRaises(ValueError):
            Config(NUM_PLAYERS=5)
        with self.assertRaises(ValueError):
            Config(NUM_PLAYERS=1)

    def test_rejects_negative_turn_cap(self) -> None:
        with self.assertRaises(ValueError):
            Config(MAX_TURNS=-1)

    def test_optional_int_reader(self) -> None:
        from ludo_core.config import _optional_int

        with mock.patch.dict(os.environ, {"SEED": "17"}):
            self.assertEqual(_optional_int("SEED"), 17)
        with mock.patch.dict(os.environ, {"SEED": ""}):
            self.assertIsNone(_optional_int("SEED"))


if __name__ == "__main__":
    unittest.main()
