from __future__ import annotations

import unittest

from ludo_core.board import Board
from ludo_core.player import Player
from ludo_core.render import render_board
from ludo_core.types import PieceRef


class RenderBoardTests(unittest.TestCase):
    def setUp(self) -> None:
        self.board = Board(2)
        self.players = [Player(0, "Ada"), Player(1, "Bob")]

    def test_empty_board(self) -> None:
        text = render_board(self.board, self.players)
        self.assertIn("=== LUDO BOARD ===", text)
        self.assertIn("[  0]", text)
        self.assertIn("[ 51]", text)
        self.assertIn("P0 Ada (red) | start 0 | Yard: 0 1 2 3 | Home: - | Finished: -", text)
        self.assertIn("P1 Bob (green) | start 26 | Yard: 0 1 2 3", text)

    def test_occupied_cells_and_home_track(self) -> None:
        self.board.move_from_yard_to_start(1, 2)
        self.board.move_from_yard_to_start(1, 3)
        self.board._yards[0][1] = False
        self.board._home_tracks[0][4] = 1
        self.board._yards[0][0] = False
        self.board._finished[0][0] = True

        text = render_board(self.board, self.players)

        self.assertIn("[P12+]", text)
        self.assertIn("Yard: 2 3 | Home: 4:1 | Finished: 0", text)
        self.assertIn("Yard: 0 1 | Home: - | Finished: -", text)

    def test_rendering_does_not_mutate(self) -> None:
        self.board.move_from_yard_to_start(0, 0)
        before = self.board.occupancy().copy()
        render_board(self.board)
        self.assertEqual(self.board.pieces_at(0), [PieceRef(0, 0)])
        self.assertTrue((self.board.occupancy() == before).all())

    def test_default_labels(self) -> None:
        text = render_board(Board(3))
        self.assertIn("P2 Player 3 | start 34", text)


if __name__ == "__main__":
    unittest.main()
