from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, ClassVar, Sequence

from ..exceptions import GameAborted
from .base import BaseStrategy

QUIT_WORDS = ("q", "quit")


def read_line(prompt: str, input_fn: Callable[[str], str] = input) -> str:
    """Read one trimmed line; ``q``/``quit`` aborts the game."""
    try:
        text = input_fn(prompt).strip()
    except EOFError as e:
        raise GameAborted("input closed") from e
    if text.lower() in QUIT_WORDS:
        raise GameAborted("player quit")
    return text


@dataclass(slots=True)
class HumanStrategy(BaseStrategy):
    """Asks on the console which piece to move."""

    name: ClassVar[str] = "human"

    input_fn: Callable[[str], str] = field(default=input)
    output_fn: Callable[[str], None] = field(default=print)

    def choose(self, board, player_id: int, dice_roll: int, legal_pieces: Sequence[int]) -> int:
        self.output_fn(f"You rolled a {dice_roll}!")
        self.output_fn("Choose a piece to move:")
        for i, piece in enumerate(legal_pieces, start=1):
            self.output_fn(f"{i}. Piece {piece} ({board.locate(player_id, piece)})")

        while True:
            text = read_line(f"Enter choice (1-{len(legal_pieces)}): ", self.input_fn)
            if text.isdigit() and 1 <= int(text) <= len(legal_pieces):
                return legal_pieces[int(text) - 1]
            self.output_fn("Invalid choice. Please try again.")
