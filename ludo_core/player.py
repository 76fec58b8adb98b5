from __future__ import annotations

from dataclasses import dataclass, field

from .config import PLAYER_COLORS


@dataclass(slots=True)
class Player:
    """Seat in a game. Colour and name are display data only; the board knows
    players by ``player_id`` alone."""

    player_id: int
    name: str = ""
    color: str = field(default="")

    def __post_init__(self) -> None:
        if not self.name:
            self.name = f"Player {self.player_id + 1}"
        if not self.color:
            self.color = PLAYER_COLORS[self.player_id % len(PLAYER_COLORS)]

    def __str__(self) -> str:
        return f"{self.name} ({self.color})"
