from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import ClassVar, Sequence

from .base import BaseStrategy


@dataclass(slots=True)
class RandomStrategy(BaseStrategy):
    """Uniformly random legal piece."""

    name: ClassVar[str] = "random"

    rng: random.Random = field(default_factory=random.Random)

    def choose(self, board, player_id: int, dice_roll: int, legal_pieces: Sequence[int]) -> int:
        return self.rng.choice(list(legal_pieces))
