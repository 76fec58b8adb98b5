from __future__ import annotations

import random
from dataclasses import dataclass, field

from .config import config


@dataclass(slots=True)
class Dice:
    sides: int = config.DICE_SIDES
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def seeded(cls, seed: int | None) -> "Dice":
        return cls(rng=random.Random(seed))

    def roll(self) -> int:
        return self.rng.randint(1, self.sides)
