import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


@dataclass(slots=True)
class Config:
    # --- Board geometry (fixed) ---
    MAIN_TRACK_SIZE: int = 52
    HOME_TRACK_SIZE: int = 6
    PIECES_PER_PLAYER: int = 4
    MIN_PLAYERS: int = 2
    MAX_PLAYERS: int = 4

    # --- Dice ---
    DICE_SIDES: int = 6
    EXIT_YARD_ROLL: int = 6

    # --- Runtime (env overridable) ---
    NUM_PLAYERS: int = int(os.getenv("NUM_PLAYERS", 4))
    MAX_TURNS: int = int(os.getenv("MAX_TURNS", 0))  # 0 = play until someone wins
    SEED: int | None = _optional_int("SEED")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # Derived (populated in __post_init__ due to slots)
    HOME_ENTRY_DISTANCE: int = 0

    def __post_init__(self):
        # Travelled distance beyond which a piece leaves the shared track
        self.HOME_ENTRY_DISTANCE = self.MAIN_TRACK_SIZE - self.HOME_TRACK_SIZE

        if not self.MIN_PLAYERS <= self.NUM_PLAYERS <= self.MAX_PLAYERS:
            raise ValueError(
                f"NUM_PLAYERS must be between {self.MIN_PLAYERS} and {self.MAX_PLAYERS}"
            )
        if self.MAX_TURNS < 0:
            raise ValueError("MAX_TURNS must be >= 0")


PLAYER_COLORS: tuple[str, ...] = ("red", "green", "blue", "yellow")

config = Config()
