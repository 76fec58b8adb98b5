from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional


class PieceRef(NamedTuple):
    """A piece identified by its owner and its index (0..3) within that owner."""

    player: int
    piece: int


@dataclass(frozen=True, slots=True)
class PieceLocation:
    """Where a piece currently is. Exactly one subclass describes any piece."""

    def __str__(self) -> str:
        return type(self).__name__


@dataclass(frozen=True, slots=True)
class Yard(PieceLocation):
    """Waiting area; the piece has not entered the track yet."""


@dataclass(frozen=True, slots=True)
class MainTrack(PieceLocation):
    position: int  # 0..MAIN_TRACK_SIZE-1, absolute on the shared ring

    def __str__(self) -> str:
        return f"MainTrack({self.position})"


@dataclass(frozen=True, slots=True)
class HomeTrack(PieceLocation):
    position: int  # 0..HOME_TRACK_SIZE-1, private to the owner

    def __str__(self) -> str:
        return f"HomeTrack({self.position})"


@dataclass(frozen=True, slots=True)
class Finished(PieceLocation):
    """Terminal location."""


class MoveResult(Enum):
    """Outcome of a single move attempt."""

    MOVED = "moved"
    CAPTURED = "captured"
    FINISHED = "finished"
    INVALID_MOVE = "invalid_move"

    @property
    def is_valid(self) -> bool:
        return self is not MoveResult.INVALID_MOVE


@dataclass(slots=True)
class TurnOutcome:
    player_id: int
    dice_roll: int
    piece: Optional[int] = None  # None when the turn was skipped
    result: Optional[MoveResult] = None
    extra_turn: bool = False
    won: bool = False

    @property
    def skipped(self) -> bool:
        return self.piece is None
