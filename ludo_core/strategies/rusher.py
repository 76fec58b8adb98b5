from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Sequence

from ..types import MoveResult
from .base import BaseStrategy

# Lower rank is preferred
_RESULT_RANK = {
    MoveResult.FINISHED: 0,
    MoveResult.CAPTURED: 1,
    MoveResult.MOVED: 2,
}


@dataclass(slots=True)
class RusherStrategy(BaseStrategy):
    """Finishes or captures when it can, otherwise pushes the most advanced piece."""

    name: ClassVar[str] = "rusher"

    def choose(self, board, player_id: int, dice_roll: int, legal_pieces: Sequence[int]) -> int:
        def key(piece: int) -> tuple[int, int, int]:
            result = board.preview_move(player_id, piece, dice_roll)
            return (
                _RESULT_RANK.get(result, len(_RESULT_RANK)),
                -board.progress(player_id, piece),
                piece,
            )

        return min(legal_pieces, key=key)
