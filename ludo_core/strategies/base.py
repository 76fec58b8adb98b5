from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Sequence

if TYPE_CHECKING:
    from ..board import Board


class BaseStrategy:
    """Picks which piece to move once the dice are rolled.

    ``legal_pieces`` is never empty: the game skips the turn itself when
    nothing can move.
    """

    name: ClassVar[str] = "base"

    def choose(
        self,
        board: "Board",
        player_id: int,
        dice_roll: int,
        legal_pieces: Sequence[int],
    ) -> int:  # pragma: no cover - abstract
        raise NotImplementedError
