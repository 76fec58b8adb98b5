from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np
from loguru import logger

from .config import config
from .exceptions import BoardConfigurationError, CorruptedBoardError
from .types import (
    Finished,
    HomeTrack,
    MainTrack,
    MoveResult,
    PieceLocation,
    PieceRef,
    Yard,
)


@dataclass(slots=True)
class Board:
    """Owns piece placement for one game and resolves every proposed move.

    The main track is a ring of ``MAIN_TRACK_SIZE`` cells shared by all
    players; a cell may hold any number of pieces. Each player also owns a
    private home track of ``HOME_TRACK_SIZE`` slots holding at most one piece
    each. A piece not on either track is in its yard or finished.

    State only changes through :meth:`move_piece` and
    :meth:`move_from_yard_to_start`; a rejected move leaves it untouched.
    """

    player_count: int
    _main_track: List[List[PieceRef]] = field(init=False, repr=False)
    _home_tracks: List[List[Optional[int]]] = field(init=False, repr=False)
    _yards: List[List[bool]] = field(init=False, repr=False)
    _finished: List[List[bool]] = field(init=False, repr=False)
    _starts: List[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not config.MIN_PLAYERS <= self.player_count <= config.MAX_PLAYERS:
            raise BoardConfigurationError(
                f"player_count must be between {config.MIN_PLAYERS} and "
                f"{config.MAX_PLAYERS}, got {self.player_count}"
            )
        n = config.MAIN_TRACK_SIZE
        pieces = config.PIECES_PER_PLAYER
        self._main_track = [[] for _ in range(n)]
        self._home_tracks = [
            [None] * config.HOME_TRACK_SIZE for _ in range(self.player_count)
        ]
        self._yards = [[True] * pieces for _ in range(self.player_count)]
        self._finished = [[False] * pieces for _ in range(self.player_count)]
        # Evenly spaced entry cells around the ring
        spacing = n // self.player_count
        self._starts = [(p * spacing) % n for p in range(self.player_count)]

    # --- Argument checks ---
    def _check_player(self, player: int) -> None:
        if not 0 <= player < self.player_count:
            raise BoardConfigurationError(
                f"player must be in 0..{self.player_count - 1}, got {player}"
            )

    def _check_piece(self, player: int, piece: int) -> None:
        self._check_player(player)
        if not 0 <= piece < config.PIECES_PER_PLAYER:
            raise BoardConfigurationError(
                f"piece must be in 0..{config.PIECES_PER_PLAYER - 1}, got {piece}"
            )

    @staticmethod
    def _check_steps(steps: int) -> None:
        if not 1 <= steps <= config.DICE_SIDES:
            raise BoardConfigurationError(
                f"steps must be in 1..{config.DICE_SIDES}, got {steps}"
            )

    # --- Geometry ---
    def start_position(self, player: int) -> int:
        self._check_player(player)
        return self._starts[player]

    def distance_from_start(self, player: int, position: int) -> int:
        """Distance travelled along the ring from ``player``'s start to ``position``."""
        n = config.MAIN_TRACK_SIZE
        return (n + position - self._starts[player]) % n

    # --- Queries ---
    def is_in_yard(self, player: int, piece: int) -> bool:
        self._check_piece(player, piece)
        return self._yards[player][piece]

    def is_finished(self, player: int, piece: int) -> bool:
        self._check_piece(player, piece)
        return self._finished[player][piece]

    def locate(self, player: int, piece: int) -> PieceLocation:
        """Classify where a piece is.

        Raises:
            CorruptedBoardError: the piece is in none of the four places. This
                means an earlier mutation broke the board and is never an
                expected outcome.
        """
        if self.is_in_yard(player, piece):
            return Yard()
        if self.is_finished(player, piece):
            return Finished()

        ref = PieceRef(player, piece)
        for pos, occupants in enumerate(self._main_track):
            if ref in occupants:
                return MainTrack(pos)

        for pos, occupant in enumerate(self._home_tracks[player]):
            if occupant == piece:
                return HomeTrack(pos)

        raise CorruptedBoardError(
            f"Piece not found on board: player {player}, piece {piece}"
        )

    def locations(self, player: int) -> List[PieceLocation]:
        return [self.locate(player, i) for i in range(config.PIECES_PER_PLAYER)]

    def has_won(self, player: int) -> bool:
        self._check_player(player)
        return all(self._finished[player])

    def pieces_at(self, position: int) -> List[PieceRef]:
        """Pieces on a main-track cell, in arrival order."""
        if not 0 <= position < config.MAIN_TRACK_SIZE:
            raise BoardConfigurationError(
                f"position must be in 0..{config.MAIN_TRACK_SIZE - 1}, got {position}"
            )
        return list(self._main_track[position])

    def yard_pieces(self, player: int) -> List[int]:
        self._check_player(player)
        return [i for i, in_yard in enumerate(self._yards[player]) if in_yard]

    def home_track(self, player: int) -> List[Optional[int]]:
        """Home-track slots for ``player``: the piece index in each slot, or None."""
        self._check_player(player)
        return list(self._home_tracks[player])

    def finished_pieces(self, player: int) -> List[int]:
        self._check_player(player)
        return [i for i, done in enumerate(self._finished[player]) if done]

    def occupancy(self) -> np.ndarray:
        """Return a (player_count, MAIN_TRACK_SIZE) array of piece counts per cell."""
        counts = np.zeros((self.player_count, config.MAIN_TRACK_SIZE), dtype=np.int64)
        for pos, occupants in enumerate(self._main_track):
            for ref in occupants:
                counts[ref.player, pos] += 1
        return counts

    def progress(self, player: int, piece: int) -> int:
        """Steps travelled since leaving the yard.

        0 in the yard, 1 on the start cell, ``HOME_ENTRY_DISTANCE + 2`` on the
        first home slot and ``MAIN_TRACK_SIZE + 2`` once finished.
        """
        location = self.locate(player, piece)
        if isinstance(location, Yard):
            return 0
        if isinstance(location, MainTrack):
            return self.distance_from_start(player, location.position) + 1
        if isinstance(location, HomeTrack):
            return config.HOME_ENTRY_DISTANCE + 2 + location.position
        return config.MAIN_TRACK_SIZE + 2

    # --- Move planning (no side effects) ---
    def _home_target(self, player: int, position: int, steps: int) -> Optional[int]:
        """Home slot reached from main-track ``position``, or None if still on the ring."""
        target = (position + steps) % config.MAIN_TRACK_SIZE
        distance = self.distance_from_start(player, target)
        if distance > config.HOME_ENTRY_DISTANCE:
            return distance - config.HOME_ENTRY_DISTANCE - 1
        return None

    def preview_move(self, player: int, piece: int, steps: int) -> MoveResult:
        """The result :meth:`move_piece` would return, without applying it."""
        self._check_steps(steps)
        location = self.locate(player, piece)
        if isinstance(location, Yard):
            if steps == config.EXIT_YARD_ROLL:
                return MoveResult.MOVED
            return MoveResult.INVALID_MOVE
        if isinstance(location, Finished):
            return MoveResult.INVALID_MOVE

        home = self._home_tracks[player]
        if isinstance(location, HomeTrack):
            target = location.position + steps
            if target == config.HOME_TRACK_SIZE:
                return MoveResult.FINISHED
            if target < config.HOME_TRACK_SIZE and home[target] is None:
                return MoveResult.MOVED
            return MoveResult.INVALID_MOVE

        home_pos = self._home_target(player, location.position, steps)
        if home_pos is not None:
            if home_pos < config.HOME_TRACK_SIZE and home[home_pos] is None:
                return MoveResult.MOVED
            return MoveResult.INVALID_MOVE

        target = (location.position + steps) % config.MAIN_TRACK_SIZE
        if any(other.player != player for other in self._main_track[target]):
            return MoveResult.CAPTURED
        return MoveResult.MOVED

    def can_move(self, player: int, piece: int, steps: int) -> bool:
        """Whether :meth:`move_piece` would accept this move."""
        return self.preview_move(player, piece, steps).is_valid

    # --- Mutations ---
    def move_from_yard_to_start(self, player: int, piece: int) -> bool:
        """Put a yard piece on its owner's start cell. No dice rule is applied."""
        if not self.is_in_yard(player, piece):
            return False
        start = self._starts[player]
        self._yards[player][piece] = False
        self._main_track[start].append(PieceRef(player, piece))
        logger.debug(f"P{player} piece {piece} left the yard onto cell {start}")
        return True

    def move_piece(self, player: int, piece: int, steps: int) -> MoveResult:
        """Validate and apply a move of ``steps`` cells.

        Returns the outcome; ``MoveResult.INVALID_MOVE`` always leaves the
        board exactly as it was.
        """
        self._check_steps(steps)
        location = self.locate(player, piece)

        if isinstance(location, Yard):
            if steps != config.EXIT_YARD_ROLL:
                return MoveResult.INVALID_MOVE
            self.move_from_yard_to_start(player, piece)
            return MoveResult.MOVED

        if isinstance(location, MainTrack):
            return self._move_on_main_track(player, piece, location.position, steps)

        if isinstance(location, HomeTrack):
            return self._move_on_home_track(player, piece, location.position, steps)

        return MoveResult.INVALID_MOVE

    def _move_on_main_track(
        self, player: int, piece: int, position: int, steps: int
    ) -> MoveResult:
        ref = PieceRef(player, piece)
        home_pos = self._home_target(player, position, steps)

        if home_pos is not None:
            # Destination is checked before the piece leaves its cell
            if home_pos >= config.HOME_TRACK_SIZE:
                logger.debug(f"P{player} piece {piece} would overshoot the home track")
                return MoveResult.INVALID_MOVE
            home = self._home_tracks[player]
            if home[home_pos] is not None:
                logger.debug(
                    f"P{player} piece {piece} blocked by own piece {home[home_pos]} "
                    f"on home slot {home_pos}"
                )
                return MoveResult.INVALID_MOVE
            self._main_track[position].remove(ref)
            home[home_pos] = piece
            logger.debug(f"P{player} piece {piece} entered home slot {home_pos}")
            return MoveResult.MOVED

        target = (position + steps) % config.MAIN_TRACK_SIZE
        self._main_track[position].remove(ref)

        cell = self._main_track[target]
        captured = [other for other in cell if other.player != player]
        if captured:
            cell[:] = [other for other in cell if other.player == player]
            for victim in captured:
                self._yards[victim.player][victim.piece] = True
            logger.debug(
                f"P{player} piece {piece} captured "
                f"{[(v.player, v.piece) for v in captured]} on cell {target}"
            )
        cell.append(ref)
        return MoveResult.CAPTURED if captured else MoveResult.MOVED

    def _move_on_home_track(
        self, player: int, piece: int, position: int, steps: int
    ) -> MoveResult:
        home = self._home_tracks[player]
        target = position + steps

        if target == config.HOME_TRACK_SIZE:
            home[position] = None
            self._finished[player][piece] = True
            logger.debug(f"P{player} piece {piece} finished")
            return MoveResult.FINISHED
        if target > config.HOME_TRACK_SIZE:
            return MoveResult.INVALID_MOVE
        if home[target] is not None:
            return MoveResult.INVALID_MOVE

        home[position] = None
        home[target] = piece
        return MoveResult.MOVED
