from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from loguru import logger

from .board import Board
from .config import config
from .dice import Dice
from .player import Player
from .strategies.base import BaseStrategy
from .types import MoveResult, TurnOutcome


@dataclass(slots=True)
class Game:
    """Sequences turns over a single :class:`Board`.

    A turn rolls the dice, asks the current player's strategy for one of the
    legal pieces and applies the move. A six or a capture grants another
    turn; otherwise play passes to the next seat.
    """

    players: List[Player]
    strategies: Sequence[BaseStrategy]
    dice: Dice = field(default_factory=Dice)
    max_turns: Optional[int] = None
    board: Board = field(init=False)
    current_index: int = field(default=0, init=False)
    turns_played: int = field(default=0, init=False)
    winner: Optional[Player] = field(default=None, init=False)

    def __post_init__(self) -> None:
        if len(self.strategies) != len(self.players):
            raise ValueError("Expected one strategy per player")
        self.board = Board(len(self.players))

    @property
    def current_player(self) -> Player:
        return self.players[self.current_index]

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    @property
    def turn_limit_reached(self) -> bool:
        return bool(self.max_turns) and self.turns_played >= self.max_turns

    def legal_pieces(self, player_id: int, dice_roll: int) -> List[int]:
        return [
            piece
            for piece in range(config.PIECES_PER_PLAYER)
            if self.board.can_move(player_id, piece, dice_roll)
        ]

    def next_player(self) -> None:
        self.current_index = (self.current_index + 1) % len(self.players)

    def play_turn(self) -> TurnOutcome:
        if self.is_over:
            raise RuntimeError("Game is already over")

        player = self.current_player
        dice_roll = self.dice.roll()
        self.turns_played += 1
        outcome = TurnOutcome(player_id=player.player_id, dice_roll=dice_roll)

        legal = self.legal_pieces(player.player_id, dice_roll)
        if not legal:
            logger.debug(f"{player.name} rolled {dice_roll}: no legal move, turn skipped")
            # a six keeps the turn even when every piece is blocked
            if dice_roll == config.EXIT_YARD_ROLL:
                outcome.extra_turn = True
            else:
                self.next_player()
            return outcome

        strategy = self.strategies[self.current_index]
        piece = strategy.choose(self.board, player.player_id, dice_roll, legal)
        result = self.board.move_piece(player.player_id, piece, dice_roll)
        outcome.piece = piece
        outcome.result = result

        if result is MoveResult.INVALID_MOVE:
            logger.warning(
                f"{player.name} chose piece {piece} with {dice_roll} but the move was rejected"
            )
        elif result is MoveResult.CAPTURED:
            logger.info(f"{player.name} captured with piece {piece} (rolled {dice_roll})")
        elif result is MoveResult.FINISHED:
            logger.info(f"{player.name} brought piece {piece} home")
        else:
            logger.debug(f"{player.name} moved piece {piece} by {dice_roll}")

        if result is MoveResult.FINISHED and self.board.has_won(player.player_id):
            self.winner = player
            outcome.won = True
            logger.info(f"{player.name} won after {self.turns_played} turns")
            return outcome

        if result is MoveResult.CAPTURED or dice_roll == config.EXIT_YARD_ROLL:
            outcome.extra_turn = True
        else:
            self.next_player()
        return outcome

    def play(self) -> Optional[Player]:
        """Play until someone wins; returns None if ``max_turns`` runs out first."""
        while not self.is_over:
            if self.turn_limit_reached:
                logger.warning(f"Stopping after {self.turns_played} turns without a winner")
                return None
            self.play_turn()
        return self.winner
