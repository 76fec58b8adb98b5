"""
Ludo board engine.
Tracks piece locations for 2-4 players and resolves moves, captures and finishes.
"""

from .board import Board
from .config import config
from .dice import Dice
from .exceptions import (
    BoardConfigurationError,
    CorruptedBoardError,
    GameAborted,
    LudoError,
)
from .game import Game
from .player import Player
from .render import render_board
from .types import (
    Finished,
    HomeTrack,
    MainTrack,
    MoveResult,
    PieceLocation,
    PieceRef,
    TurnOutcome,
    Yard,
)

__all__ = [
    "Board",
    "BoardConfigurationError",
    "CorruptedBoardError",
    "Dice",
    "Finished",
    "Game",
    "GameAborted",
    "HomeTrack",
    "LudoError",
    "MainTrack",
    "MoveResult",
    "PieceLocation",
    "PieceRef",
    "Player",
    "TurnOutcome",
    "Yard",
    "config",
    "render_board",
]
