from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional

from loguru import logger

from .config import config
from .dice import Dice
from .exceptions import GameAborted
from .game import Game
from .player import Player
from .render import render_board
from .strategies import HumanStrategy, RandomStrategy, available, create
from .strategies.human import read_line
from .types import MoveResult, TurnOutcome

WELCOME = """Welcome to Ludo!
Get all your pieces from the yard to the finish line.
Roll a 6 to move a piece out of the yard.
Capture opponent pieces by landing on their space.
Roll a 6 or capture to get an extra turn.
"""

RESULT_MESSAGES = {
    MoveResult.MOVED: "moved successfully",
    MoveResult.CAPTURED: "captured an opponent's piece",
    MoveResult.FINISHED: "reached the finish",
    MoveResult.INVALID_MOVE: "couldn't move (invalid move)",
}


@dataclass
class PlayConfig:
    players: Optional[int]
    names: List[str]
    strategies: List[str]
    seed: Optional[int]
    max_turns: int
    verbose: bool


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play a game of Ludo in the terminal")
    parser.add_argument(
        "--players",
        type=int,
        default=None,
        help="Number of players (2-4); asked interactively when a human is seated",
    )
    parser.add_argument("--names", nargs="*", default=[], help="Player names in seat order")
    parser.add_argument(
        "--strategies",
        nargs="*",
        default=[HumanStrategy.name],
        choices=sorted(available(ignore_human=False)),
        help=(
            "Strategy per seat; a single value applies to every seat. "
            f"Bots: {', '.join(sorted(available()))}"
        ),
    )
    parser.add_argument("--seed", type=int, default=config.SEED)
    parser.add_argument(
        "--max-turns",
        type=int,
        default=config.MAX_TURNS,
        help="Stop after this many turns (0 = no limit)",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def parse_play_args(args: list[str] | None = None) -> PlayConfig:
    namespace = build_parser().parse_args(args=args)
    return PlayConfig(
        players=namespace.players,
        names=list(namespace.names),
        strategies=list(namespace.strategies) or [HumanStrategy.name],
        seed=namespace.seed,
        max_turns=namespace.max_turns,
        verbose=namespace.verbose,
    )


def ask_player_count(input_fn: Callable[[str], str] = input) -> int:
    while True:
        text = read_line(
            f"Enter the number of players ({config.MIN_PLAYERS}-{config.MAX_PLAYERS}): ",
            input_fn,
        )
        if text.isdigit() and config.MIN_PLAYERS <= int(text) <= config.MAX_PLAYERS:
            return int(text)
        print(f"Please enter a number between {config.MIN_PLAYERS} and {config.MAX_PLAYERS}.")


def ask_player_name(player_id: int, input_fn: Callable[[str], str] = input) -> str:
    return read_line(f"Enter name for Player {player_id + 1}: ", input_fn)


def seat_strategies(
    names: List[str],
    count: int,
    seed: Optional[int],
    input_fn: Callable[[str], str] = input,
):
    if len(names) == 1:
        names = names * count
    if len(names) != count:
        raise ValueError(f"Expected 1 or {count} strategies, got {len(names)}")
    seats = []
    for i, name in enumerate(names):
        if name == RandomStrategy.name and seed is not None:
            seats.append(create(name, rng=Dice.seeded(seed + i + 1).rng))
        elif name == HumanStrategy.name:
            seats.append(create(name, input_fn=input_fn))
        else:
            seats.append(create(name))
    return seats


def describe_turn(outcome: TurnOutcome, player: Player) -> List[str]:
    lines = [f"{player.name} rolled a {outcome.dice_roll}."]
    if outcome.skipped:
        lines.append("No valid moves available. Turn skipped.")
    else:
        lines.append(
            f"{player.name}'s piece {outcome.piece} {RESULT_MESSAGES[outcome.result]}"
        )
    if outcome.extra_turn:
        lines.append("Extra turn!")
    return lines


def configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else config.LOG_LEVEL)


def run(cfg: PlayConfig, input_fn: Callable[[str], str] = input) -> int:
    configure_logging(cfg.verbose)
    has_human = HumanStrategy.name in cfg.strategies

    print(WELCOME)
    try:
        count = cfg.players
        if count is None:
            count = ask_player_count(input_fn) if has_human else config.NUM_PLAYERS
        names = list(cfg.names[:count])
        for player_id in range(len(names), count):
            names.append(ask_player_name(player_id, input_fn) if has_human else "")
        players = [Player(player_id=i, name=name) for i, name in enumerate(names)]

        game = Game(
            players=players,
            strategies=seat_strategies(cfg.strategies, count, cfg.seed, input_fn),
            dice=Dice.seeded(cfg.seed),
            max_turns=cfg.max_turns or None,
        )
        logger.debug(f"Starting game: {[str(p) for p in players]}, seed={cfg.seed}")

        while not game.is_over and not game.turn_limit_reached:
            player = game.current_player
            if isinstance(game.strategies[game.current_index], HumanStrategy):
                print(render_board(game.board, players))
                print(f"\n{player.name}'s turn")
                read_line("Press Enter to roll the dice...", input_fn)
            outcome = game.play_turn()
            for line in describe_turn(outcome, player):
                print(line)
    except GameAborted:
        print("Quitting game. Goodbye!")
        return 1

    print(render_board(game.board, players))
    if game.winner is None:
        print(f"\nNo winner after {game.turns_played} turns.")
    else:
        print("\n=== GAME OVER ===")
        print(f"Congratulations! {game.winner.name} has won the game!")
    return 0


def main(args: list[str] | None = None) -> int:
    try:
        return run(parse_play_args(args))
    except ValueError as e:
        logger.error(f"Cannot start game: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
