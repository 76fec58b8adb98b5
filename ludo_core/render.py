"""
Plain-text rendering of a board.
Reads the board through its query methods only.
"""

from typing import Optional, Sequence

from .board import Board
from .config import config
from .player import Player

CELLS_PER_ROW = 13


def _cell(board: Board, position: int) -> str:
    occupants = board.pieces_at(position)
    if not occupants:
        return f"{position:3}"
    first = occupants[0]
    label = f"P{first.player}{first.piece}"
    return label + ("+" if len(occupants) > 1 else " ")


def render_board(board: Board, players: Optional[Sequence[Player]] = None) -> str:
    """
    Render the main track followed by one summary line per player.

    Args:
        board: Board to draw
        players: Optional seats, used for names; defaults to "Player N"

    Returns:
        str: Multi-line text
    """
    lines = ["", "=== LUDO BOARD ===", "", "Main Track:"]
    row = []
    for position in range(config.MAIN_TRACK_SIZE):
        row.append(f"[{_cell(board, position)}]")
        if len(row) == CELLS_PER_ROW:
            lines.append("".join(row))
            row = []
    if row:
        lines.append("".join(row))

    lines.append("")
    lines.append("Players:")
    for player_id in range(board.player_count):
        if players is not None:
            label = str(players[player_id])
        else:
            label = f"Player {player_id + 1}"
        yard = " ".join(str(i) for i in board.yard_pieces(player_id))
        home = " ".join(
            f"{slot}:{piece}"
            for slot, piece in enumerate(board.home_track(player_id))
            if piece is not None
        )
        finished = " ".join(str(i) for i in board.finished_pieces(player_id))
        lines.append(
            f"P{player_id} {label} | start {board.start_position(player_id)} "
            f"| Yard: {yard or '-'} | Home: {home or '-'} | Finished: {finished or '-'}"
        )
    return "\n".join(lines)
