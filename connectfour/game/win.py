"""
win.py - Four-in-a-row detection

Every cell is tried as the anchor of four candidate runs, one per
direction in DIRECTION_VECTORS. Each direction only steps down or right,
which still covers every line on the board: a line is always found from
its top-most (then left-most) cell. Runs that leave the board simply do
not match.
"""

from typing import List, Optional, Tuple

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.utils import CONNECT_N, Direction, Player, run_cells

Coord = Tuple[int, int]  # (row, col)


def candidate_runs(row: int, col: int) -> List[Tuple[Coord, ...]]:
    """The four runs anchored at (row, col), in detection order."""
    return [run_cells(row, col, direction) for direction in Direction]


def _is_winning_run(board: Board, cells: Tuple[Coord, ...], player: Player) -> bool:
    return all(
        board.in_bounds(r, c) and board.grid[r, c] == player.value
        for r, c in cells
    )


def find_winning_run(board: Board, player: Player) -> Optional[List[Coord]]:
    """
    Find a four-in-a-row owned by `player`.

    Args:
        board: Board to scan
        player: Player whose pieces must fill the run

    Returns:
        The run's (row, col) cells from its anchor outward, or None
    """
    if player == Player.EMPTY or board.piece_count(player) < CONNECT_N:
        return None

    for row in range(board.height):
        for col in range(board.width):
            for cells in candidate_runs(row, col):
                if _is_winning_run(board, cells, player):
                    debug.trace(f"Winning run for {player.name}: {list(cells)}", "win")
                    return list(cells)
    return None


def has_win(board: Board, player: Player) -> bool:
    """True if `player` has four in a row anywhere on the board."""
    with debug.timer("win_check", "win"):
        return find_winning_run(board, player) is not None
