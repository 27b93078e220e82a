"""
utils.py - Shared constants, enumerations and helpers for Connect Four

This module provides the board defaults, the player and game status
enumerations, direction vectors used by win detection, the derived
display helpers for each player, and ASCII rendering of a grid.
"""

from enum import Enum, auto
from typing import Tuple

import numpy as np

# Board defaults
WIDTH = 7
HEIGHT = 6
CONNECT_N = 4  # Number of pieces in a row to win


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player, always opens the game
    TWO = 2

    def other(self) -> 'Player':
        """Get the opposing player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class GameStatus(Enum):
    """Enumeration representing where a game stands."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WON = auto()
    PLAYER_TWO_WON = auto()
    TIED = auto()

    def is_terminal(self) -> bool:
        """Check if no further placements are accepted."""
        return self != GameStatus.IN_PROGRESS

    @classmethod
    def won_by(cls, player: Player) -> 'GameStatus':
        """Get the winning status for a player."""
        if player == Player.ONE:
            return cls.PLAYER_ONE_WON
        if player == Player.TWO:
            return cls.PLAYER_TWO_WON
        raise ValueError(f"No winning status for {player!r}")


class Direction(Enum):
    """Orientations probed from an anchor cell during win detection."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Step vectors (row, col); every direction moves down the board or right along it
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}

_DISPLAY = {
    Player.ONE: ("RED", "red"),
    Player.TWO: ("BLUE", "blue"),
}


def display_name(player: Player) -> str:
    """Name shown to the users for a player's pieces."""
    return _DISPLAY[player][0]


def display_color(player: Player) -> str:
    """Color a renderer should paint a player's pieces with."""
    return _DISPLAY[player][1]


def win_message(player: Player) -> str:
    """Announcement for a finished game won by `player`."""
    return f"{display_name(player)} is the winner!"


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as ASCII art.

    Args:
        grid: 2D array of cell values, row 0 at the top

    Returns:
        ASCII representation with 0-based column numbers underneath
    """
    height, width = grid.shape
    symbols = {p.value: str(p) for p in Player}
    edge = "|" + "-" * (width * 2 - 1) + "|"

    lines = [edge]
    for row in range(height):
        lines.append("|" + " ".join(symbols[int(v)] for v in grid[row]) + "|")
    lines.append(edge)
    # Column labels only line up while they are single digits
    lines.append("|" + " ".join(str(col % 10) for col in range(width)) + "|")
    return "\n".join(lines)


def run_cells(row: int, col: int, direction: Direction, length: int = CONNECT_N) -> Tuple[Tuple[int, int], ...]:
    """Cells of the run of `length` starting at (row, col) along `direction`."""
    dr, dc = DIRECTION_VECTORS[direction]
    return tuple((row + i * dr, col + i * dc) for i in range(length))
