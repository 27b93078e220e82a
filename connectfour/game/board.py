"""
board.py - Board representation for Connect Four

This module implements the Board class which holds the grid contents and
the column-drop placement rules. Win detection lives in
connectfour.game.win; turn sequencing in connectfour.game.rules.
"""

from typing import List, Optional, Sequence

import numpy as np

from connectfour.debug import debug
from connectfour.utils import WIDTH, HEIGHT, Player, render_board_ascii


class Board:
    """
    A Connect Four grid of `height` rows by `width` columns.

    Row 0 is the top of the board and row `height - 1` the bottom; pieces
    always come to rest in the lowest empty cell of their column.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT):
        """
        Initialize an empty board.

        Args:
            width: Number of columns
            height: Number of rows
        """
        if width < 1 or height < 1:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        debug.debug(f"Initializing new {width}x{height} Board", "board")
        self.width = width
        self.height = height
        self.grid = np.zeros((height, width), dtype=int)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> 'Board':
        """
        Build a board from nested cell values, top row first.

        Gravity is not enforced, so arbitrary positions can be analysed.
        """
        grid = np.array(rows, dtype=int)
        if grid.ndim != 2:
            raise ValueError("Rows must form a rectangular 2D grid")
        if not np.isin(grid, [p.value for p in Player]).all():
            raise ValueError("Cell values must be 0, 1 or 2")
        board = cls(width=grid.shape[1], height=grid.shape[0])
        board.grid = grid
        return board

    def copy(self) -> 'Board':
        """Create an independent copy of this board."""
        new_board = Board(self.width, self.height)
        new_board.grid = self.grid.copy()
        return new_board

    def mirrored(self) -> 'Board':
        """Copy of this board reflected left to right (column x becomes width-1-x)."""
        new_board = self.copy()
        new_board.grid = np.fliplr(self.grid).copy()
        return new_board

    def is_valid_column(self, column: int) -> bool:
        return 0 <= column < self.width

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.height and 0 <= column < self.width

    def cell(self, row: int, column: int) -> Player:
        """Get the occupant of a cell."""
        if not self.in_bounds(row, column):
            raise ValueError(f"Cell ({row}, {column}) is outside the board")
        return Player(int(self.grid[row, column]))

    def find_landing_row(self, column: int) -> Optional[int]:
        """
        Find where a piece dropped into `column` would come to rest.

        Args:
            column: Column index (0-indexed)

        Returns:
            The lowest empty row, or None if the column is full

        Raises:
            ValueError: If the column is outside the board
        """
        if not self.is_valid_column(column):
            raise ValueError(f"Column {column} out of range [0, {self.width})")

        for row in range(self.height - 1, -1, -1):
            if self.grid[row, column] == Player.EMPTY.value:
                return row
        return None

    def place(self, row: int, column: int, player: Player) -> None:
        """
        Put `player`'s piece in a cell.

        The row must come from find_landing_row for the same column,
        otherwise the gravity invariant no longer holds.

        Raises:
            ValueError: If the cell is outside the board or already taken
        """
        if player == Player.EMPTY:
            raise ValueError("Cannot place an empty piece")
        if not self.in_bounds(row, column):
            raise ValueError(f"Cell ({row}, {column}) is outside the board")
        if self.grid[row, column] != Player.EMPTY.value:
            raise ValueError(f"Cell ({row}, {column}) is already occupied")

        debug.trace(f"Placing {player.name} at ({row}, {column})", "board")
        self.grid[row, column] = player.value

    def is_full(self) -> bool:
        """True when every cell holds a piece."""
        return bool(np.all(self.grid != Player.EMPTY.value))

    def valid_columns(self) -> List[int]:
        """Columns that can still take a piece."""
        return [col for col in range(self.width) if self.grid[0, col] == Player.EMPTY.value]

    def piece_count(self, player: Optional[Player] = None) -> int:
        """Number of pieces on the board, optionally only those of `player`."""
        if player is None:
            return int(np.count_nonzero(self.grid))
        return int(np.count_nonzero(self.grid == player.value))

    def satisfies_gravity(self) -> bool:
        """Check that no column has an empty cell below an occupied one."""
        occupied = self.grid != Player.EMPTY.value
        # Scanning downward, once a column is occupied it must stay occupied
        return bool(np.all(occupied[1:] >= occupied[:-1]))

    def get_state(self) -> np.ndarray:
        """Copy of the grid as a numpy array."""
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height}, pieces={self.piece_count()})"
