"""
board.py - Board representation for Connect Four

This module implements the Board class, the sole owner of cell contents. It
resolves where a dropped piece lands, places pieces, and answers occupancy
queries. Turn order and win detection live in rules.py.
"""

from numbers import Integral
from typing import List, Optional, Sequence

import numpy as np

from connectfour.debug import debug
from connectfour.exceptions import ColumnFullError, InvalidColumnError, InvalidConfigurationError
from connectfour.utils import (DEFAULT_COLS, DEFAULT_MARKERS, DEFAULT_ROWS, MIN_DIMENSION,
                               Coord, Player, render_board_ascii)


class Board:
    """
    A fixed-size Connect Four grid.

    The grid is a (rows, cols) numpy array of Player values with row 0 at
    the top, so pieces fall towards higher row indices.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS):
        """
        Initialize an empty board.

        Args:
            rows: Number of rows, at least MIN_DIMENSION
            cols: Number of columns, at least MIN_DIMENSION

        Raises:
            InvalidConfigurationError: If either dimension is too small
        """
        if rows < MIN_DIMENSION or cols < MIN_DIMENSION:
            raise InvalidConfigurationError(
                f"Board must be at least {MIN_DIMENSION}x{MIN_DIMENSION}, got {rows}x{cols}")

        debug.debug(f"Initializing {rows}x{cols} board", "board")
        self.rows = rows
        self.cols = cols
        self.grid = np.zeros((rows, cols), dtype=np.int8)

    def reset(self) -> None:
        """Reset every cell to empty."""
        debug.debug("Resetting board", "board")
        self.grid.fill(Player.EMPTY.value)

    def copy(self) -> "Board":
        new_board = Board(self.rows, self.cols)
        new_board.grid = self.grid.copy()
        return new_board

    def is_valid_column(self, column: int) -> bool:
        """True for an integer index inside the board."""
        return isinstance(column, Integral) and 0 <= column < self.cols

    def _check_column(self, column: int) -> None:
        if not self.is_valid_column(column):
            raise InvalidColumnError(column, self.cols)

    def _check_cell(self, row: int, column: int) -> None:
        self._check_column(column)
        if not (isinstance(row, Integral) and 0 <= row < self.rows):
            raise ValueError(f"Row {row} out of range 0..{self.rows - 1}")

    def is_column_full(self, column: int) -> bool:
        self._check_column(column)
        return bool(self.grid[0, column] != Player.EMPTY.value)

    def valid_columns(self) -> List[int]:
        """
        Get the columns that still accept a drop.

        Returns:
            List of column indices whose top cell is empty
        """
        return [int(col) for col in np.flatnonzero(self.grid[0] == Player.EMPTY.value)]

    def drop_column(self, column: int) -> int:
        """
        Find the row a piece dropped into `column` would land in.

        Scans from the bottom row upward and returns the first empty row.
        The board is not modified.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            Row index of the lowest empty cell

        Raises:
            InvalidColumnError: If the column is outside the board
            ColumnFullError: If the column has no empty cell
        """
        self._check_column(column)
        if self.is_column_full(column):
            debug.debug(f"Column {column} is full", "board")
            raise ColumnFullError(column)

        for row in range(self.rows - 1, -1, -1):
            if self.grid[row, column] == Player.EMPTY.value:
                debug.trace(f"Drop in column {column} lands on row {row}", "board")
                return row

        # The top cell was empty, so the loop always returns
        raise ColumnFullError(column)

    def place(self, row: int, column: int, player: Player) -> None:
        """
        Put `player`'s piece at (row, column).

        The caller is expected to have resolved `row` through drop_column.

        Raises:
            ValueError: If the cell is out of range, already occupied,
                or `player` is not one of the two players
        """
        self._check_cell(row, column)
        if player not in (Player.ONE, Player.TWO):
            raise ValueError(f"Cannot place a piece for {player!r}")
        if self.grid[row, column] != Player.EMPTY.value:
            raise ValueError(f"Cell ({row}, {column}) is already occupied")

        debug.trace(f"Placing {player} at ({row}, {column})", "board")
        self.grid[row, column] = player.value

    def occupant_at(self, row: int, column: int) -> Player:
        self._check_cell(row, column)
        return Player(int(self.grid[row, column]))

    def is_full(self) -> bool:
        """True when every column's top cell is occupied."""
        return bool(np.all(self.grid[0] != Player.EMPTY.value))

    def get_state(self) -> np.ndarray:
        """
        Get a copy of the grid.

        Returns:
            2D numpy array of Player values, safe for the caller to modify
        """
        return self.grid.copy()

    def render(self, markers: Sequence[str] = DEFAULT_MARKERS,
               highlight: Optional[Sequence[Coord]] = None) -> str:
        return render_board_ascii(self.grid, markers, highlight)

    def __str__(self) -> str:
        return self.render()
