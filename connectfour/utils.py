"""
utils.py - Constants, enumerations and helpers for the Connect Four core

This module provides the cell/player enumeration, the game phase enumeration,
direction vectors used by the win scans, and the ASCII renderer shared by the
board and the command-line shell.
"""

from enum import Enum, auto
from typing import Iterable, Optional, Sequence, Set, Tuple

import numpy as np

from connectfour.exceptions import InvalidConfigurationError

# Game constants
DEFAULT_ROWS = 6
DEFAULT_COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
MIN_DIMENSION = CONNECT_N  # A smaller board could never produce a line

DEFAULT_MARKERS = ("X", "O")
EMPTY_MARKER = " "
HIGHLIGHT_MARKER = "*"

Coord = Tuple[int, int]  # (row, col), row 0 is the top row


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player, always moves first
    TWO = 2

    def other(self) -> "Player":
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return "Empty"
        return f"Player {self.value}"


class GamePhase(Enum):
    """Lifecycle of a single game."""
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()

    def is_game_over(self) -> bool:
        """Check if the phase is terminal."""
        return self != GamePhase.IN_PROGRESS


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # From top-left to bottom-right
    DIAGONAL_UP = auto()  # From bottom-left to top-right


# Direction vectors (row, col) for each direction
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (-1, 1),
}


def line_from(row: int, col: int, direction: Direction, length: int = CONNECT_N) -> Tuple[Coord, ...]:
    """
    Build the coordinates of a line starting at (row, col).

    Args:
        row: Row of the first cell
        col: Column of the first cell
        direction: Direction the line extends in
        length: Number of cells in the line

    Returns:
        Tuple of (row, col) coordinates in order
    """
    dr, dc = DIRECTION_VECTORS[direction]
    return tuple((row + i * dr, col + i * dc) for i in range(length))


def validate_markers(markers: Sequence[str]) -> Tuple[str, str]:
    """
    Check that the two player markers can be told apart on screen.

    Returns the markers as a tuple, or raises InvalidConfigurationError.
    """
    if len(markers) != 2:
        raise InvalidConfigurationError(f"Exactly two player markers are required, got {len(markers)}")

    first, second = (str(m) for m in markers)
    if not first.strip() or not second.strip():
        raise InvalidConfigurationError("Player markers must not be blank")
    if first == second:
        raise InvalidConfigurationError(f"Player markers must be distinct, both are {first!r}")
    if HIGHLIGHT_MARKER in (first, second):
        raise InvalidConfigurationError(f"{HIGHLIGHT_MARKER!r} is reserved for the winning line")
    return first, second


def render_board_ascii(grid: np.ndarray,
                       markers: Sequence[str] = DEFAULT_MARKERS,
                       highlight: Optional[Iterable[Coord]] = None) -> str:
    """
    Render the board as ASCII art.

    Args:
        grid: The game board, a (rows, cols) array of Player values
        markers: Display markers for Player.ONE and Player.TWO
        highlight: Coordinates to draw with the highlight marker

    Returns:
        ASCII representation of the board
    """
    rows, cols = grid.shape
    highlighted: Set[Coord] = set(highlight or ())
    symbols = {
        Player.EMPTY.value: EMPTY_MARKER,
        Player.ONE.value: markers[0],
        Player.TWO.value: markers[1],
    }
    width = max(len(str(cols - 1)), *(len(m) for m in markers))

    def cell_text(text: str) -> str:
        return text.center(width)

    border = "+" + "-" * ((width + 1) * cols - 1) + "+"
    result = [border]
    for row in range(rows):
        cells = []
        for col in range(cols):
            if (row, col) in highlighted:
                cells.append(cell_text(HIGHLIGHT_MARKER))
            else:
                cells.append(cell_text(symbols[int(grid[row, col])]))
        result.append("|" + " ".join(cells) + "|")
    result.append(border)
    result.append("|" + " ".join(cell_text(str(c)) for c in range(cols)) + "|")

    return "\n".join(result)
