"""
exceptions.py - Error types raised by the Connect Four core

All errors derive from ValueError so callers catching the builtin keep working.
"""


class Connect4Error(ValueError):
    """Base class for Connect Four errors."""


class ColumnFullError(Connect4Error):
    """Raised when a drop is attempted on a column whose top cell is occupied."""

    def __init__(self, column: int):
        super().__init__(f"Column {column} is full")
        self.column = column


class InvalidColumnError(Connect4Error):
    """Raised when a column (or cell) index lies outside the board."""

    def __init__(self, column: int, cols: int):
        super().__init__(f"Column {column} out of range 0..{cols - 1}")
        self.column = column
        self.cols = cols


class InvalidConfigurationError(Connect4Error):
    """Raised at construction time for unusable board sizes or player markers."""
