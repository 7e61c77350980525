"""
rules.py - Win detection and turn management for Connect Four

This module provides:
1. Whole-board scans that find a four-in-a-row in each of the four directions
2. GameEngine, which owns the turn order and game lifecycle and turns each
   column choice into an explicit MoveResult
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from connectfour.debug import debug
from connectfour.exceptions import ColumnFullError
from connectfour.game.board import Board
from connectfour.game.state import (Continue, GameState, MoveResult, Rejected, RejectReason,
                                    Tie, Win, WinningLine)
from connectfour.utils import (CONNECT_N, DEFAULT_COLS, DEFAULT_MARKERS, DEFAULT_ROWS,
                               Direction, GamePhase, Player, line_from, validate_markers)

LineMatch = Tuple[Player, WinningLine]


def scan_rows(grid: np.ndarray) -> Optional[LineMatch]:
    """
    Look for four in a row horizontally.

    Rows are scanned top to bottom and each row left to right. The run
    counter grows while neighbouring cells hold the same non-empty occupant.
    """
    rows, cols = grid.shape
    for row in range(rows):
        run = 0
        for col in range(cols - 1):
            if grid[row, col] != Player.EMPTY.value and grid[row, col] == grid[row, col + 1]:
                run += 1
            else:
                run = 0
            if run == CONNECT_N - 1:
                start = col + 2 - CONNECT_N
                return Player(int(grid[row, col])), line_from(row, start, Direction.HORIZONTAL)
    return None


def scan_columns(grid: np.ndarray) -> Optional[LineMatch]:
    """Look for four in a row vertically, columns left to right, rows top to bottom."""
    rows, cols = grid.shape
    for col in range(cols):
        run = 0
        for row in range(rows - 1):
            if grid[row, col] != Player.EMPTY.value and grid[row, col] == grid[row + 1, col]:
                run += 1
            else:
                run = 0
            if run == CONNECT_N - 1:
                start = row + 2 - CONNECT_N
                return Player(int(grid[row, col])), line_from(start, col, Direction.VERTICAL)
    return None


def _scan_diagonal(grid: np.ndarray, anchors: Sequence[Tuple[int, int]],
                   direction: Direction) -> Optional[LineMatch]:
    for row, col in anchors:
        occupant = grid[row, col]
        if occupant == Player.EMPTY.value:
            continue
        line = line_from(row, col, direction)
        if all(grid[r, c] == occupant for r, c in line[1:]):
            return Player(int(occupant)), line
    return None


def scan_diagonals_down(grid: np.ndarray) -> Optional[LineMatch]:
    """Look for a top-left to bottom-right line, anchored at its upper end."""
    rows, cols = grid.shape
    anchors = [(r, c) for r in range(rows - CONNECT_N + 1) for c in range(cols - CONNECT_N + 1)]
    return _scan_diagonal(grid, anchors, Direction.DIAGONAL_DOWN)


def scan_diagonals_up(grid: np.ndarray) -> Optional[LineMatch]:
    """Look for a bottom-left to top-right line, anchored at its lower end."""
    rows, cols = grid.shape
    anchors = [(r, c) for r in range(rows - 1, CONNECT_N - 2, -1)
               for c in range(cols - CONNECT_N + 1)]
    return _scan_diagonal(grid, anchors, Direction.DIAGONAL_UP)


# Order matters: the first scan that finds a line decides the reported line
WIN_SCANS = (scan_rows, scan_columns, scan_diagonals_down, scan_diagonals_up)


def find_winning_line(board: Board) -> Optional[LineMatch]:
    """
    Scan the whole board for any four in a row.

    Returns:
        (player, line) for the first line found, or None
    """
    for scan in WIN_SCANS:
        match = scan(board.grid)
        if match is not None:
            return match
    return None


class GameEngine:
    """
    Two-player Connect Four game manager.

    The engine holds the board and the GameState and is the only thing that
    mutates either. Callers drive it with apply_move() and reset() and read
    it through the query methods; markers are carried for the presentation
    layer and never inspected here.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS,
                 markers: Sequence[str] = DEFAULT_MARKERS):
        """
        Initialize a new game.

        Args:
            rows: Number of board rows (at least 4)
            cols: Number of board columns (at least 4)
            markers: Display markers for Player.ONE and Player.TWO

        Raises:
            InvalidConfigurationError: If the board is too small or the
                markers cannot be told apart
        """
        self.markers = validate_markers(markers)
        self.board = Board(rows, cols)
        self.state = GameState()
        debug.info(f"New {rows}x{cols} game, markers {self.markers[0]!r}/{self.markers[1]!r}", "engine")

    def reset(self) -> None:
        """Clear the board and start again with Player.ONE to move."""
        debug.info("Resetting game", "engine")
        self.board.reset()
        self.state.reset()

    @property
    def current_player(self) -> Player:
        return self.state.current_player

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    @property
    def winner(self) -> Optional[Player]:
        return self.state.winner

    @property
    def winning_line(self) -> Optional[WinningLine]:
        return self.state.winning_line

    def is_game_over(self) -> bool:
        return self.state.phase.is_game_over()

    def occupant_at(self, row: int, column: int) -> Player:
        return self.board.occupant_at(row, column)

    def marker_for(self, player: Player) -> str:
        if player == Player.ONE:
            return self.markers[0]
        if player == Player.TWO:
            return self.markers[1]
        raise ValueError(f"{player!r} has no marker")

    def valid_moves(self) -> List[int]:
        """
        Get the columns a move may currently be played in.

        Returns:
            Column indices, empty once the game is over
        """
        if self.is_game_over():
            return []
        return self.board.valid_columns()

    def _reject(self, reason: RejectReason, column: int) -> Rejected:
        result = Rejected(reason, column)
        debug.warning(result.message, "engine")
        return result

    def apply_move(self, column: int) -> MoveResult:
        """
        Drop the current player's piece into `column`.

        All checks happen before the board is touched, so a Rejected result
        leaves the game exactly as it was.

        Args:
            column: Column to drop into (0-indexed)

        Returns:
            Continue, Win, Tie or Rejected
        """
        player = self.state.current_player
        debug.debug(f"{player} plays column {column}", "engine")

        if self.is_game_over():
            return self._reject(RejectReason.GAME_OVER, column)
        if not self.board.is_valid_column(column):
            return self._reject(RejectReason.INVALID_COLUMN, column)
        try:
            row = self.board.drop_column(column)
        except ColumnFullError:
            return self._reject(RejectReason.COLUMN_FULL, column)

        self.board.place(row, column, player)
        self.state.moves_played += 1

        with debug.timed("win_check", "engine"):
            match = find_winning_line(self.board)

        if match is not None:
            winner, line = match
            self.state.phase = GamePhase.WON
            self.state.winner = winner
            self.state.winning_line = line
            debug.info(f"{winner} wins after {self.state.moves_played} moves with {list(line)}", "engine")
            return Win(winner, line, row, column)

        if self.board.is_full():
            self.state.phase = GamePhase.TIED
            debug.info(f"Game tied after {self.state.moves_played} moves", "engine")
            return Tie(row, column)

        self.state.current_player = player.other()
        debug.debug(f"Switching to {self.state.current_player}", "engine")
        return Continue(self.state.current_player, row, column)

    def render(self) -> str:
        return self.board.render(self.markers, self.state.winning_line)
