"""Helpers for building game positions in tests."""

from connectfour.utils import Player


def play(engine, moves):
    """Apply `moves` in order and return the last result."""
    result = None
    for column in moves:
        result = engine.apply_move(column)
    return result


def set_cells(board, cells, player=Player.ONE):
    """Write `player` into each (row, col) of `cells` directly."""
    for row, col in cells:
        board.grid[row, col] = player.value


def tie_moves():
    """
    Column sequence that fills a 6x7 board without four in a row.

    Final position, bottom row first:
        X X O O X X O
        O O X X O O X
        ... repeated
    """
    def paired(x_first, o_first):
        return [x_first, o_first, o_first, x_first] * 3

    return paired(0, 2) + paired(1, 3) + paired(5, 6) + [4] * 6
