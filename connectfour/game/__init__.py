"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board, the win-detection scans and the
GameEngine that owns turn order and the game lifecycle.
"""

from connectfour.game.board import Board
from connectfour.game.rules import GameEngine, find_winning_line
from connectfour.game.state import Continue, GameState, MoveResult, Rejected, RejectReason, Tie, Win

__all__ = ['Board', 'GameEngine', 'find_winning_line', 'GameState', 'MoveResult',
           'Continue', 'Win', 'Tie', 'Rejected', 'RejectReason']
