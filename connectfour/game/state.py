"""
state.py - Game state and move results for Connect Four

GameEngine owns a single GameState and answers every move with one of the
MoveResult variants below, so the presentation layer never has to inspect
engine internals to learn what happened.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from connectfour.utils import Coord, GamePhase, Player

WinningLine = Tuple[Coord, ...]


@dataclass
class GameState:
    """Mutable turn and lifecycle state owned by GameEngine."""
    current_player: Player = Player.ONE
    phase: GamePhase = GamePhase.IN_PROGRESS
    winner: Optional[Player] = None
    winning_line: Optional[WinningLine] = None
    moves_played: int = 0

    def reset(self) -> None:
        self.current_player = Player.ONE
        self.phase = GamePhase.IN_PROGRESS
        self.winner = None
        self.winning_line = None
        self.moves_played = 0


class RejectReason(Enum):
    COLUMN_FULL = "column is full"
    INVALID_COLUMN = "column is out of range"
    GAME_OVER = "game is over"


@dataclass(frozen=True)
class Continue:
    """The move was played and the game goes on with `next_player`."""
    next_player: Player
    row: int
    column: int


@dataclass(frozen=True)
class Win:
    """The move completed four in a row."""
    player: Player
    winning_line: WinningLine
    row: int
    column: int


@dataclass(frozen=True)
class Tie:
    """The move filled the board without a winner."""
    row: int
    column: int


@dataclass(frozen=True)
class Rejected:
    """The move was refused; nothing changed."""
    reason: RejectReason
    column: int

    @property
    def message(self) -> str:
        return f"Move in column {self.column} rejected: {self.reason.value}"


MoveResult = Union[Continue, Win, Tie, Rejected]
