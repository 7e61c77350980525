"""
Tests for GameEngine: move results, turn order, lifecycle and validation.
"""

import numpy as np
import pytest

from connectfour.exceptions import InvalidConfigurationError
from connectfour.game.rules import GameEngine
from connectfour.game.state import Continue, Rejected, RejectReason, Tie, Win
from connectfour.utils import GamePhase, Player

from helpers import play, tie_moves


class TestConstruction:

    def test_initial_state(self, engine):
        assert engine.current_player == Player.ONE
        assert engine.phase == GamePhase.IN_PROGRESS
        assert engine.winner is None
        assert engine.winning_line is None
        assert engine.valid_moves() == list(range(7))

    @pytest.mark.parametrize("rows,cols", [(3, 7), (6, 2)])
    def test_board_too_small(self, rows, cols):
        with pytest.raises(InvalidConfigurationError):
            GameEngine(rows=rows, cols=cols)

    @pytest.mark.parametrize("markers", [("X", "X"), ("X", ""), (" ", "O"), ("X",), ("X", "O", "Z"), ("*", "O")])
    def test_bad_markers(self, markers):
        with pytest.raises(InvalidConfigurationError):
            GameEngine(markers=markers)

    def test_markers_are_kept(self):
        engine = GameEngine(markers=("R", "B"))
        assert engine.marker_for(Player.ONE) == "R"
        assert engine.marker_for(Player.TWO) == "B"
        with pytest.raises(ValueError):
            engine.marker_for(Player.EMPTY)


class TestMoves:

    def test_first_move_lands_on_bottom(self, engine):
        result = engine.apply_move(3)
        assert result == Continue(Player.TWO, 5, 3)
        assert engine.occupant_at(5, 3) == Player.ONE

    def test_turns_alternate(self, engine):
        assert engine.apply_move(0).next_player == Player.TWO
        assert engine.current_player == Player.TWO
        assert engine.apply_move(1).next_player == Player.ONE
        assert engine.current_player == Player.ONE

    def test_gravity(self, engine):
        play(engine, [2, 2, 2])
        result = engine.apply_move(2)
        assert result.row == 2
        assert engine.occupant_at(2, 2) == Player.TWO

    def test_column_accepts_exactly_rows_drops(self, engine):
        for _ in range(engine.board.rows):
            assert isinstance(engine.apply_move(6), Continue)
        result = engine.apply_move(6)
        assert result == Rejected(RejectReason.COLUMN_FULL, 6)
        assert 6 not in engine.valid_moves()

    @pytest.mark.parametrize("column", [-1, 7, 42])
    def test_invalid_column(self, engine, column):
        result = engine.apply_move(column)
        assert result == Rejected(RejectReason.INVALID_COLUMN, column)
        assert "out of range" in result.message

    def test_rejection_does_not_mutate(self, engine):
        play(engine, [0] * 6)
        before = engine.board.get_state()
        player = engine.current_player
        engine.apply_move(0)
        engine.apply_move(9)
        assert np.array_equal(engine.board.grid, before)
        assert engine.current_player == player
        assert engine.state.moves_played == 6

    @pytest.mark.parametrize("column", [2.5, "3", None])
    def test_non_integer_column(self, engine, column):
        result = engine.apply_move(column)
        assert result == Rejected(RejectReason.INVALID_COLUMN, column)
        assert engine.state.moves_played == 0

    def test_numpy_integer_column(self, engine):
        assert engine.apply_move(np.int64(3)) == Continue(Player.TWO, 5, 3)


class TestWins:

    def test_horizontal_win(self, engine):
        # ONE builds the bottom row, TWO stacks on top of it
        result = play(engine, [0, 0, 1, 1, 2, 2, 3])
        assert result == Win(Player.ONE, ((5, 0), (5, 1), (5, 2), (5, 3)), 5, 3)
        assert engine.phase == GamePhase.WON
        assert engine.winner == Player.ONE
        assert engine.winning_line == ((5, 0), (5, 1), (5, 2), (5, 3))

    def test_vertical_win(self, engine):
        result = play(engine, [0, 1, 0, 1, 0, 1, 6, 1])
        assert isinstance(result, Win)
        assert result.player == Player.TWO
        assert result.winning_line == ((2, 1), (3, 1), (4, 1), (5, 1))

    def test_diagonal_win(self, engine):
        # ONE ends up on (5,0), (4,1), (3,2), (2,3)
        result = play(engine, [0, 1, 1, 2, 2, 3, 2, 3, 3, 6, 3])
        assert isinstance(result, Win)
        assert result.player == Player.ONE
        assert result.winning_line == ((5, 0), (4, 1), (3, 2), (2, 3))

    def test_down_right_diagonal_win(self, engine):
        # TWO ends up on (2,0), (3,1), (4,2), (5,3)
        result = play(engine, [2, 3, 1, 2, 0, 1, 0, 1, 0, 0])
        assert isinstance(result, Win)
        assert result.player == Player.TWO
        assert result.winning_line == ((2, 0), (3, 1), (4, 2), (5, 3))

    def test_current_player_stays_with_winner(self, engine):
        play(engine, [0, 0, 1, 1, 2, 2, 3])
        assert engine.current_player == Player.ONE

    def test_no_moves_after_win(self, engine):
        play(engine, [0, 0, 1, 1, 2, 2, 3])
        assert engine.apply_move(4) == Rejected(RejectReason.GAME_OVER, 4)
        assert engine.valid_moves() == []
        assert engine.occupant_at(5, 4) == Player.EMPTY

    def test_render_highlights_winning_line(self, engine):
        play(engine, [0, 0, 1, 1, 2, 2, 3])
        bottom = engine.render().splitlines()[6]
        assert bottom.startswith("|* * * *")


class TestTie:

    def test_full_board_is_a_tie(self, engine):
        moves = tie_moves()
        results = [engine.apply_move(c) for c in moves]
        assert all(isinstance(r, Continue) for r in results[:-1])
        assert results[-1] == Tie(0, 4)
        assert engine.phase == GamePhase.TIED
        assert engine.winner is None
        assert engine.board.is_full()

    def test_no_moves_after_tie(self, engine):
        play(engine, tie_moves())
        for column in range(7):
            assert engine.apply_move(column) == Rejected(RejectReason.GAME_OVER, column)


class TestReset:

    def test_reset_after_win(self, engine):
        play(engine, [0, 0, 1, 1, 2, 2, 3])
        engine.reset()
        assert engine.phase == GamePhase.IN_PROGRESS
        assert engine.current_player == Player.ONE
        assert engine.winner is None
        assert engine.winning_line is None
        assert all(engine.occupant_at(r, c) == Player.EMPTY for r in range(6) for c in range(7))

    def test_reset_after_tie_allows_play(self, engine):
        play(engine, tie_moves())
        engine.reset()
        assert engine.apply_move(3) == Continue(Player.TWO, 5, 3)

    def test_reset_mid_game(self, engine):
        play(engine, [3, 4, 5])
        engine.reset()
        assert engine.current_player == Player.ONE
        assert engine.state.moves_played == 0


class TestQueries:

    def test_occupant_at_does_not_mutate(self, engine):
        play(engine, [3, 3])
        before = engine.board.get_state()
        for _ in range(3):
            assert engine.occupant_at(4, 3) == Player.TWO
            assert engine.occupant_at(0, 0) == Player.EMPTY
        assert np.array_equal(engine.board.grid, before)
        assert engine.current_player == Player.ONE

    def test_small_board_game(self):
        engine = GameEngine(rows=4, cols=4)
        result = play(engine, [0, 1, 0, 1, 0, 1, 0])
        assert isinstance(result, Win)
        assert result.winning_line == ((0, 0), (1, 0), (2, 0), (3, 0))
