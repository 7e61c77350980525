"""
cli.py - Command-line presentation shell for Connect Four

This module draws the board in the terminal, turns typed column numbers
into GameEngine moves, and reports each MoveResult. It also provides
a replay command for checking a move sequence and a benchmark of
GameEngine.apply_move over random legal games.
"""

import argparse
import random
import sys
import time
from typing import Callable, List, Optional, Sequence, Union

from connectfour.debug import debug
from connectfour.exceptions import InvalidConfigurationError
from connectfour.game.rules import GameEngine
from connectfour.game.state import Continue, MoveResult, Rejected, Tie, Win
from connectfour.utils import DEFAULT_COLS, DEFAULT_MARKERS, DEFAULT_ROWS

QUIT = "q"
RESTART = "r"


def parse_markers(value: str) -> List[str]:
    """Split a "X,O" style argument into the two player markers."""
    markers = [m.strip() for m in value.split(",")]
    if len(markers) != 2:
        raise argparse.ArgumentTypeError("expected two comma-separated markers, e.g. X,O")
    return markers


def parse_moves(value: str) -> List[int]:
    try:
        return [int(m) for m in value.replace(" ", "").split(",") if m]
    except ValueError:
        raise argparse.ArgumentTypeError(f"moves must be comma-separated column numbers: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Two-player Connect Four")
    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="Number of board rows (min 4)")
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS, help="Number of board columns (min 4)")
    parser.add_argument("--markers", type=parse_markers, default=list(DEFAULT_MARKERS),
                        help="Markers for player 1 and player 2, e.g. X,O")
    parser.add_argument("--debug-level", default="warning",
                        choices=["none", "error", "warning", "info", "debug", "trace"],
                        help="Logging verbosity")
    parser.add_argument("--debug", action="store_true", help="Shortcut for --debug-level debug")
    parser.add_argument("--log-file", default=None, help="Also write log output to this file")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")
    subparsers.add_parser("play", help="Play a game interactively")

    test_parser = subparsers.add_parser("test", help="Replay a sequence of moves")
    test_parser.add_argument("--moves", type=parse_moves, required=True,
                             help="Comma-separated columns, e.g. 3,3,4,4,5,5,6")

    benchmark_parser = subparsers.add_parser("benchmark", help="Benchmark move processing")
    benchmark_parser.add_argument("--iterations", type=int, default=1000, help="Number of games to play")
    benchmark_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    return parser


class SimpleCLI:
    """Terminal front end driving a single GameEngine."""

    def __init__(self, engine: Optional[GameEngine] = None,
                 input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print):
        self.engine = engine
        self.args: Optional[argparse.Namespace] = None
        self._input = input_func
        self._print = output_func

    def parse_args(self, argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments and configure logging from them."""
        self.args = build_parser().parse_args(argv)

        level = "debug" if self.args.debug else self.args.debug_level
        debug.set_from_string(level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)
        return self.args

    def _ensure_engine(self) -> GameEngine:
        if self.engine is None:
            self.engine = GameEngine(self.args.rows, self.args.cols, self.args.markers)
        return self.engine

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """
        Run the command selected on the command line.

        Returns:
            Process exit status
        """
        if self.args is None:
            try:
                self.parse_args(argv)
            except OSError as e:
                self._print(f"Cannot open log file: {e}")
                return 2

        try:
            self._ensure_engine()
        except InvalidConfigurationError as e:
            self._print(f"Invalid configuration: {e}")
            return 2

        command = self.args.command or "play"
        if command == "play":
            self.play_game()
        elif command == "test":
            return self.replay_moves(self.args.moves)
        elif command == "benchmark":
            self.benchmark(self.args.iterations, self.args.seed)
        return 0

    # Rendering

    def status_line(self) -> str:
        engine = self.engine
        player = engine.current_player
        return f"{player}'s turn ({engine.marker_for(player)})"

    def show_board(self) -> None:
        self._print(self.engine.render())

    def report(self, result: MoveResult) -> None:
        """Print what a move did."""
        engine = self.engine
        if isinstance(result, Rejected):
            self._print(result.message)
        elif isinstance(result, Win):
            self.show_board()
            self._print(f"{result.player} ({engine.marker_for(result.player)}) wins!")
        elif isinstance(result, Tie):
            self.show_board()
            self._print("It's a tie!")
        elif isinstance(result, Continue):
            self.show_board()
            self._print(self.status_line())

    # Interactive play

    def get_human_move(self) -> Optional[Union[int, str]]:
        """
        Ask the current player for a column.

        Returns:
            A column index, QUIT, RESTART, or None for unusable input
        """
        engine = self.engine
        open_columns = engine.valid_moves()
        try:
            raw = self._input(f"{engine.marker_for(engine.current_player)} move "
                              f"(columns {','.join(map(str, open_columns))}, q/r): ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            # Closed stdin or Ctrl-C ends the session
            self._print("")
            return QUIT

        if raw in (QUIT, RESTART):
            return raw
        try:
            column = int(raw)
        except ValueError:
            self._print("Invalid input. Please enter a column number, 'q' or 'r'.")
            return None

        # Full columns are unavailable here; apply_move still checks them
        if 0 <= column < engine.board.cols and column not in open_columns:
            self._print(f"Column {column} is full, pick another.")
            return None
        return column

    def ask_play_again(self) -> bool:
        while True:
            try:
                answer = self._input("Play again? [y/n]: ").strip().lower()
            except (EOFError, KeyboardInterrupt):
                self._print("")
                return False
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no", QUIT):
                return False
            self._print("Please answer y or n.")

    def play_game(self) -> None:
        """Play hot-seat games until a player quits or declines a rematch."""
        engine = self.engine
        self._print("Starting a new Connect Four game!")
        self._print(f"Enter a column number (0-{engine.board.cols - 1}); 'q' quits, 'r' restarts.")
        engine.reset()
        self.show_board()
        self._print(self.status_line())

        while True:
            move = self.get_human_move()
            if move is None:
                continue
            if move == QUIT:
                self._print("Quitting game.")
                return
            if move == RESTART:
                engine.reset()
                self._print("Game restarted.")
                self.show_board()
                self._print(self.status_line())
                continue

            result = engine.apply_move(move)
            self.report(result)

            if engine.is_game_over():
                if not self.ask_play_again():
                    self._print("Thanks for playing!")
                    return
                engine.reset()
                self.show_board()
                self._print(self.status_line())

    # Non-interactive commands

    def replay_moves(self, moves: Sequence[int]) -> int:
        """
        Play `moves` in order and print the final position.

        Returns:
            0 if every move was accepted, 1 if one was rejected
        """
        engine = self.engine
        engine.reset()
        result: Optional[MoveResult] = None
        for i, column in enumerate(moves, start=1):
            result = engine.apply_move(column)
            if isinstance(result, Rejected):
                self._print(f"Move {i}: {result.message}")
                self.show_board()
                return 1

        self.show_board()
        if isinstance(result, Win):
            self._print(f"{result.player} wins with {list(result.winning_line)}")
        elif isinstance(result, Tie):
            self._print("Tie")
        else:
            self._print(f"In progress, {self.status_line()}")
        return 0

    def benchmark(self, iterations: int, seed: Optional[int] = None) -> float:
        """
        Time apply_move over random legal games.

        Returns:
            Average microseconds per move
        """
        engine = self.engine
        rng = random.Random(seed)
        moves = 0
        outcomes = {"win": 0, "tie": 0}

        start = time.perf_counter()
        for _ in range(iterations):
            engine.reset()
            while not engine.is_game_over():
                result = engine.apply_move(rng.choice(engine.valid_moves()))
                moves += 1
            outcomes["win" if isinstance(result, Win) else "tie"] += 1
        elapsed = time.perf_counter() - start

        per_move = elapsed / moves * 1e6 if moves else 0.0
        self._print(f"{iterations} games, {moves} moves in {elapsed:.3f}s "
                    f"({per_move:.1f} us/move); wins {outcomes['win']}, ties {outcomes['tie']}")
        engine.reset()
        return per_move


def main(argv: Optional[Sequence[str]] = None) -> int:
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
