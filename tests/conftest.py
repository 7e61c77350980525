"""Shared fixtures for the Connect Four test suite."""

import pytest

from connectfour.debug import DebugLevel, debug
from connectfour.game.board import Board
from connectfour.game.rules import GameEngine


@pytest.fixture(autouse=True)
def quiet_debug():
    """Keep the shared debug manager at its default settings between tests."""
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[], log_file="")
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[], log_file="")


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def engine():
    return GameEngine()
