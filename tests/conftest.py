"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.core.board import Board
from chessrules.core.castling import CastlingRights
from chessrules.game.state import GameState


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def fresh_rights() -> CastlingRights:
    """Castling rights at the start of a game: nothing has moved."""
    return CastlingRights()


@pytest.fixture
def game() -> GameState:
    gs = GameState()
    gs.setup()
    return gs
