"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessfen.core.board import Board
from chessfen.core.notation import STARTING_FEN, position_from_fen
from chessfen.core.position import Position


@pytest.fixture
def starting_position() -> Position:
    return position_from_fen(STARTING_FEN)


@pytest.fixture
def empty_board() -> Board:
    return Board()
