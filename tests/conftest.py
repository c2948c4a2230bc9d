"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chesslet.core.board import Board
from chesslet.core.notation import board_from_fen


@pytest.fixture
def initial_board() -> Board:
    return Board()


@pytest.fixture
def empty_board() -> Board:
    return Board.empty()


@pytest.fixture
def board_at() -> Callable[[str], Board]:
    """Build a board from a bare FEN placement field."""

    def _build(placement: str) -> Board:
        return board_from_fen(f"{placement} w - - 0 1")

    return _build
