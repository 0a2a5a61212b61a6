"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from chessboard.chess.board import Board
from chessboard.chess.fen import parse_position
from chessboard.chess.game import Game
from chessboard.chess.pieces import Piece


@pytest.fixture
def new_game() -> Game:
    """Fresh game in the standard starting position, White to move."""
    return Game.new_game()


@pytest.fixture
def pieces_from_fen() -> Callable[[str], list[Piece]]:
    """Call the inner function with a placement string to get the list of pieces it describes"""

    def _create_pieces(position: str) -> list[Piece]:
        return parse_position(position)

    return _create_pieces


@pytest.fixture
def game_from_fen() -> Callable[[str], Game]:
    """Call the inner function with a placement string. White to move."""

    def _create_game(position: str) -> Game:
        return Game(board=Board.from_fen(position))

    return _create_game
