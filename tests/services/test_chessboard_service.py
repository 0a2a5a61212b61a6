"""Unit tests for chessboard/services/chessboard_service.py"""

import pytest

from chessboard.chess.board import Board
from chessboard.chess.game import Game
from chessboard.core.exceptions import InvalidRequestError
from chessboard.core.shared_types import Color, PieceType, Status
from chessboard.services.chessboard_service import (
    ChessboardService,
    GameResponse,
    PickSquareRequest,
    TickRequest,
)


@pytest.fixture
def service() -> ChessboardService:
    return ChessboardService()


def piece_on(response: GameResponse, square: str) -> tuple[Color, PieceType] | None:
    for piece in response.pieces:
        if piece.square == square:
            return piece.color, piece.type
    return None


# --- SERVICE - GAME STATE ----
def test_initial_state(service: ChessboardService) -> None:
    response = service.get_game_state()
    assert isinstance(response, GameResponse)
    assert len(response.pieces) == 32
    assert response.turn == Color.WHITE
    assert response.status == Status.IN_PROGRESS
    assert response.winner is None
    assert response.selected_square is None
    assert response.next_move_text == "Next move: White"


# --- SERVICE - PICKS ----
def test_select_and_move(service: ChessboardService) -> None:
    response = service.pick(PickSquareRequest(square="e2"))
    assert response.selected_square == "e2"
    assert set(response.legal_targets) == {"e3", "e4"}
    assert set(service.legal_targets()) == {"e3", "e4"}

    response = service.pick(PickSquareRequest(square="e4"))
    assert piece_on(response, "e4") == (Color.WHITE, PieceType.PAWN)
    assert piece_on(response, "e2") is None
    assert response.turn == Color.BLACK
    assert response.selected_square is None
    assert response.legal_targets == []
    assert response.next_move_text == "Next move: Black"


def test_illegal_move_is_not_an_error(service: ChessboardService) -> None:
    before = service.get_game_state()
    service.pick(PickSquareRequest(square="a1"))
    response = service.pick(PickSquareRequest(square="a4"))
    assert response.pieces == before.pieces
    assert response.turn == Color.WHITE
    assert response.selected_square is None


def test_tick_with_multiple_picks(service: ChessboardService) -> None:
    """Deselect of the old square + pick of the new square in the same frame"""
    service.pick(PickSquareRequest(square="g1"))
    response = service.tick(
        TickRequest(
            picks=[
                PickSquareRequest(square="g1", selected=False),
                PickSquareRequest(square="f3"),
            ]
        )
    )
    assert piece_on(response, "f3") == (Color.WHITE, PieceType.KNIGHT)
    assert response.turn == Color.BLACK


def test_deselect(service: ChessboardService) -> None:
    service.pick(PickSquareRequest(square="g1"))
    response = service.pick(PickSquareRequest(square="g1", selected=False))
    assert response.selected_square is None
    assert service.legal_targets() == []
    assert response.turn == Color.WHITE


def test_invalid_square_propagates(service: ChessboardService) -> None:
    """Make sure the service does not swallow validation errors"""
    with pytest.raises(InvalidRequestError):
        service.pick(PickSquareRequest(square="x9"))


def test_game_over_response() -> None:
    service = ChessboardService(Game(board=Board.from_fen("4k3/8/8/8/8/8/8/4R1K1")))
    service.pick(PickSquareRequest(square="e1"))
    response = service.pick(PickSquareRequest(square="e8"))

    assert response.status == Status.GAME_OVER
    assert response.winner == Color.WHITE
    assert response.next_move_text == "Game over: White wins"
    assert piece_on(response, "e8") == (Color.WHITE, PieceType.ROOK)
    assert len(response.pieces) == 2
