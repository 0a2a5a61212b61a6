"""Unit tests for /chessboard/chess/board.py"""

import pytest

from chessboard.chess.board import Board
from chessboard.chess.fen import EMPTY_POSITION, STARTING_POSITION
from chessboard.chess.pieces import Color, Piece, PieceType
from chessboard.chess.square import Square
from chessboard.core.exceptions import BoardStateError


# -- CREATION LOGIC ---
def test_creating_board_in_starting_position() -> None:
    """16 pieces per side, on their canonical ranks"""
    board = Board.starting_position()
    assert len(board) == 32
    assert len(board.locate_color(Color.WHITE)) == 16
    assert len(board.locate_color(Color.BLACK)) == 16
    assert {square.rank for square in board.locate_color(Color.WHITE)} == {0, 1}
    assert {square.rank for square in board.locate_color(Color.BLACK)} == {6, 7}

    white_king = board.piece_at(Square(0, 4))
    assert white_king is not None
    assert board.piece(white_king) == Piece(PieceType.KING, Color.WHITE, Square(0, 4))
    black_queen = board.piece_at(Square(7, 3))
    assert black_queen is not None
    assert board.piece(black_queen) == Piece(PieceType.QUEEN, Color.BLACK, Square(7, 3))


def test_fen_roundtrip() -> None:
    assert Board.starting_position().to_fen() == STARTING_POSITION
    assert Board.from_fen(EMPTY_POSITION).to_fen() == EMPTY_POSITION


def test_empty_board() -> None:
    board = Board()
    assert len(board) == 0
    assert board.pieces() == []
    assert board.piece_at(Square(0, 0)) is None


# -- ARENA / IDS ---
def test_place_piece_hands_out_new_ids() -> None:
    board = Board()
    first = board.place_piece(Piece(PieceType.ROOK, Color.WHITE, Square(0, 0)))
    second = board.place_piece(Piece(PieceType.ROOK, Color.BLACK, Square(7, 7)))
    assert first != second
    assert first in board
    assert second in board
    assert board.piece_at(Square(7, 7)) == second


def test_cannot_place_two_pieces_on_the_same_square() -> None:
    """No two live pieces share a square"""
    board = Board()
    board.place_piece(Piece(PieceType.ROOK, Color.WHITE, Square(0, 0)))
    with pytest.raises(BoardStateError):
        board.place_piece(Piece(PieceType.KNIGHT, Color.BLACK, Square(0, 0)))


def test_cannot_place_piece_off_the_board() -> None:
    board = Board()
    with pytest.raises(BoardStateError):
        board.place_piece(Piece(PieceType.ROOK, Color.WHITE, Square(8, 0)))


def test_ids_stay_valid_after_removal() -> None:
    """Removing a piece must not shift the handles of the other pieces"""
    board = Board()
    ids = [
        board.place_piece(Piece(PieceType.PAWN, Color.WHITE, Square(1, file)))
        for file in range(8)
    ]
    board.remove_piece(ids[0])
    board.remove_piece(ids[3])

    assert ids[0] not in board
    for file, piece_id in enumerate(ids):
        if piece_id in (ids[0], ids[3]):
            continue
        assert board.piece(piece_id).square == Square(1, file)

    # new ids are never recycled
    new_id = board.place_piece(Piece(PieceType.QUEEN, Color.WHITE, Square(0, 3)))
    assert new_id not in ids


def test_unknown_id() -> None:
    board = Board()
    with pytest.raises(BoardStateError):
        board.piece(42)
    with pytest.raises(BoardStateError):
        board.remove_piece(42)


# -- UPDATES ---
def test_move_piece() -> None:
    board = Board.starting_position()
    pawn = board.piece_at(Square.from_algebraic("e2"))
    assert pawn is not None

    board.move_piece(pawn, Square.from_algebraic("e4"))
    assert board.piece(pawn).square == Square.from_algebraic("e4")
    assert board.piece_at(Square.from_algebraic("e2")) is None
    assert board.piece_at(Square.from_algebraic("e4")) == pawn


def test_remove_piece() -> None:
    board = Board.starting_position()
    knight = board.piece_at(Square.from_algebraic("g8"))
    assert knight is not None

    removed = board.remove_piece(knight)
    assert removed == Piece(PieceType.KNIGHT, Color.BLACK, Square.from_algebraic("g8"))
    assert len(board) == 31
    assert board.piece_at(Square.from_algebraic("g8")) is None


def test_pieces_returns_snapshot() -> None:
    """Messing with the snapshot should not move pieces on the real board"""
    board = Board.starting_position()
    snapshot = board.pieces()
    for piece in snapshot:
        piece.square = Square(4, 4)

    assert board.to_fen() == STARTING_POSITION
