"""The Game board owns the live pieces: the authoritative configuration of pieces on the board."""

from copy import copy
from typing import Optional, Self

from chessboard.chess.fen import STARTING_POSITION, parse_position, position_to_fen
from chessboard.chess.pieces import Color, Piece
from chessboard.chess.square import Square
from chessboard.core.exceptions import BoardStateError

# Stable handle to a single piece entry. Ids are handed out in increasing order and never reused,
# so a handle keeps pointing at the same piece even after other pieces are removed from the board.
PieceId = int


class Board:
    """
    Arena of live pieces.
    ---

    Everybody else refers to a piece by its PieceId and looks up the current position through the board.
    Pieces handed out by `pieces()` are copies: the move rules get a read-only snapshot, never the real thing.
    """

    def __init__(self, pieces: Optional[list[Piece]] = None) -> None:
        self._pieces: dict[PieceId, Piece] = {}
        self._next_id: PieceId = 0
        for piece in pieces or []:
            self.place_piece(piece)

    @classmethod
    def starting_position(cls) -> Self:
        """Standard opening position: 16 pieces per side on their canonical ranks/files."""
        return cls.from_fen(STARTING_POSITION)

    @classmethod
    def from_fen(cls, position: str) -> Self:
        """Construct a board using the placement part of a FEN string (see chessboard/chess/fen.py)."""
        return cls(parse_position(position))

    def to_fen(self) -> str:
        return position_to_fen(self.pieces())

    # --- LOOKUPS ---
    def piece(self, piece_id: PieceId) -> Piece:
        try:
            return self._pieces[piece_id]
        except KeyError:
            raise BoardStateError(f"No live piece with id {piece_id}.") from None

    def piece_at(self, square: Square) -> Optional[PieceId]:
        """Id of the piece standing on the square, if any."""
        return next(
            (
                piece_id
                for piece_id, piece in self._pieces.items()
                if piece.square == square
            ),
            None,
        )

    def pieces(self) -> list[Piece]:
        """Snapshot of all live pieces (copies, so mutating them does not touch the board)."""
        return [copy(piece) for piece in self._pieces.values()]

    def locate_color(self, color: Color) -> list[Square]:
        return [piece.square for piece in self._pieces.values() if piece.color == color]

    def __len__(self) -> int:
        return len(self._pieces)

    def __contains__(self, piece_id: object) -> bool:
        return piece_id in self._pieces

    # --- UPDATES ---
    def place_piece(self, piece: Piece) -> PieceId:
        """Add a new piece to the arena and return its handle"""
        if not piece.square.is_within_bounds():
            raise BoardStateError(f"Cannot place a piece outside the board: {piece.square}")
        if self.piece_at(piece.square) is not None:
            raise BoardStateError(
                f"Square {piece.square.to_algebraic()} is already occupied."
            )

        piece_id = self._next_id
        self._next_id += 1
        self._pieces[piece_id] = piece
        return piece_id

    def move_piece(self, piece_id: PieceId, to_square: Square) -> None:
        """
        Update the position of a piece.

        NOTE: No rules are checked here. A captured piece on the target square is removed separately
        (the Game queues it and sweeps it at the end of the tick).
        """
        self.piece(piece_id).square = to_square

    def remove_piece(self, piece_id: PieceId) -> Piece:
        piece = self.piece(piece_id)
        del self._pieces[piece_id]
        return piece
