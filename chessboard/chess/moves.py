"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the movement rule for each piece type.

Every rule answers a single question: "can this piece go to that square, given every piece on the board?"
The functions are pure: they only read the snapshot of pieces passed in and never raise.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from chessboard.chess.pieces import Color, Piece, PieceType
from chessboard.chess.square import BOARD_DIMENSIONS, Square

Vector = tuple[int, int]

# ranks from which a pawn may still make its double step
PAWN_STARTING_RANK: dict[Color, int] = {
    Color.WHITE: 1,
    Color.BLACK: BOARD_DIMENSIONS[0] - 2,
}


@dataclass(frozen=True)
class Move:
    """basic definition of a move that has been made"""

    from_square: Square
    to_square: Square

    def to_uci(self) -> str:
        """Convert into UCI notation"""
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"


# --- HELPERS ---
def piece_on(square: Square, pieces: Sequence[Piece]) -> Optional[Piece]:
    """The piece standing on the square, if any."""
    return next((piece for piece in pieces if piece.square == square), None)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def squares_between(from_square: Square, to_square: Square) -> list[Square]:
    """
    Find the squares strictly in between two squares on the same rank, file, or diagonal.

    Adjacent squares have nothing in between. Squares that are not on a common line return an empty list as well:
    there is no path for a piece to be blocked on.
    """
    d_rank = to_square.rank - from_square.rank
    d_file = to_square.file - from_square.file
    is_straight = (d_rank == 0) != (d_file == 0)
    is_diagonal = abs(d_rank) == abs(d_file)
    if not (is_straight or is_diagonal):
        return []

    step: Vector = (_sign(d_rank), _sign(d_file))
    distance = max(abs(d_rank), abs(d_file))
    return [
        from_square.offset(step[0] * i, step[1] * i) for i in range(1, distance)
    ]


def is_path_clear(
    from_square: Square, to_square: Square, pieces: Sequence[Piece]
) -> bool:
    """Line of sight: no piece is standing on any square in between."""
    occupied = {piece.square for piece in pieces}
    return not any(square in occupied for square in squares_between(from_square, to_square))


# --- MOVEMENT RULES ---
# NOTE: The rules below can assume the target is NOT occupied by a piece of the same color (checked once in `is_move_legal()`)
def king_rule(piece: Piece, target: Square, pieces: Sequence[Piece]) -> bool:
    """The king can move by a single square at the time, in any direction. No castling."""
    d_rank = abs(target.rank - piece.square.rank)
    d_file = abs(target.file - piece.square.file)
    return max(d_rank, d_file) == 1


def queen_rule(piece: Piece, target: Square, pieces: Sequence[Piece]) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    d_rank = abs(target.rank - piece.square.rank)
    d_file = abs(target.file - piece.square.file)
    is_diagonal = d_rank == d_file != 0
    is_straight = (d_rank == 0) != (d_file == 0)
    return (is_diagonal or is_straight) and is_path_clear(piece.square, target, pieces)


def bishop_rule(piece: Piece, target: Square, pieces: Sequence[Piece]) -> bool:
    """Bishops move diagonally: |delta_rank| = |delta_file|"""
    d_rank = abs(target.rank - piece.square.rank)
    d_file = abs(target.file - piece.square.file)
    return d_rank == d_file != 0 and is_path_clear(piece.square, target, pieces)


def knight_rule(piece: Piece, target: Square, pieces: Sequence[Piece]) -> bool:
    """Knights jump in an L-shape. Pieces in between never matter."""
    d_rank = abs(target.rank - piece.square.rank)
    d_file = abs(target.file - piece.square.file)
    return (d_rank, d_file) in {(2, 1), (1, 2)}


def rook_rule(piece: Piece, target: Square, pieces: Sequence[Piece]) -> bool:
    """Rooks move either horizontally or vertically"""
    d_rank = abs(target.rank - piece.square.rank)
    d_file = abs(target.file - piece.square.file)
    return ((d_rank == 0) != (d_file == 0)) and is_path_clear(
        piece.square, target, pieces
    )


def pawn_rule(piece: Piece, target: Square, pieces: Sequence[Piece]) -> bool:
    """
    A pawn:
    - moves by a single square forward, onto an empty square.
    - It can move by two in their first move (so when on their starting rank), if both squares are empty
    - takes diagonally (never moves diagonally onto an empty square)

    NOTE: White moves UP the board (increasing rank), Black moves DOWN. No en passant, no promotion.
    """
    forward = (
        target.rank - piece.square.rank
        if piece.color == Color.WHITE
        else piece.square.rank - target.rank
    )
    d_file = abs(target.file - piece.square.file)
    target_is_empty = piece_on(target, pieces) is None

    if forward == 1 and d_file == 0:
        return target_is_empty

    if forward == 2 and d_file == 0:
        on_starting_rank = piece.square.rank == PAWN_STARTING_RANK[piece.color]
        return (
            on_starting_rank
            and is_path_clear(piece.square, target, pieces)
            and target_is_empty
        )

    if forward == 1 and d_file == 1:
        return not target_is_empty

    return False


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MoveRuleFn = Callable[[Piece, Square, Sequence[Piece]], bool]
MOVEMENT_RULES: dict[PieceType, MoveRuleFn] = {
    PieceType.KING: king_rule,
    PieceType.QUEEN: queen_rule,
    PieceType.BISHOP: bishop_rule,
    PieceType.KNIGHT: knight_rule,
    PieceType.ROOK: rook_rule,
    PieceType.PAWN: pawn_rule,
}


def is_move_legal(piece: Piece, target: Square, pieces: Sequence[Piece]) -> bool:
    """
    Shared checks first, then the rule of the piece type.
    ---

    A target occupied by your own color is never legal. As a side effect this also rejects
    "moving" to the square you are already standing on (you occupy it yourself).
    """
    if not target.is_within_bounds():
        return False

    occupant = piece_on(target, pieces)
    if occupant is not None and occupant.color == piece.color:
        return False

    movement_rule = MOVEMENT_RULES[piece.type]
    return movement_rule(piece, target, pieces)


def legal_targets(piece: Piece, pieces: Sequence[Piece]) -> list[Square]:
    """Every square the piece could legally move to. Handy for highlighting destinations."""
    num_ranks, num_files = BOARD_DIMENSIONS
    return [
        Square(rank, file)
        for rank in range(num_ranks)
        for file in range(num_files)
        if is_move_legal(piece, Square(rank, file), pieces)
    ]
