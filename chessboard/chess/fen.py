"""
Placement part of a FEN string: the configuration of pieces on the board.

ex) standard starting position:
rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
means:
* black pieces are on the 8th rank (rank index 7), starting with the rook on a8, knight on b8, etc.
* pawns cover the 7th rank entirely
* ranks 6 through 3 have 8 consecutive empty squares
* rank 2 are the white pawns (capital letters)
* 1st rank (rank index 0) are the white pieces. Again, left-to-right reads a1-h1.

Only the placement is used here: turn, castling rights etc. are not part of this game.
"""

from chessboard.chess.pieces import FEN_TO_PIECE, Piece
from chessboard.chess.square import BOARD_DIMENSIONS, Square
from chessboard.core.exceptions import InvalidFENError

STARTING_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_POSITION = "/".join(["8"] * BOARD_DIMENSIONS[0])


def is_valid_position(position: str) -> bool:
    """Only check the part of the FEN encoding for the board position."""
    num_ranks, num_files = BOARD_DIMENSIONS
    rank_fens = position.split("/")
    if len(rank_fens) != num_ranks:
        return False

    for rank_fen in rank_fens:
        file_count = 0
        for character in rank_fen:
            # make sure every character is valid
            if character.isdigit():
                file_count += int(character)
            elif character.lower() in FEN_TO_PIECE:
                file_count += 1
            else:
                # immediately invalidate if the character is anything else
                return False

        # make sure you are creating a correctly sized board
        if file_count != num_files:
            return False
    return True


def parse_position(position: str) -> list[Piece]:
    """Turn the placement string into the list of pieces it describes."""
    if not is_valid_position(position):
        raise InvalidFENError(f"Invalid placement string: {position!r}")

    pieces: list[Piece] = []
    for rank_idx, fen_one_rank in enumerate(position.split("/")):
        # FEN string is read from top rank (8th) to bottom rank (1st)
        rank = BOARD_DIMENSIONS[0] - 1 - rank_idx
        # ... but the first character is the a-file, so reads in normal direction
        file = 0
        for character in fen_one_rank:
            if character.isalpha():
                pieces.append(Piece.from_fen(character, Square(rank, file)))
                file += 1
            else:
                # A number denotes the amount of empty squares after each other
                file += int(character)
    return pieces


def position_to_fen(pieces: list[Piece]) -> str:
    """Ranks are separated by slashes in FEN string."""
    by_square = {piece.square: piece for piece in pieces}
    return "/".join(
        _rank_to_fen(rank, by_square)
        for rank in range(BOARD_DIMENSIONS[0] - 1, -1, -1)
    )


def _rank_to_fen(rank: int, by_square: dict[Square, Piece]) -> str:
    """FEN string of a single rank"""
    fen_characters: list[str] = []
    empty_count = 0
    for file in range(BOARD_DIMENSIONS[1]):
        piece = by_square.get(Square(rank, file))

        if piece is not None:
            if empty_count > 0:
                fen_characters.append(str(empty_count))
                empty_count = 0
            fen_characters.append(piece.to_fen())
        else:
            empty_count += 1

    # if the entire rank is empty, then we still place this number in the string
    if empty_count > 0:
        fen_characters.append(str(empty_count))
    return "".join(fen_characters)
