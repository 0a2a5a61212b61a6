"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from chessboard.core.exceptions import InvalidRequestError

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)

# ASCII only: "²" passes str.isdigit() but not int()
FILE_NAMES = "abcdefgh"[: BOARD_DIMENSIONS[1]]
RANK_NAMES = "123456789"[: BOARD_DIMENSIONS[0]]


@dataclass(frozen=True)
class Square:
    """
    Zero-based board coordinate.

    * rank: the axis pawns advance along. White's back rank is 0, Black's back rank is 7.
    * file: 0 is the a-file, 7 the h-file.

    ex) Square(1, 0) is a2, the square of White's a-pawn.
    """

    rank: int
    file: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7)"""
        if len(sq) != 2 or sq[0].lower() not in FILE_NAMES or sq[1] not in RANK_NAMES:
            raise InvalidRequestError(f"Cannot interpret {sq!r} as a square name.")
        square = cls(rank=int(sq[1]) - 1, file=ord(sq[0].lower()) - ord("a"))
        if not square.is_within_bounds():
            raise InvalidRequestError(f"Square {sq!r} is not on the board.")
        return square

    def to_algebraic(self) -> str:
        return f"{chr(self.file + ord('a'))}{self.rank + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.rank < BOARD_DIMENSIONS[0]) and (
            0 <= self.file < BOARD_DIMENSIONS[1]
        )

    def offset(self, d_rank: int, d_file: int) -> Square:
        """Square reached by stepping along a vector. Might be off the board: check with `is_within_bounds()`."""
        return Square(self.rank + d_rank, self.file + d_file)
