"""Unit tests for /chessboard/chess/square.py"""

from string import ascii_lowercase

import pytest

from chessboard.chess.square import BOARD_DIMENSIONS, Square
from chessboard.core.exceptions import InvalidRequestError


@pytest.mark.parametrize(
    "rank, file, notation",
    [
        (rank, file, f"{ascii_lowercase[file]}{rank + 1}")
        for rank in range(8)
        for file in range(8)
    ],
)
def test_creating_from_algebraic(rank: int, file: int, notation: str) -> None:
    """Simply checks if the notation for 'a1' indeed maps to rank 0, file 0, etc."""
    square = Square.from_algebraic(notation)
    assert square.rank == rank
    assert square.file == file
    assert square.to_algebraic() == notation


def test_rank_first_coordinates() -> None:
    """(rank, file) tuples: White's a-pawn stands on (1, 0), Black's king on (7, 4)"""
    assert Square(1, 0) == Square.from_algebraic("a2")
    assert Square(7, 4) == Square.from_algebraic("e8")


@pytest.mark.parametrize(
    "name", ["i1", "a9", "a0", "", "e", "e10", "11", "ee", "a²", "e٣", "ａ1", "ß1"]
)
def test_invalid_square_names(name: str) -> None:
    """Anything that is not a square on the board gets rejected at the boundary"""
    with pytest.raises(InvalidRequestError):
        Square.from_algebraic(name)


def test_square_within_bounds() -> None:
    """happy case: squares within the dimensions of the board"""
    for rank in range(BOARD_DIMENSIONS[0]):
        for file in range(BOARD_DIMENSIONS[1]):
            assert Square(rank, file).is_within_bounds()


def test_square_out_of_bounds() -> None:
    assert not Square(BOARD_DIMENSIONS[0], 0).is_within_bounds()
    assert not Square(0, BOARD_DIMENSIONS[1]).is_within_bounds()
    assert not Square(-1, -1).is_within_bounds()


def test_offset() -> None:
    """Stepping along a vector. Leaving the board is allowed, checking bounds is up to the caller."""
    d4 = Square.from_algebraic("d4")
    assert d4.offset(1, 1) == Square.from_algebraic("e5")
    assert d4.offset(-3, -3) == Square.from_algebraic("a1")
    assert not d4.offset(-4, 0).is_within_bounds()
