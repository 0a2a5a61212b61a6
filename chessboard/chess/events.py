"""Input events a presentation adapter feeds into the Game, one batch per tick."""

from dataclasses import dataclass

from chessboard.chess.square import Square


@dataclass(frozen=True)
class SquareChosen:
    """The user picked this square."""

    square: Square


@dataclass(frozen=True)
class SquareCleared:
    """The picking layer dropped its selection of this square."""

    square: Square


InputEvent = SquareChosen | SquareCleared
