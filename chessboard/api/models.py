"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from chessboard.chess.square import Square
from chessboard.core.shared_types import Color, PieceType, Status


# --- REQUEST MODELS ---
class PickSquareRequest(BaseModel):
    """
    A single picking event coming from the adapter.

    * selected=True: the square was just picked
    * selected=False: the picking layer dropped the selection of that square
    """

    square: str
    selected: bool = True

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        # raises InvalidRequestError if the name is not a square on the board
        return Square.from_algebraic(value.strip()).to_algebraic()


class TickRequest(BaseModel):
    """All picking events collected during one frame, in the order they happened."""

    picks: list[PickSquareRequest]


# --- RESPONSE MODELS ---
class PieceView(BaseModel):
    color: Color
    type: PieceType
    square: str


class GameResponse(BaseModel):
    pieces: list[PieceView]
    turn: Color
    status: Status
    winner: Optional[Color] = None
    selected_square: Optional[str] = None
    legal_targets: list[str] = []

    @property
    def next_move_text(self) -> str:
        """Banner text shown above the board"""
        if self.status == Status.GAME_OVER and self.winner is not None:
            return f"Game over: {self.winner.value.capitalize()} wins"
        return f"Next move: {self.turn.value.capitalize()}"
