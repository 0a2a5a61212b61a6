"""
Boundary layer data model(s).

These objects are what the Game hands to the Service after every tick, and what the Service turns into responses for an adapter.
(Decouples the domain objects (Board, Piece ids, ...) from the information a renderer actually needs.)
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class PieceModel:
    """Transport-safe representation of a single live piece. Square is in algebraic notation."""

    color: str
    type: str
    square: str


@dataclass
class GameModel:
    """Everything a renderer needs to draw one frame."""

    pieces: list[PieceModel]
    turn: str
    status: str
    winner: Optional[str] = None
    selected_square: Optional[str] = None
    legal_targets: list[str] = field(default_factory=list)
