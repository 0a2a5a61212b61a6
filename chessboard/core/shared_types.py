"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    GAME_OVER = "game over"


# --- Domain versions of Color and PieceType live in chessboard/chess/pieces.py
# --- NOTE Same names are used on purpose: the imports show which versions are used in what part of the code


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"
