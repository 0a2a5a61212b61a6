"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating everything that happens in one tick:
tracking the selected square, resolving the selected piece, attempting the move, and sweeping captured pieces.
"""

from collections.abc import Callable, Iterable
from copy import copy
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

import structlog

from chessboard.chess.board import Board, PieceId
from chessboard.chess.events import InputEvent, SquareChosen, SquareCleared
from chessboard.chess.moves import Move, is_move_legal, legal_targets
from chessboard.chess.pieces import Color, Piece, PieceType
from chessboard.chess.square import Square
from chessboard.core.models import GameModel, PieceModel

logger = structlog.get_logger(__name__)


class Status(Enum):
    IN_PROGRESS = auto()
    GAME_OVER = auto()


class SelectionPhase(Enum):
    IDLE = auto()
    SQUARE_SELECTED = auto()
    PIECE_SELECTED = auto()


@dataclass
class Selection:
    """
    What the player has picked so far.

    * IDLE: nothing selected
    * SQUARE_SELECTED: a square is selected, but none of your pieces stands on it
    * PIECE_SELECTED: one of your pieces is selected and waits for a destination square
    """

    phase: SelectionPhase = SelectionPhase.IDLE
    square: Optional[Square] = None
    piece: Optional[PieceId] = None

    def clear(self) -> None:
        self.phase = SelectionPhase.IDLE
        self.square = None
        self.piece = None


# -- Observable callbacks --
MoveCallback = Callable[[Move, Piece], None]  # move, piece that moved
CaptureCallback = Callable[[Piece], None]  # piece about to be removed
GameOverCallback = Callable[[Color], None]  # winner


@dataclass
class GameEvents:
    """Multiple handlers per event. Adapters subscribe to animate / play sounds / quit."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_capture: list[CaptureCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    turn: Color = Color.WHITE
    selection: Selection = field(default_factory=Selection)
    status: Status = Status.IN_PROGRESS
    winner: Optional[Color] = None
    pending_captures: list[PieceId] = field(default_factory=list)
    events: GameEvents = field(default_factory=GameEvents)

    @classmethod
    def new_game(cls) -> Self:
        """Standard starting position, White to move."""
        return cls(board=Board.starting_position())

    def to_model(self) -> GameModel:
        """Encode into the format the Service layer uses"""
        pieces = sorted(
            self.board.pieces(), key=lambda p: (p.square.rank, p.square.file)
        )
        return GameModel(
            pieces=[
                PieceModel(
                    color=piece.color.name.lower(),
                    type=piece.type.name.lower(),
                    square=piece.square.to_algebraic(),
                )
                for piece in pieces
            ],
            turn=self.turn.name.lower(),
            status=self.status.name.lower().replace("_", " "),
            winner=self.winner.name.lower() if self.winner else None,
            selected_square=(
                self.selection.square.to_algebraic() if self.selection.square else None
            ),
            legal_targets=[square.to_algebraic() for square in self.legal_targets()],
        )

    @property
    def is_over(self) -> bool:
        return self.status == Status.GAME_OVER

    def selected_piece(self) -> Optional[Piece]:
        if self.selection.piece is None:
            return None
        return self.board.piece(self.selection.piece)

    def legal_targets(self) -> list[Square]:
        """Destinations for the currently selected piece (empty if no piece is selected)."""
        piece = self.selected_piece()
        if piece is None:
            return []
        return legal_targets(piece, self.board.pieces())

    def tick(self, events: Iterable[InputEvent]) -> None:
        """
        Process one batch of input events
        ----

        1. track the selected square (all events, in the order delivered)
        2. nothing selected before? --> resolve which of your pieces stands on the square
        3. piece selected in an earlier tick? --> the square is its destination: attempt the move
        4. remove captured pieces (ends the game if a king was taken)
        """
        if self.is_over:
            logger.info("input ignored, game is over", winner=self._winner_name())
            return

        if self._track_selection(events):
            if self.selection.phase == SelectionPhase.PIECE_SELECTED:
                self._attempt_move()
            else:
                self._resolve_piece()

        self._sweep_captures()

    # -- PRIVATE HELPERS ---
    def _track_selection(self, events: Iterable[InputEvent]) -> bool:
        """Update the selected square. Returns True if any event touched it."""
        touched = False
        for event in events:
            match event:
                case SquareChosen(square=square):
                    self.selection.square = square
                    touched = True
                case SquareCleared(square=square):
                    # only the currently selected square can be cleared. Anything else is a no-op.
                    if square == self.selection.square:
                        self.selection.square = None
                        touched = True
        return touched

    def _resolve_piece(self) -> None:
        """Select the piece of the player to move standing on the selected square (if there is one)."""
        square = self.selection.square
        if square is None:
            self.selection.clear()
            return

        piece_id = self.board.piece_at(square)
        if piece_id is not None and self.board.piece(piece_id).color == self.turn:
            self.selection.phase = SelectionPhase.PIECE_SELECTED
            self.selection.piece = piece_id
            logger.debug("piece selected", square=square.to_algebraic())
        else:
            self.selection.phase = SelectionPhase.SQUARE_SELECTED
            self.selection.piece = None
            logger.debug("square selected", square=square.to_algebraic())

    def _attempt_move(self) -> None:
        """The selection gets consumed, whether or not the move turns out to be legal."""
        target = self.selection.square
        piece_id = self.selection.piece
        # for the type checker: PIECE_SELECTED always carries a piece
        assert piece_id is not None

        if target is None:
            logger.debug("selection cleared")
            self.selection.clear()
            return

        piece = self.board.piece(piece_id)
        if not is_move_legal(piece, target, self.board.pieces()):
            logger.debug(
                "illegal move",
                piece=piece.type.name.lower(),
                from_square=piece.square.to_algebraic(),
                to_square=target.to_algebraic(),
            )
            self.selection.clear()
            return

        # opponent's piece on the target square? Mark it. It is removed in the sweep at the end of the tick.
        captured_id = self.board.piece_at(target)
        if captured_id is not None:
            self.pending_captures.append(captured_id)

        move = Move(piece.square, target)
        self.board.move_piece(piece_id, target)
        logger.info("move", color=self.turn.name.lower(), uci=move.to_uci())
        self.turn = self.turn.opponent()
        self.selection.clear()

        # observers only see a fully applied move
        if captured_id is not None:
            captured = copy(self.board.piece(captured_id))
            for capture_callback in self.events.on_capture:
                capture_callback(captured)
        for callback in self.events.on_move:
            callback(move, copy(piece))

    def _sweep_captures(self) -> None:
        """Remove every piece marked as captured. Taking the king ends the game."""
        while self.pending_captures:
            piece_id = self.pending_captures.pop(0)
            piece = self.board.piece(piece_id)
            try:
                if piece.type == PieceType.KING:
                    self._end_game(winner=piece.color.opponent())
            finally:
                self.board.remove_piece(piece_id)
            logger.info(
                "piece captured",
                piece=piece.type.name.lower(),
                color=piece.color.name.lower(),
                square=piece.square.to_algebraic(),
            )

    def _end_game(self, winner: Color) -> None:
        self.status = Status.GAME_OVER
        self.winner = winner
        logger.info("game over", winner=winner.name.lower())
        for callback in self.events.on_game_over:
            callback(winner)

    def _winner_name(self) -> Optional[str]:
        return self.winner.name.lower() if self.winner else None

