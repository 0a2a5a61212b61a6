"""Orchestration of communication from the presentation adapter to the game (and the reverse direction)."""

from typing import Optional

import structlog

from chessboard.api.models import GameResponse, PickSquareRequest, PieceView, TickRequest
from chessboard.chess.events import InputEvent, SquareChosen, SquareCleared
from chessboard.chess.game import Game
from chessboard.chess.square import Square
from chessboard.core.models import GameModel

logger = structlog.get_logger(__name__)


class ChessboardService:
    """
    Single in-memory game. The adapter calls `tick()` once per frame with the picks it collected.

    NOTE: There is no persistence: the game lives as long as the service (reset by restarting the process).
    """

    def __init__(self, game: Optional[Game] = None) -> None:
        self.game = game or Game.new_game()

    # -- Adapter facing logic ---
    def tick(self, request: TickRequest) -> GameResponse:
        """Feed one frame worth of picking events into the game."""
        events = [self._to_event(pick) for pick in request.picks]
        logger.debug("tick", num_events=len(events))
        self.game.tick(events)
        return self._create_game_response(self.game.to_model())

    def pick(self, request: PickSquareRequest) -> GameResponse:
        """Convenience method: a tick with a single picking event."""
        return self.tick(TickRequest(picks=[request]))

    def get_game_state(self) -> GameResponse:
        """Retrieve current game state (what the adapter should render)."""
        return self._create_game_response(self.game.to_model())

    def legal_targets(self) -> list[str]:
        """Destinations of the selected piece, in algebraic notation."""
        return [square.to_algebraic() for square in self.game.legal_targets()]

    # -- Internal helpers --
    def _to_event(self, pick: PickSquareRequest) -> InputEvent:
        square = Square.from_algebraic(pick.square)
        return SquareChosen(square) if pick.selected else SquareCleared(square)

    def _create_game_response(self, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse"""
        return GameResponse(
            pieces=[
                PieceView(color=piece.color, type=piece.type, square=piece.square)
                for piece in model.pieces
            ],
            turn=model.turn,
            status=model.status,
            winner=model.winner,
            selected_square=model.selected_square,
            legal_targets=model.legal_targets,
        )
