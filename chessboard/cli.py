"""
Console presentation adapter
-----

Stands in for the 3D scene: renders the board as text and turns typed square names into picking events.

* "e2"  pick a square
* "-"   drop the current selection
* "q"   quit
"""

import sys
from typing import Iterable, Optional, TextIO

from chessboard.api.models import GameResponse, PickSquareRequest
from chessboard.core.config import Settings, get_settings
from chessboard.core.exceptions import InvalidRequestError
from chessboard.core.logging import setup_logging
from chessboard.core.shared_types import Color, PieceType, Status
from chessboard.services.chessboard_service import ChessboardService

PIECE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
FILES = "abcdefgh"


def render_board(state: GameResponse, show_legal_targets: bool = False) -> str:
    """Rank 8 on top, White's pieces in capitals. The selected square is wrapped in brackets."""
    letters = {
        piece.square: (
            PIECE_LETTERS[piece.type].upper()
            if piece.color == Color.WHITE
            else PIECE_LETTERS[piece.type]
        )
        for piece in state.pieces
    }
    targets = set(state.legal_targets) if show_legal_targets else set()

    lines = [state.next_move_text]
    for rank in range(8, 0, -1):
        cells: list[str] = []
        for file in FILES:
            square = f"{file}{rank}"
            symbol = letters.get(square, "*" if square in targets else ".")
            cells.append(f"[{symbol}]" if square == state.selected_square else f" {symbol} ")
        lines.append(f"{rank} {''.join(cells)}")
    lines.append("  " + "".join(f" {file} " for file in FILES))
    return "\n".join(lines)


def run(
    lines: Iterable[str],
    out: TextIO,
    service: Optional[ChessboardService] = None,
    settings: Optional[Settings] = None,
) -> int:
    """Read commands until the input runs out, the user quits, or a king is taken."""
    service = service or ChessboardService()
    settings = settings or get_settings()

    state = service.get_game_state()
    print(render_board(state, settings.show_legal_targets), file=out)
    for line in lines:
        command = line.strip()
        if command == "q":
            break
        if not command:
            continue

        try:
            state = _handle(command, state, service)
        except InvalidRequestError as err:
            print(err, file=out)
            continue

        print(render_board(state, settings.show_legal_targets), file=out)
        if state.status == Status.GAME_OVER:
            break
    return 0


def _handle(command: str, state: GameResponse, service: ChessboardService) -> GameResponse:
    if command == "-":
        if state.selected_square is None:
            return state
        return service.pick(
            PickSquareRequest(square=state.selected_square, selected=False)
        )
    return service.pick(PickSquareRequest(square=command))


def main() -> int:
    settings = get_settings()
    setup_logging(settings)
    return run(sys.stdin, sys.stdout, settings=settings)


if __name__ == "__main__":
    sys.exit(main())
