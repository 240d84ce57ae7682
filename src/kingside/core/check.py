"""Check detection by enumerating the opponent's pseudo-legal moves."""

from __future__ import annotations

from kingside.core.board import Board
from kingside.core.enums import CastlingRights, Color
from kingside.core.move_generator import pseudo_legal_destinations


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by any opposing piece?

    A board without a king of *color* is never in check.
    """
    king_sq = board.king_square(color)
    if king_sq is None:
        return False

    opponent = color.opposite
    for sq, _piece in board.pieces(opponent):
        targets = pseudo_legal_destinations(
            board, sq, opponent, CastlingRights.NONE, allow_castling=False
        )
        if king_sq in targets:
            return True
    return False
