"""Position — immutable snapshot of board, side to move and castling rights."""

from __future__ import annotations

from dataclasses import dataclass, field

from kingside.core.board import Board
from kingside.core.enums import CastlingRights, Color, PieceType
from kingside.core.move import Move
from kingside.core.move_generator import (
    KING_START_COL,
    KINGSIDE_ROOK_COL,
    QUEENSIDE_ROOK_COL,
)
from kingside.core.types import Square

# Rook corner → the permission it carries.
_ROOK_CORNERS: dict[Square, tuple[Color, CastlingRights]] = {
    (7, QUEENSIDE_ROOK_COL): (Color.WHITE, CastlingRights.WHITE_QUEENSIDE),
    (7, KINGSIDE_ROOK_COL): (Color.WHITE, CastlingRights.WHITE_KINGSIDE),
    (0, QUEENSIDE_ROOK_COL): (Color.BLACK, CastlingRights.BLACK_QUEENSIDE),
    (0, KINGSIDE_ROOK_COL): (Color.BLACK, CastlingRights.BLACK_KINGSIDE),
}


@dataclass(frozen=True, slots=True)
class Position:
    """Full game state the rules depend on.

    Positions are values: :meth:`play` returns a successor and never
    touches ``self``.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL

    @classmethod
    def initial(cls) -> Position:
        """Canonical starting position, White to move, all rights held."""
        return cls(Board.initial(), Color.WHITE, CastlingRights.ALL)

    # ── Move application ─────────────────────────────────────────────────

    def play(self, move: Move) -> Position:
        """Successor after *move*.  Legality is the caller's concern."""
        piece = self.board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        board = self.board.apply(move.from_sq, move.to_sq)

        # Slide the rook when the king castles.
        from_row, from_col = move.from_sq
        to_row, to_col = move.to_sq
        if (
            piece.piece_type == PieceType.KING
            and move.from_sq == (piece.color.home_row, KING_START_COL)
            and to_row == from_row
            and abs(to_col - from_col) == 2
        ):
            if to_col > from_col:
                rook_from, rook_to = (from_row, KINGSIDE_ROOK_COL), (from_row, 5)
            else:
                rook_from, rook_to = (from_row, QUEENSIDE_ROOK_COL), (from_row, 3)
            board = board.apply(rook_from, rook_to)

        return Position(
            board=board,
            side_to_move=self.side_to_move.opposite,
            castling=self._next_castling(move),
        )

    # ── Castling bookkeeping ─────────────────────────────────────────────

    def _next_castling(self, move: Move) -> CastlingRights:
        """Rights after *move*, judged on the board before it is applied."""
        rights = self.castling
        piece = self.board[move.from_sq]
        assert piece is not None

        if piece.piece_type == PieceType.KING:
            rights &= ~CastlingRights.all_for(piece.color)

        # Rook leaving its corner, or a rook captured on its corner.
        for sq in (move.from_sq, move.to_sq):
            corner = _ROOK_CORNERS.get(sq)
            if corner is None:
                continue
            color, flag = corner
            occupant = self.board[sq]
            if occupant is not None and occupant.is_a(color, PieceType.ROOK):
                rights &= ~flag
        return rights

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Independent copy (a fresh board object with equal cells)."""
        return Position(self.board.copy(), self.side_to_move, self.castling)
