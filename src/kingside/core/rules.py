"""High-level chess rules: check, checkmate and stalemate detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kingside.core.check import is_in_check
from kingside.core.enums import Color, GameStatus
from kingside.core.move_generator import legal_moves

if TYPE_CHECKING:
    from kingside.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return is_in_check(position.board, position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return Rules.game_status(position) == GameStatus.CHECKMATE

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return Rules.game_status(position) == GameStatus.STALEMATE

    @staticmethod
    def game_status(position: Position) -> GameStatus:
        """Derive the status of the side to move.

        No legal moves means checkmate when in check, stalemate otherwise.
        """
        in_check = Rules.is_in_check(position)
        if not legal_moves(position):
            return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
        return GameStatus.CHECK if in_check else GameStatus.ACTIVE

    @staticmethod
    def winner(position: Position) -> Color | None:
        """The side that delivered mate, or ``None`` if nobody has won."""
        if Rules.is_checkmate(position):
            return position.side_to_move.opposite
        return None
