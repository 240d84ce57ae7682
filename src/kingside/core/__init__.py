"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from kingside.core import Position, legal_moves, Rules

    pos = Position.initial()
    for move in legal_moves(pos):
        print(move)
    print(Rules.game_status(pos))
"""

from kingside.core.board import Board
from kingside.core.check import is_in_check
from kingside.core.codec import STARTING_TEXT, position_from_text, position_to_text
from kingside.core.enums import CastlingRights, Color, GameStatus, PieceType
from kingside.core.errors import InvalidCoordinateError
from kingside.core.move import Move
from kingside.core.move_generator import (
    MoveGenerator,
    legal_destinations,
    legal_moves,
    pseudo_legal_destinations,
)
from kingside.core.piece import Piece
from kingside.core.position import Position
from kingside.core.rules import Rules
from kingside.core.types import Square, check_square, in_bounds, square_name

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "check_square",
    "in_bounds",
    "square_name",
    # Errors
    "InvalidCoordinateError",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Move generation / check detection
    "is_in_check",
    "legal_destinations",
    "legal_moves",
    "pseudo_legal_destinations",
    # Codec
    "STARTING_TEXT",
    "position_from_text",
    "position_to_text",
]
