"""Game state machine — validated move application and derived status.

The state itself is an immutable :class:`Position`; every function here
takes one and, where relevant, returns a new one.
"""

from __future__ import annotations

import logging

from kingside.core.enums import Color, GameStatus
from kingside.core.move import Move
from kingside.core.move_generator import legal_destinations
from kingside.core.position import Position
from kingside.core.rules import Rules
from kingside.core.types import in_bounds

_LOGGER = logging.getLogger(__name__)


def new_game() -> Position:
    """Canonical starting position."""
    return Position.initial()


def reset() -> Position:
    """Canonical starting position, regardless of any prior game."""
    return Position.initial()


def apply_move(position: Position, move: Move) -> Position | None:
    """Play *move* if it is legal in *position*.

    Returns the successor position, or ``None`` when the move is rejected
    (off-board coordinates, wrong side's piece, illegal destination, or a
    game that is already over).  *position* is never modified.
    """
    if not (in_bounds(*move.from_sq) and in_bounds(*move.to_sq)):
        _LOGGER.debug("Rejected off-board move %r", move)
        return None
    if move.to_sq not in legal_destinations(position, move.from_sq):
        _LOGGER.debug("Rejected illegal move %s", move)
        return None
    return position.play(move)


def game_status(position: Position) -> GameStatus:
    return Rules.game_status(position)


def is_in_check(position: Position) -> bool:
    """Whether the side to move is in check."""
    return Rules.is_in_check(position)


def is_terminal(position: Position) -> bool:
    return game_status(position).is_terminal


def winner(position: Position) -> Color | None:
    return Rules.winner(position)
