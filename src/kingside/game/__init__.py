"""Game management layer — state machine, history, session.

Quick start::

    from kingside.core import Move
    from kingside.game import GameSession

    session = GameSession()
    session.submit_move(Move.of(6, 4, 4, 4))  # e2-e4
    session.go_back()
"""

from kingside.game.history import History
from kingside.game.session import GameSession, SessionEvents
from kingside.game.state import (
    apply_move,
    game_status,
    is_in_check,
    is_terminal,
    new_game,
    reset,
    winner,
)

__all__ = [
    # State machine
    "apply_move",
    "game_status",
    "is_in_check",
    "is_terminal",
    "new_game",
    "reset",
    "winner",
    # Concrete
    "GameSession",
    "History",
    "SessionEvents",
]
