"""GameSession — the facade a presentation layer drives.

Owns one :class:`History`; the live position is always ``history.current``.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from kingside.core.enums import Color, GameStatus
from kingside.core.move import Move
from kingside.core.move_generator import legal_destinations, legal_moves
from kingside.core.position import Position
from kingside.core.types import Square, check_square
from kingside.game import state
from kingside.game.history import History

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Position], None]  # move, position after
PositionCallback = Callable[[Position], None]
GameOverCallback = Callable[[GameStatus, Color | None], None]  # status, winner
RejectedCallback = Callable[[Move], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_position_changed: list[PositionCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """One game: validates and applies moves, browses history, runs premoves.

    Not thread-safe; each game needs its own session driven by one caller.
    """

    __slots__ = ("_history", "_premove", "_premoves_enabled", "events")

    def __init__(self, start: Position | None = None, *, premoves: bool = True) -> None:
        self._history = History(start)
        self._premove: Move | None = None
        self._premoves_enabled = premoves
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def history(self) -> History:
        return self._history

    @property
    def current_position(self) -> Position:
        return self._history.current

    @property
    def side_to_move(self) -> Color:
        return self.current_position.side_to_move

    @property
    def status(self) -> GameStatus:
        return state.game_status(self.current_position)

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def winner(self) -> Color | None:
        return state.winner(self.current_position)

    @property
    def premove(self) -> Move | None:
        return self._premove

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(self, start: Position | None = None) -> Position:
        """Start over from *start* (default: the standard setup)."""
        position = start if start is not None else state.new_game()
        self._history.reset(position)
        self._premove = None
        _LOGGER.info("New game, %s to move", position.side_to_move)
        self._emit_position_changed()
        return position

    def reset(self) -> Position:
        """Start over from the canonical starting position."""
        return self.new_game(state.reset())

    # ── Queries ──────────────────────────────────────────────────────────

    def is_in_check(self) -> bool:
        return state.is_in_check(self.current_position)

    def legal_destinations(self, row: int, col: int) -> list[Square]:
        """Where the piece on (row, col) may legally go, for highlighting."""
        return legal_destinations(self.current_position, check_square(row, col))

    def legal_moves(self) -> list[Move]:
        return legal_moves(self.current_position)

    def status_message(self) -> str:
        status = self.status
        if status == GameStatus.CHECKMATE:
            winner = self.side_to_move.opposite
            return f"Checkmate! {winner.name.capitalize()} wins."
        if status == GameStatus.STALEMATE:
            return "Stalemate!"
        if status == GameStatus.CHECK:
            return "Check!"
        return ""

    # ── Moves ────────────────────────────────────────────────────────────

    def submit_move(self, move: Move) -> bool:
        """Apply *move* if legal and record it.  Returns True on success."""
        if not self._play(move):
            return False
        self._try_premove()
        return True

    def set_premove(self, move: Move) -> None:
        """Queue *move* to be played once it becomes legal on a turn change."""
        if not self._premoves_enabled:
            return
        check_square(*move.from_sq)
        check_square(*move.to_sq)
        self._premove = move

    def clear_premove(self) -> None:
        self._premove = None

    # ── History navigation ───────────────────────────────────────────────

    def go_back(self) -> Position:
        return self.navigate(self._history.cursor - 1)

    def go_forward(self) -> Position:
        return self.navigate(self._history.cursor + 1)

    def navigate(self, index: int) -> Position:
        """Show the snapshot at *index* (clamped).  Clears any premove."""
        before = self._history.cursor
        position = self._history.navigate(index)
        self._premove = None
        if self._history.cursor != before:
            self._emit_position_changed()
        return position

    # ── Internal helpers ─────────────────────────────────────────────────

    def _play(self, move: Move) -> bool:
        if self.is_game_over:
            _LOGGER.debug("Rejected %s: game is over", move)
            self._emit_rejected(move)
            return False

        position = state.apply_move(self.current_position, move)
        if position is None:
            self._emit_rejected(move)
            return False

        self._history.record(position)
        _LOGGER.debug("Played %s (ply %d)", move, self._history.cursor)

        for cb in self.events.on_move:
            cb(move, position)
        self._emit_position_changed()

        status = self.status
        if status.is_terminal:
            winner = self.winner
            for go_cb in self.events.on_game_over:
                go_cb(status, winner)
        return True

    def _try_premove(self) -> None:
        move = self._premove
        if move is None:
            return
        piece = self.current_position.board[move.from_sq]
        if piece is None or piece.color != self.side_to_move:
            return
        if move.to_sq not in legal_destinations(self.current_position, move.from_sq):
            return
        self._premove = None
        _LOGGER.debug("Executing premove %s", move)
        self._play(move)

    def _emit_position_changed(self) -> None:
        position = self.current_position
        for cb in self.events.on_position_changed:
            cb(position)

    def _emit_rejected(self, move: Move) -> None:
        for cb in self.events.on_rejected:
            cb(move)
