"""Qt bridge exposing a :class:`GameSession` to a presentation layer."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from kingside.core.enums import Color, GameStatus
from kingside.core.errors import InvalidCoordinateError
from kingside.core.move import Move
from kingside.core.position import Position
from kingside.game.session import GameSession


class SessionBridge(QObject):
    """Translates slot calls into session operations and session events
    into signals.  Lives on the UI thread, like the session it wraps.
    """

    destinations_ready = pyqtSignal(int, int, object)  # row, col, [(row, col)]
    position_changed = pyqtSignal(object)  # Position
    move_rejected = pyqtSignal(int, int, int, int)
    status_changed = pyqtSignal(int, str)  # GameStatus, message
    game_over = pyqtSignal(int, object)  # GameStatus, Color | None

    __slots__ = ("_session",)

    def __init__(self, session: GameSession | None = None) -> None:
        super().__init__()
        self._session = session if session is not None else GameSession()
        events = self._session.events
        events.on_position_changed.append(self._on_position_changed)
        events.on_rejected.append(self._on_rejected)
        events.on_game_over.append(self._on_game_over)

    @property
    def session(self) -> GameSession:
        return self._session

    # ── Slots ────────────────────────────────────────────────────────────

    @pyqtSlot(int, int)
    def select(self, row: int, col: int) -> None:
        """Emit the legal destinations of the piece on (row, col)."""
        try:
            targets = self._session.legal_destinations(row, col)
        except InvalidCoordinateError:
            targets = []
        self.destinations_ready.emit(row, col, targets)

    @pyqtSlot(int, int, int, int)
    def submit(self, from_row: int, from_col: int, to_row: int, to_col: int) -> None:
        try:
            move = Move.of(from_row, from_col, to_row, to_col)
        except InvalidCoordinateError:
            self.move_rejected.emit(from_row, from_col, to_row, to_col)
            return
        self._session.submit_move(move)

    @pyqtSlot()
    def go_back(self) -> None:
        self._session.go_back()

    @pyqtSlot()
    def go_forward(self) -> None:
        self._session.go_forward()

    @pyqtSlot()
    def reset(self) -> None:
        self._session.reset()

    # ── Session callbacks ────────────────────────────────────────────────

    def _on_position_changed(self, position: Position) -> None:
        self.position_changed.emit(position)
        self.status_changed.emit(
            int(self._session.status), self._session.status_message()
        )

    def _on_rejected(self, move: Move) -> None:
        (fr, fc), (tr, tc) = move.from_sq, move.to_sq
        self.move_rejected.emit(fr, fc, tr, tc)

    def _on_game_over(self, status: GameStatus, winner: Color | None) -> None:
        self.game_over.emit(int(status), winner)
