"""Linear position history with a browse cursor (branch-discard undo/redo)."""

from __future__ import annotations

import logging

from kingside.core.position import Position

_LOGGER = logging.getLogger(__name__)


class History:
    """Ordered snapshots; index 0 is the starting position.

    Navigation only moves the cursor.  Recording while the cursor is behind
    the tail discards every later entry first.
    """

    __slots__ = ("_entries", "_cursor")

    def __init__(self, initial: Position | None = None) -> None:
        if initial is None:
            initial = Position.initial()
        self._entries: list[Position] = [initial]
        self._cursor = 0

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def current(self) -> Position:
        return self._entries[self._cursor]

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def entries(self) -> tuple[Position, ...]:
        return tuple(self._entries)

    @property
    def at_tail(self) -> bool:
        return self._cursor == len(self._entries) - 1

    @property
    def can_go_back(self) -> bool:
        return self._cursor > 0

    @property
    def can_go_forward(self) -> bool:
        return not self.at_tail

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> Position:
        return self._entries[index]

    # ── Mutation ─────────────────────────────────────────────────────────

    def record(self, position: Position) -> None:
        """Append *position* after the cursor and move the cursor onto it."""
        if not self.at_tail:
            dropped = len(self._entries) - self._cursor - 1
            del self._entries[self._cursor + 1 :]
            _LOGGER.debug("Discarded %d later history entries", dropped)
        self._entries.append(position)
        self._cursor = len(self._entries) - 1

    def navigate(self, index: int) -> Position:
        """Move the cursor to *index*, clamped to the stored range."""
        self._cursor = max(0, min(index, len(self._entries) - 1))
        return self.current

    def go_back(self) -> Position:
        return self.navigate(self._cursor - 1)

    def go_forward(self) -> Position:
        return self.navigate(self._cursor + 1)

    def reset(self, initial: Position | None = None) -> None:
        """Clear to a single starting entry."""
        if initial is None:
            initial = Position.initial()
        self._entries = [initial]
        self._cursor = 0
