"""Exceptions raised at the public API boundary."""

from __future__ import annotations


class InvalidCoordinateError(ValueError):
    """A row/column pair lies outside the 8x8 board."""

    def __init__(self, row: object, col: object) -> None:
        super().__init__(f"Coordinate out of range: ({row!r}, {col!r})")
        self.row = row
        self.col = col
