"""Square type alias and coordinate helpers.

Board layout (row-major, standard orientation):
    (0, 0) = a8, (0, 7) = h8
    ...
    (7, 0) = a1, (7, 7) = h1
"""

from __future__ import annotations

from typing import TypeAlias

from kingside.core.errors import InvalidCoordinateError

Square: TypeAlias = tuple[int, int]  # (row, col), both 0–7

BOARD_SIZE = 8


def in_bounds(row: int, col: int) -> bool:
    """Whether (row, col) lies on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def check_square(row: int, col: int) -> Square:
    """Return ``(row, col)`` or raise :class:`InvalidCoordinateError`."""
    if (
        not isinstance(row, int)
        or not isinstance(col, int)
        or isinstance(row, bool)
        or isinstance(col, bool)
        or not in_bounds(row, col)
    ):
        raise InvalidCoordinateError(row, col)
    return (row, col)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (6, 4) → 'e2'."""
    row, col = sq
    return chr(ord("a") + col) + str(BOARD_SIZE - row)


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ((0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = ((7, c) for c in range(8))
