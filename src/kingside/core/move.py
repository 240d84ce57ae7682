"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from kingside.core.types import Square, check_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable (from, to) pair.  Validity depends on the position."""

    from_sq: Square
    to_sq: Square

    @classmethod
    def of(cls, from_row: int, from_col: int, to_row: int, to_col: int) -> Move:
        """Build a move from raw coordinates, validating bounds."""
        return cls(check_square(from_row, from_col), check_square(to_row, to_col))

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
