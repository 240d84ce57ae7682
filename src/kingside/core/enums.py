"""Core enumerations and flags for chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def home_row(self) -> int:
        """Row holding this side's king and rooks at the start."""
        return 7 if self == Color.WHITE else 0

    @property
    def pawn_direction(self) -> int:
        """Row delta of a single pawn step (white moves up the grid)."""
        return -1 if self == Color.WHITE else 1

    @property
    def pawn_start_row(self) -> int:
        return 6 if self == Color.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastlingRights(IntFlag):
    """Six independent castling permissions.

    A set bit means the permission still holds.  ``WHITE_KING`` and
    ``BLACK_KING`` stay set until that king moves for the first time.
    """

    NONE = 0
    WHITE_KING = auto()
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KING = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_ALL = WHITE_KING | WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_ALL = BLACK_KING | BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_ALL | BLACK_ALL

    @classmethod
    def king_flag(cls, color: Color) -> CastlingRights:
        return cls.WHITE_KING if color == Color.WHITE else cls.BLACK_KING

    @classmethod
    def kingside(cls, color: Color) -> CastlingRights:
        return cls.WHITE_KINGSIDE if color == Color.WHITE else cls.BLACK_KINGSIDE

    @classmethod
    def queenside(cls, color: Color) -> CastlingRights:
        return cls.WHITE_QUEENSIDE if color == Color.WHITE else cls.BLACK_QUEENSIDE

    @classmethod
    def all_for(cls, color: Color) -> CastlingRights:
        return cls.WHITE_ALL if color == Color.WHITE else cls.BLACK_ALL

    def is_subset_of(self, other: CastlingRights) -> bool:
        """True when every permission held here is also held by *other*."""
        return not (self & ~other)


class GameStatus(IntEnum):
    """Status of the side to move, derived from the position."""

    ACTIVE = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE)
