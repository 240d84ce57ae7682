"""Canonical text encoding of a :class:`Position`.

One line, three space-separated fields::

    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w 111111

1. Placement, row 0 (rank 8) first; piece codes, digits for empty runs.
2. Side to move, ``w`` or ``b``.
3. Six ``0``/``1`` castling flags in the order white king, white kingside,
   white queenside, black king, black kingside, black queenside.
"""

from __future__ import annotations

from kingside.core.board import Board
from kingside.core.enums import CastlingRights, Color
from kingside.core.piece import Piece
from kingside.core.position import Position
from kingside.core.types import BOARD_SIZE

STARTING_TEXT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w 111111"

_FLAG_ORDER: tuple[CastlingRights, ...] = (
    CastlingRights.WHITE_KING,
    CastlingRights.WHITE_KINGSIDE,
    CastlingRights.WHITE_QUEENSIDE,
    CastlingRights.BLACK_KING,
    CastlingRights.BLACK_KINGSIDE,
    CastlingRights.BLACK_QUEENSIDE,
)


def position_from_text(text: str) -> Position:
    """Parse the canonical text form into a :class:`Position`."""
    parts = text.split()
    if len(parts) != 3:
        raise ValueError(f"Invalid position text (need 3 fields): {text!r}")

    placement, side_part, flags_part = parts

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 rows): {text!r}")
    rows: list[list[Piece | None]] = []
    for rank_text in ranks:
        row: list[Piece | None] = []
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid digit {ch!r}: {text!r}")
                row.extend([None] * step)
            else:
                row.append(Piece.from_char(ch))
            if len(row) > BOARD_SIZE:
                raise ValueError(f"Invalid row width: {text!r}")
        if len(row) != BOARD_SIZE:
            raise ValueError(f"Invalid row width: {text!r}")
        rows.append(row)

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid side-to-move field: {side_part!r}")

    # 3. Castling flags
    if len(flags_part) != len(_FLAG_ORDER) or set(flags_part) - {"0", "1"}:
        raise ValueError(f"Invalid castling flags: {flags_part!r}")
    castling = CastlingRights.NONE
    for ch, flag in zip(flags_part, _FLAG_ORDER):
        if ch == "1":
            castling |= flag

    return Position(Board.from_rows(rows), side, castling)


def position_to_text(position: Position) -> str:
    """Serialise *position* to the canonical text form."""
    ranks: list[str] = []
    for row in position.board.to_rows():
        parts: list[str] = []
        empty = 0
        for piece in row:
            if piece is None:
                empty += 1
                continue
            if empty:
                parts.append(str(empty))
                empty = 0
            parts.append(str(piece))
        if empty:
            parts.append(str(empty))
        ranks.append("".join(parts))

    side = "w" if position.side_to_move == Color.WHITE else "b"
    flags = "".join("1" if position.castling & flag else "0" for flag in _FLAG_ORDER)
    return f"{'/'.join(ranks)} {side} {flags}"
