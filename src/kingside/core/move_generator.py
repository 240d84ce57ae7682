"""Pseudo-legal and legal move generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kingside.core.board import Board
from kingside.core.enums import CastlingRights, Color, PieceType
from kingside.core.move import Move
from kingside.core.types import Square, check_square, in_bounds

if TYPE_CHECKING:
    from kingside.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDING_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

KING_START_COL = 4
KINGSIDE_ROOK_COL = 7
QUEENSIDE_ROOK_COL = 0

# (rook column, empty columns between, columns the king stands on after each step)
_CASTLE_PATHS: tuple[tuple[int, tuple[int, ...], tuple[int, ...]], ...] = (
    (KINGSIDE_ROOK_COL, (5, 6), (5, 6)),
    (QUEENSIDE_ROOK_COL, (3, 2, 1), (3, 2)),
)


# -- Public API ---------------------------------------------------------------


def pseudo_legal_destinations(
    board: Board,
    sq: Square,
    side_to_move: Color,
    castling: CastlingRights,
    allow_castling: bool = True,
) -> list[Square]:
    """Destinations of the piece on *sq*, ignoring self-check.

    Empty if the cell is empty or holds a piece of the side not to move.
    ``allow_castling=False`` suppresses castling generation; check detection
    relies on it so that castling legality and attack tests never recurse
    into each other.
    """
    piece = board[sq]
    if piece is None or piece.color != side_to_move:
        return []

    color = piece.color
    ptype = piece.piece_type
    moves: list[Square] = []

    if ptype == PieceType.PAWN:
        _gen_pawn(board, sq, color, moves)
    elif ptype == PieceType.KNIGHT:
        _gen_steps(board, sq, color, KNIGHT_OFFSETS, moves)
    elif ptype == PieceType.KING:
        _gen_steps(board, sq, color, KING_OFFSETS, moves)
        if allow_castling:
            _gen_castling(board, sq, color, castling, moves)
    else:
        _gen_sliding(board, sq, color, _SLIDING_DIRS[ptype], moves)
    return moves


def legal_destinations(position: Position, sq: Square) -> list[Square]:
    """Destinations of the piece on *sq* that keep the mover's king safe.

    Raises :class:`InvalidCoordinateError` if *sq* is off the board.
    """
    from kingside.core.check import is_in_check

    check_square(*sq)
    board = position.board
    color = position.side_to_move
    return [
        to_sq
        for to_sq in pseudo_legal_destinations(board, sq, color, position.castling)
        if not is_in_check(board.apply(sq, to_sq), color)
    ]


def legal_moves(position: Position) -> list[Move]:
    """All strictly legal moves for the side to move, in row-major order."""
    moves: list[Move] = []
    for from_sq, _piece in position.board.pieces(position.side_to_move):
        for to_sq in legal_destinations(position, from_sq):
            moves.append(Move(from_sq, to_sq))
    return moves


class MoveGenerator:
    """Generates legal moves for a given :class:`Position`."""

    __slots__ = ("_pos",)

    def __init__(self, position: Position) -> None:
        self._pos = position

    def generate_legal_moves(self) -> list[Move]:
        return legal_moves(self._pos)

    def destinations(self, sq: Square) -> list[Square]:
        return legal_destinations(self._pos, sq)

    def pseudo_legal_destinations(
        self, sq: Square, allow_castling: bool = True
    ) -> list[Square]:
        pos = self._pos
        check_square(*sq)
        return pseudo_legal_destinations(
            pos.board, sq, pos.side_to_move, pos.castling, allow_castling
        )

    def is_in_check(self, color: Color) -> bool:
        from kingside.core.check import is_in_check

        return is_in_check(self._pos.board, color)


# -- Piece-specific generators (private) -----------------------------------


def _is_enemy(board: Board, sq: Square, color: Color) -> bool:
    target = board[sq]
    return target is not None and target.color != color


def _gen_pawn(board: Board, sq: Square, color: Color, moves: list[Square]) -> None:
    row, col = sq
    step = color.pawn_direction

    one_step = (row + step, col)
    if in_bounds(*one_step) and board.is_empty(one_step):
        moves.append(one_step)
        if row == color.pawn_start_row:
            two_step = (row + 2 * step, col)
            if board.is_empty(two_step):
                moves.append(two_step)

    for dc in (-1, 1):
        cap_sq = (row + step, col + dc)
        if in_bounds(*cap_sq) and _is_enemy(board, cap_sq, color):
            moves.append(cap_sq)


def _gen_steps(
    board: Board,
    sq: Square,
    color: Color,
    offsets: tuple[tuple[int, int], ...],
    moves: list[Square],
) -> None:
    row, col = sq
    for dr, dc in offsets:
        to_sq = (row + dr, col + dc)
        if not in_bounds(*to_sq):
            continue
        target = board[to_sq]
        if target is None or target.color != color:
            moves.append(to_sq)


def _gen_sliding(
    board: Board,
    sq: Square,
    color: Color,
    directions: tuple[tuple[int, int], ...],
    moves: list[Square],
) -> None:
    row, col = sq
    for dr, dc in directions:
        r, c = row + dr, col + dc
        while in_bounds(r, c):
            target = board[(r, c)]
            if target is None:
                moves.append((r, c))
            else:
                if target.color != color:
                    moves.append((r, c))
                break
            r += dr
            c += dc


def _gen_castling(
    board: Board,
    king_sq: Square,
    color: Color,
    castling: CastlingRights,
    moves: list[Square],
) -> None:
    from kingside.core.check import is_in_check

    home = color.home_row
    if king_sq != (home, KING_START_COL):
        return
    if not castling & CastlingRights.king_flag(color):
        return

    in_check: bool | None = None
    for rook_col, between, king_path in _CASTLE_PATHS:
        side_flag = (
            CastlingRights.kingside(color)
            if rook_col == KINGSIDE_ROOK_COL
            else CastlingRights.queenside(color)
        )
        if not castling & side_flag:
            continue
        rook = board[(home, rook_col)]
        if rook is None or not rook.is_a(color, PieceType.ROOK):
            continue
        if any(not board.is_empty((home, c)) for c in between):
            continue

        if in_check is None:
            in_check = is_in_check(board, color)
        if in_check:
            return
        if any(is_in_check(board.apply(king_sq, (home, c)), color) for c in king_path):
            continue
        moves.append((home, king_path[-1]))
