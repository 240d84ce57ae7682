"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence

from kingside.core.enums import Color, PieceType
from kingside.core.piece import Piece
from kingside.core.types import BOARD_SIZE, Square, check_square

_Cells = tuple[tuple[Piece | None, ...], ...]

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Immutable 8x8 grid of ``Piece | None`` cells, row 0 = rank 8.

    Every "mutation" returns a fresh :class:`Board`; instances can be shared
    freely between positions and history snapshots.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Iterable[Iterable[Piece | None]] | None = None) -> None:
        if cells is None:
            empty_row = (None,) * BOARD_SIZE
            self._cells: _Cells = (empty_row,) * BOARD_SIZE
            return
        grid = tuple(tuple(row) for row in cells)
        if len(grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in grid):
            raise ValueError("Board must be 8 rows of 8 cells")
        self._cells = grid

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        return self._cells[row][col]

    def get(self, row: int, col: int) -> Piece | None:
        """Bounds-checked cell access for callers outside the engine."""
        check_square(row, col)
        return self._cells[row][col]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares (optionally only *color*'s) in row-major order."""
        for row, cells in enumerate(self._cells):
            for col, piece in enumerate(cells):
                if piece is not None and (color is None or piece.color == color):
                    yield (row, col), piece

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` when it is absent."""
        for sq, piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return sq
        return None

    # -- Derivation ---------------------------------------------------------

    def copy(self) -> Board:
        return Board(self._cells)

    def apply(self, from_sq: Square, to_sq: Square) -> Board:
        """Move whatever stands on *from_sq* to *to_sq*, clearing the origin.

        Castling rook relocation is not handled here.
        """
        piece = self[from_sq]
        return self.with_pieces({to_sq: piece, from_sq: None})

    def with_piece(self, sq: Square, piece: Piece | None) -> Board:
        return self.with_pieces({sq: piece})

    def with_pieces(self, changes: Mapping[Square, Piece | None]) -> Board:
        """New board with the given cells overwritten (applied in order)."""
        rows = self.to_rows()
        for (row, col), piece in changes.items():
            rows[row][col] = piece
        return Board(rows)

    def to_rows(self) -> list[list[Piece | None]]:
        """Independent mutable copy of the grid."""
        return [list(row) for row in self._cells]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        rows: list[list[Piece | None]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        for col, pt in enumerate(_BACK_RANK):
            rows[0][col] = Piece(Color.BLACK, pt)
            rows[7][col] = Piece(Color.WHITE, pt)
        for col in range(BOARD_SIZE):
            rows[1][col] = Piece(Color.BLACK, PieceType.PAWN)
            rows[6][col] = Piece(Color.WHITE, PieceType.PAWN)
        return cls(rows)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Piece | None]]) -> Board:
        return cls(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row_idx, cells in enumerate(self._cells):
            row = [str(p) if p else "." for p in cells]
            rows.append(f"{BOARD_SIZE - row_idx} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
