"""Tests for Board."""

import pytest

from kingside.core.board import Board
from kingside.core.enums import Color, PieceType
from kingside.core.errors import InvalidCoordinateError
from kingside.core.piece import Piece
from kingside.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E4,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_row_zero_is_black_back_rank(self) -> None:
        board = Board.initial()
        assert E8 == (0, 4)
        assert board.get(0, 4) == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawns(self) -> None:
        board = Board.initial()
        for col in range(8):
            assert board[(6, col)] == Piece(Color.WHITE, PieceType.PAWN)
            assert board[(1, col)] == Piece(Color.BLACK, PieceType.PAWN)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert board[(row, col)] is None

    def test_piece_counts(self) -> None:
        board = Board.initial()
        assert len(list(board.pieces(Color.WHITE))) == 16
        assert len(list(board.pieces(Color.BLACK))) == 16
        assert len(list(board.pieces())) == 32


class TestBoardOperations:
    def test_with_piece_returns_new_board(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        updated = board.with_piece(E4, piece)
        assert updated[E4] == piece
        assert board[E4] is None
        assert updated.is_empty(E2)

    def test_apply_moves_piece_and_clears_origin(self) -> None:
        board = Board.initial()
        moved = board.apply(E2, E4)
        assert moved[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert moved[E2] is None
        # original untouched
        assert board[E2] == Piece(Color.WHITE, PieceType.PAWN)
        assert board[E4] is None

    def test_apply_capture_replaces_target(self) -> None:
        board = Board().with_pieces(
            {
                (4, 4): Piece(Color.WHITE, PieceType.ROOK),
                (0, 4): Piece(Color.BLACK, PieceType.QUEEN),
            }
        )
        moved = board.apply((4, 4), (0, 4))
        assert moved[(0, 4)] == Piece(Color.WHITE, PieceType.ROOK)
        assert len(list(moved.pieces())) == 1

    def test_copy_equal_and_independent(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        assert copy is not board
        rows = copy.to_rows()
        rows[7][4] = None
        assert copy[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_king_square_missing_is_none(self) -> None:
        assert Board.empty().king_square(Color.WHITE) is None

    def test_get_out_of_range_raises(self) -> None:
        board = Board.initial()
        with pytest.raises(InvalidCoordinateError):
            board.get(8, 0)
        with pytest.raises(InvalidCoordinateError):
            board.get(0, -1)

    def test_from_rows_rejects_bad_shape(self) -> None:
        with pytest.raises(ValueError, match="8 rows"):
            Board.from_rows([[None] * 8] * 7)

    def test_empty_board_has_no_pieces(self) -> None:
        board = Board.empty()
        assert list(board.pieces()) == []
        assert board == Board()

    def test_from_rows_copies_input(self) -> None:
        rows: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]
        rows[7][4] = Piece(Color.WHITE, PieceType.KING)
        board = Board.from_rows(rows)
        rows[7][4] = None
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert board.to_rows()[7][4] == Piece(Color.WHITE, PieceType.KING)

    def test_hashable_value(self) -> None:
        assert hash(Board.initial()) == hash(Board.initial())

    def test_repr_not_empty(self) -> None:
        text = repr(Board.initial())
        assert "K" in text
        assert text.splitlines()[0].startswith("8 r n b q k")
        assert "a b c d e f g h" in text
