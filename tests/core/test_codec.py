"""Tests for the canonical position text format."""

import pytest

from kingside.core.codec import STARTING_TEXT, position_from_text, position_to_text
from kingside.core.enums import CastlingRights, Color, PieceType
from kingside.core.piece import Piece
from kingside.core.position import Position


class TestParse:
    def test_starting_text_is_initial_position(self) -> None:
        assert position_from_text(STARTING_TEXT) == Position.initial()

    def test_side_and_flags(self) -> None:
        pos = position_from_text("4k3/8/8/8/8/8/8/4K3 b 100001")
        assert pos.side_to_move == Color.BLACK
        assert pos.castling == (
            CastlingRights.WHITE_KING | CastlingRights.BLACK_QUEENSIDE
        )

    def test_row_zero_comes_first(self) -> None:
        pos = position_from_text("k7/8/8/8/8/8/8/7K w 000000")
        assert pos.board[(0, 0)] == Piece(Color.BLACK, PieceType.KING)
        assert pos.board[(7, 7)] == Piece(Color.WHITE, PieceType.KING)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "8/8/8/8/8/8/8/8 w",
            "8/8/8/8/8/8/8 w 000000",
            "9/8/8/8/8/8/8/8 w 000000",
            "7/8/8/8/8/8/8/8 w 000000",
            "8/8/8/8/8/8/8/8 x 000000",
            "8/8/8/8/8/8/8/8 w 00000",
            "8/8/8/8/8/8/8/8 w 00000a",
            "8/8/8/8/8/8/8/7X w 000000",
        ],
    )
    def test_rejects_malformed(self, text: str) -> None:
        with pytest.raises(ValueError):
            position_from_text(text)


class TestSerialise:
    def test_initial(self) -> None:
        assert position_to_text(Position.initial()) == STARTING_TEXT

    def test_round_trip_after_moves(self) -> None:
        text = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R b 011110"
        assert position_to_text(position_from_text(text)) == text
