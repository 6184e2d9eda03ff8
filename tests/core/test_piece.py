"""Tests for the Piece value object."""

import pytest

from fenboard.core.enums import Color, PieceType
from fenboard.core.piece import PIECE_COUNT, Piece


class TestPieceIndex:
    def test_index_formula(self) -> None:
        assert Piece(Color.WHITE, PieceType.PAWN).index == 0
        assert Piece(Color.BLACK, PieceType.PAWN).index == 1
        assert Piece(Color.BLACK, PieceType.KNIGHT).index == 3
        assert Piece(Color.WHITE, PieceType.QUEEN).index == 8
        assert Piece(Color.BLACK, PieceType.KING).index == 11

    def test_index_to_piece_roundtrip(self) -> None:
        for i in range(PIECE_COUNT):
            assert Piece.from_index(i).index == i

    def test_piece_to_index_roundtrip(self) -> None:
        for color in Color:
            for pt in PieceType:
                piece = Piece(color, pt)
                assert Piece.from_index(piece.index) == piece

    @pytest.mark.parametrize("index", [-1, 12, 100])
    def test_invalid_index(self, index: int) -> None:
        with pytest.raises(ValueError, match="Invalid piece index"):
            Piece.from_index(index)

    def test_all_in_index_order(self) -> None:
        pieces = list(Piece.all())
        assert len(pieces) == PIECE_COUNT
        assert [p.index for p in pieces] == list(range(PIECE_COUNT))


class TestPieceChars:
    def test_letters_in_index_order(self) -> None:
        assert "".join(str(p) for p in Piece.all()) == "PpNnBbRrQqKk"

    def test_char_roundtrip(self) -> None:
        for piece in Piece.all():
            assert Piece.from_char(str(piece)) == piece

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_symbol(self) -> None:
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"

