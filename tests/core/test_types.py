"""Tests for square and bitboard helpers."""

import pytest

from fenboard.core.types import (
    BITBOARD_MASK,
    FILE_MASKS,
    RANK_MASKS,
    is_valid_square,
    iter_bits,
    make_square,
    parse_square,
    square_mask,
    square_name,
)


class TestMasks:
    def test_every_mask_has_eight_bits(self) -> None:
        for mask in (*RANK_MASKS, *FILE_MASKS):
            assert bin(mask).count("1") == 8

    def test_ranks_partition_board(self) -> None:
        union = 0
        for mask in RANK_MASKS:
            assert union & mask == 0
            union |= mask
        assert union == BITBOARD_MASK

    def test_files_partition_board(self) -> None:
        union = 0
        for mask in FILE_MASKS:
            assert union & mask == 0
            union |= mask
        assert union == BITBOARD_MASK

    def test_a_file_is_high_bit_of_each_rank(self) -> None:
        assert FILE_MASKS[0] == 0x8080808080808080
        assert FILE_MASKS[7] == 0x0101010101010101


class TestSquares:
    def test_files_are_mirrored(self) -> None:
        assert make_square(0, 0) == 7  # a1
        assert make_square(0, 7) == 0  # h1
        assert make_square(7, 0) == 63  # a8

    def test_square_mask_matches_make_square(self) -> None:
        for rank in range(8):
            for file in range(8):
                assert square_mask(rank, file) == 1 << make_square(rank, file)

    @pytest.mark.parametrize("rank, file", [(-1, 0), (0, -1), (8, 0), (0, 8)])
    def test_out_of_range_rejected(self, rank: int, file: int) -> None:
        with pytest.raises(ValueError, match="out of range"):
            square_mask(rank, file)
        with pytest.raises(ValueError, match="out of range"):
            make_square(rank, file)

    def test_is_valid_square(self) -> None:
        assert is_valid_square(0)
        assert is_valid_square(63)
        assert not is_valid_square(-1)
        assert not is_valid_square(64)

    def test_iter_bits(self) -> None:
        assert iter_bits(0) == []
        assert iter_bits(0b1010_0001) == [0, 5, 7]
        assert iter_bits(1 << 63) == [63]


class TestSquareTokens:
    def test_name_examples(self) -> None:
        assert square_name(0) == "a1"
        assert square_name(7) == "a8"
        assert square_name(8) == "b1"
        assert square_name(63) == "h8"

    def test_every_square_roundtrips(self) -> None:
        for sq in range(64):
            assert parse_square(square_name(sq)) == sq

    def test_parse_formula(self) -> None:
        # letter a..h as hex 10..17: (letter - 10) * 8 + (digit - 1)
        assert parse_square("e3") == 34
        assert parse_square("h1") == 56

    @pytest.mark.parametrize("token", ["", "a", "i1", "a0", "a9", "A1", "e33", "-", "1a"])
    def test_malformed_tokens(self, token: str) -> None:
        assert parse_square(token) is None

    def test_name_rejects_invalid_square(self) -> None:
        with pytest.raises(ValueError, match="Invalid square"):
            square_name(64)
