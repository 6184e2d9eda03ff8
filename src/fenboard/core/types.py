"""Square and bitboard aliases plus coordinate helpers.

Board layout (mirrored files)::

    h1=0, g1=1, ..., a1=7
    h2=8, g2=9, ..., a2=15
    ...
    h8=56, g8=57, ..., a8=63

Queries take a display file (0 = "a" ... 7 = "h"); the stored bit for
``(rank, file)`` is ``rank * 8 + (7 - file)``.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int  # 0–63
Bitboard: TypeAlias = int  # unsigned 64-bit mask

BITBOARD_MASK: Bitboard = (1 << 64) - 1

# Indexed by display file: FILE_MASKS[0] is the "a" file.
FILE_MASKS: tuple[Bitboard, ...] = (
    0x8080808080808080,
    0x4040404040404040,
    0x2020202020202020,
    0x1010101010101010,
    0x0808080808080808,
    0x0404040404040404,
    0x0202020202020202,
    0x0101010101010101,
)

RANK_MASKS: tuple[Bitboard, ...] = (
    0x00000000000000FF,
    0x000000000000FF00,
    0x0000000000FF0000,
    0x00000000FF000000,
    0x000000FF00000000,
    0x0000FF0000000000,
    0x00FF000000000000,
    0xFF00000000000000,
)

# Letter for ``square // 8`` in en-passant tokens.
EN_PASSANT_LETTERS = "abcdefgh"


def _check_coordinate(name: str, value: int) -> None:
    if not 0 <= value < 8:
        raise ValueError(f"{name} out of range (0-7): {value!r}")


def make_square(rank: int, file: int) -> Square:
    """Square for *rank* (0–7) and display *file* (0–7, "a" first)."""
    _check_coordinate("Rank", rank)
    _check_coordinate("File", file)
    return rank * 8 + (7 - file)


def square_mask(rank: int, file: int) -> Bitboard:
    """Single-bit mask for *rank* and display *file*."""
    _check_coordinate("Rank", rank)
    _check_coordinate("File", file)
    return RANK_MASKS[rank] & FILE_MASKS[file]


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < 64


def square_name(sq: Square) -> str:
    """Two-character token for *sq*, e.g. 0 → 'a1', 63 → 'h8'."""
    if not is_valid_square(sq):
        raise ValueError(f"Invalid square: {sq!r}")
    return EN_PASSANT_LETTERS[sq // 8] + str(sq % 8 + 1)


def parse_square(token: str) -> Square | None:
    """Inverse of :func:`square_name`; ``None`` if *token* is malformed.

    The letter is read as a hex-style digit (a=10 ... h=17), so the square
    is ``(letter - 10) * 8 + (digit - 1)``.
    """
    if len(token) != 2:
        return None
    letter, digit = token
    if letter not in EN_PASSANT_LETTERS or digit not in "12345678":
        return None
    return EN_PASSANT_LETTERS.index(letter) * 8 + (int(digit) - 1)


def iter_bits(bitboard: Bitboard) -> list[Square]:
    """Squares of all set bits, lowest first."""
    squares: list[Square] = []
    while bitboard:
        lsb = bitboard & -bitboard
        squares.append(lsb.bit_length() - 1)
        bitboard ^= lsb
    return squares
