"""Core enumerations for the position model."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color; the value doubles as the array index."""

    WHITE = 0
    BLACK = 1


class PieceType(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6
