"""fenboard — bitboard chess positions and a FEN codec."""

from fenboard.core import (
    STARTING_FEN,
    Color,
    FenError,
    Piece,
    PieceType,
    Position,
    position_from_fen,
    position_to_fen,
)

__version__ = "0.1.0"

__all__ = [
    "STARTING_FEN",
    "Color",
    "FenError",
    "Piece",
    "PieceType",
    "Position",
    "position_from_fen",
    "position_to_fen",
]
