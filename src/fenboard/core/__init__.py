"""Core domain layer — bitboard positions and FEN, zero external dependencies.

Quick start::

    from fenboard.core import Position, position_from_fen, position_to_fen

    pos = position_from_fen("8/8/4k3/8/8/4K3/8/8 w - - 0 1")
    print(pos.diagram())
    assert position_to_fen(Position.default()) == STARTING_FEN
"""

from fenboard.core.enums import Color, PieceType
from fenboard.core.notation import (
    STARTING_FEN,
    FenError,
    MalformedCastlingError,
    MalformedColorError,
    MalformedEnPassantError,
    MalformedNumberError,
    MalformedPlacementError,
    MissingFieldError,
    position_from_fen,
    position_to_fen,
)
from fenboard.core.piece import Piece
from fenboard.core.position import Position
from fenboard.core.types import (
    FILE_MASKS,
    RANK_MASKS,
    Bitboard,
    Square,
    make_square,
    parse_square,
    square_mask,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Bitboard",
    "Square",
    "FILE_MASKS",
    "RANK_MASKS",
    "make_square",
    "parse_square",
    "square_mask",
    "square_name",
    # Domain objects
    "Piece",
    "Position",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
    # Errors
    "FenError",
    "MissingFieldError",
    "MalformedPlacementError",
    "MalformedColorError",
    "MalformedCastlingError",
    "MalformedEnPassantError",
    "MalformedNumberError",
]
