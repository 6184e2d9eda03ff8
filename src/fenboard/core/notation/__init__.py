"""Notation package: FEN parsing and serialization."""

from fenboard.core.notation.errors import (
    FenError,
    MalformedCastlingError,
    MalformedColorError,
    MalformedEnPassantError,
    MalformedNumberError,
    MalformedPlacementError,
    MissingFieldError,
)
from fenboard.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen

__all__ = [
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
