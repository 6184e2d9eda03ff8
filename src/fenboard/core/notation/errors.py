"""FEN parse errors."""

from __future__ import annotations


class FenError(ValueError):
    """Base class for FEN parse failures; *field* names the bad field."""

    field = "string"

    def __init__(self, message: str, fen: str | None = None) -> None:
        self.message = message
        self.fen = fen
        text = f"Invalid FEN {self.field}: {message}"
        if fen is not None:
            text = f"{text} ({fen!r})"
        super().__init__(text)


class MissingFieldError(FenError):
    field = "field count"


class MalformedPlacementError(FenError):
    field = "placement"


class MalformedColorError(FenError):
    field = "active color"


class MalformedCastlingError(FenError):
    field = "castling"


class MalformedEnPassantError(FenError):
    field = "en passant"


class MalformedNumberError(FenError):
    """Half-move clock or full-move number is not a 0–255 decimal."""

    def __init__(self, field: str, message: str, fen: str | None = None) -> None:
        self.field = field
        super().__init__(message, fen)
