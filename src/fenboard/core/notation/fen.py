"""FEN parsing and serialization."""

from __future__ import annotations

import logging

from fenboard.core.enums import Color
from fenboard.core.notation.errors import (
    MalformedCastlingError,
    MalformedColorError,
    MalformedEnPassantError,
    MalformedNumberError,
    MalformedPlacementError,
    MissingFieldError,
)
from fenboard.core.piece import PIECE_COUNT, Piece
from fenboard.core.position import COUNTER_MAX, Position
from fenboard.core.types import Bitboard, Square, parse_square, square_name

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_DIGITS = "0123456789"
_FIELD_COUNT = 6

# Castling letters in flag order.
_CASTLING_LETTERS = "KQkq"


def position_from_fen(fen: str, *, strict: bool = True) -> Position:
    """Parse a FEN string into a :class:`Position`.

    With ``strict=False`` the legacy lenient rules apply: unknown placement
    characters are skipped, any side other than ``w`` is black, and an
    unreadable en-passant square is dropped. Clock fields are always
    validated.
    """
    parts = fen.split(" ")
    if len(parts) < _FIELD_COUNT:
        raise MissingFieldError(
            f"not enough fields (need {_FIELD_COUNT}, got {len(parts)})", fen
        )

    placement, side_part, castling_part, ep_part, half_part, full_part = parts[
        :_FIELD_COUNT
    ]

    # 1. Piece placement
    if strict:
        bitboards = _parse_placement_strict(placement, fen)
    else:
        bitboards = _parse_placement_lenient(placement)

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b" or not strict:
        if side_part != "b":
            _LOGGER.warning("Treating side-to-move %r as black", side_part)
        side = Color.BLACK
    else:
        raise MalformedColorError(f"expected 'w' or 'b', got {side_part!r}", fen)

    # 3. Castling
    if strict:
        _check_castling(castling_part, fen)
    castling = tuple(ch in castling_part for ch in _CASTLING_LETTERS)

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        if ep is None:
            if strict:
                raise MalformedEnPassantError(
                    f"not a square token: {ep_part!r}", fen
                )
            _LOGGER.warning("Dropping unreadable en-passant target %r", ep_part)

    # 5–6. Clocks
    halfmove = _parse_counter(half_part, "half-move clock", fen)
    fullmove = _parse_counter(full_part, "full-move number", fen)

    _LOGGER.debug("Parsed FEN %r", fen)
    return Position(bitboards, side, castling, ep, halfmove, fullmove)


def _parse_placement_strict(placement: str, fen: str) -> tuple[Bitboard, ...]:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise MalformedPlacementError(
            f"must contain 8 ranks, got {len(ranks)}", fen
        )
    bitboards = [0] * PIECE_COUNT
    for rank_group, rank_text in enumerate(ranks):
        rank = 7 - rank_group
        file = 0
        for ch in rank_text:
            if ch in _DIGITS:
                step = int(ch)
                if not (1 <= step <= 8):
                    raise MalformedPlacementError(f"invalid digit {ch!r}", fen)
                file += step
            else:
                try:
                    piece = Piece.from_char(ch)
                except ValueError:
                    raise MalformedPlacementError(
                        f"invalid piece character {ch!r}", fen
                    ) from None
                if file >= 8:
                    raise MalformedPlacementError(
                        f"rank {rank + 1} is wider than 8 files", fen
                    )
                bitboards[piece.index] |= 1 << (rank * 8 + (7 - file))
                file += 1
            if file > 8:
                raise MalformedPlacementError(
                    f"rank {rank + 1} is wider than 8 files", fen
                )
        if file != 8:
            raise MalformedPlacementError(
                f"rank {rank + 1} covers {file} files, expected 8", fen
            )
    return tuple(bitboards)


def _parse_placement_lenient(placement: str) -> tuple[Bitboard, ...]:
    bitboards = [0] * PIECE_COUNT
    for rank_group, rank_text in enumerate(placement.split("/")):
        rank = 7 - rank_group
        file = 0
        for ch in rank_text:
            if ch in _DIGITS:
                file += int(ch)
                continue
            try:
                piece = Piece.from_char(ch)
            except ValueError:
                _LOGGER.warning("Skipping unrecognised placement character %r", ch)
                continue
            if 0 <= rank < 8 and file < 8:
                bitboards[piece.index] |= 1 << (rank * 8 + (7 - file))
            else:
                _LOGGER.warning(
                    "Dropping %r outside the board (rank group %d, file %d)",
                    ch,
                    rank_group,
                    file,
                )
            file += 1
    return tuple(bitboards)


def _check_castling(castling_part: str, fen: str) -> None:
    if castling_part == "-":
        return
    if not castling_part:
        raise MalformedCastlingError("empty field", fen)
    seen: set[str] = set()
    for ch in castling_part:
        if ch not in _CASTLING_LETTERS or ch in seen:
            raise MalformedCastlingError(f"unexpected {ch!r}", fen)
        seen.add(ch)


def _parse_counter(text: str, field: str, fen: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise MalformedNumberError(field, str(exc), fen) from exc
    # int() also takes whitespace, underscores and non-ASCII digits.
    digits = text[1:] if text.startswith("+") else text
    if not digits or any(ch not in _DIGITS for ch in digits):
        raise MalformedNumberError(field, f"not a decimal number: {text!r}", fen)
    if value > COUNTER_MAX:
        raise MalformedNumberError(field, f"{value} exceeds {COUNTER_MAX}", fen)
    return value


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    # 1. Board
    grid = pos.board_grid()
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for piece in grid[rank]:
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if pos.active_color == Color.WHITE else "b"

    # 3. Castling
    castling_str = ""
    for i, can_castle in enumerate(pos.castling_rights):
        if not can_castle:
            continue
        ch = "K" if i % 2 == 0 else "Q"
        castling_str += ch.lower() if i >= 2 else ch
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep = pos.en_passant_target
    ep_str = square_name(ep) if ep is not None else "-"

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{pos.half_move_clock} {pos.full_move_number}"
    )
