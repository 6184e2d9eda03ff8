"""Position — immutable bitboard snapshot of a chess game state."""

from __future__ import annotations

from dataclasses import dataclass

from fenboard.core.enums import Color, PieceType
from fenboard.core.piece import PIECE_COUNT, Piece
from fenboard.core.types import (
    BITBOARD_MASK,
    Bitboard,
    Square,
    iter_bits,
    make_square,
    square_mask,
)

_CASTLING_FLAG_COUNT = 4
COUNTER_MAX = 255

Grid = tuple[tuple[Piece | None, ...], ...]


@dataclass(frozen=True, slots=True)
class Position:
    """Piece placement as twelve bitboards plus the scalar FEN fields.

    ``bitboards[piece.index]`` marks every square holding *piece*. At most
    one bitboard may have a given bit set; this is assumed, not checked.
    ``castling_rights`` is ordered white king-side, white queen-side,
    black king-side, black queen-side.
    """

    bitboards: tuple[Bitboard, ...]
    active_color: Color = Color.WHITE
    castling_rights: tuple[bool, bool, bool, bool] = (True, True, True, True)
    en_passant_target: Square | None = None
    half_move_clock: int = 0
    full_move_number: int = 1

    def __post_init__(self) -> None:
        # Normalise sequences so equality does not depend on list vs tuple.
        object.__setattr__(self, "bitboards", tuple(self.bitboards))
        object.__setattr__(
            self, "castling_rights", tuple(bool(f) for f in self.castling_rights)
        )
        object.__setattr__(self, "active_color", Color(self.active_color))
        if len(self.bitboards) != PIECE_COUNT:
            raise ValueError(
                f"Expected {PIECE_COUNT} bitboards, got {len(self.bitboards)}"
            )
        for index, bitboard in enumerate(self.bitboards):
            if not 0 <= bitboard <= BITBOARD_MASK:
                raise ValueError(f"Bitboard {index} is not a 64-bit mask: {bitboard!r}")
        if len(self.castling_rights) != _CASTLING_FLAG_COUNT:
            raise ValueError(
                f"Expected {_CASTLING_FLAG_COUNT} castling flags, "
                f"got {len(self.castling_rights)}"
            )
        ep = self.en_passant_target
        if ep is not None and not 0 <= ep < 64:
            raise ValueError(f"Invalid en-passant target: {ep!r}")
        for name in ("half_move_clock", "full_move_number"):
            value = getattr(self, name)
            if not 0 <= value <= COUNTER_MAX:
                raise ValueError(f"{name} out of range (0-{COUNTER_MAX}): {value!r}")

    # -- Factory ------------------------------------------------------------

    @classmethod
    def default(cls) -> Position:
        """Standard starting position."""
        bitboards = [0] * PIECE_COUNT
        white_pawn = Piece(Color.WHITE, PieceType.PAWN).index
        black_pawn = Piece(Color.BLACK, PieceType.PAWN).index
        for f in range(8):
            bitboards[white_pawn] |= 1 << make_square(1, f)
            bitboards[black_pawn] |= 1 << make_square(6, f)

        back_rank = [
            PieceType.ROOK,
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.QUEEN,
            PieceType.KING,
            PieceType.BISHOP,
            PieceType.KNIGHT,
            PieceType.ROOK,
        ]
        for f, pt in enumerate(back_rank):
            bitboards[Piece(Color.WHITE, pt).index] |= 1 << make_square(0, f)
            bitboards[Piece(Color.BLACK, pt).index] |= 1 << make_square(7, f)
        return cls(tuple(bitboards))

    @classmethod
    def empty(cls) -> Position:
        """Empty board, white to move, no castling rights."""
        return cls(
            (0,) * PIECE_COUNT,
            castling_rights=(False, False, False, False),
        )

    # -- Query helpers ------------------------------------------------------

    def bitboard_for(self, piece: Piece) -> Bitboard:
        """Bitboard of squares occupied by *piece*."""
        return self.bitboards[piece.index]

    def squares_of(self, piece: Piece) -> list[Square]:
        """Squares occupied by *piece*, lowest first."""
        return iter_bits(self.bitboards[piece.index])

    @property
    def occupancy(self) -> Bitboard:
        """Bitboard of every occupied square."""
        occupied = 0
        for bitboard in self.bitboards:
            occupied |= bitboard
        return occupied

    def piece_at(self, rank: int, file: int) -> Piece | None:
        """Piece on *rank* (0–7) and display *file* (0–7, "a" first).

        Bitboards are scanned in index order, so on an invalid board with
        overlapping masks the lowest index wins.
        """
        mask = square_mask(rank, file)
        for index, bitboard in enumerate(self.bitboards):
            if bitboard & mask:
                return Piece.from_index(index)
        return None

    def board_grid(self) -> Grid:
        """8×8 view indexed ``[rank][file]``."""
        return tuple(
            tuple(self.piece_at(rank, file) for file in range(8))
            for rank in range(8)
        )

    # -- Rendering ----------------------------------------------------------

    def diagram(self) -> str:
        """Text board, rank 8 at the top."""
        grid = self.board_grid()
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = [p.symbol if p else "." for p in grid[rank]]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

    def __str__(self) -> str:
        from fenboard.core.notation.fen import position_to_fen

        return position_to_fen(self)
