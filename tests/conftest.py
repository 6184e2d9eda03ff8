"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from fenboard.core.position import Position

_SAMPLE_FENS = [
    "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
    "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1",
    "8/8/4k3/8/8/4K3/8/8 w - - 0 1",
    "8/8/8/8/8/8/8/8 w - - 0 1",
]


@pytest.fixture
def start_position() -> Position:
    """A fresh standard starting position."""
    return Position.default()


@pytest.fixture(params=_SAMPLE_FENS)
def sample_fen(request: pytest.FixtureRequest) -> str:
    """A handful of well-formed FEN strings."""
    return request.param
