"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.core.enums import CastlingRights, Color
from chessrules.core.position import Position
from chessrules.core.setup import position_from_layout

# Kiwipete: rich in castling, pins, en passant and captures.
KIWIPETE_LAYOUT = {
    "a8": "r", "e8": "k", "h8": "r",
    "a7": "p", "c7": "p", "d7": "p", "e7": "q", "f7": "p", "g7": "b",
    "a6": "b", "b6": "n", "e6": "p", "f6": "n", "g6": "p",
    "d5": "P", "e5": "N",
    "b4": "p", "e4": "P",
    "c3": "N", "f3": "Q", "h3": "p",
    "a2": "P", "b2": "P", "c2": "P", "d2": "B", "e2": "B", "f2": "P", "g2": "P",
    "h2": "P",
    "a1": "R", "e1": "K", "h1": "R",
}  # fmt: skip

# Perft "position 3": en passant pins along the rank.
POS3_LAYOUT = {
    "c7": "p",
    "d6": "p",
    "a5": "K", "b5": "P", "h5": "r",
    "b4": "R", "f4": "p", "h4": "k",
    "e2": "P", "g2": "P",
}  # fmt: skip


@pytest.fixture
def start() -> Position:
    return Position.initial()


@pytest.fixture
def kiwipete() -> Position:
    return position_from_layout(KIWIPETE_LAYOUT, castling=CastlingRights.ALL)


@pytest.fixture
def pos3() -> Position:
    return position_from_layout(POS3_LAYOUT, side_to_move=Color.WHITE)
