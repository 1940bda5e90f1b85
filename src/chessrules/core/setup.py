"""Position setup: the standard layout and hand-built layouts.

Layouts are plain mappings from square names to piece letters
(uppercase = white), e.g. ``{"e1": "K", "e8": "k", "h4": "q"}``.
"""

from __future__ import annotations

from collections.abc import Mapping

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, PieceKind
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import Square, SquareLike, as_square

_HOME_RANKS: dict[tuple[Color, PieceKind], int] = {
    (Color.WHITE, PieceKind.PAWN): 2,
    (Color.BLACK, PieceKind.PAWN): 7,
}


def initial_position() -> Position:
    """Standard starting position, white to move, all castling rights."""
    return Position.initial()


def board_from_layout(layout: Mapping[SquareLike, str]) -> Board:
    """Build a board from square → piece-letter pairs.

    Pawns off their starting rank are marked as having moved; every other
    piece is taken as unmoved.
    """
    squares: dict[Square, Piece] = {}
    for name, char in layout.items():
        sq = as_square(name)
        if sq in squares:
            raise ValueError(f"Square {sq} listed twice")
        piece = Piece.from_char(char)
        home_rank = _HOME_RANKS.get((piece.color, piece.kind))
        if home_rank is not None and sq.rank != home_rank:
            piece = piece.moved()
        squares[sq] = piece
    return Board(squares)


def position_from_layout(
    layout: Mapping[SquareLike, str],
    side_to_move: Color = Color.WHITE,
    castling: CastlingRights = CastlingRights.NONE,
    en_passant: SquareLike | None = None,
) -> Position:
    """Build a :class:`Position` from a layout and game-state fields."""
    return Position(
        board=board_from_layout(layout),
        side_to_move=side_to_move,
        castling=castling,
        en_passant=as_square(en_passant) if en_passant is not None else None,
    )
