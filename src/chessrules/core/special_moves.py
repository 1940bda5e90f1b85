"""Move application: castling rights, en passant and castling rook slides.

:func:`apply_move` builds the successor of a position for a move that is
already known to be pseudo-legal.  Castling rights and the en passant
target are derived purely from the move being applied.
"""

from __future__ import annotations

from dataclasses import replace

from chessrules.core.enums import CastlingRights, MoveFlag, PieceKind
from chessrules.core.errors import InvariantViolation
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.piece_rules import CASTLING_PATHS
from chessrules.core.position import Position
from chessrules.core.types import Square

_ROOK_CORNERS: dict[Square, CastlingRights] = {
    Square("a", 1): CastlingRights.WHITE_QUEENSIDE,
    Square("h", 1): CastlingRights.WHITE_KINGSIDE,
    Square("a", 8): CastlingRights.BLACK_QUEENSIDE,
    Square("h", 8): CastlingRights.BLACK_KINGSIDE,
}


def apply_move(position: Position, move: Move) -> Position:
    """Return the position after *move*; *position* itself is unchanged."""
    board = position.board
    piece = board[move.from_sq]
    if piece is None:
        raise InvariantViolation(f"No piece on {move.from_sq}")

    promotion = move.promotion if move.flag == MoveFlag.PROMOTION else None
    if move.flag == MoveFlag.PROMOTION and promotion is None:
        raise InvariantViolation(f"Promotion move {move} has no piece chosen")

    # En passant: the captured pawn sits beside the mover, not on the target
    if move.flag == MoveFlag.EN_PASSANT:
        board = board.without(en_passant_victim(move))

    board = board.with_move(move.from_sq, move.to_sq, promotion)

    if move.is_castling:
        path = next(p for p in CASTLING_PATHS[piece.color] if p.flag == move.flag)
        board = board.with_move(path.rook_from, path.rook_to)

    next_en_passant: Square | None = None
    if move.flag == MoveFlag.DOUBLE_PAWN:
        next_en_passant = Square(
            move.from_sq.file, (move.from_sq.rank + move.to_sq.rank) // 2
        )

    return replace(
        position,
        board=board,
        side_to_move=position.side_to_move.opposite,
        castling=updated_castling(position.castling, move, piece),
        en_passant=next_en_passant,
    )


def en_passant_victim(move: Move) -> Square:
    """Square of the pawn removed by an en passant capture."""
    return Square(move.to_sq.file, move.from_sq.rank)


def updated_castling(
    castling: CastlingRights, move: Move, piece: Piece
) -> CastlingRights:
    """Castling rights after *piece* makes *move*.

    Rights are only ever removed: a king move drops both of its side's
    rights, and any move leaving or landing on a rook corner drops that
    corner's right (the rook moved or was captured).
    """
    if piece.kind == PieceKind.KING:
        castling &= ~CastlingRights.for_color(piece.color)
    for sq in (move.from_sq, move.to_sq):
        if sq in _ROOK_CORNERS:
            castling &= ~_ROOK_CORNERS[sq]
    return castling
