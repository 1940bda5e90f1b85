"""Pseudo-legal move generation, one rule set per piece kind.

Pseudo-legal moves obey the piece's movement pattern and the blocking and
capture rules, but may still leave the mover's own king in check; see
:mod:`chessrules.core.move_generator` for the legality filter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.attack_map import (
    KING_TARGETS,
    KNIGHT_TARGETS,
    attacked_squares,
    pawn_attacks,
    slider_rays,
)
from chessrules.core.enums import CastlingRights, Color, MoveFlag, PieceKind
from chessrules.core.move import Move
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.piece import Piece
    from chessrules.core.position import Position


@dataclass(frozen=True, slots=True)
class CastlingPath:
    """Geometry of one castling move for one color."""

    flag: MoveFlag
    right: CastlingRights
    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square
    between: tuple[Square, ...]  # must be empty
    king_path: tuple[Square, ...]  # must not be attacked, king square included


def _castling_paths(color: Color) -> tuple[CastlingPath, CastlingPath]:
    rank = 1 if color == Color.WHITE else 8

    def sq(file: str) -> Square:
        return Square(file, rank)

    kingside = CastlingPath(
        flag=MoveFlag.CASTLE_KINGSIDE,
        right=CastlingRights.kingside(color),
        king_from=sq("e"),
        king_to=sq("g"),
        rook_from=sq("h"),
        rook_to=sq("f"),
        between=(sq("f"), sq("g")),
        king_path=(sq("e"), sq("f"), sq("g")),
    )
    queenside = CastlingPath(
        flag=MoveFlag.CASTLE_QUEENSIDE,
        right=CastlingRights.queenside(color),
        king_from=sq("e"),
        king_to=sq("c"),
        rook_from=sq("a"),
        rook_to=sq("d"),
        between=(sq("b"), sq("c"), sq("d")),
        king_path=(sq("e"), sq("d"), sq("c")),
    )
    return kingside, queenside


CASTLING_PATHS: dict[Color, tuple[CastlingPath, CastlingPath]] = {
    color: _castling_paths(color) for color in Color
}


def promotion_rank(color: Color) -> int:
    return 8 if color == Color.WHITE else 1


def pawn_start_rank(color: Color) -> int:
    return 2 if color == Color.WHITE else 7


# -- Dispatch --------------------------------------------------------------


def pseudo_legal_moves(position: Position, from_sq: Square) -> list[Move]:
    """Pseudo-legal moves of the piece on *from_sq* (empty if no piece)."""
    piece = position.board[from_sq]
    if piece is None:
        return []

    kind = piece.kind
    if kind == PieceKind.PAWN:
        return _pawn_moves(position, from_sq, piece)
    if kind == PieceKind.KNIGHT:
        return _step_moves(position, from_sq, piece, KNIGHT_TARGETS[from_sq])
    if kind == PieceKind.KING:
        return _king_moves(position, from_sq, piece)
    return _slide_moves(position, from_sq, piece)


def pseudo_legal_targets(position: Position, from_sq: Square) -> set[Square]:
    return {move.to_sq for move in pseudo_legal_moves(position, from_sq)}


# -- Piece-specific generators ----------------------------------------------


def _slide_moves(position: Position, sq: Square, piece: Piece) -> list[Move]:
    board = position.board
    moves: list[Move] = []
    for ray in slider_rays(piece.kind, sq):
        for to_sq in ray:
            target = board[to_sq]
            if target is None:
                moves.append(Move(sq, to_sq))
                continue
            if target.color != piece.color:
                moves.append(Move(sq, to_sq))
            break
    return moves


def _step_moves(
    position: Position,
    sq: Square,
    piece: Piece,
    targets: tuple[Square, ...],
    forbidden: frozenset[Square] = frozenset(),
) -> list[Move]:
    board = position.board
    return [
        Move(sq, to_sq)
        for to_sq in targets
        if not board.is_occupied_by_friend(to_sq, piece.color)
        and to_sq not in forbidden
    ]


def _king_moves(position: Position, sq: Square, piece: Piece) -> list[Move]:
    danger = attacked_squares(position.board, piece.color.opposite)
    moves = _step_moves(position, sq, piece, KING_TARGETS[sq], danger)
    moves.extend(_castling_moves(position, sq, piece, danger))
    return moves


def _castling_moves(
    position: Position,
    king_sq: Square,
    king: Piece,
    danger: frozenset[Square],
) -> list[Move]:
    board = position.board
    moves: list[Move] = []
    for path in CASTLING_PATHS[king.color]:
        if not position.castling & path.right:
            continue
        if king_sq != path.king_from:
            continue
        rook = board[path.rook_from]
        if rook is None or rook.kind != PieceKind.ROOK or rook.color != king.color:
            continue
        if any(board.is_occupied(s) for s in path.between):
            continue
        if any(s in danger for s in path.king_path):
            continue
        moves.append(Move(king_sq, path.king_to, path.flag))
    return moves


def _pawn_moves(position: Position, sq: Square, piece: Piece) -> list[Move]:
    board = position.board
    color = piece.color
    forward = color.forward
    last_rank = promotion_rank(color)
    moves: list[Move] = []

    def add(to_sq: Square, flag: MoveFlag = MoveFlag.NORMAL) -> None:
        if to_sq.rank == last_rank:
            flag = MoveFlag.PROMOTION
        moves.append(Move(sq, to_sq, flag))

    one_step = sq.offset(0, forward)
    if one_step is not None and not board.is_occupied(one_step):
        add(one_step)
        if sq.rank == pawn_start_rank(color):
            two_step = one_step.offset(0, forward)
            if two_step is not None and not board.is_occupied(two_step):
                add(two_step, MoveFlag.DOUBLE_PAWN)

    for cap_sq in pawn_attacks(sq, color):
        if board.is_occupied_by_enemy(cap_sq, color):
            add(cap_sq)
        elif cap_sq == position.en_passant and _can_capture_en_passant(
            position, sq, piece, cap_sq
        ):
            moves.append(Move(sq, cap_sq, MoveFlag.EN_PASSANT))
    return moves


def _can_capture_en_passant(
    position: Position, sq: Square, piece: Piece, target: Square
) -> bool:
    if piece.color != position.side_to_move:
        return False
    victim = position.board[Square(target.file, sq.rank)]
    return (
        victim is not None
        and victim.kind == PieceKind.PAWN
        and victim.color != piece.color
    )
