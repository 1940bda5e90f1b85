"""Attack maps: which squares a side could capture on if it moved next.

Attacks are computed against the raw board, without asking whether the
attacking side's own king would be exposed.  Pawns attack their two
forward diagonals only; castling never attacks anything.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceKind
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_SQUARES, Square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

Rays = tuple[tuple[Square, ...], ...]


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        moves = (sq.offset(df, dr) for df, dr in offsets)
        targets[sq] = tuple(to_sq for to_sq in moves if to_sq is not None)
    return targets


def _build_rays(directions: tuple[tuple[int, int], ...]) -> dict[Square, Rays]:
    rays_per_square: dict[Square, Rays] = {}
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            ray: list[Square] = []
            to_sq = sq.offset(df, dr)
            while to_sq is not None:
                ray.append(to_sq)
                to_sq = to_sq.offset(df, dr)
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)

BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)


def slider_rays(kind: PieceKind, sq: Square) -> Rays:
    """Rays a sliding piece of *kind* casts from *sq*."""
    if kind == PieceKind.BISHOP:
        return BISHOP_RAYS[sq]
    if kind == PieceKind.ROOK:
        return ROOK_RAYS[sq]
    if kind == PieceKind.QUEEN:
        return QUEEN_RAYS[sq]
    raise ValueError(f"{kind.name.lower()} is not a sliding piece")


# -- Per-piece attacks -----------------------------------------------------


def pawn_attacks(sq: Square, color: Color) -> tuple[Square, ...]:
    """The two forward-diagonal squares a pawn of *color* attacks."""
    forward = color.forward
    targets = (sq.offset(-1, forward), sq.offset(1, forward))
    return tuple(to_sq for to_sq in targets if to_sq is not None)


def piece_attacks(board: Board, sq: Square, piece: Piece) -> set[Square]:
    """Squares attacked by *piece* standing on *sq*.

    Sliding rays stop at the first occupied square and include it, whoever
    owns it, so that defended pieces count as attacked.
    """
    kind = piece.kind
    if kind == PieceKind.PAWN:
        return set(pawn_attacks(sq, piece.color))
    if kind == PieceKind.KNIGHT:
        return set(KNIGHT_TARGETS[sq])
    if kind == PieceKind.KING:
        return set(KING_TARGETS[sq])

    attacked: set[Square] = set()
    for ray in slider_rays(kind, sq):
        for to_sq in ray:
            attacked.add(to_sq)
            if board.is_occupied(to_sq):
                break
    return attacked


# -- Aggregate -------------------------------------------------------------


def attacked_squares(board: Board, by_color: Color) -> frozenset[Square]:
    """Union of the squares attacked by every piece of *by_color*."""
    attacked: set[Square] = set()
    for sq, piece in board.pieces(by_color):
        attacked |= piece_attacks(board, sq, piece)
    return frozenset(attacked)


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?"""
    return sq in attacked_squares(board, by_color)


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?"""
    return is_square_attacked(board, board.king_square(color), color.opposite)
