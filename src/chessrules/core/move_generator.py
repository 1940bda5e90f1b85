"""Legal move generation: pseudo-legal moves filtered by king safety."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.attack_map import is_in_check, is_square_attacked
from chessrules.core.enums import Color, MoveFlag, PieceKind
from chessrules.core.move import Move
from chessrules.core.piece_rules import pseudo_legal_moves
from chessrules.core.special_moves import apply_move
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.position import Position


class MoveGenerator:
    """Generates legal moves for a given :class:`Position`.

    Every pseudo-legal candidate is applied to a copy of the position and
    kept only if the mover's king is not attacked afterwards.  This covers
    pinned pieces and king steps into check alike.
    """

    __slots__ = ("_pos",)

    def __init__(self, position: Position) -> None:
        self._pos = position

    @property
    def position(self) -> Position:
        return self._pos

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, from_sq: Square) -> list[Move]:
        """Legal moves of the piece on *from_sq* (empty if no piece).

        A piece of the side not to move may be giving check; taking the king
        is never a move, so such candidates are dropped before simulation.
        """
        board = self._pos.board
        piece = board[from_sq]
        if piece is None:
            return []
        return [
            move
            for move in pseudo_legal_moves(self._pos, from_sq)
            if not _captures_king(board, move)
            and self._keeps_king_safe(move, piece.color)
        ]

    def legal_targets(self, from_sq: Square) -> set[Square]:
        return {move.to_sq for move in self.legal_moves(from_sq)}

    def generate_legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move."""
        legal: list[Move] = []
        for sq, _piece in self._pos.board.pieces(self._pos.side_to_move):
            legal.extend(self.legal_moves(sq))
        return legal

    def generate_pseudo_legal_moves(self) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check)."""
        moves: list[Move] = []
        for sq, _piece in self._pos.board.pieces(self._pos.side_to_move):
            moves.extend(pseudo_legal_moves(self._pos, sq))
        return moves

    def has_legal_moves(self) -> bool:
        for sq, _piece in self._pos.board.pieces(self._pos.side_to_move):
            if self.legal_moves(sq):
                return True
        return False

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return is_in_check(self._pos.board, color)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        return is_square_attacked(self._pos.board, sq, by_color)

    # -- Internal -----------------------------------------------------------

    def _keeps_king_safe(self, move: Move, color: Color) -> bool:
        if move.flag == MoveFlag.PROMOTION:
            # Safety does not depend on the promoted piece; any choice will do.
            move = move.with_promotion(PieceKind.QUEEN)
        after = apply_move(self._pos, move)
        return not is_in_check(after.board, color)


def _captures_king(board: Board, move: Move) -> bool:
    target = board[move.to_sq]
    return target is not None and target.kind == PieceKind.KING
