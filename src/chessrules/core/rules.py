"""High-level rules: status classification and the move request API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessrules.core.enums import (
    PROMOTION_KINDS,
    Color,
    GameResult,
    GameStatus,
    PieceKind,
)
from chessrules.core.errors import (
    GameOverError,
    IllegalTarget,
    InvalidPromotionChoice,
    MissingPromotionChoice,
    MoveError,
    NoPieceAtSquare,
    UnexpectedPromotionChoice,
    WrongSideToMove,
)
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.special_moves import apply_move
from chessrules.core.types import SquareLike, as_square

if TYPE_CHECKING:
    from chessrules.core.move import Move
    from chessrules.core.position import Position
    from chessrules.core.types import Square

_LOGGER = logging.getLogger(__name__)


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def is_in_check(position: Position) -> bool:
        gen = MoveGenerator(position)
        return gen.is_in_check(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return Rules.status(position) == GameStatus.CHECKMATE

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return Rules.status(position) == GameStatus.STALEMATE

    @staticmethod
    def status(position: Position) -> GameStatus:
        """Classify *position* for the side to move."""
        gen = MoveGenerator(position)
        in_check = gen.is_in_check(position.side_to_move)
        if gen.has_legal_moves():
            return GameStatus.CHECK if in_check else GameStatus.NORMAL
        return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE

    @staticmethod
    def is_insufficient_material(position: Position) -> bool:
        """K vs K, K+B vs K, K+N vs K, K+B vs K+B (same-color bishops).

        Informational only; it does not change :meth:`status`.
        """
        board = position.board
        non_kings = [
            (sq, piece)
            for color in Color
            for sq, piece in board.pieces(color)
            if piece.kind != PieceKind.KING
        ]
        if not non_kings:
            return True
        if len(non_kings) == 1:
            return non_kings[0][1].kind in (PieceKind.KNIGHT, PieceKind.BISHOP)
        if len(non_kings) == 2:
            (sq_a, a), (sq_b, b) = non_kings
            if a.kind == b.kind == PieceKind.BISHOP and a.color != b.color:
                return _square_shade(sq_a) == _square_shade(sq_b)
        return False

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result."""
        current = Rules.status(position)
        if current == GameStatus.CHECKMATE:
            return (
                GameResult.BLACK_WINS
                if position.side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        if current == GameStatus.STALEMATE:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS

    @staticmethod
    def find_move(
        position: Position,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceKind | None = None,
    ) -> Move:
        """Validate a move request and return the matching legal move.

        Raises a :class:`MoveError` subclass describing the first rule the
        request breaks.
        """
        gen = MoveGenerator(position)
        if not gen.has_legal_moves():
            raise GameOverError(from_sq, to_sq, Rules.status(position))

        piece = position.board[from_sq]
        if piece is None:
            raise NoPieceAtSquare(from_sq, to_sq)
        if piece.color != position.side_to_move:
            raise WrongSideToMove(from_sq, to_sq, position.side_to_move)

        move = next((m for m in gen.legal_moves(from_sq) if m.to_sq == to_sq), None)
        if move is None:
            raise IllegalTarget(from_sq, to_sq)

        if move.requires_promotion:
            if promotion is None:
                raise MissingPromotionChoice(from_sq, to_sq)
            if promotion not in PROMOTION_KINDS:
                raise InvalidPromotionChoice(from_sq, to_sq, promotion)
            return move.with_promotion(promotion)
        if promotion is not None:
            raise UnexpectedPromotionChoice(from_sq, to_sq)
        return move


def _square_shade(sq: Square) -> int:
    return (sq.file_index + sq.rank) % 2


# ── Module-level API ─────────────────────────────────────────────────────────


def attempt_move(
    position: Position,
    from_sq: SquareLike,
    to_sq: SquareLike,
    promotion: PieceKind | None = None,
) -> Position:
    """Apply a move request, returning the successor position.

    On failure a :class:`MoveError` is raised and *position* is untouched.
    """
    origin = as_square(from_sq)
    target = as_square(to_sq)
    try:
        move = Rules.find_move(position, origin, target, promotion)
    except MoveError as exc:
        _LOGGER.debug("Rejected move %s%s: %s", origin, target, exc)
        raise
    return apply_move(position, move)


def legal_moves(position: Position, from_sq: SquareLike) -> set[Square]:
    """Target squares the piece on *from_sq* may legally move to."""
    return MoveGenerator(position).legal_targets(as_square(from_sq))


def status(position: Position) -> GameStatus:
    return Rules.status(position)


def side_to_move(position: Position) -> Color:
    return position.side_to_move
