"""Exceptions raised by the rules engine.

Every move-request failure is a :class:`MoveError`; callers can catch the
base class or a specific subclass.  None of them leaves a position
half-updated: validation always happens before a successor is built.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import PieceKind

if TYPE_CHECKING:
    from chessrules.core.enums import Color, GameStatus
    from chessrules.core.types import Square


class ChessError(Exception):
    """Base class for all rules-engine errors."""


class InvariantViolation(ChessError):
    """Raised when a board reaches a state that play can never produce."""


class MoveError(ChessError):
    """Raised when a requested move cannot be applied."""

    def __init__(self, message: str, from_sq: Square, to_sq: Square) -> None:
        super().__init__(message)
        self.from_sq = from_sq
        self.to_sq = to_sq


class NoPieceAtSquare(MoveError):
    """Raised when a move is requested from an empty square."""

    def __init__(self, from_sq: Square, to_sq: Square) -> None:
        super().__init__(f"No piece on {from_sq}", from_sq, to_sq)


class WrongSideToMove(MoveError):
    """Raised when the moving piece belongs to the side not on move."""

    def __init__(self, from_sq: Square, to_sq: Square, side_to_move: Color) -> None:
        super().__init__(
            f"Piece on {from_sq} does not belong to {side_to_move}, who is to move",
            from_sq,
            to_sq,
        )
        self.side_to_move = side_to_move


class IllegalTarget(MoveError):
    """Raised when the target square is not among the piece's legal moves."""

    def __init__(self, from_sq: Square, to_sq: Square) -> None:
        super().__init__(f"Illegal move: {from_sq} to {to_sq}", from_sq, to_sq)


class MissingPromotionChoice(MoveError):
    """Raised when a pawn reaches the last rank without a promotion piece."""

    def __init__(self, from_sq: Square, to_sq: Square) -> None:
        super().__init__(
            f"Move {from_sq}{to_sq} requires a promotion choice", from_sq, to_sq
        )


class UnexpectedPromotionChoice(MoveError):
    """Raised when a promotion piece is supplied for a non-promoting move."""

    def __init__(self, from_sq: Square, to_sq: Square) -> None:
        super().__init__(
            f"Move {from_sq}{to_sq} does not promote a pawn", from_sq, to_sq
        )


class InvalidPromotionChoice(MoveError):
    """Raised when the promotion piece is not a queen, rook, bishop or knight."""

    def __init__(self, from_sq: Square, to_sq: Square, kind: object) -> None:
        label = kind.name.lower() if isinstance(kind, PieceKind) else repr(kind)
        super().__init__(f"Cannot promote to {label}", from_sq, to_sq)
        self.kind = kind


class GameOverError(MoveError):
    """Raised when a move is requested in a checkmate or stalemate position."""

    def __init__(self, from_sq: Square, to_sq: Square, status: GameStatus) -> None:
        super().__init__(
            f"Game is over ({status.name.lower()}); no moves accepted", from_sq, to_sq
        )
        self.status = status
