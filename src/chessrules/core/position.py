"""Position: complete legally-relevant game state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.errors import InvariantViolation
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.move import Move


@dataclass(frozen=True, slots=True)
class Position:
    """Board + side to move + castling rights + en passant target.

    Positions never change once built; :meth:`with_move` returns the
    successor position.
    """

    board: Board
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None

    def __post_init__(self) -> None:
        for color in Color:
            count = self.board.king_count(color)
            if count != 1:
                raise InvariantViolation(
                    f"Position needs exactly one {color} king, found {count}"
                )
        if self.en_passant is not None and self.en_passant.rank not in (3, 6):
            raise ValueError(f"Invalid en passant target: {self.en_passant}")

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position, white to move."""
        return cls(Board.initial())

    def with_move(self, move: Move) -> Position:
        """Successor position after *move* (no legality check)."""
        from chessrules.core.special_moves import apply_move

        return apply_move(self, move)

    @property
    def king_square(self) -> Square:
        """King square of the side to move."""
        return self.board.king_square(self.side_to_move)
