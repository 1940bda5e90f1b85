"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from chessrules.core.enums import Color, PieceKind
from chessrules.core.errors import InvariantViolation
from chessrules.core.piece import Piece
from chessrules.core.types import FILES, Square

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Immutable sparse square → piece mapping.

    Empty squares are simply absent.  Transformations such as
    :meth:`with_move` return a new board and leave this one untouched.
    """

    __slots__ = ("_squares", "_king_squares")

    def __init__(self, pieces: Mapping[Square, Piece] | None = None) -> None:
        self._squares: dict[Square, Piece] = dict(pieces) if pieces else {}
        self._king_squares: dict[Color, list[Square]] = {
            Color.WHITE: [],
            Color.BLACK: [],
        }
        for sq, piece in self._squares.items():
            if piece.kind == PieceKind.KING:
                self._king_squares[piece.color].append(sq)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares.get(sq)

    def __contains__(self, sq: object) -> bool:
        return sq in self._squares

    def __iter__(self) -> Iterator[Square]:
        return iter(self._squares)

    def __len__(self) -> int:
        return len(self._squares)

    def piece_at(self, sq: Square) -> Piece | None:
        return self._squares.get(sq)

    def is_occupied(self, sq: Square) -> bool:
        return sq in self._squares

    def is_occupied_by_enemy(self, sq: Square, color: Color) -> bool:
        """Whether *sq* holds a piece of the side opposing *color*."""
        piece = self._squares.get(sq)
        return piece is not None and piece.color != color

    def is_occupied_by_friend(self, sq: Square, color: Color) -> bool:
        piece = self._squares.get(sq)
        return piece is not None and piece.color == color

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """All ``(square, piece)`` pairs belonging to *color*."""
        return [(sq, p) for sq, p in self._squares.items() if p.color == color]

    def squares_of(self, color: Color, kind: PieceKind) -> list[Square]:
        """Squares occupied by *color*'s pieces of *kind*."""
        return [
            sq
            for sq, p in self._squares.items()
            if p.color == color and p.kind == kind
        ]

    def king_count(self, color: Color) -> int:
        return len(self._king_squares[color])

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        kings = self._king_squares[color]
        if len(kings) != 1:
            raise InvariantViolation(
                f"Expected exactly one {color} king, found {len(kings)}"
            )
        return kings[0]

    # -- Transformations ----------------------------------------------------

    def with_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceKind | None = None,
    ) -> Board:
        """New board with the piece on *from_sq* relocated to *to_sq*.

        Whatever stood on *to_sq* is removed.  With *promotion* the piece
        arrives as that kind instead.
        """
        piece = self._squares.get(from_sq)
        if piece is None:
            raise InvariantViolation(f"No piece on {from_sq} to move")
        squares = dict(self._squares)
        del squares[from_sq]
        squares[to_sq] = (
            piece.promoted(promotion) if promotion is not None else piece.moved()
        )
        return Board(squares)

    def without(self, sq: Square) -> Board:
        """New board with *sq* emptied."""
        if sq not in self._squares:
            return self
        squares = dict(self._squares)
        del squares[sq]
        return Board(squares)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        squares: dict[Square, Piece] = {}
        for file, kind in zip(FILES, _BACK_RANK):
            squares[Square(file, 1)] = Piece(kind, Color.WHITE)
            squares[Square(file, 2)] = Piece(PieceKind.PAWN, Color.WHITE)
            squares[Square(file, 7)] = Piece(PieceKind.PAWN, Color.BLACK)
            squares[Square(file, 8)] = Piece(kind, Color.BLACK)
        return cls(squares)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(frozenset(self._squares.items()))

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(8, 0, -1):
            row = []
            for file in FILES:
                p = self[Square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
