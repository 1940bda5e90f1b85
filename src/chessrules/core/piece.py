"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessrules.core.enums import Color, PieceKind

_LETTERS: dict[PieceKind, str] = {
    PieceKind.PAWN: "P",
    PieceKind.KNIGHT: "N",
    PieceKind.BISHOP: "B",
    PieceKind.ROOK: "R",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}
_KINDS: dict[str, PieceKind] = {v: k for k, v in _LETTERS.items()}

# Conventional material values; the king is priceless.
_VALUES: dict[PieceKind, int] = {
    PieceKind.PAWN: 1,
    PieceKind.KNIGHT: 3,
    PieceKind.BISHOP: 3,
    PieceKind.ROOK: 5,
    PieceKind.QUEEN: 9,
    PieceKind.KING: 0,
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a piece on the board."""

    kind: PieceKind
    color: Color
    has_moved: bool = False

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Piece letter (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.kind]
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str, has_moved: bool = False) -> Piece:
        """Create piece from its letter, e.g. 'N' → white knight."""
        try:
            kind = _KINDS[char.upper()]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(kind, color, has_moved)

    @property
    def value(self) -> int:
        return _VALUES[self.kind]

    # ── Derivation ───────────────────────────────────────────────────────

    def moved(self) -> Piece:
        """Copy of this piece flagged as having moved."""
        if self.has_moved:
            return self
        return replace(self, has_moved=True)

    def promoted(self, kind: PieceKind) -> Piece:
        return Piece(kind, self.color, has_moved=True)
