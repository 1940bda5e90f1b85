"""Square value type and coordinate helpers.

A square is addressed by its file letter (``a``-``h``) and rank number
(``1``-``8``), e.g. ``Square("e", 4)``.  Exactly 64 values exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

FILES = "abcdefgh"
RANKS = range(1, 9)


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """One of the 64 board squares."""

    file: str
    rank: int

    def __post_init__(self) -> None:
        if len(self.file) != 1 or self.file not in FILES:
            raise ValueError(f"Invalid file: {self.file!r}")
        if self.rank not in RANKS:
            raise ValueError(f"Invalid rank: {self.rank!r}")

    def __str__(self) -> str:
        return f"{self.file}{self.rank}"

    @property
    def file_index(self) -> int:
        """File index 0–7 (a–h)."""
        return FILES.index(self.file)

    def offset(self, df: int, dr: int) -> Square | None:
        """Square shifted by *df* files and *dr* ranks, or ``None`` if off-board."""
        f = self.file_index + df
        r = self.rank + dr
        if 0 <= f < 8 and 1 <= r <= 8:
            return Square(FILES[f], r)
        return None

    @classmethod
    def parse(cls, name: str) -> Square:
        """Parse square name, e.g. 'e4'."""
        if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(name[0], int(name[1]))


SquareLike: TypeAlias = "Square | str"

ALL_SQUARES: tuple[Square, ...] = tuple(Square(f, r) for r in RANKS for f in FILES)


def as_square(value: SquareLike) -> Square:
    """Accept either a :class:`Square` or its name."""
    if isinstance(value, Square):
        return value
    return Square.parse(value)
