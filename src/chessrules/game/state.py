"""Game state machine: drives a game one ply at a time."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chessrules.core.enums import Color, GameResult, GameStatus, PieceKind
from chessrules.core.errors import GameOverError, MoveError
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.core.special_moves import apply_move
from chessrules.core.types import Square, SquareLike, as_square

_LOGGER = logging.getLogger(__name__)


@dataclass
class GameState:
    """Tracks the current position, whose turn it is and the game status.

    This is a pure data/logic class with no threading and no UI.  Positions are
    immutable, so a rejected move simply leaves :attr:`position` as it was.
    """

    position: Position = field(default_factory=Position.initial, init=False)
    status: GameStatus = field(default=GameStatus.NORMAL, init=False)
    ply_count: int = field(default=0, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, position: Position | None = None) -> None:
        """Initialise (or reset) the game, from the standard layout by default."""
        self.position = position if position is not None else Position.initial()
        self.ply_count = 0
        self._refresh_status()

    # ── Move application ─────────────────────────────────────────────────

    def attempt_move(
        self,
        from_sq: SquareLike,
        to_sq: SquareLike,
        promotion: PieceKind | None = None,
    ) -> Position:
        """Play a move for the side to move and return the new position.

        Raises :class:`MoveError` (and keeps the current position) when the
        request is not legal or the game is already over.
        """
        origin = as_square(from_sq)
        target = as_square(to_sq)
        if self.status.is_terminal:
            _LOGGER.debug("Move %s%s refused: game is over", origin, target)
            raise GameOverError(origin, target, self.status)

        try:
            move = Rules.find_move(self.position, origin, target, promotion)
        except MoveError as exc:
            _LOGGER.debug("Rejected move %s%s: %s", origin, target, exc)
            raise

        mover = self.position.side_to_move
        self.position = apply_move(self.position, move)
        self.ply_count += 1
        _LOGGER.info("Ply %d: %s played %s", self.ply_count, mover, move)

        self._refresh_status()
        return self.position

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def result(self) -> GameResult:
        if self.status == GameStatus.CHECKMATE:
            return (
                GameResult.BLACK_WINS
                if self.side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        if self.status == GameStatus.STALEMATE:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS

    def legal_moves(self, from_sq: SquareLike) -> set[Square]:
        """Legal targets for the piece on *from_sq*, for move hints."""
        if self.is_game_over:
            return set()
        return MoveGenerator(self.position).legal_targets(as_square(from_sq))

    # ── Internal ─────────────────────────────────────────────────────────

    def _refresh_status(self) -> None:
        self.status = Rules.status(self.position)
        if self.status.is_terminal:
            _LOGGER.info(
                "Game over after %d plies: %s (%s)",
                self.ply_count,
                self.status.name.lower(),
                self.result.name.lower(),
            )
