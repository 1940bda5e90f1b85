"""Chess move generation and legality engine.

The rules live in :mod:`chessrules.core`; :mod:`chessrules.game` drives a
game ply by ply.
"""

from chessrules.core import (
    Color,
    GameStatus,
    MoveError,
    PieceKind,
    Position,
    Square,
    attempt_move,
    initial_position,
    legal_moves,
    position_from_layout,
    side_to_move,
    status,
)
from chessrules.game import GameState

__all__ = [
    "Color",
    "GameState",
    "GameStatus",
    "MoveError",
    "PieceKind",
    "Position",
    "Square",
    "attempt_move",
    "initial_position",
    "legal_moves",
    "position_from_layout",
    "side_to_move",
    "status",
]
