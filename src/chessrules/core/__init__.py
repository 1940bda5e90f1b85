"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import initial_position, legal_moves, attempt_move

    pos = initial_position()
    print(sorted(map(str, legal_moves(pos, "b1"))))  # ['a3', 'c3']
    pos = attempt_move(pos, "e2", "e4")
"""

from chessrules.core.attack_map import attacked_squares, is_square_attacked
from chessrules.core.board import Board
from chessrules.core.enums import (
    CastlingRights,
    Color,
    GameResult,
    GameStatus,
    MoveFlag,
    PieceKind,
)
from chessrules.core.errors import (
    ChessError,
    GameOverError,
    IllegalTarget,
    InvalidPromotionChoice,
    InvariantViolation,
    MissingPromotionChoice,
    MoveError,
    NoPieceAtSquare,
    UnexpectedPromotionChoice,
    WrongSideToMove,
)
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.piece_rules import pseudo_legal_moves, pseudo_legal_targets
from chessrules.core.position import Position
from chessrules.core.rules import (
    Rules,
    attempt_move,
    legal_moves,
    side_to_move,
    status,
)
from chessrules.core.setup import initial_position, position_from_layout
from chessrules.core.special_moves import apply_move
from chessrules.core.types import ALL_SQUARES, Square, as_square

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "GameStatus",
    "MoveFlag",
    "PieceKind",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "as_square",
    # Errors
    "ChessError",
    "GameOverError",
    "IllegalTarget",
    "InvalidPromotionChoice",
    "InvariantViolation",
    "MissingPromotionChoice",
    "MoveError",
    "NoPieceAtSquare",
    "UnexpectedPromotionChoice",
    "WrongSideToMove",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Operations
    "apply_move",
    "attacked_squares",
    "attempt_move",
    "is_square_attacked",
    "legal_moves",
    "pseudo_legal_moves",
    "pseudo_legal_targets",
    "side_to_move",
    "status",
    # Setup
    "initial_position",
    "position_from_layout",
]
