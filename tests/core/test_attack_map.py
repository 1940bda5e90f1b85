"""Tests for attack maps."""

from chessrules.core.attack_map import (
    attacked_squares,
    is_in_check,
    is_square_attacked,
    piece_attacks,
)
from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.setup import board_from_layout
from chessrules.core.types import Square


def squares(*names: str) -> set[Square]:
    return {Square.parse(n) for n in names}


class TestPieceAttacks:
    def test_pawn_attacks_diagonals_only(self) -> None:
        board = board_from_layout({"e4": "P", "e5": "p"})
        assert piece_attacks(board, Square.parse("e4"), board[Square.parse("e4")]) == (
            squares("d5", "f5")
        )

    def test_black_pawn_attacks_downwards(self) -> None:
        board = board_from_layout({"a7": "p"})
        assert piece_attacks(board, Square.parse("a7"), board[Square.parse("a7")]) == (
            squares("b6")
        )

    def test_slider_includes_first_blocker_of_either_color(self) -> None:
        board = board_from_layout({"a1": "R", "a3": "P", "c1": "n"})
        attacked = piece_attacks(board, Square.parse("a1"), board[Square.parse("a1")])
        assert attacked == squares("a2", "a3", "b1", "c1")

    def test_knight_ignores_blockers(self) -> None:
        board = Board.initial()
        attacked = piece_attacks(board, Square.parse("g1"), board[Square.parse("g1")])
        assert attacked == squares("e2", "f3", "h3")


class TestAttackedSquares:
    def test_initial_white_attacks(self) -> None:
        attacked = attacked_squares(Board.initial(), Color.WHITE)
        # Every square on rank 3 is covered by a pawn or knight.
        assert all(Square(f, 3) in attacked for f in "abcdefgh")
        assert not any(Square(f, 4) in attacked for f in "abcdefgh")

    def test_pawn_forward_square_not_attacked(self) -> None:
        board = board_from_layout({"e1": "K", "e8": "k", "d4": "P"})
        assert not is_square_attacked(board, Square.parse("d5"), Color.WHITE)
        assert is_square_attacked(board, Square.parse("c5"), Color.WHITE)

    def test_ray_stops_at_king(self) -> None:
        # The square behind the king along the ray is not in the raw map.
        board = board_from_layout({"e4": "K", "e8": "r", "a1": "k"})
        attacked = attacked_squares(board, Color.BLACK)
        assert Square.parse("e4") in attacked
        assert Square.parse("e3") not in attacked


class TestIsInCheck:
    def test_queen_check(self) -> None:
        board = board_from_layout({"e1": "K", "h4": "q", "a8": "k"})
        assert is_in_check(board, Color.WHITE)
        assert not is_in_check(board, Color.BLACK)

    def test_blocked_check(self) -> None:
        board = board_from_layout({"e1": "K", "f2": "P", "h4": "q", "a8": "k"})
        assert not is_in_check(board, Color.WHITE)
