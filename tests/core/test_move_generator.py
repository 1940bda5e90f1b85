"""Legality filter tests, plus perft, the gold standard for move generators.

Reference values: https://www.chessprogramming.org/Perft_Results
"""

import pytest

from chessrules.core.attack_map import is_in_check
from chessrules.core.enums import PROMOTION_KINDS, CastlingRights, Color, MoveFlag
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece_rules import pseudo_legal_targets
from chessrules.core.position import Position
from chessrules.core.setup import position_from_layout
from chessrules.core.types import Square


def perft(position: Position, depth: int) -> int:
    """Count leaf nodes at *depth*; each promotion piece is its own move."""
    if depth == 0:
        return 1
    nodes = 0
    for move in MoveGenerator(position).generate_legal_moves():
        if move.flag == MoveFlag.PROMOTION:
            for kind in PROMOTION_KINDS:
                nodes += perft(position.with_move(move.with_promotion(kind)), depth - 1)
        else:
            nodes += perft(position.with_move(move), depth - 1)
    return nodes


def sq(name: str) -> Square:
    return Square.parse(name)


# ── Starting position ────────────────────────────────────────────────────────


class TestPerftStarting:
    def test_depth_1(self, start: Position) -> None:
        assert perft(start, 1) == 20

    def test_depth_2(self, start: Position) -> None:
        assert perft(start, 2) == 400

    def test_depth_3(self, start: Position) -> None:
        assert perft(start, 3) == 8_902


# ── Kiwipete (rich in tactics: castling, ep, promotions) ─────────────────────


class TestPerftKiwipete:
    def test_depth_1(self, kiwipete: Position) -> None:
        assert perft(kiwipete, 1) == 48

    def test_depth_2(self, kiwipete: Position) -> None:
        assert perft(kiwipete, 2) == 2_039

    @pytest.mark.slow
    def test_depth_3(self, kiwipete: Position) -> None:
        assert perft(kiwipete, 3) == 97_862


# ── Position 3: en-passant + rank pin edge cases ────────────────────────────


class TestPerftPos3:
    def test_depth_1(self, pos3: Position) -> None:
        assert perft(pos3, 1) == 14

    def test_depth_2(self, pos3: Position) -> None:
        assert perft(pos3, 2) == 191

    def test_depth_3(self, pos3: Position) -> None:
        assert perft(pos3, 3) == 2_812


# ── Legality filter ──────────────────────────────────────────────────────────


class TestLegalMoves:
    def test_initial_knight(self, start: Position) -> None:
        assert MoveGenerator(start).legal_targets(sq("b1")) == {sq("a3"), sq("c3")}

    def test_empty_square_has_no_moves(self, start: Position) -> None:
        assert MoveGenerator(start).legal_moves(sq("e4")) == []

    def test_pinned_piece_cannot_move(self) -> None:
        pos = position_from_layout({"e1": "K", "e2": "N", "e8": "r", "a8": "k"})
        gen = MoveGenerator(pos)
        assert pseudo_legal_targets(pos, sq("e2"))
        assert gen.legal_targets(sq("e2")) == set()

    def test_pinned_slider_moves_along_pin(self) -> None:
        pos = position_from_layout({"e1": "K", "e3": "R", "e8": "r", "a8": "k"})
        assert MoveGenerator(pos).legal_targets(sq("e3")) == {
            sq("e2"),
            sq("e4"),
            sq("e5"),
            sq("e6"),
            sq("e7"),
            sq("e8"),
        }

    def test_king_cannot_retreat_along_checking_ray(self) -> None:
        pos = position_from_layout({"e2": "K", "e8": "r", "a8": "k"})
        targets = MoveGenerator(pos).legal_targets(sq("e2"))
        assert sq("e1") not in targets
        assert sq("e3") not in targets
        assert sq("d1") in targets

    def test_must_answer_check(self) -> None:
        pos = position_from_layout({"e1": "K", "h4": "q", "e4": "N", "a2": "P", "a8": "k"})
        gen = MoveGenerator(pos)
        assert gen.legal_moves(sq("a2")) == []
        assert gen.legal_targets(sq("e4")) == {sq("f2"), sq("g3")}
        assert gen.legal_targets(sq("e1")) == {sq("d1"), sq("d2"), sq("e2"), sq("f1")}

    def test_en_passant_exposing_king_is_illegal(self) -> None:
        pos = position_from_layout(
            {"a5": "K", "b5": "P", "c5": "p", "h5": "r", "h8": "k"},
            side_to_move=Color.WHITE,
            en_passant="c6",
        )
        assert MoveGenerator(pos).legal_targets(sq("b5")) == {sq("b6")}

    def test_legal_moves_keep_king_safe(self, kiwipete: Position) -> None:
        mover = kiwipete.side_to_move
        for move in MoveGenerator(kiwipete).generate_legal_moves():
            if move.flag == MoveFlag.PROMOTION:
                move = move.with_promotion(PROMOTION_KINDS[0])
            after = kiwipete.with_move(move)
            assert not is_in_check(after.board, mover), f"Failed for {move}"

    def test_pseudo_legal_superset(self, kiwipete: Position) -> None:
        gen = MoveGenerator(kiwipete)
        assert set(gen.generate_legal_moves()) <= set(gen.generate_pseudo_legal_moves())

    def test_hints_for_side_not_to_move(self, start: Position) -> None:
        assert MoveGenerator(start).legal_targets(sq("g8")) == {sq("f6"), sq("h6")}

    def test_castling_is_legal_move(self) -> None:
        pos = position_from_layout(
            {"e1": "K", "a1": "R", "h1": "R", "e8": "k"},
            castling=CastlingRights.WHITE_BOTH,
        )
        targets = MoveGenerator(pos).legal_targets(sq("e1"))
        assert {sq("g1"), sq("c1")} <= targets
