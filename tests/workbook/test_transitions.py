"""Tests for building child positions from move text."""

import pytest

from chesstree.core.enums import CastlingRights, Color, PieceType
from chesstree.core.position import Position
from chesstree.core.types import parse_square
from chesstree.errors import MoveParseError
from chesstree.notation import position_from_fen, position_to_fen
from chesstree.workbook.transitions import apply_move


def _play(position: Position, *moves: str) -> Position:
    for move in moves:
        position, _ = apply_move(position, move)
    return position


class TestApplyMove:
    def test_first_move(self) -> None:
        child, desc = apply_move(Position(), "e4")
        assert position_to_fen(child) == "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        assert child.move_number == 1
        assert desc.is_pawn_move

    def test_parent_untouched(self) -> None:
        parent = Position()
        apply_move(parent, "e4")
        assert parent == Position()

    def test_black_reply_keeps_move_number(self) -> None:
        child = _play(Position(), "e4", "e5")
        assert child.move_number == 1
        assert child.side_to_move == Color.WHITE
        assert child.fullmove_number == 2
        assert child.en_passant == parse_square("e6")

    def test_en_passant_cleared_by_next_move(self) -> None:
        child = _play(Position(), "e4", "Nf6")
        assert child.en_passant is None

    def test_halfmove_clock(self) -> None:
        pos = _play(Position(), "Nf3", "Nf6", "Nc3")
        assert pos.halfmove_clock == 3
        pos = _play(pos, "e5")
        assert pos.halfmove_clock == 0
        pos = _play(pos, "Nxe5")
        assert pos.halfmove_clock == 0

    def test_en_passant_capture(self) -> None:
        pos = _play(Position(), "e4", "d5", "e5", "f5", "exf6")
        assert pos.board[parse_square("f5")] is None
        assert pos.board[parse_square("f6")].piece_type == PieceType.PAWN  # type: ignore[union-attr]
        assert pos.halfmove_clock == 0

    def test_castling_rights_revoked_for_good(self) -> None:
        pos = _play(Position(), "e4", "e5", "Ke2", "Nc6", "Ke1")
        assert pos.castling == CastlingRights.BLACK_BOTH

    def test_rook_capture_revokes_both_sides(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        pos, _ = apply_move(pos, "Rxa8+")
        assert pos.castling == CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_KINGSIDE

    def test_castle(self) -> None:
        pos = _play(Position(), "e4", "e5", "Nf3", "Nc6", "Bc4", "Bc5", "O-O")
        assert pos.board[parse_square("g1")].piece_type == PieceType.KING  # type: ignore[union-attr]
        assert pos.board[parse_square("f1")].piece_type == PieceType.ROOK  # type: ignore[union-attr]
        assert pos.castling == CastlingRights.BLACK_BOTH
        assert pos.halfmove_clock == 5

    def test_illegal_move(self) -> None:
        with pytest.raises(MoveParseError):
            apply_move(Position(), "Ke2")
