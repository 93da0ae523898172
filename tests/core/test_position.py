"""Tests for Position snapshots and the castling / en-passant helpers."""

from chesstree.core.board import Board
from chesstree.core.enums import CastlingRights, Color, MoveFlag
from chesstree.core.move import Move
from chesstree.core.position import Position, en_passant_target, updated_castling_rights
from chesstree.core.types import A1, D5, D7, E1, E2, E3, E4, E8, G1, H8, parse_square


class TestPositionCounters:
    def test_start_counters(self) -> None:
        pos = Position()
        assert pos.move_number == 0
        assert pos.fullmove_number == 1
        assert pos.side_to_move == Color.WHITE

    def test_fullmove_with_black_to_move(self) -> None:
        pos = Position(side_to_move=Color.BLACK, move_number=7)
        assert pos.fullmove_number == 7

    def test_from_fullmove_white(self) -> None:
        pos = Position.from_fullmove(Board.initial(), Color.WHITE, CastlingRights.ALL, None, 0, 12)
        assert pos.move_number == 11

    def test_from_fullmove_black(self) -> None:
        pos = Position.from_fullmove(Board.initial(), Color.BLACK, CastlingRights.ALL, None, 0, 12)
        assert pos.move_number == 12


class TestCopy:
    def test_copy_equal(self) -> None:
        pos = Position()
        assert pos.copy() == pos

    def test_copy_owns_board(self) -> None:
        pos = Position()
        clone = pos.copy()
        clone.board[E2] = None
        assert pos.board[E2] is not None

    def test_has_castling_right(self) -> None:
        pos = Position(castling=CastlingRights.WHITE_KINGSIDE)
        assert pos.has_castling_right(CastlingRights.WHITE_KINGSIDE)
        assert not pos.has_castling_right(CastlingRights.BLACK_QUEENSIDE)


class TestCastlingRights:
    def test_untouched_board_keeps_all(self) -> None:
        assert updated_castling_rights(CastlingRights.ALL, Board.initial()) == CastlingRights.ALL

    def test_king_off_home_clears_both(self) -> None:
        board = Board.initial()
        board.apply_move(Move(E1, E2))
        rights = updated_castling_rights(CastlingRights.ALL, board)
        assert rights == CastlingRights.BLACK_BOTH

    def test_rook_off_corner_clears_one_wing(self) -> None:
        board = Board.initial()
        board[A1] = None
        rights = updated_castling_rights(CastlingRights.ALL, board)
        assert rights == CastlingRights.ALL & ~CastlingRights.WHITE_QUEENSIDE

    def test_captured_rook_clears_right(self) -> None:
        board = Board.initial()
        board[H8] = board[G1]
        rights = updated_castling_rights(CastlingRights.ALL, board)
        assert not rights & CastlingRights.BLACK_KINGSIDE

    def test_cleared_right_is_not_restored(self) -> None:
        rights = updated_castling_rights(CastlingRights.WHITE_KINGSIDE, Board.initial())
        assert rights == CastlingRights.WHITE_KINGSIDE

    def test_black_king_moved(self) -> None:
        board = Board.initial()
        board[E8] = None
        rights = updated_castling_rights(CastlingRights.ALL, board)
        assert rights == CastlingRights.WHITE_BOTH


class TestEnPassantTarget:
    def test_double_push_white(self) -> None:
        assert en_passant_target(Move(E2, E4, MoveFlag.DOUBLE_PAWN)) == E3

    def test_double_push_black(self) -> None:
        assert en_passant_target(Move(D7, D5, MoveFlag.DOUBLE_PAWN)) == parse_square("d6")

    def test_single_push(self) -> None:
        assert en_passant_target(Move(E2, E3)) is None
