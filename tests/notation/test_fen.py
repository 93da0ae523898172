"""Tests for FEN parsing and serialisation."""

import pytest

from chesstree.core.enums import CastlingRights, Color, PieceType
from chesstree.core.piece import Piece
from chesstree.core.types import E1, E3, E8
from chesstree.notation import STARTING_FEN, position_from_fen, position_to_fen


class TestFenParsing:
    def test_starting_side(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.side_to_move == Color.WHITE

    def test_starting_castling(self) -> None:
        assert position_from_fen(STARTING_FEN).castling == CastlingRights.ALL

    def test_starting_counters(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.halfmove_clock == 0
        assert pos.fullmove_number == 1
        assert pos.move_number == 0

    def test_starting_kings(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert pos.board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_en_passant_square(self) -> None:
        pos = position_from_fen("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1")
        assert pos.en_passant == E3
        assert pos.move_number == 1

    def test_partial_castling(self) -> None:
        pos = position_from_fen("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w Kq - 0 1")
        assert pos.castling == CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE

    def test_empty_board(self) -> None:
        pos = position_from_fen("8/8/8/8/8/8/8/8 w - - 0 1")
        assert list(pos.board.occupied()) == []

    def test_clocks_optional(self) -> None:
        pos = position_from_fen("8/8/4k3/8/8/4K3/8/8 b - -")
        assert pos.halfmove_clock == 0
        assert pos.fullmove_number == 1

    @pytest.mark.parametrize(
        ("fen", "match"),
        [
            ("invalid", "4-6 fields"),
            ("8/8/8/8/8/8/8/8 x - - 0 1", "side-to-move"),
            ("8/8/8/8/8/8/8 w - - 0 1", "8 ranks"),
            ("9/8/8/8/8/8/8/8 w - - 0 1", "Invalid FEN"),
            ("8/8/8/8/8/8/8/8 w Kx - 0 1", "castling"),
            ("8/8/8/8/8/8/8/8 w KK - 0 1", "castling"),
            ("8/8/8/8/8/8/8/8 w - e3 0 1", "en-passant"),
            ("8/8/8/8/8/8/8/8 w - - -1 1", "halfmove"),
            ("8/8/8/8/8/8/8/8 w - - 0 zero", "fullmove"),
        ],
    )
    def test_invalid_fen_raises(self, fen: str, match: str) -> None:
        with pytest.raises(ValueError, match=match):
            position_from_fen(fen)


class TestFenSerialisation:
    @pytest.mark.parametrize(
        "fen",
        [
            STARTING_FEN,
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1",
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
            "8/8/4k3/8/8/4K3/8/8 w - - 12 57",
        ],
    )
    def test_roundtrip(self, fen: str) -> None:
        assert position_to_fen(position_from_fen(fen)) == fen
