"""One ply's board state plus the move bookkeeping around it."""

from __future__ import annotations

from chesstree.core.board import Board
from chesstree.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chesstree.core.move import Move
from chesstree.core.piece import Piece
from chesstree.core.types import A1, A8, E1, E8, H1, H8, Square, file_of, make_square, rank_of

# right -> (king home, rook home, color)
_CASTLING_HOMES: dict[CastlingRights, tuple[Square, Square, Color]] = {
    CastlingRights.WHITE_KINGSIDE: (E1, H1, Color.WHITE),
    CastlingRights.WHITE_QUEENSIDE: (E1, A1, Color.WHITE),
    CastlingRights.BLACK_KINGSIDE: (E8, H8, Color.BLACK),
    CastlingRights.BLACK_QUEENSIDE: (E8, A8, Color.BLACK),
}


class Position:
    """Full chess position: board, side to move, castling, en passant, clocks.

    ``move_number`` counts full moves the way the tree displays them: it is
    the number of the move pair the last ply belonged to, so it goes up when
    White moves and stays put when Black answers. The FEN view of the same
    counter is :attr:`fullmove_number`.

    Positions stored in a workbook tree are snapshots: they are built once by
    :func:`chesstree.workbook.transitions.apply_move` and not touched again.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "move_number",
        "castling",
        "en_passant",
        "halfmove_clock",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        move_number: int = 0,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.move_number = move_number

    @property
    def fullmove_number(self) -> int:
        """FEN full-move counter (number of the next move pair)."""
        if self.side_to_move == Color.WHITE:
            return self.move_number + 1
        return self.move_number

    @classmethod
    def from_fullmove(
        cls,
        board: Board,
        side_to_move: Color,
        castling: CastlingRights,
        en_passant: Square | None,
        halfmove_clock: int,
        fullmove_number: int,
    ) -> Position:
        """Build a position from FEN-style counters."""
        move_number = fullmove_number
        if side_to_move == Color.WHITE:
            move_number -= 1
        return cls(board, side_to_move, castling, en_passant, halfmove_clock, move_number)

    def copy(self) -> Position:
        """Field-by-field copy with its own board."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            move_number=self.move_number,
        )

    def has_castling_right(self, right: CastlingRights) -> bool:
        return bool(self.castling & right)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.move_number == other.move_number
        )

    def __repr__(self) -> str:
        return (
            f"Position(side_to_move={self.side_to_move}, move_number={self.move_number}, "
            f"castling={self.castling!r}, en_passant={self.en_passant})"
        )


# ── Bookkeeping helpers ──────────────────────────────────────────────────────


def updated_castling_rights(castling: CastlingRights, board: Board) -> CastlingRights:
    """Clear every right whose king or rook has left its home square.

    *board* is the board after the move; a right that is already gone is
    never restored.
    """
    for right, (king_sq, rook_sq, color) in _CASTLING_HOMES.items():
        if not castling & right:
            continue
        if board[king_sq] != Piece(color, PieceType.KING) or board[rook_sq] != Piece(
            color, PieceType.ROOK
        ):
            castling &= ~right
    return castling


def en_passant_target(move: Move) -> Square | None:
    """Square skipped by a two-square pawn advance, else None."""
    if move.flag != MoveFlag.DOUBLE_PAWN:
        return None
    return make_square(file_of(move.from_sq), (rank_of(move.from_sq) + rank_of(move.to_sq)) // 2)
