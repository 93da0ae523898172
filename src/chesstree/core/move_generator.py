"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesstree.core.board import Board
from chesstree.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chesstree.core.move import Move
from chesstree.core.piece import Piece
from chesstree.core.types import Square, file_of, make_square, on_board, rank_of

if TYPE_CHECKING:
    from chesstree.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)
KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}
_PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# (right, rook file, squares that must be empty, squares the king crosses, flag, king target file)
_CASTLING_PATHS: dict[
    Color, tuple[tuple[CastlingRights, int, tuple[int, ...], tuple[int, ...], MoveFlag, int], ...]
] = {
    Color.WHITE: (
        (CastlingRights.WHITE_KINGSIDE, 7, (5, 6), (5, 6), MoveFlag.CASTLE_KINGSIDE, 6),
        (CastlingRights.WHITE_QUEENSIDE, 0, (1, 2, 3), (2, 3), MoveFlag.CASTLE_QUEENSIDE, 2),
    ),
    Color.BLACK: (
        (CastlingRights.BLACK_KINGSIDE, 7, (5, 6), (5, 6), MoveFlag.CASTLE_KINGSIDE, 6),
        (CastlingRights.BLACK_QUEENSIDE, 0, (1, 2, 3), (2, 3), MoveFlag.CASTLE_QUEENSIDE, 2),
    ),
}


def _targets(sq: Square, offsets: tuple[tuple[int, int], ...]) -> list[Square]:
    f, r = file_of(sq), rank_of(sq)
    return [make_square(f + df, r + dr) for df, dr in offsets if on_board(f + df, r + dr)]


def _ray(sq: Square, direction: tuple[int, int]) -> list[Square]:
    df, dr = direction
    f, r = file_of(sq) + df, rank_of(sq) + dr
    squares: list[Square] = []
    while on_board(f, r):
        squares.append(make_square(f, r))
        f += df
        r += dr
    return squares


_KNIGHT_TARGETS = tuple(_targets(sq, KNIGHT_OFFSETS) for sq in range(64))
_KING_TARGETS = tuple(_targets(sq, KING_OFFSETS) for sq in range(64))
_RAYS: dict[tuple[int, int], tuple[list[Square], ...]] = {
    d: tuple(_ray(sq, d) for sq in range(64)) for d in QUEEN_DIRS
}


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color* on *board*?"""
    # A pawn of by_color attacks sq from one rank behind it (seen from by_color).
    pawn_rank = rank_of(sq) - (1 if by_color == Color.WHITE else -1)
    for df in (-1, 1):
        f = file_of(sq) + df
        if on_board(f, pawn_rank):
            piece = board[make_square(f, pawn_rank)]
            if piece is not None and piece.color == by_color and piece.piece_type == PieceType.PAWN:
                return True

    for targets, piece_type in ((_KNIGHT_TARGETS, PieceType.KNIGHT), (_KING_TARGETS, PieceType.KING)):
        for to_sq in targets[sq]:
            piece = board[to_sq]
            if piece is not None and piece.color == by_color and piece.piece_type == piece_type:
                return True

    for direction in QUEEN_DIRS:
        sliders = (PieceType.ROOK, PieceType.QUEEN) if direction in ROOK_DIRS else (PieceType.BISHOP, PieceType.QUEEN)
        for to_sq in _RAYS[direction][sq]:
            piece = board[to_sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in sliders:
                return True
            break

    return False


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked? A board without that king is never in check."""
    king_sq = board.king_square(color)
    if king_sq is None:
        return False
    return is_square_attacked(board, king_sq, color.opposite)


class MoveGenerator:
    """Generates moves for the side to move of a :class:`Position`.

    Legality is probed on a scratch copy of the board, the position itself
    is never modified.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move."""
        color = self._pos.side_to_move
        legal: list[Move] = []
        for move in self.generate_pseudo_legal_moves():
            scratch = self._board.copy()
            scratch.apply_move(move)
            if not is_in_check(scratch, color):
                legal.append(move)
        return legal

    def generate_pseudo_legal_moves(self) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check)."""
        color = self._pos.side_to_move
        moves: list[Move] = []
        for sq, piece in self._board.occupied():
            if piece.color != color:
                continue
            if piece.piece_type == PieceType.PAWN:
                self._gen_pawn(sq, color, moves)
            elif piece.piece_type == PieceType.KNIGHT:
                self._gen_steps(sq, color, _KNIGHT_TARGETS[sq], moves)
            elif piece.piece_type == PieceType.KING:
                self._gen_steps(sq, color, _KING_TARGETS[sq], moves)
                self._gen_castling(sq, color, moves)
            else:
                self._gen_sliding(sq, color, _SLIDER_DIRS[piece.piece_type], moves)
        return moves

    def is_in_check(self, color: Color) -> bool:
        return is_in_check(self._board, color)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        return is_square_attacked(self._board, sq, by_color)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        step = 1 if color == Color.WHITE else -1
        start_rank = 1 if color == Color.WHITE else 6
        last_rank = 7 if color == Color.WHITE else 0
        f, r = file_of(sq), rank_of(sq)
        if not on_board(f, r + step):
            return

        def add(to_sq: Square, flag: MoveFlag = MoveFlag.NORMAL) -> None:
            if rank_of(to_sq) == last_rank:
                for pt in _PROMOTION_TYPES:
                    moves.append(Move(sq, to_sq, MoveFlag.PROMOTION, pt))
            else:
                moves.append(Move(sq, to_sq, flag))

        one_step = make_square(f, r + step)
        if board.is_empty(one_step):
            add(one_step)
            if r == start_rank:
                two_step = make_square(f, r + 2 * step)
                if board.is_empty(two_step):
                    moves.append(Move(sq, two_step, MoveFlag.DOUBLE_PAWN))

        for df in (-1, 1):
            if not on_board(f + df, r + step):
                continue
            cap_sq = make_square(f + df, r + step)
            target = board[cap_sq]
            if target is not None and target.color != color:
                add(cap_sq)
            elif target is None and cap_sq == self._pos.en_passant:
                moves.append(Move(sq, cap_sq, MoveFlag.EN_PASSANT))

    def _gen_steps(self, sq: Square, color: Color, targets: list[Square], moves: list[Move]) -> None:
        for to_sq in targets:
            target = self._board[to_sq]
            if target is None or target.color != color:
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        for direction in directions:
            for to_sq in _RAYS[direction][sq]:
                target = self._board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq))
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Move]) -> None:
        rank = 0 if color == Color.WHITE else 7
        if not self._pos.castling & CastlingRights.of(color):
            return
        if king_sq != make_square(4, rank) or self.is_in_check(color):
            return
        rook = Piece(color, PieceType.ROOK)
        for right, rook_file, empty_files, crossed_files, flag, target_file in _CASTLING_PATHS[color]:
            if not self._pos.castling & right:
                continue
            if self._board[make_square(rook_file, rank)] != rook:
                continue
            if not all(self._board.is_empty(make_square(f, rank)) for f in empty_files):
                continue
            if any(self.is_square_attacked(make_square(f, rank), color.opposite) for f in crossed_files):
                continue
            moves.append(Move(king_sq, make_square(target_file, rank), flag))
