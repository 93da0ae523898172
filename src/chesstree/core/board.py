"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chesstree.core.enums import Color, MoveFlag, PieceType
from chesstree.core.move import Move
from chesstree.core.piece import Piece
from chesstree.core.types import Square, file_of, make_square, rank_of

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# castling flag -> (rook origin file, rook destination file)
_ROOK_SLIDES: dict[MoveFlag, tuple[int, int]] = {
    MoveFlag.CASTLE_KINGSIDE: (7, 5),
    MoveFlag.CASTLE_QUEENSIDE: (0, 3),
}


class Board:
    """Mutable 64-square occupancy grid.

    Every tree position owns its own board; :meth:`copy` is a full snapshot
    with no sharing between the copies.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every non-empty square, a1 first."""
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                yield sq, piece

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in self.occupied() if piece == target]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or None on a board without one."""
        kings = self.pieces(color, PieceType.KING)
        return kings[0] if kings else None

    def rows(self) -> list[list[Piece | None]]:
        """The board as an 8x8 grid, rank 8 first, file a first."""
        return [
            [self._squares[make_square(file, rank)] for file in range(8)]
            for rank in range(7, -1, -1)
        ]

    # -- Mutation / copying -------------------------------------------------

    def apply_move(self, move: Move) -> Piece | None:
        """Play *move* on this board in place and return the captured piece.

        The move must already be valid for the board; the captured pawn of an
        en-passant capture is removed from its own square.
        """
        piece = self._squares[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        capture_sq = move.to_sq
        if move.flag == MoveFlag.EN_PASSANT:
            capture_sq = make_square(file_of(move.to_sq), rank_of(move.from_sq))
        captured = self._squares[capture_sq]
        self._squares[capture_sq] = None

        self._squares[move.from_sq] = None
        if move.flag == MoveFlag.PROMOTION and move.promotion is not None:
            piece = Piece(piece.color, move.promotion)
        self._squares[move.to_sq] = piece

        slide = _ROOK_SLIDES.get(move.flag)
        if slide is not None:
            rank = rank_of(move.from_sq)
            rook_from = make_square(slide[0], rank)
            self._squares[make_square(slide[1], rank)] = self._squares[rook_from]
            self._squares[rook_from] = None

        return captured

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for file, piece_type in enumerate(_BACK_RANK):
            b[make_square(file, 0)] = Piece(Color.WHITE, piece_type)
            b[make_square(file, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(file, 6)] = Piece(Color.BLACK, PieceType.PAWN)
            b[make_square(file, 7)] = Piece(Color.BLACK, piece_type)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        lines: list[str] = []
        for offset, row in enumerate(self.rows()):
            cells = " ".join(str(p) if p else "." for p in row)
            lines.append(f"{8 - offset} {cells}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
