"""Move value objects."""

from __future__ import annotations

from dataclasses import dataclass

from chesstree.core.enums import MoveFlag, PieceType
from chesstree.core.piece import Piece
from chesstree.core.types import Square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Board-level move: origin, destination and special-move flag."""

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NORMAL
    promotion: PieceType | None = None

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)


@dataclass(frozen=True, slots=True)
class MoveDescriptor:
    """A move resolved against a concrete position.

    Produced by :func:`chesstree.notation.parse_algebraic`; carries what the
    position bookkeeping needs besides the squares themselves.
    """

    move: Move
    piece: Piece
    captured: Piece | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def is_pawn_move(self) -> bool:
        return self.piece.piece_type == PieceType.PAWN

    @property
    def is_capture_or_pawn_move(self) -> bool:
        return self.is_capture or self.is_pawn_move
