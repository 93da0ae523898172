"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesstree.core.enums import Color, PieceType


@dataclass(frozen=True, slots=True)
class Piece:
    """Occupancy code of one square: piece type plus color."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        letter = self.piece_type.letter
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' -> white knight."""
        piece_type = PieceType.from_letter(char.upper())
        if piece_type is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, piece_type)
