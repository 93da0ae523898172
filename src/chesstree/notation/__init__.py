"""Notation package: FEN and SAN parsing and serialization."""

from chesstree.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from chesstree.notation.san import parse_algebraic

__all__ = [
    "STARTING_FEN",
    "parse_algebraic",
    "position_from_fen",
    "position_to_fen",
]
