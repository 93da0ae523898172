"""Board, positions and legal move generation, with no external dependencies.

Quick start::

    from chesstree.core import MoveGenerator
    from chesstree.notation import STARTING_FEN, position_from_fen

    pos = position_from_fen(STARTING_FEN)
    for move in MoveGenerator(pos).generate_legal_moves():
        print(move)
"""

from chesstree.core.board import Board
from chesstree.core.enums import CastlingRights, Color, GameResult, MoveFlag, PieceType
from chesstree.core.move import Move, MoveDescriptor
from chesstree.core.move_generator import MoveGenerator, is_in_check, is_square_attacked
from chesstree.core.piece import Piece
from chesstree.core.position import Position, en_passant_target, updated_castling_rights
from chesstree.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "MoveFlag",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveDescriptor",
    "MoveGenerator",
    "Piece",
    "Position",
    # Move bookkeeping
    "en_passant_target",
    "is_in_check",
    "is_square_attacked",
    "updated_castling_rights",
]
