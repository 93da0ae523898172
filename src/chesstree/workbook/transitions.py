"""Child positions: one parsed move applied to a parent snapshot."""

from __future__ import annotations

from chesstree.core.enums import Color
from chesstree.core.move import MoveDescriptor
from chesstree.core.position import Position, en_passant_target, updated_castling_rights
from chesstree.notation.san import parse_algebraic


def apply_move(parent: Position, move_text: str) -> tuple[Position, MoveDescriptor]:
    """Play *move_text* from *parent* and return the new position with the move.

    *parent* is left untouched. Raises :class:`chesstree.errors.MoveParseError`
    when the text is not a legal move for the side to move.
    """
    descriptor = parse_algebraic(parent, move_text)

    child = parent.copy()
    if parent.side_to_move == Color.WHITE:
        child.move_number = parent.move_number + 1
        child.side_to_move = Color.BLACK
    else:
        child.side_to_move = Color.WHITE

    child.board.apply_move(descriptor.move)

    # Both recomputations look at the board after the move.
    child.castling = updated_castling_rights(parent.castling, child.board)
    child.en_passant = en_passant_target(descriptor.move)

    if descriptor.is_capture_or_pawn_move:
        child.halfmove_clock = 0
    else:
        child.halfmove_clock = parent.halfmove_clock + 1

    return child, descriptor
