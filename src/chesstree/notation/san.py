"""SAN (Standard Algebraic Notation) move parsing."""

from __future__ import annotations

from chesstree.core.enums import MoveFlag, PieceType
from chesstree.core.move import Move, MoveDescriptor
from chesstree.core.move_generator import MoveGenerator
from chesstree.core.position import Position
from chesstree.core.types import FILE_NAMES, RANK_NAMES, file_of, make_square, parse_square, rank_of
from chesstree.errors import MoveParseError

_CASTLING_TEXT: dict[str, MoveFlag] = {
    "O-O": MoveFlag.CASTLE_KINGSIDE,
    "0-0": MoveFlag.CASTLE_KINGSIDE,
    "O-O-O": MoveFlag.CASTLE_QUEENSIDE,
    "0-0-0": MoveFlag.CASTLE_QUEENSIDE,
}
_SUFFIX_CHARS = "+#!?"
_PIECE_LETTERS = "NBRQK"
_PROMOTION_LETTERS = "NBRQ"


def _describe(position: Position, move: Move) -> MoveDescriptor:
    board = position.board
    piece = board[move.from_sq]
    assert piece is not None
    if move.flag == MoveFlag.EN_PASSANT:
        captured = board[make_square(file_of(move.to_sq), rank_of(move.from_sq))]
    else:
        captured = board[move.to_sq]
    return MoveDescriptor(move=move, piece=piece, captured=captured)


def parse_algebraic(position: Position, san: str) -> MoveDescriptor:
    """Resolve *san* to a legal move for the side to move in *position*.

    Check, mate and move-quality suffixes are ignored. Raises
    :class:`MoveParseError` when the text is not a move, matches no legal
    move, or matches more than one.

    Zero-digit castling (``0-0``) is accepted here, but the movetext
    tokenizer reads any token starting with a digit as a move number, so
    game records must spell castling with the letter O.
    """
    side = position.side_to_move
    clean = san.rstrip(_SUFFIX_CHARS)
    if not clean:
        raise MoveParseError(san, side, "empty move text")

    legal = MoveGenerator(position).generate_legal_moves()

    castle_flag = _CASTLING_TEXT.get(clean)
    if castle_flag is not None:
        for m in legal:
            if m.flag == castle_flag:
                return _describe(position, m)
        raise MoveParseError(san, side, "castling is not legal")

    # Promotion, written "e8=Q" or "e8Q"
    promotion: PieceType | None = None
    if len(clean) >= 3 and clean[-1] in _PROMOTION_LETTERS and clean[-2] != "=" and clean[-2] in RANK_NAMES:
        promotion = PieceType.from_letter(clean[-1])
        clean = clean[:-1]
    elif len(clean) >= 4 and clean[-2] == "=":
        promotion = PieceType.from_letter(clean[-1]) if clean[-1] in _PROMOTION_LETTERS else None
        if promotion is None:
            raise MoveParseError(san, side, "unknown promotion piece")
        clean = clean[:-2]

    try:
        to_sq = parse_square(clean[-2:])
    except ValueError:
        raise MoveParseError(san, side, "no destination square") from None
    clean = clean[:-2]

    if clean.endswith(("x", ":")):
        clean = clean[:-1]

    if clean and clean[0] in _PIECE_LETTERS:
        piece_type = PieceType.from_letter(clean[0])
        clean = clean[1:]
    else:
        piece_type = PieceType.PAWN

    from_file: int | None = None
    from_rank: int | None = None
    for ch in clean:
        if ch in FILE_NAMES and from_file is None:
            from_file = FILE_NAMES.index(ch)
        elif ch in RANK_NAMES and from_rank is None:
            from_rank = RANK_NAMES.index(ch)
        else:
            raise MoveParseError(san, side, f"unexpected character {ch!r}")

    board = position.board
    candidates: list[Move] = []
    for m in legal:
        p = board[m.from_sq]
        if p is None or p.piece_type != piece_type or m.to_sq != to_sq:
            continue
        if m.flag.is_castle:
            continue
        if m.promotion != promotion:
            continue
        if from_file is not None and file_of(m.from_sq) != from_file:
            continue
        if from_rank is not None and rank_of(m.from_sq) != from_rank:
            continue
        candidates.append(m)

    if len(candidates) == 1:
        return _describe(position, candidates[0])
    if not candidates:
        raise MoveParseError(san, side, "illegal move")
    raise MoveParseError(san, side, f"ambiguous, matches {', '.join(map(str, candidates))}")
