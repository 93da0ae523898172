"""FEN parsing and serialization."""

from __future__ import annotations

from chesstree.core.board import Board
from chesstree.core.enums import CastlingRights, Color
from chesstree.core.piece import Piece
from chesstree.core.position import Position
from chesstree.core.types import Square, make_square, parse_square, rank_of, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)


def _parse_placement(placement: str, fen: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                if not ("1" <= ch <= "8"):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += int(ch)
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[make_square(file, rank)] = Piece.from_char(ch)
                file += 1
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
    return board


def _parse_castling(field: str) -> CastlingRights:
    if field == "-":
        return CastlingRights.NONE
    lookup = dict(_CASTLING_CHARS)
    castling = CastlingRights.NONE
    for ch in field:
        right = lookup.get(ch)
        if right is None or castling & right:
            raise ValueError(f"Invalid FEN castling field: {field!r}")
        castling |= right
    return castling


def _parse_counter(field: str, minimum: int, name: str) -> int:
    try:
        value = int(field)
    except ValueError:
        raise ValueError(f"Invalid FEN {name}: {field!r}") from None
    if value < minimum:
        raise ValueError(f"Invalid FEN {name}: {field!r}")
    return value


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    The half-move clock and full-move number are optional and default to
    ``0`` and ``1``.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]
    board = _parse_placement(placement, fen)

    try:
        side = Color.from_fen_char(side_part)
    except ValueError:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}") from None

    castling = _parse_castling(castling_part)

    ep: Square | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        expected_rank = 5 if side == Color.WHITE else 2
        if rank_of(ep) != expected_rank:
            raise ValueError(f"Invalid FEN en-passant square for side-to-move: {ep_part!r}")

    halfmove = _parse_counter(parts[4], 0, "halfmove clock") if len(parts) > 4 else 0
    fullmove = _parse_counter(parts[5], 1, "fullmove number") if len(parts) > 5 else 1

    return Position.from_fullmove(board, side, castling, ep, halfmove, fullmove)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    rows: list[str] = []
    for row in pos.board.rows():
        text = ""
        empty = 0
        for piece in row:
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)

    side_str = pos.side_to_move.fen_char
    castling_str = "".join(ch for ch, right in _CASTLING_CHARS if pos.castling & right) or "-"
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return (
        f"{'/'.join(rows)} {side_str} {castling_str} {ep_str} "
        f"{pos.halfmove_clock} {pos.fullmove_number}"
    )
