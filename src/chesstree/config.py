"""Parser options."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ParserOptions:
    """Knobs for a single parse.

    ``debug_mode`` logs every produced position as FEN at DEBUG level.
    ``use_fen_header`` starts the tree from the record's FEN header when it
    has one. ``validate_move_numbers`` raises the log level of move-number
    tokens that disagree with the replayed position from DEBUG to WARNING.
    """

    debug_mode: bool = False
    use_fen_header: bool = True
    validate_move_numbers: bool = False


DEFAULT_OPTIONS = ParserOptions()
