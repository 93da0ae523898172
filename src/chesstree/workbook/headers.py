"""Bracketed ``[Key "Value"]`` header lines preceding the movetext."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import StrEnum

from chesstree.core.enums import Color

_LOGGER = logging.getLogger(__name__)

KEY_WORKBOOK_TITLE = "ChessForgeWorkbook"
KEY_TRAINING_SIDE = "TrainingSide"
KEY_STUDY_BOARD_ORIENTATION = "StudyBoardOrientation"
KEY_GAME_BOARD_ORIENTATION = "GameBoardOrientation"
KEY_EXERCISE_BOARD_ORIENTATION = "ExerciseBoardOrientation"
KEY_EVENT = "Event"
KEY_ROUND = "Round"
KEY_FEN_STRING = "FEN"
KEY_CHAPTER_ID = "ChapterId"
KEY_CHAPTER_TITLE = "ChapterTitle"
KEY_LEGACY_TITLE = "Title"
KEY_CONTENT_TYPE = "ContentType"
KEY_RESULT = "Result"
KEY_DATE = "Date"
KEY_WHITE = "White"
KEY_BLACK = "Black"
KEY_PREAMBLE = "Preamble"

VALUE_WHITE = "White"
VALUE_BLACK = "Black"


class ContentType(StrEnum):
    """Kind of record a game's headers describe."""

    STUDY_TREE = "Study Tree"
    MODEL_GAME = "Model Game"
    EXERCISE = "Exercise"


def parse_header_line(line: str) -> tuple[str, str] | None:
    """Split ``[Key "Value"]`` into ``(key, value)``.

    Returns None for a line that is not bracketed or has no quoted value.
    """
    line = line.strip()
    if len(line) < 2 or line[0] != "[" or line[-1] != "]":
        return None
    tokens = line[1:-1].split('"')
    if len(tokens) < 2:
        return None
    return tokens[0].strip(), tokens[1].strip()


def build_header_line(key: str, value: str | None) -> str:
    if not key:
        return ""
    return f'[{key} "{value or ""}"]'


def color_from_text(text: str | None) -> Color | None:
    """``VALUE_WHITE``/``VALUE_BLACK`` in any case, else None."""
    if text is None:
        return None
    value = text.strip().casefold()
    if value == VALUE_WHITE.casefold():
        return Color.WHITE
    if value == VALUE_BLACK.casefold():
        return Color.BLACK
    return None


class GameHeaders:
    """Ordered header list; adding a key that exists appends another entry."""

    __slots__ = ("_items",)

    def __init__(self, items: list[tuple[str, str]] | None = None) -> None:
        self._items: list[tuple[str, str]] = list(items or [])

    def add(self, key: str, value: str) -> None:
        self._items.append((key, value))

    def get(self, key: str, default: str | None = None) -> str | None:
        for k, v in self._items:
            if k == key:
                return v
        return default

    def get_all(self, key: str) -> list[str]:
        return [v for k, v in self._items if k == key]

    def items(self) -> list[tuple[str, str]]:
        return list(self._items)

    def keys(self) -> list[str]:
        return [k for k, _ in self._items]

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self._items)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameHeaders):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"GameHeaders({self._items!r})"

    # -- Well-known keys ----------------------------------------------------

    def fen(self) -> str | None:
        value = self.get(KEY_FEN_STRING)
        return value if value and value.strip() else None

    def preamble(self) -> str:
        return "\n".join(self.get_all(KEY_PREAMBLE))

    def training_side(self) -> Color | None:
        return color_from_text(self.get(KEY_TRAINING_SIDE))

    def content_type(self) -> ContentType:
        """Declared content type; without one a FEN header marks an exercise."""
        declared = self.get(KEY_CONTENT_TYPE)
        for content_type in ContentType:
            if declared == content_type.value:
                return content_type
        return ContentType.EXERCISE if self.fen() else ContentType.MODEL_GAME

    def summary_line(self) -> str:
        """One-line description such as ``"Carlsen - Nepo, WCh 2021 (1/2-1/2)"``."""
        white = self.get(KEY_WHITE) or "?"
        black = self.get(KEY_BLACK) or "?"
        text = f"{white} - {black}"
        event = self.get(KEY_EVENT)
        if event and event != "?":
            text += f", {event}"
        result = self.get(KEY_RESULT)
        if result:
            text += f" ({result})"
        return text

    def to_text(self) -> str:
        return "\n".join(build_header_line(k, v) for k, v in self._items)


def scan_headers(text: str) -> tuple[GameHeaders, str]:
    """Separate the header block from the movetext.

    Blank lines inside the header block are skipped. The first non-blank
    line not starting with ``[`` ends the block; it and every later line are
    joined with single spaces into the returned body. Malformed bracket lines
    are dropped without ending the block.
    """
    headers = GameHeaders()
    body: list[str] = []
    in_headers = True
    for line in text.splitlines():
        if in_headers:
            stripped = line.strip()
            if not stripped:
                continue
            if stripped[0] == "[":
                parsed = parse_header_line(stripped)
                if parsed is None:
                    _LOGGER.debug("Skipping malformed header line: %s", stripped)
                else:
                    headers.add(*parsed)
                continue
            in_headers = False
        body.append(line)
    return headers, " ".join(body) + (" " if body else "")
