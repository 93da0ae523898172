"""Pull tokenizer over the movetext that follows the headers."""

from __future__ import annotations

from enum import IntEnum, auto

from chesstree.core.enums import GameResult
from chesstree.errors import PgnParseError

SINGLE_CHAR_TOKENS = frozenset("{}()")
RESULT_TOKENS = frozenset(result.value for result in GameResult)


class TokenType(IntEnum):
    UNKNOWN = auto()
    MOVE = auto()
    MOVE_NUMBER = auto()
    COMMENT_START = auto()
    COMMENT_END = auto()
    BRANCH_START = auto()
    BRANCH_END = auto()
    NAG = auto()


_CHAR_TYPES: dict[str, TokenType] = {
    "(": TokenType.BRANCH_START,
    ")": TokenType.BRANCH_END,
    "{": TokenType.COMMENT_START,
    "}": TokenType.COMMENT_END,
    "$": TokenType.NAG,
}


def classify_token(token: str) -> TokenType:
    """Token type from the first character alone."""
    if not token:
        return TokenType.UNKNOWN
    c = token[0]
    if c.isdigit():
        return TokenType.MOVE_NUMBER
    if c.isalpha():
        return TokenType.MOVE
    return _CHAR_TYPES.get(c, TokenType.UNKNOWN)


def is_game_termination_marker(token: str) -> bool:
    """Result tokens and the empty end-of-input token end a line."""
    return not token or token in RESULT_TOKENS


class TextCursor:
    """Remaining movetext: a buffer and the index of the first unread char.

    One cursor is shared by every nesting level of a single parse.
    """

    __slots__ = ("_text", "pos")

    def __init__(self, text: str) -> None:
        self._text = text
        self.pos = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def remaining(self) -> str:
        return self._text[self.pos :]

    def at_end(self) -> bool:
        return self.pos >= len(self._text)

    def peek(self) -> str:
        if self.at_end():
            raise PgnParseError(f"Unexpected end of movetext at offset {self.pos}")
        return self._text[self.pos]

    def find(self, sub: str, start: int | None = None, end: int | None = None) -> int:
        """Absolute index of *sub* in ``[start, end)``, or -1."""
        return self._text.find(sub, self.pos if start is None else start, end)

    def remove(self, start: int, end: int) -> None:
        """Cut ``[start, end)`` out of the buffer; must not precede the cursor."""
        if start < self.pos or end < start:
            raise PgnParseError(f"Invalid cut [{start}, {end}) at offset {self.pos}")
        self._text = self._text[:start] + self._text[end:]

    def discard(self) -> None:
        """Drop everything that has not been read yet."""
        self.pos = len(self._text)


class Tokenizer:
    """Splits movetext into tokens on demand; ``""`` marks the end."""

    __slots__ = ("cursor",)

    def __init__(self, cursor: TextCursor) -> None:
        self.cursor = cursor

    def next_token(self) -> str:
        cursor = self.cursor
        while not cursor.at_end() and cursor.peek().isspace():
            cursor.pos += 1
        if cursor.at_end():
            return ""

        start = cursor.pos
        if cursor.peek() in SINGLE_CHAR_TOKENS:
            cursor.pos += 1
            return cursor.text[start : cursor.pos]

        # A closing parenthesis ends the token but stays for the next call.
        while not cursor.at_end():
            c = cursor.peek()
            if c.isspace() or c == ")":
                break
            cursor.pos += 1
        return cursor.text[start : cursor.pos]
