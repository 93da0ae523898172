"""Tests for the movetext tokenizer."""

import pytest

from chesstree.errors import PgnParseError
from chesstree.workbook.tokenizer import (
    TextCursor,
    Tokenizer,
    TokenType,
    classify_token,
    is_game_termination_marker,
)


def _tokens(text: str) -> list[str]:
    tokenizer = Tokenizer(TextCursor(text))
    out: list[str] = []
    while token := tokenizer.next_token():
        out.append(token)
    return out


class TestNextToken:
    def test_moves_and_numbers(self) -> None:
        assert _tokens("1. e4 e5 2. Nf3 *") == ["1.", "e4", "e5", "2.", "Nf3", "*"]

    def test_single_char_tokens(self) -> None:
        assert _tokens("{a}(b)") == ["{", "a}(b", ")"]

    def test_closing_parenthesis_not_swallowed(self) -> None:
        assert _tokens("(2. Bc4 Nc6) 2... Nc6") == ["(", "2.", "Bc4", "Nc6", ")", "2...", "Nc6"]

    def test_nag(self) -> None:
        assert _tokens("e4 $1 $14") == ["e4", "$1", "$14"]

    def test_whitespace_runs(self) -> None:
        assert _tokens("   e4 \t  e5  ") == ["e4", "e5"]

    def test_empty_text(self) -> None:
        assert Tokenizer(TextCursor("")).next_token() == ""
        assert Tokenizer(TextCursor("    ")).next_token() == ""

    def test_token_at_end_of_text(self) -> None:
        tokenizer = Tokenizer(TextCursor("e4"))
        assert tokenizer.next_token() == "e4"
        assert tokenizer.next_token() == ""


class TestClassify:
    @pytest.mark.parametrize(
        ("token", "token_type"),
        [
            ("1.", TokenType.MOVE_NUMBER),
            ("12...", TokenType.MOVE_NUMBER),
            ("e4", TokenType.MOVE),
            ("O-O", TokenType.MOVE),
            ("0-0", TokenType.MOVE_NUMBER),
            ("(", TokenType.BRANCH_START),
            (")", TokenType.BRANCH_END),
            ("{", TokenType.COMMENT_START),
            ("}", TokenType.COMMENT_END),
            ("$3", TokenType.NAG),
            ("!?", TokenType.UNKNOWN),
            ("", TokenType.UNKNOWN),
        ],
    )
    def test_first_character_decides(self, token: str, token_type: TokenType) -> None:
        assert classify_token(token) == token_type

    @pytest.mark.parametrize("token", ["", "*", "1-0", "0-1", "1/2-1/2"])
    def test_termination_markers(self, token: str) -> None:
        assert is_game_termination_marker(token)

    def test_not_termination(self) -> None:
        assert not is_game_termination_marker("1.")


class TestTextCursor:
    def test_peek_past_end_raises(self) -> None:
        cursor = TextCursor("a")
        cursor.pos = 1
        with pytest.raises(PgnParseError, match="end of movetext"):
            cursor.peek()

    def test_remove(self) -> None:
        cursor = TextCursor("abc[%x]def")
        cursor.pos = 3
        cursor.remove(3, 7)
        assert cursor.remaining == "def"

    def test_remove_before_cursor_rejected(self) -> None:
        cursor = TextCursor("abcdef")
        cursor.pos = 3
        with pytest.raises(PgnParseError):
            cursor.remove(1, 2)

    def test_find_is_absolute(self) -> None:
        cursor = TextCursor("}x}")
        cursor.pos = 1
        assert cursor.find("}") == 2
        assert cursor.find("}", end=2) == -1

    def test_discard(self) -> None:
        cursor = TextCursor("rest of game")
        cursor.discard()
        assert cursor.at_end()
        assert cursor.remaining == ""
