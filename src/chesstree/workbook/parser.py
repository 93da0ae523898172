"""Builds a :class:`WorkbookTree` from the text of one game record.

Movetext grammar handled here::

    [Key "Value"] ...           header block, see headers.scan_headers
    1. e4 e5 2. Nf3             move numbers and moves
    { text [%tag params] }      comments with embedded vendor commands
    ( 2. Bc4 Nc6 )              variations, nested to any depth
    $1                          numeric annotation glyphs
    1-0 | 0-1 | 1/2-1/2 | *     termination markers

Each nesting level of variations is one call of ``_parse_branch``. Comments
and glyphs always go to the node created last, wherever that was.
"""

from __future__ import annotations

import logging
import re

from chesstree.config import DEFAULT_OPTIONS, ParserOptions
from chesstree.core.enums import Color
from chesstree.core.position import Position
from chesstree.errors import PgnParseError
from chesstree.notation.fen import position_from_fen, position_to_fen
from chesstree.workbook.commands import COMMAND_CLOSE, COMMAND_OPEN, apply_command, decode_command
from chesstree.workbook.headers import GameHeaders, scan_headers
from chesstree.workbook.tokenizer import (
    RESULT_TOKENS,
    TextCursor,
    Tokenizer,
    TokenType,
    classify_token,
    is_game_termination_marker,
)
from chesstree.workbook.transitions import apply_move
from chesstree.workbook.tree import TreeNode, WorkbookTree

_LOGGER = logging.getLogger(__name__)

_MOVE_NUMBER_RE = re.compile(r"^(\d+)(\.*)")


class PgnGameParser:
    """Parser for a single game record.

    Holds the cursor and the last-created-node handle for one parse, so an
    instance must not be shared between threads or reused for another text.
    """

    __slots__ = ("_text", "_options", "_cursor", "_tokenizer", "_tree", "_last_node_id", "_parsed")

    def __init__(self, text: str, options: ParserOptions | None = None) -> None:
        self._text = text
        self._options = options or DEFAULT_OPTIONS
        self._cursor = TextCursor("")
        self._tokenizer = Tokenizer(self._cursor)
        self._tree = WorkbookTree()
        self._last_node_id = 0
        self._parsed = False

    @property
    def tree(self) -> WorkbookTree:
        return self._tree

    def parse(self) -> WorkbookTree:
        """Run the parse and return the populated tree.

        Raises :class:`PgnParseError` for an unusable FEN header and
        :class:`chesstree.errors.MoveParseError` for a move that cannot be
        played; both end the parse of this record.
        """
        if self._parsed:
            raise RuntimeError("PgnGameParser instances parse a single record once")
        self._parsed = True

        headers, body = scan_headers(self._text)
        self._tree.headers = headers
        self._cursor = TextCursor(body)
        self._tokenizer = Tokenizer(self._cursor)

        root = TreeNode(node_id=self._tree.next_node_id, position=self._starting_position(headers))
        self._add_node(root)
        self._parse_branch(root, depth=0)

        header_result = headers.get("Result")
        if self._tree.result == "*" and header_result in RESULT_TOKENS:
            self._tree.result = header_result
        return self._tree

    # -- Tree building ------------------------------------------------------

    def _starting_position(self, headers: GameHeaders) -> Position:
        fen = headers.fen()
        if fen is None or not self._options.use_fen_header:
            return Position()
        try:
            return position_from_fen(fen)
        except ValueError as exc:
            raise PgnParseError(f"Invalid FEN header {fen!r}: {exc}") from exc

    def _add_node(self, node: TreeNode) -> None:
        self._tree.add_node(node)
        self._last_node_id = node.node_id
        if self._options.debug_mode:
            _LOGGER.debug(
                "Node %d %r: %s", node.node_id, node.move_text, position_to_fen(node.position)
            )

    @property
    def _last_node(self) -> TreeNode:
        return self._tree.node(self._last_node_id)

    def _parse_branch(self, parent: TreeNode, depth: int) -> None:
        current = parent
        previous = parent

        while True:
            token = self._tokenizer.next_token()
            if is_game_termination_marker(token):
                if token and depth == 0:
                    self._tree.result = token
                return

            token_type = classify_token(token)
            if token_type == TokenType.BRANCH_START:
                self._parse_branch(previous, depth + 1)
            elif token_type == TokenType.BRANCH_END:
                return
            elif token_type == TokenType.COMMENT_START:
                self._process_comment(self._last_node)
            elif token_type == TokenType.MOVE:
                node = self._process_move(token, current)
                previous = current
                current = node
            elif token_type == TokenType.MOVE_NUMBER:
                self._process_move_number(token, current)
            elif token_type == TokenType.NAG:
                self._process_nag(token)
            else:
                _LOGGER.debug("Skipping token %r", token)

    def _process_move(self, move_text: str, parent: TreeNode) -> TreeNode:
        position, _ = apply_move(parent.position, move_text)
        node = TreeNode(node_id=self._tree.next_node_id, position=position, move_text=move_text)
        parent.add_child(node)
        self._add_node(node)
        return node

    def _process_move_number(self, token: str, current: TreeNode) -> None:
        # Informational only: the replayed position decides the numbering.
        match = _MOVE_NUMBER_RE.match(token)
        if match is None:
            return
        stated = int(match.group(1))
        black_to_move = len(match.group(2)) >= 3
        position = current.position
        if black_to_move:
            expected = position.move_number
            consistent = position.side_to_move == Color.BLACK and stated == expected
        else:
            expected = position.move_number + 1
            consistent = position.side_to_move == Color.WHITE and stated == expected
        if not consistent:
            level = logging.WARNING if self._options.validate_move_numbers else logging.DEBUG
            _LOGGER.log(level, "Move number %r does not match the position (expected %d)", token, expected)

    def _process_nag(self, token: str) -> None:
        digits = token[1:]
        if not digits.isdigit():
            _LOGGER.debug("Skipping malformed glyph %r", token)
            return
        self._last_node.add_nag(int(digits))

    def _process_comment(self, node: TreeNode) -> None:
        """Consume a comment up to its ``}`` and attach it to *node*.

        Vendor commands are decoded, attached and cut out of the text first;
        what remains becomes the comment unless it is blank. Without a closing
        brace the rest of the record is dropped.
        """
        cursor = self._cursor
        end = cursor.find("}")
        if end < 0:
            _LOGGER.warning(
                "Unterminated comment at offset %d; ignoring the rest of the game", cursor.pos
            )
            cursor.discard()
            return

        search_from = cursor.pos
        while True:
            cmd_start = cursor.find(COMMAND_OPEN, search_from, end)
            if cmd_start < 0:
                break
            cmd_end = cursor.find(COMMAND_CLOSE, cmd_start, end)
            if cmd_end < 0:
                break
            command = decode_command(cursor.text[cmd_start + 1 : cmd_end])
            apply_command(self._tree, node, command)
            cursor.remove(cmd_start, cmd_end + 1)
            end -= cmd_end + 1 - cmd_start
            search_from = cmd_start

        comment = cursor.text[cursor.pos : end]
        if comment.strip():
            node.comment = comment
        cursor.pos = end + 1


def parse_game(text: str, options: ParserOptions | None = None) -> WorkbookTree:
    """Parse one game record with a fresh :class:`PgnGameParser`."""
    return PgnGameParser(text, options).parse()
