"""Workbook trees: parsing game records with variations into node trees."""

from chesstree.workbook.commands import (
    Assessment,
    Command,
    VendorCommand,
    assessment_for_tag,
    command_for_tag,
    decode_command,
    encode_command,
    tag_for_assessment,
    tag_for_command,
)
from chesstree.workbook.headers import ContentType, GameHeaders, build_header_line, scan_headers
from chesstree.workbook.lines import build_line_text, tree_to_movetext, tree_to_pgn
from chesstree.workbook.parser import PgnGameParser, parse_game
from chesstree.workbook.reader import ArchiveReadResult, GameProcessingError, read_games, split_games
from chesstree.workbook.transitions import apply_move
from chesstree.workbook.tree import TreeNode, WorkbookTree

__all__ = [
    "ArchiveReadResult",
    "Assessment",
    "Command",
    "ContentType",
    "GameHeaders",
    "GameProcessingError",
    "PgnGameParser",
    "TreeNode",
    "VendorCommand",
    "WorkbookTree",
    "apply_move",
    "assessment_for_tag",
    "build_header_line",
    "build_line_text",
    "command_for_tag",
    "decode_command",
    "encode_command",
    "parse_game",
    "read_games",
    "scan_headers",
    "split_games",
    "tag_for_assessment",
    "tag_for_command",
    "tree_to_movetext",
    "tree_to_pgn",
]
