"""chesstree: game records with variations parsed into trees of positions.

Quick start::

    from chesstree import parse_game

    tree = parse_game('[Event "Casual"]\n\n1. e4 e5 2. Nf3 (2. Bc4 Nc6) 2... Nc6 *')
    for node in tree.mainline():
        print(node.node_id, node.move_text)
"""

from chesstree.config import ParserOptions
from chesstree.errors import MoveParseError, PgnParseError
from chesstree.workbook import PgnGameParser, TreeNode, WorkbookTree, parse_game, read_games

__all__ = [
    "MoveParseError",
    "ParserOptions",
    "PgnGameParser",
    "PgnParseError",
    "TreeNode",
    "WorkbookTree",
    "parse_game",
    "read_games",
]
