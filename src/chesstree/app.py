"""Command-line entry point: summarize the games of a PGN archive."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from chesstree.config import ParserOptions
from chesstree.workbook.reader import read_games
from chesstree.workbook.tree import TreeNode, WorkbookTree

_LOGGER = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chesstree", description="Parse PGN game records into variation trees."
    )
    parser.add_argument("path", type=Path, help="PGN file to read")
    parser.add_argument("--debug", action="store_true", help="log every position as FEN")
    parser.add_argument(
        "--mainline", action="store_true", help="print only the main line of each game"
    )
    parser.add_argument(
        "--check-move-numbers",
        action="store_true",
        help="warn about move numbers that disagree with the moves",
    )
    return parser


def _outline(node: TreeNode, depth: int, out: list[str]) -> None:
    for index, child in enumerate(node.children):
        marker = "" if index == 0 else "+ "
        out.append(f"{'  ' * depth}{marker}{child.move_number}. {child.move_text} [{child.node_id}]")
        _outline(child, depth + (0 if index == 0 else 1), out)


def describe_tree(tree: WorkbookTree, mainline_only: bool = False) -> str:
    lines = [tree.headers.summary_line(), f"  nodes: {len(tree)}  result: {tree.result}"]
    if mainline_only:
        lines.append(f"  {tree.mainline_text()}")
    else:
        outline: list[str] = []
        _outline(tree.root, 1, outline)
        lines.extend(outline)
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    options = ParserOptions(
        debug_mode=args.debug, validate_move_numbers=args.check_move_numbers
    )

    try:
        text = args.path.read_text(encoding="utf-8")
    except OSError as exc:
        _LOGGER.error("Cannot read %s: %s", args.path, exc)
        return 2

    result = read_games(text, options)
    for tree in result.trees:
        print(describe_tree(tree, mainline_only=args.mainline))
    for error in result.errors:
        print(error, file=sys.stderr)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
