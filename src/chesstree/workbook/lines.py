"""Rendering nodes back to movetext."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesstree.core.enums import Color
from chesstree.workbook.commands import node_commands_text

if TYPE_CHECKING:
    from chesstree.workbook.tree import TreeNode, WorkbookTree


def _number_prefix(node: TreeNode, force: bool) -> str:
    if node.parent is None:
        return ""
    if node.parent.position.side_to_move == Color.WHITE:
        return f"{node.move_number}."
    return f"{node.move_number}..." if force else ""


def _comment_text(node: TreeNode) -> str:
    body = node_commands_text(node) + (node.comment or "")
    return f"{{{body}}}" if body else ""


def _move_tokens(node: TreeNode, force: bool, with_nags: bool, with_comments: bool) -> list[str]:
    tokens = [_number_prefix(node, force), node.move_text]
    if with_nags:
        tokens.extend(f"${nag}" for nag in node.nags)
    if with_comments:
        tokens.append(_comment_text(node))
    return [t for t in tokens if t]


def build_line_text(line: list[TreeNode], with_nags: bool = False) -> str:
    """Movetext for a root-to-leaf list of nodes, e.g. ``"1. e4 e5 2. Nf3"``.

    The root, if present, is skipped; a line whose first ply is Black's starts
    with ``"N..."``.
    """
    parts: list[str] = []
    first = True
    for node in line:
        if node.is_root:
            continue
        parts.extend(_move_tokens(node, first, with_nags, with_comments=False))
        first = False
    return " ".join(parts)


def _continuation(parent: TreeNode, force: bool) -> list[str]:
    parts: list[str] = []
    while parent.children:
        main, *variations = parent.children
        parts.extend(_move_tokens(main, force, with_nags=True, with_comments=True))
        force = bool(main.comment or main.commands)
        for variation in variations:
            inner = _move_tokens(variation, True, with_nags=True, with_comments=True)
            inner.extend(_continuation(variation, bool(variation.comment or variation.commands)))
            parts.append("(" + " ".join(inner) + ")")
            force = True
        parent = main
    return parts


def tree_to_movetext(tree: WorkbookTree) -> str:
    """Full movetext of *tree*: every variation, comment, command and glyph."""
    root = tree.root
    parts: list[str] = []
    root_comment = _comment_text(root)
    if root_comment:
        parts.append(root_comment)
    parts.extend(_continuation(root, force=True))
    parts.append(tree.result)
    return " ".join(parts)


def tree_to_pgn(tree: WorkbookTree) -> str:
    """Headers, a blank line and the movetext of *tree*."""
    lines: list[str] = []
    if len(tree.headers):
        lines.append(tree.headers.to_text())
        lines.append("")
    lines.append(tree_to_movetext(tree))
    lines.append("")
    return "\n".join(lines)
