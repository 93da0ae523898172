"""Workbook tree: one node per ply below a synthetic root."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from chesstree.core.enums import Color
from chesstree.core.position import Position
from chesstree.workbook.commands import Assessment, VendorCommand
from chesstree.workbook.headers import GameHeaders
from chesstree.workbook.lines import build_line_text


@dataclass(eq=False, slots=True)
class TreeNode:
    """A ply of the game, or the root when ``move_text`` is empty.

    ``children[0]`` is the main continuation; later children are side
    variations, in the order they appear in the source.
    """

    node_id: int
    position: Position
    move_text: str = ""
    parent: TreeNode | None = None
    children: list[TreeNode] = field(default_factory=list)
    comment: str | None = None
    nags: list[int] = field(default_factory=list)
    commands: list[VendorCommand] = field(default_factory=list)
    is_bookmark: bool = False
    engine_evaluation: str | None = None
    assessment: Assessment = Assessment.NONE
    arrows: list[str] = field(default_factory=list)
    circles: list[str] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def color_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def move_number(self) -> int:
        return self.position.move_number

    def add_child(self, node: TreeNode) -> None:
        node.parent = self
        self.children.append(node)

    def add_nag(self, nag: str | int) -> None:
        """Record a glyph given as ``"$14"``, ``"14"`` or ``14``."""
        if isinstance(nag, str):
            nag = int(nag.lstrip("$"))
        self.nags.append(nag)

    def __repr__(self) -> str:
        return f"TreeNode(id={self.node_id}, move={self.move_text!r}, children={len(self.children)})"


class WorkbookTree:
    """Every node of one parsed record, indexed by creation order.

    ``nodes[i].node_id == i`` holds for every node; ``nodes[0]`` is the root.
    """

    __slots__ = ("nodes", "headers", "bookmarks", "result")

    def __init__(self, headers: GameHeaders | None = None) -> None:
        self.nodes: list[TreeNode] = []
        self.headers = headers if headers is not None else GameHeaders()
        self.bookmarks: list[TreeNode] = []
        self.result = "*"

    @property
    def root(self) -> TreeNode:
        if not self.nodes:
            raise ValueError("Tree has no root node yet")
        return self.nodes[0]

    @property
    def next_node_id(self) -> int:
        return len(self.nodes)

    def add_node(self, node: TreeNode) -> None:
        if node.node_id != len(self.nodes):
            raise ValueError(f"Node id {node.node_id} out of sequence, expected {len(self.nodes)}")
        self.nodes.append(node)

    def node(self, node_id: int) -> TreeNode:
        return self.nodes[node_id]

    def add_bookmark(self, node: TreeNode) -> None:
        node.is_bookmark = True
        if node not in self.bookmarks:
            self.bookmarks.append(node)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[TreeNode]:
        return iter(self.nodes)

    # -- Lines --------------------------------------------------------------

    def mainline(self) -> list[TreeNode]:
        """Root followed by the first child at every branch point."""
        line = [self.root]
        while line[-1].children:
            line.append(line[-1].children[0])
        return line

    def line_to(self, node: TreeNode) -> list[TreeNode]:
        """Path from the root down to *node*, both included."""
        line: list[TreeNode] = []
        current: TreeNode | None = node
        while current is not None:
            line.append(current)
            current = current.parent
        line.reverse()
        return line

    def leaves(self) -> list[TreeNode]:
        return [nd for nd in self.nodes if not nd.children]

    def mainline_text(self, with_nags: bool = False) -> str:
        return build_line_text(self.mainline(), with_nags=with_nags)
