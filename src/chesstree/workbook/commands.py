"""Vendor commands embedded in comments as ``[%tag params]``.

The tag tables are fixed; lookups never fail and return the ``NONE`` / empty
sentinels for anything unknown, so callers must check for those.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chesstree.workbook.tree import TreeNode, WorkbookTree

_LOGGER = logging.getLogger(__name__)

COMMAND_OPEN = "[%"
COMMAND_CLOSE = "]"


class Command(IntEnum):
    NONE = 0
    BOOKMARK = 1
    BOOKMARK_V2 = 2
    ENGINE_EVALUATION = 3
    ENGINE_EVALUATION_V2 = 4
    COACH_ASSESSMENT = 5
    COACH_COMMENT = 6
    ARROWS = 7
    CIRCLES = 8


class Assessment(IntEnum):
    """Severity a coach attaches to a move."""

    NONE = 0
    BEST = 1
    ONLY = 2
    BRILLIANT = 3
    DUBIOUS = 4
    MISTAKE = 5
    BLUNDER = 6


_COMMAND_TAGS = MappingProxyType(
    {
        "%chf-bkm": Command.BOOKMARK,
        "%bkm": Command.BOOKMARK_V2,
        "%chf-eev": Command.ENGINE_EVALUATION,
        "%eval": Command.ENGINE_EVALUATION_V2,
        "%coach": Command.COACH_ASSESSMENT,
        "%csl": Command.CIRCLES,
        "%cal": Command.ARROWS,
    }
)

_ASSESSMENT_TAGS = MappingProxyType(
    {
        "best": Assessment.BEST,
        "only": Assessment.ONLY,
        "brilliant": Assessment.BRILLIANT,
        "dubious": Assessment.DUBIOUS,
        "mistake": Assessment.MISTAKE,
        "blunder": Assessment.BLUNDER,
    }
)


def command_for_tag(tag: str | None) -> Command:
    if tag is None:
        return Command.NONE
    return _COMMAND_TAGS.get(tag, Command.NONE)


def tag_for_command(command: Command) -> str:
    """First tag mapped to *command*, or ``""`` when none is."""
    return next((tag for tag, cmd in _COMMAND_TAGS.items() if cmd == command), "")


def assessment_for_tag(tag: str | None) -> Assessment:
    if tag is None:
        return Assessment.NONE
    return _ASSESSMENT_TAGS.get(tag, Assessment.NONE)


def tag_for_assessment(assessment: Assessment) -> str:
    return next((tag for tag, value in _ASSESSMENT_TAGS.items() if value == assessment), "")


@dataclass(frozen=True, slots=True)
class VendorCommand:
    """A decoded ``[%tag params]`` directive."""

    command: Command
    tag: str
    params: str = ""

    @property
    def is_known(self) -> bool:
        return self.command != Command.NONE


def decode_command(body: str) -> VendorCommand:
    """Decode the text between ``[`` and ``]``, e.g. ``"%eval 0.35"``."""
    tag, _, params = body.strip().partition(" ")
    return VendorCommand(command=command_for_tag(tag), tag=tag, params=params.strip())


def encode_command(command: VendorCommand) -> str:
    """Render *command* back to its bracketed comment form."""
    tag = command.tag or tag_for_command(command.command)
    if command.params:
        return f"[{tag} {command.params}]"
    return f"[{tag}]"


def _split_codes(params: str) -> list[str]:
    return [code.strip() for code in params.split(",") if code.strip()]


def apply_command(tree: WorkbookTree, node: TreeNode, command: VendorCommand) -> bool:
    """Attach the payload of *command* to *node*.

    Returns False for an unrecognized tag, which is left unattached.
    """
    cmd = command.command
    if cmd in (Command.BOOKMARK, Command.BOOKMARK_V2):
        tree.add_bookmark(node)
    elif cmd in (Command.ENGINE_EVALUATION, Command.ENGINE_EVALUATION_V2):
        node.engine_evaluation = command.params
    elif cmd == Command.COACH_ASSESSMENT:
        node.assessment = assessment_for_tag(command.params)
    elif cmd == Command.ARROWS:
        node.arrows.extend(_split_codes(command.params))
    elif cmd == Command.CIRCLES:
        node.circles.extend(_split_codes(command.params))
    else:
        _LOGGER.debug("Ignoring unknown command %r on node %d", command.tag, node.node_id)
        return False
    node.commands.append(command)
    return True


def node_commands_text(node: TreeNode) -> str:
    """Re-encode every command attached to *node*, in the order they were read."""
    return "".join(encode_command(cmd) for cmd in node.commands)
