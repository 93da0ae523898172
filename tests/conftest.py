"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chesstree.core.position import Position
from chesstree.workbook.parser import parse_game
from chesstree.workbook.tree import WorkbookTree

ITALIAN_WITH_VARIATION = "1. e4 e5 2. Nf3 (2. Bc4 Nc6) 2... Nc6 *"

ANNOTATED_GAME = """[Event "Club Championship"]
[Site "?"]
[White "Alpha"]
[Black "Beta"]
[Result "1-0"]

{[%bkm] Opening study} 1. e4 $1 {[%eval 0.35][%cal Ge2e4,Rd7d5] best by test}
1... e5 (1... c5 2. Nf3 {Open Sicilian}) 2. Nf3 Nc6 3. Bb5 a6 1-0
"""


@pytest.fixture
def start_position() -> Position:
    return Position()


@pytest.fixture
def italian_tree() -> WorkbookTree:
    return parse_game(ITALIAN_WITH_VARIATION)


@pytest.fixture
def annotated_tree() -> WorkbookTree:
    return parse_game(ANNOTATED_GAME)
