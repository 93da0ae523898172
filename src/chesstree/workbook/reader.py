"""Reading archives that hold many game records."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chesstree.config import ParserOptions
from chesstree.errors import PgnParseError
from chesstree.workbook.headers import parse_header_line, scan_headers
from chesstree.workbook.parser import PgnGameParser
from chesstree.workbook.tree import WorkbookTree

_LOGGER = logging.getLogger(__name__)


def _is_header_line(line: str) -> bool:
    stripped = line.strip()
    return not stripped.startswith("[%") and parse_header_line(stripped) is not None


def split_games(text: str) -> list[str]:
    """Cut an archive into game records.

    A header line that follows movetext opens the next record. Records with
    neither headers nor movetext are dropped.
    """
    games: list[list[str]] = [[]]
    in_movetext = False
    for line in text.splitlines():
        if _is_header_line(line):
            if in_movetext:
                games.append([])
                in_movetext = False
        elif line.strip():
            in_movetext = True
        games[-1].append(line)
    return ["\n".join(lines) for lines in games if any(line.strip() for line in lines)]


@dataclass(slots=True, frozen=True)
class GameProcessingError:
    """A record that could not be parsed; numbering starts at 1."""

    game_number: int
    title: str
    message: str

    def __str__(self) -> str:
        return f"Game #{self.game_number} : {self.title}\n     {self.message}"


@dataclass(slots=True)
class ArchiveReadResult:
    trees: list[WorkbookTree] = field(default_factory=list)
    errors: list[GameProcessingError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def read_games(text: str, options: ParserOptions | None = None) -> ArchiveReadResult:
    """Parse every record of *text*, each with its own parser.

    A record that fails is reported in ``errors`` and the rest are still read.
    """
    result = ArchiveReadResult()
    for number, game_text in enumerate(split_games(text), start=1):
        try:
            tree = PgnGameParser(game_text, options).parse()
        except PgnParseError as exc:
            headers, _ = scan_headers(game_text)
            error = GameProcessingError(number, headers.summary_line(), str(exc))
            _LOGGER.warning("Skipping game #%d: %s", number, exc)
            result.errors.append(error)
            continue
        result.trees.append(tree)
    return result
