"""Tests for the command-line entry point."""

from pathlib import Path

import pytest

from chesstree.app import describe_tree, main
from chesstree.workbook.tree import WorkbookTree


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "games.pgn"
    path.write_text(text, encoding="utf-8")
    return path


class TestDescribeTree:
    def test_outline_marks_variations(self, italian_tree: WorkbookTree) -> None:
        text = describe_tree(italian_tree)
        assert "nodes: 7  result: *" in text
        assert "+ 2. Bc4 [4]" in text

    def test_mainline_only(self, italian_tree: WorkbookTree) -> None:
        text = describe_tree(italian_tree, mainline_only=True)
        assert text.splitlines()[-1] == "  1. e4 e5 2. Nf3 Nc6"


class TestMain:
    def test_success(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write(tmp_path, '[White "A"]\n[Black "B"]\n\n1. e4 e5 1/2-1/2\n')
        assert main([str(path), "--mainline"]) == 0
        out = capsys.readouterr().out
        assert "A - B" in out
        assert "1. e4 e5" in out

    def test_bad_game(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write(tmp_path, '[White "A"]\n[Black "B"]\n\n1. e5 *\n')
        assert main([str(path)]) == 1
        assert "Game #1 : A - B" in capsys.readouterr().err

    def test_missing_file(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "missing.pgn")]) == 2
