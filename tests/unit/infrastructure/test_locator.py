"""Tests for infrastructure/locator.py."""

from pathlib import Path

import pytest

from modforge.infrastructure.locator import SourceTreeLocator


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    (tmp_path / "Fw" / "Cmd").mkdir(parents=True)
    (tmp_path / "Os").mkdir()
    (tmp_path / "notes.txt").write_text("", encoding="utf-8")
    return tmp_path


class TestSourceTreeLocator:
    """Tests for SourceTreeLocator.locate."""

    def test_relative_directory(self, tree: Path) -> None:
        assert SourceTreeLocator([tree]).locate("Fw/Cmd") == tree / "Fw" / "Cmd"

    def test_module_name(self, tree: Path) -> None:
        assert SourceTreeLocator([tree]).locate("Fw_Cmd") == tree / "Fw" / "Cmd"

    def test_absolute_directory(self, tree: Path) -> None:
        assert SourceTreeLocator([tree]).locate(str(tree / "Os")) == tree / "Os"

    def test_file_is_not_a_module(self, tree: Path) -> None:
        assert SourceTreeLocator([tree]).locate("notes.txt") is None

    def test_missing(self, tree: Path) -> None:
        assert SourceTreeLocator([tree]).locate("Svc/Missing") is None

    def test_blank_identifier(self, tree: Path) -> None:
        assert SourceTreeLocator([tree]).locate("  ") is None

    def test_roots_searched_in_order(self, tmp_path: Path) -> None:
        first = tmp_path / "first"
        second = tmp_path / "second"
        (first / "Lib").mkdir(parents=True)
        (second / "Lib").mkdir(parents=True)
        (second / "Only").mkdir()

        locator = SourceTreeLocator([first, second])

        assert locator.locate("Lib") == first / "Lib"
        assert locator.locate("Only") == second / "Only"

    def test_no_roots_raises(self) -> None:
        with pytest.raises(ValueError, match="roots"):
            SourceTreeLocator([])
