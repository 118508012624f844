"""Tests for the selection accumulator (core/accumulator.py)."""

from __future__ import annotations

from pathlib import Path

from itree.core.accumulator import SelectionAccumulator


ROOT = Path("/work/project")


class TestRecord:
    def test_root_selection_is_stored_bare(self) -> None:
        acc = SelectionAccumulator()
        added = acc.record(["📁 src", "📝 README.md"], ROOT, ROOT)
        assert added == 2
        assert acc.selection.sorted() == ("README.md", "src")

    def test_nested_selection_is_prefixed(self) -> None:
        acc = SelectionAccumulator()
        acc.record(["🐍 main.py"], ROOT / "src" / "app", ROOT)
        assert acc.selection.sorted() == ("src/app/main.py",)

    def test_parent_entry_is_never_recorded(self) -> None:
        acc = SelectionAccumulator()
        added = acc.record(["📁 ..", "📁 lib"], ROOT / "src", ROOT)
        assert added == 1
        assert acc.selection.sorted() == ("src/lib",)

    def test_empty_lines_are_ignored(self) -> None:
        acc = SelectionAccumulator()
        assert acc.record(["", "   ", "📁 "], ROOT, ROOT) == 0
        assert not acc.selection

    def test_recording_twice_is_idempotent(self) -> None:
        acc = SelectionAccumulator()
        acc.record(["📁 src"], ROOT, ROOT)
        assert acc.record(["📁 src"], ROOT, ROOT) == 0
        assert len(acc.selection) == 1

    def test_names_with_spaces(self) -> None:
        acc = SelectionAccumulator()
        acc.record(["📄 my notes.txt"], ROOT, ROOT)
        assert "my notes.txt" in acc.selection


class TestDump:
    def test_writes_sorted_lines(self, tmp_path: Path) -> None:
        acc = SelectionAccumulator()
        acc.record(["📁 src", "📝 README.md"], ROOT, ROOT)
        target = tmp_path / "selected.txt"
        acc.dump(target)
        assert target.read_text(encoding="utf-8") == "README.md\nsrc\n"

    def test_empty_selection_writes_empty_file(self, tmp_path: Path) -> None:
        target = tmp_path / "selected.txt"
        SelectionAccumulator().dump(target)
        assert target.read_text(encoding="utf-8") == ""
