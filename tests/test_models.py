"""Tests for domain models (core/models.py).

Coverage:
* DirectoryEntry labels per kind.
* DisplayMode label mapping.
* NavigationState transitions and depth bound.
* SelectionSet normalisation and de-duplication.
* RenderedTree text and truthiness.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from itree.core.models import (
    DirectoryEntry,
    DisplayMode,
    EntryKind,
    FuzzyOutcome,
    FuzzyResult,
    NavigationState,
    RenderedTree,
    SelectionSet,
    SelectionSummary,
    normalize_relative_path,
)


class TestDirectoryEntry:
    def test_directory_label(self) -> None:
        assert DirectoryEntry("src", EntryKind.DIRECTORY).label == "📁 src"

    def test_file_label_uses_extension(self) -> None:
        assert DirectoryEntry("app.py", EntryKind.FILE, "py").label == "🐍 app.py"

    def test_symlink_label(self) -> None:
        assert DirectoryEntry("current", EntryKind.SYMLINK).label == "🔗 current"

    def test_frozen(self) -> None:
        entry = DirectoryEntry("src", EntryKind.DIRECTORY)
        with pytest.raises(AttributeError):
            entry.name = "other"  # type: ignore[misc]


class TestDisplayMode:
    def test_folders_only(self) -> None:
        mode = DisplayMode.from_label("📁 Folders only")
        assert mode is DisplayMode.FOLDERS_ONLY
        assert mode.include_files is False

    def test_other_label_means_files(self) -> None:
        assert DisplayMode.from_label("📄 Folders and files").include_files is True
        assert DisplayMode.from_label("anything").include_files is True

    def test_description_drops_icon(self) -> None:
        assert DisplayMode.FOLDERS_ONLY.description == "Folders only"


class TestNavigationState:
    def _state(self, max_depth: int = 2) -> NavigationState:
        return NavigationState.start(Path("/work/project"), include_files=False, max_depth=max_depth)

    def test_start_is_at_root(self) -> None:
        state = self._state()
        assert state.at_root
        assert state.depth == 0
        assert state.relative_location == "/"

    def test_descend_and_ascend(self) -> None:
        state = self._state().descend("src")
        assert state.current_directory == Path("/work/project/src")
        assert state.relative_location == "/src"
        assert state.depth == 1
        assert state.ascend().at_root

    def test_descend_is_bounded_by_max_depth(self) -> None:
        state = self._state(max_depth=1).descend("src")
        assert state.descend("deeper") == state

    def test_ascend_at_root_is_noop(self) -> None:
        state = self._state()
        assert state.ascend() == state

    def test_transitions_return_new_instances(self) -> None:
        state = self._state()
        state.descend("src")
        assert state.at_root


class TestSelectionSet:
    @pytest.mark.parametrize(
        ("raw", "normalized"),
        [
            ("src", "src"),
            ("src/", "src"),
            ("./src//lib", "src/lib"),
            ("  docs  ", "docs"),
        ],
    )
    def test_normalize(self, raw: str, normalized: str) -> None:
        assert normalize_relative_path(raw) == normalized

    def test_add_deduplicates(self) -> None:
        selection = SelectionSet()
        assert selection.add("src") is True
        assert selection.add("./src/") is False
        assert len(selection) == 1

    def test_empty_path_is_rejected(self) -> None:
        selection = SelectionSet()
        assert selection.add("  ") is False
        assert not selection

    def test_sorted(self) -> None:
        selection = SelectionSet(["src/b", "README.md", "src/a"])
        assert selection.sorted() == ("README.md", "src/a", "src/b")

    def test_contains_uses_normal_form(self) -> None:
        selection = SelectionSet(["src"])
        assert "src/" in selection
        assert 42 not in selection


class TestResultsAndSummaries:
    def test_fuzzy_result_confirmed(self) -> None:
        result = FuzzyResult(FuzzyOutcome.CONFIRMED, ("📁 src",), 0)
        assert result.confirmed

    def test_summary_total(self) -> None:
        assert SelectionSummary(directories=2, files=3).total == 5

    def test_rendered_tree_text(self) -> None:
        tree = RenderedTree("project", ("├── 📁 src/",))
        assert tree.text == "project/\n├── 📁 src/"
        assert tree.item_count == 1
        assert tree

    def test_rendered_tree_without_items_is_falsy(self) -> None:
        assert not RenderedTree("project", ())
