"""Tests for the fzf preview helper (core/preview.py)."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from itree.core.preview import build_preview


class TestBuildPreview:
    def test_parent_entry(self, project: Path) -> None:
        lines = build_preview("📁 ..", project)
        assert lines[0] == "📁 Parent Directory"

    def test_directory_lists_contents(self, project: Path) -> None:
        lines = build_preview("📁 src", project)
        assert "📁 Directory Contents:" in lines
        assert "🐍 main.py" in lines

    def test_directory_listing_is_truncated(self, tmp_path: Path) -> None:
        folder = tmp_path / "many"
        folder.mkdir()
        for index in range(5):
            (folder / f"f{index}.txt").write_text("", encoding="utf-8")
        lines = build_preview("📁 many", tmp_path, directory_lines=3)
        assert lines[-1] == "… 2 more"

    def test_empty_directory(self, tmp_path: Path) -> None:
        (tmp_path / "empty").mkdir()
        assert build_preview("📁 empty", tmp_path)[-1] == "(empty)"

    def test_file_shows_size_and_head(self, tmp_path: Path) -> None:
        (tmp_path / "notes.txt").write_text("".join(f"line {i}\n" for i in range(30)), encoding="utf-8")
        lines = build_preview("📄 notes.txt", tmp_path, file_lines=5)
        assert "📄 File Contents:" in lines
        assert any(line.startswith("📏 Size:") for line in lines)
        assert lines[-1] == "line 4"
        assert "line 5" not in lines

    def test_unknown_item(self, tmp_path: Path) -> None:
        assert build_preview("📄 ghost", tmp_path)[-1] == "❓ Unknown item type"

    @pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
    def test_broken_symlink(self, tmp_path: Path) -> None:
        (tmp_path / "dangling").symlink_to(tmp_path / "nowhere")
        lines = build_preview("🔗 dangling", tmp_path)
        assert "🔗 Symlink Target:" in lines
        assert lines[-1] == "❌ Broken symlink"
