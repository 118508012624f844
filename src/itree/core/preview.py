"""Preview text for one fuzzy-finder line.

fzf runs ``python -m itree preview {} <dir>`` for the highlighted line;
this module builds what that command prints.
"""

from __future__ import annotations

from itertools import islice
from pathlib import Path

from itree.core.icons import strip_icon
from itree.core.navigator import list_entries
from itree.utils.constants import PARENT_ENTRY, PREVIEW_DIRECTORY_LINES, PREVIEW_FILE_LINES


def _directory_lines(path: Path, limit: int) -> list[str]:
    if not path.exists() or not _listable(path):
        return ["❌ Cannot access directory"]
    entries = list_entries(path, include_files=True)
    if not entries:
        return ["(empty)"]
    lines = [entry.label for entry in entries[:limit]]
    if len(entries) > limit:
        lines.append(f"… {len(entries) - limit} more")
    return lines


def _listable(path: Path) -> bool:
    try:
        next(iter(path.iterdir()), None)
    except OSError:
        return False
    return True


def _file_lines(path: Path, limit: int) -> list[str]:
    try:
        size = path.stat().st_size
    except OSError:
        return ["❌ Cannot read file"]
    lines = [f"📏 Size: {size} bytes", ""]
    try:
        with path.open(encoding="utf-8", errors="replace") as handle:
            lines.extend(line.rstrip("\n") for line in islice(handle, limit))
    except OSError:
        lines.append("❌ Cannot read file")
    return lines


def build_preview(
    label: str,
    directory: Path,
    *,
    directory_lines: int = PREVIEW_DIRECTORY_LINES,
    file_lines: int = PREVIEW_FILE_LINES,
) -> list[str]:
    """Return the preview lines for *label* listed in *directory*."""
    name = strip_icon(label)
    if name == PARENT_ENTRY:
        return [
            "📁 Parent Directory",
            "⬅️  Select to go up one level",
        ]

    full_path = directory / name
    lines = [f"📁 Preview: {name}", f"📍 Path: {full_path}", ""]

    if full_path.is_dir():
        lines.append("📁 Directory Contents:")
        lines.extend(_directory_lines(full_path, directory_lines))
    elif full_path.is_file():
        lines.append("📄 File Contents:")
        lines.extend(_file_lines(full_path, file_lines))
    elif full_path.is_symlink():
        lines.append("🔗 Symlink Target:")
        try:
            lines.append(str(full_path.readlink()))
        except OSError:
            lines.append("❌ Broken symlink")
        else:
            if not full_path.exists():
                lines.append("❌ Broken symlink")
    else:
        lines.append("❓ Unknown item type")
    return lines
