"""Selective tree rendering.

Every function here is a deterministic transformation of the selection
and the filesystem state at call time; nothing is written anywhere.

The tree is deliberately shallow: every selected path is listed as a
direct child of the root line, whatever its real nesting depth.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from itree.core.icons import DIRECTORY_ICON, SYMLINK_ICON, icon_for_name
from itree.core.models import RenderedTree, SelectionSet, SelectionSummary, TextStats

BRANCH: str = "├── "
BROKEN_LINK: str = "broken"
PAYLOAD_TITLE: str = "# Selective Tree Structure"


def _ordered(selection: SelectionSet | Iterable[str]) -> tuple[str, ...]:
    if isinstance(selection, SelectionSet):
        return selection.sorted()
    return SelectionSet(selection).sorted()


def _link_target(path: Path) -> str:
    if not path.exists():
        return BROKEN_LINK
    try:
        return os.readlink(path)
    except OSError:
        return BROKEN_LINK


def render_line(relative: str, full_path: Path, include_files: bool) -> str | None:
    """Return the tree line for one selected path, or ``None`` to skip it."""
    if not os.path.lexists(full_path):
        return None
    if full_path.is_dir():
        return f"{BRANCH}{DIRECTORY_ICON} {relative}/"
    if full_path.is_file() and include_files:
        return f"{BRANCH}{icon_for_name(full_path.name)} {relative}"
    # Folders-only mode still lists links to files, tagged as symlinks.
    if full_path.is_symlink():
        return f"{BRANCH}{SYMLINK_ICON} {relative} -> {_link_target(full_path)}"
    return None


def render_tree(
    selection: SelectionSet | Iterable[str],
    root_directory: Path,
    include_files: bool,
) -> RenderedTree:
    """Convert the selection into a :class:`RenderedTree`.

    Paths that vanished since they were picked are skipped silently.
    """
    lines: list[str] = []
    for relative in _ordered(selection):
        line = render_line(relative, root_directory / relative, include_files)
        if line is not None:
            lines.append(line)
    return RenderedTree(root_name=root_directory.name or str(root_directory), lines=tuple(lines))


def summarize(selection: SelectionSet | Iterable[str], root_directory: Path) -> SelectionSummary:
    """Count selected directories versus everything else."""
    directories = 0
    files = 0
    for relative in _ordered(selection):
        if (root_directory / relative).is_dir():
            directories += 1
        else:
            files += 1
    return SelectionSummary(directories=directories, files=files)


def clipboard_payload(tree: RenderedTree, root_directory: Path, generated_at: datetime) -> str:
    """Tree text prefixed with the metadata header copied to the clipboard."""
    header = (
        PAYLOAD_TITLE,
        "# Generated by itree",
        f"# Directory: {root_directory}",
        f"# Date: {generated_at:%a %b %d %H:%M:%S %Y}",
    )
    return "\n".join((*header, "", tree.text)) + "\n"


def text_stats(text: str) -> TextStats:
    """Line, word and character counts, in the spirit of ``wc``."""
    stripped = text.rstrip("\n")
    lines = len(stripped.split("\n")) if stripped else 0
    return TextStats(lines=lines, words=len(text.split()), characters=len(text))


def saved_tree_filename(prefix: str, generated_at: datetime) -> str:
    return f"{prefix}{generated_at:%Y%m%d_%H%M%S}.txt"
