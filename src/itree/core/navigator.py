"""Directory listing for one navigation step.

Classification order per entry mirrors the shell tests the explorer
grew out of: directory (following links) → regular file, only when files
are shown → symlink.  Entries that do not resolve to anything are
skipped.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from itree.core.icons import DIRECTORY_ICON, extension_of
from itree.core.models import DirectoryEntry, EntryKind, NavigationState
from itree.exceptions import UnreadableDirectoryError
from itree.utils.constants import IGNORED_NAMES, PARENT_ENTRY

logger = logging.getLogger(__name__)

PARENT_LABEL: str = f"{DIRECTORY_ICON} {PARENT_ENTRY}"


def is_ignored(name: str) -> bool:
    """Hidden entries and well-known build/dependency folders are never listed."""
    return name.startswith(".") or name in IGNORED_NAMES


def classify(path: Path, include_files: bool) -> EntryKind | None:
    """Return the kind of *path*, or ``None`` when it should not be listed."""
    try:
        if not path.exists():
            return None
        if path.is_dir():
            return EntryKind.DIRECTORY
        if include_files and path.is_file():
            return EntryKind.FILE
        if path.is_symlink():
            return EntryKind.SYMLINK
    except OSError:
        return None
    return None


def list_entries(directory: Path, include_files: bool) -> list[DirectoryEntry]:
    """List the visible children of *directory*, sorted by display label.

    Returns an empty list when the directory cannot be read; callers
    that need to tell "empty" from "unreadable" use :func:`scan`.
    """
    try:
        names = [entry.name for entry in os.scandir(directory)]
    except OSError as exc:
        logger.debug("cannot list %s: %s", directory, exc)
        return []

    entries: list[DirectoryEntry] = []
    for name in names:
        if is_ignored(name):
            continue
        kind = classify(directory / name, include_files)
        if kind is None:
            continue
        extension = extension_of(name) if kind is EntryKind.FILE else None
        entries.append(DirectoryEntry(name=name, kind=kind, extension=extension))

    entries.sort(key=lambda entry: entry.label)
    return entries


def check_readable(directory: Path) -> None:
    """Raise :class:`UnreadableDirectoryError` unless *directory* can be listed."""
    if not directory.is_dir():
        raise UnreadableDirectoryError(f"Directory does not exist: {directory}")
    if not os.access(directory, os.R_OK | os.X_OK):
        raise UnreadableDirectoryError(
            f"Cannot read directory: {directory}",
            hint="Check the directory permissions.",
        )


def scan(state: NavigationState) -> list[str]:
    """Return the fuzzy-finder labels for the current navigation step.

    A ``📁 ..`` pseudo-entry leads the list whenever the current directory
    is below the root.
    """
    check_readable(state.current_directory)
    labels = [entry.label for entry in list_entries(state.current_directory, state.include_files)]
    if not state.at_root:
        labels.insert(0, PARENT_LABEL)
    logger.debug("scanned %s: %d entries", state.current_directory, len(labels))
    return labels
