"""Domain models for itree.

Value objects are **frozen** dataclasses with no behaviour beyond data
access and small derived properties.  The one mutable model is
:class:`SelectionSet`, which is owned exclusively by a single explorer
session.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from pathlib import Path, PurePosixPath

from itree.core.icons import DIRECTORY_ICON, SYMLINK_ICON, icon_for_extension


# ---------------------------------------------------------------------------
# Directory entries
# ---------------------------------------------------------------------------

class EntryKind(enum.Enum):
    """How an entry was classified during a listing."""

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """One child of the directory being navigated."""

    name: str
    """Bare entry name (no path components)."""

    kind: EntryKind

    extension: str | None = None
    """Lower-case extension without the dot, only set for files."""

    @property
    def icon(self) -> str:
        if self.kind is EntryKind.DIRECTORY:
            return DIRECTORY_ICON
        if self.kind is EntryKind.SYMLINK:
            return SYMLINK_ICON
        return icon_for_extension(self.extension)

    @property
    def label(self) -> str:
        """Display string handed to the fuzzy finder, e.g. ``"📁 src"``."""
        return f"{self.icon} {self.name}"


# ---------------------------------------------------------------------------
# Session configuration
# ---------------------------------------------------------------------------

class DisplayMode(enum.Enum):
    """Content type picked at the start of a session."""

    FOLDERS_ONLY = "📁 Folders only"
    FOLDERS_AND_FILES = "📄 Folders and files"

    @property
    def include_files(self) -> bool:
        return self is DisplayMode.FOLDERS_AND_FILES

    @property
    def description(self) -> str:
        return self.value.split(" ", 1)[1]

    @classmethod
    def from_label(cls, label: str) -> DisplayMode:
        """Map a fuzzy-finder line back to a mode.

        Anything other than the folders-only label means files are shown,
        matching how the two-item pick is interpreted.
        """
        if label.strip() == cls.FOLDERS_ONLY.value:
            return cls.FOLDERS_ONLY
        return cls.FOLDERS_AND_FILES


@dataclass(frozen=True, slots=True)
class NavigationState:
    """Explicit per-session configuration threaded through every step.

    Transitions return new instances; nothing is mutated in place.
    """

    root_directory: Path
    current_directory: Path
    include_files: bool
    max_depth: int

    @classmethod
    def start(cls, root: Path, *, include_files: bool, max_depth: int) -> NavigationState:
        return cls(
            root_directory=root,
            current_directory=root,
            include_files=include_files,
            max_depth=max_depth,
        )

    @property
    def at_root(self) -> bool:
        return self.current_directory == self.root_directory

    @property
    def depth(self) -> int:
        """Number of levels below the root."""
        if self.at_root:
            return 0
        return len(self.current_directory.relative_to(self.root_directory).parts)

    @property
    def relative_location(self) -> str:
        """``"/"`` at the root, ``"/<relative path>"`` below it."""
        if self.at_root:
            return "/"
        relative = self.current_directory.relative_to(self.root_directory)
        return "/" + relative.as_posix()

    def can_descend(self) -> bool:
        return self.depth < self.max_depth

    def descend(self, name: str) -> NavigationState:
        if not self.can_descend():
            return self
        return replace(self, current_directory=self.current_directory / name)

    def ascend(self) -> NavigationState:
        if self.at_root:
            return self
        return replace(self, current_directory=self.current_directory.parent)


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

def normalize_relative_path(path: str) -> str:
    """Collapse redundant separators and ``./`` segments of a relative path."""
    parts = [part for part in PurePosixPath(path.strip()).parts if part not in ("", ".")]
    return "/".join(parts)


class SelectionSet:
    """Ordered, de-duplicated set of relative paths.

    Paths are keyed by their normalised form, so ``"src/"`` and
    ``"./src"`` are the same entry.  Insertion order is kept for
    inspection; rendering always uses :meth:`sorted`.
    """

    def __init__(self, paths: Iterable[str] = ()) -> None:
        self._items: dict[str, None] = {}
        for path in paths:
            self.add(path)

    def add(self, path: str) -> bool:
        """Insert *path*; return ``False`` when empty or already present."""
        key = normalize_relative_path(path)
        if not key or key in self._items:
            return False
        self._items[key] = None
        return True

    def sorted(self) -> tuple[str, ...]:
        return tuple(sorted(self._items))

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and normalize_relative_path(path) in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return len(self._items) > 0

    def __repr__(self) -> str:
        return f"SelectionSet({list(self._items)!r})"


# ---------------------------------------------------------------------------
# Fuzzy finder results
# ---------------------------------------------------------------------------

class FuzzyOutcome(enum.Enum):
    """The three exit paths of an fzf invocation."""

    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class FuzzyResult:
    """Interpreted result of one fuzzy-finder call."""

    outcome: FuzzyOutcome
    selected: tuple[str, ...]
    exit_code: int

    @property
    def confirmed(self) -> bool:
        return self.outcome is FuzzyOutcome.CONFIRMED


# ---------------------------------------------------------------------------
# Summaries and rendered output
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SelectionSummary:
    """Counts shown before the tree is generated."""

    directories: int
    files: int

    @property
    def total(self) -> int:
        return self.directories + self.files


@dataclass(frozen=True, slots=True)
class TextStats:
    """Line / word / character counts of a text block."""

    lines: int
    words: int
    characters: int


@dataclass(frozen=True, slots=True)
class RenderedTree:
    """Selective tree text: a root line followed by one line per item."""

    root_name: str
    lines: tuple[str, ...]

    @property
    def root_line(self) -> str:
        return f"{self.root_name}/"

    @property
    def item_count(self) -> int:
        return len(self.lines)

    @property
    def text(self) -> str:
        return "\n".join((self.root_line, *self.lines))

    def __bool__(self) -> bool:
        return len(self.lines) > 0
