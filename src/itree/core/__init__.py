"""Core / service layer — domain models and explorer logic.

Rules
-----
* No ``print()`` calls and no Rich rendering.
* No subprocesses; filesystem access is read-only and limited to
  listing and classifying entries.
* No imports from ``cli`` or ``infra``.
"""

from itree.core.accumulator import SelectionAccumulator
from itree.core.explorer_service import ExplorerService
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
    TextStats,
)
from itree.core.protocols import ClipboardWriter, FuzzySelector

__all__: list[str] = [
    "ClipboardWriter",
    "DirectoryEntry",
    "DisplayMode",
    "EntryKind",
    "ExplorerService",
    "FuzzyOutcome",
    "FuzzyResult",
    "FuzzySelector",
    "NavigationState",
    "RenderedTree",
    "SelectionAccumulator",
    "SelectionSet",
    "SelectionSummary",
    "TextStats",
]
