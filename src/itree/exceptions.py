"""Custom exception hierarchy for itree.

All exceptions that cross layer boundaries must inherit from
:class:`ItreeError`.  Raw ``OSError`` / ``subprocess`` failures must
never propagate beyond the infrastructure layer; they are caught there
and re-raised as a typed subclass defined here.

Hierarchy
---------
ItreeError
├── MissingDependencyError
├── UnreadableDirectoryError
├── UserCancelledError
├── EmptySelectionError
├── RenderFailureError
├── FuzzyFinderError
├── ClipboardError
├── CommandFailedError
└── EnvironmentError
"""

from __future__ import annotations


class ItreeError(Exception):
    """Base exception for all itree errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- External programs -----------------------------------------------------

class MissingDependencyError(ItreeError):
    """Raised when a required external program is not on PATH."""


class FuzzyFinderError(ItreeError):
    """Raised when fzf exits with a code that is neither success nor cancel."""


class ClipboardError(ItreeError):
    """Raised when no clipboard utility accepted the text."""


class CommandFailedError(ItreeError):
    """Raised when a wrapped command cannot be started at all."""


# --- Navigation ------------------------------------------------------------

class UnreadableDirectoryError(ItreeError):
    """Raised when the directory being scanned is missing or unreadable.

    The navigation loop treats this as recoverable: the user is asked
    whether to retry or abort.
    """


class UserCancelledError(ItreeError):
    """Raised when the user explicitly aborts an interactive step."""


# --- Selection / rendering -------------------------------------------------

class EmptySelectionError(ItreeError):
    """Raised when the navigation finished without any selected item."""


class RenderFailureError(ItreeError):
    """Raised when the selective tree contains no item lines."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ItreeError):
    """Raised when a required Python runtime dependency is not available."""
