"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from itree.core.models import FuzzyResult


class FuzzySelector(Protocol):
    """Contract for interactive fuzzy-selection backends.

    Any object that implements :meth:`select` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def select(
        self,
        items: Sequence[str],
        *,
        multi: bool,
        prompt: str,
        header: str,
        preview: str | None = None,
        preview_window: str | None = None,
        height: str | None = None,
        bindings: Sequence[str] = (),
    ) -> FuzzyResult:
        """Present *items* and return the interpreted outcome.

        Implementations map the backend's exit status to a
        :class:`~itree.core.models.FuzzyOutcome`; they never raise for a
        cancel.

        Raises
        ------
        MissingDependencyError
            When the backend program cannot be started.
        """
        ...  # pragma: no cover


class ClipboardWriter(Protocol):
    """Contract for clipboard backends."""

    def copy(self, text: str) -> None:
        """Place *text* on the system clipboard.

        Raises
        ------
        ClipboardError
            When no clipboard utility accepted the text.
        """
        ...  # pragma: no cover
