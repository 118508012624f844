"""Shared pytest fixtures and configuration for the itree test suite.

Guidelines
----------
* fzf, tree and the clipboard utility are never started for real; they
  are mocked at the infra boundary.
* Core tests work on ``tmp_path`` trees only.
* Tests must not depend on the host's PATH or clipboard.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from itree.core.models import FuzzyOutcome, FuzzyResult


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A small project: ``src/``, ``README.md`` and a hidden ``.git/``."""
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "src" / "main.py").write_text("print('hi')\n", encoding="utf-8")
    (root / "README.md").write_text("# project\n", encoding="utf-8")
    (root / ".git").mkdir()
    return root


def confirmed(*selected: str) -> FuzzyResult:
    return FuzzyResult(outcome=FuzzyOutcome.CONFIRMED, selected=tuple(selected), exit_code=0)


def cancelled(exit_code: int = 130) -> FuzzyResult:
    return FuzzyResult(outcome=FuzzyOutcome.CANCELLED, selected=(), exit_code=exit_code)


class FakeSelector:
    """Scripted :class:`FuzzySelector`; records every call."""

    def __init__(self, *results: FuzzyResult) -> None:
        self._results = list(results)
        self.calls: list[dict[str, object]] = []

    def select(self, items: Sequence[str], **options: object) -> FuzzyResult:
        self.calls.append({"items": list(items), **options})
        return self._results.pop(0)


class FakeClipboard:
    """In-memory :class:`ClipboardWriter`."""

    def __init__(self) -> None:
        self.copied: list[str] = []
        self.available = True

    def copy(self, text: str) -> None:
        self.copied.append(text)
