"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``, ``doctor``)
remain functional even when Rich is not installed.

Two proxies are exported: :data:`console` writes status and progress to
stdout, :data:`err_console` writes errors and warnings to stderr.
"""

from __future__ import annotations

import sys
from typing import Any

from itree.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = False) -> Any:
    """Create a Rich console instance targeting stdout or stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object, **options: Any) -> None:
        """Render with Rich when available, else plain print.

        *options* are Rich ``Console.print`` keywords (``markup``,
        ``highlight``, ...) and are dropped in the plain fallback.
        """
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            print(*objects, file=sys.stderr if self._stderr else sys.stdout)
            return
        rich_console.print(*objects, **options)

    def plain(self, text: str) -> None:
        """Print *text* verbatim — no markup, no highlighting."""
        self.print(text, markup=False, highlight=False)


console = _ConsoleProxy(stderr=False)
err_console = _ConsoleProxy(stderr=True)
