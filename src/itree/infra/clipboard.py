"""Clipboard access through the platform's command-line utility.

Implements :class:`~itree.core.protocols.ClipboardWriter`.  The first
utility found on PATH is used; failures surface as
:class:`~itree.exceptions.ClipboardError`.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys

from itree.exceptions import ClipboardError, MissingDependencyError

logger = logging.getLogger(__name__)


def clipboard_candidates() -> list[list[str]]:
    """Return the clipboard commands to try on this platform, in order."""
    if sys.platform == "darwin":
        return [["pbcopy"]]
    if os.name == "nt":
        return [["clip"]]
    return [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ]


def find_clipboard_command() -> list[str] | None:
    """Return the first available clipboard command, or ``None``."""
    for command in clipboard_candidates():
        if shutil.which(command[0]) is not None:
            return command
    return None


class SystemClipboard:
    """Concrete :class:`ClipboardWriter` backed by pbcopy / clip / wl-copy / xclip / xsel."""

    def __init__(self, command: list[str] | None = None) -> None:
        self._command = command

    @property
    def command(self) -> list[str] | None:
        if self._command is None:
            self._command = find_clipboard_command()
        return self._command

    @property
    def available(self) -> bool:
        return self.command is not None

    def copy(self, text: str) -> None:
        command = self.command
        if command is None:
            names = ", ".join(candidate[0] for candidate in clipboard_candidates())
            raise ClipboardError(
                "No clipboard utility available.",
                hint=f"Install one of: {names}",
            )

        logger.debug("copying %d character(s) with %s", len(text), command[0])
        try:
            completed = subprocess.run(
                command,
                input=text,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except OSError as exc:
            raise ClipboardError(f"Failed to run {command[0]}: {exc}") from exc

        if completed.returncode != 0:
            raise ClipboardError(
                f"Failed to copy to clipboard ({command[0]} exited with {completed.returncode})",
            )


def require_clipboard() -> SystemClipboard:
    """Return a :class:`SystemClipboard` or raise :class:`MissingDependencyError`."""
    clipboard = SystemClipboard()
    if not clipboard.available:
        names = ", ".join(candidate[0] for candidate in clipboard_candidates())
        raise MissingDependencyError(
            "No clipboard utility available.",
            hint=f"Install one of: {names}",
        )
    return clipboard
