"""Run a command and capture its combined output (``itree copy-output``)."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

from itree.exceptions import CommandFailedError

logger = logging.getLogger(__name__)

COMMAND_NOT_FOUND: int = 127
"""Exit status reported for a program that is not on PATH, as a shell would."""


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Exit status and combined stdout/stderr of one command."""

    argv: tuple[str, ...]
    exit_code: int
    output: str

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


def run_captured(argv: Sequence[str]) -> CommandResult:
    """Run *argv* with stderr folded into stdout.

    A missing program is reported as exit status 127 with a
    ``command not found`` message, the way an interactive shell does.

    Raises
    ------
    CommandFailedError
        When *argv* is empty or the program exists but cannot be started.
    """
    if not argv:
        raise CommandFailedError("Command is required")

    logger.debug("running %s", list(argv))
    try:
        completed = subprocess.run(
            list(argv),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except FileNotFoundError:
        return CommandResult(
            argv=tuple(argv),
            exit_code=COMMAND_NOT_FOUND,
            output=f"command not found: {argv[0]}",
        )
    except OSError as exc:
        raise CommandFailedError(f"Cannot run {argv[0]}: {exc}") from exc

    output = (completed.stdout or "").rstrip("\n")
    logger.debug("%s exited with %d", argv[0], completed.returncode)
    return CommandResult(argv=tuple(argv), exit_code=completed.returncode, output=output)
