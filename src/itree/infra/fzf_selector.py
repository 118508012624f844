"""fzf backed implementation of :class:`~itree.core.protocols.FuzzySelector`.

This module is the **only** place in the codebase that starts fzf.
Exit codes are mapped to :class:`~itree.core.models.FuzzyOutcome`;
failing to start the program raises
:class:`~itree.exceptions.MissingDependencyError`.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from itree.core.models import FuzzyOutcome, FuzzyResult
from itree.exceptions import MissingDependencyError

logger = logging.getLogger(__name__)

CANCEL_EXIT_CODES: frozenset[int] = frozenset({1, 130})
"""``1``: no match / ``q`` abort; ``130``: interrupted with Ctrl+C or Esc."""


def outcome_for_exit_code(exit_code: int) -> FuzzyOutcome:
    if exit_code == 0:
        return FuzzyOutcome.CONFIRMED
    if exit_code in CANCEL_EXIT_CODES:
        return FuzzyOutcome.CANCELLED
    return FuzzyOutcome.ERROR


def parse_selection(stdout: str) -> tuple[str, ...]:
    """Split fzf output into non-empty lines."""
    return tuple(line for line in stdout.splitlines() if line.strip())


class FzfSelector:
    """Concrete :class:`FuzzySelector` that shells out to ``fzf``.

    The item list is fed on stdin; fzf draws its interface on the
    controlling terminal and writes the picked lines to stdout.

    This class satisfies the :class:`~itree.core.protocols.FuzzySelector`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, binary: str = "fzf") -> None:
        self._binary = binary

    def build_command(
        self,
        *,
        multi: bool,
        prompt: str,
        header: str,
        preview: str | None = None,
        preview_window: str | None = None,
        height: str | None = None,
        bindings: Sequence[str] = (),
    ) -> list[str]:
        """Return the argv for one fzf invocation."""
        command = [
            self._binary,
            "--multi" if multi else "--no-multi",
            f"--prompt={prompt}",
            f"--header={header}",
        ]
        if height is not None:
            command.append(f"--height={height}")
        if preview is not None:
            command.append(f"--preview={preview}")
            if preview_window is not None:
                command.append(f"--preview-window={preview_window}")
        command.extend(f"--bind={binding}" for binding in bindings)
        return command

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

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
        """Run fzf over *items* and interpret its exit status."""
        command = self.build_command(
            multi=multi,
            prompt=prompt,
            header=header,
            preview=preview,
            preview_window=preview_window,
            height=height,
            bindings=bindings,
        )
        logger.debug("running %s with %d item(s)", command[0], len(items))

        try:
            completed = subprocess.run(
                command,
                input="\n".join(items) + "\n",
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except FileNotFoundError as exc:
            raise MissingDependencyError(
                f"{self._binary} is required for interactive selection but was not found.",
                hint="Install fzf: https://github.com/junegunn/fzf#installation",
            ) from exc

        outcome = outcome_for_exit_code(completed.returncode)
        logger.debug("fzf exited with %d (%s)", completed.returncode, outcome.value)
        selected = parse_selection(completed.stdout or "") if outcome is FuzzyOutcome.CONFIRMED else ()
        return FuzzyResult(outcome=outcome, selected=selected, exit_code=completed.returncode)
