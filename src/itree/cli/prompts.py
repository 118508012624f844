"""Interactive questions asked on the terminal.

questionary is imported lazily so that the bootstrap commands keep
working without it; every prompt that needs it raises
:class:`~itree.exceptions.EnvironmentError` with an install hint instead.

All functions return plain values and hold no business logic.
"""

from __future__ import annotations

import asyncio
from typing import Any

from itree.cli.console import err_console
from itree.exceptions import EnvironmentError, UserCancelledError
from itree.utils.constants import DEFAULT_DEPTH, MAX_DEPTH, SAVE_PROMPT_TIMEOUT


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def ask_depth() -> str:
    """Ask for the tree depth and return the raw answer.

    Validation is left to :func:`itree.core.depth.parse_depth`.

    Raises
    ------
    UserCancelledError
        If the prompt was interrupted (questionary returns ``None``).
    """
    questionary = _import_questionary()
    answer: str | None = questionary.text(
        f"🔢 Enter tree depth (default: {DEFAULT_DEPTH}, max: {MAX_DEPTH}):",
        default="",
    ).ask()  # Returns None on Ctrl+C
    if answer is None:
        raise UserCancelledError("Operation cancelled")
    return answer


def confirm(message: str, *, default: bool = False) -> bool:
    """Yes/no question; an interrupted prompt counts as "no"."""
    questionary = _import_questionary()
    answer: bool | None = questionary.confirm(message, default=default).ask()
    return bool(answer)


def confirm_with_timeout(
    message: str,
    *,
    timeout: float = SAVE_PROMPT_TIMEOUT,
    default: bool = False,
) -> bool:
    """Yes/no question that gives up after *timeout* seconds.

    A timeout or an interrupted prompt returns *default*.
    """
    questionary = _import_questionary()
    question = questionary.confirm(message, default=default)
    try:
        answer: bool | None = asyncio.run(
            asyncio.wait_for(question.ask_async(), timeout=timeout),
        )
    except asyncio.TimeoutError:
        return default
    if answer is None:
        return default
    return bool(answer)


def confirm_retry(message: str) -> bool:
    """Ask whether to rescan after *message*; used by the navigation loop."""
    err_console.plain(message)
    return confirm("Rescan and continue? (No aborts)", default=True)
