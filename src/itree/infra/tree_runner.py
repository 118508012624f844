"""Wrapper around the external ``tree`` program (``itree get-tree``).

Builds the ``tree`` command line from a default ignore set plus
user-supplied patterns and runs it with output going straight to the
terminal.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from itree.exceptions import MissingDependencyError
from itree.utils.constants import TREE_DEFAULT_IGNORE, TREE_DEFAULT_LEVEL

logger = logging.getLogger(__name__)


def clean_ignore_patterns(patterns: str) -> str:
    """Strip surrounding quotes and ``./`` prefixes from user patterns."""
    cleaned = patterns.strip().removeprefix("'").removesuffix("'")
    return cleaned.replace("./", "")


def combine_ignore_patterns(extra: str | None, default: str = TREE_DEFAULT_IGNORE) -> str:
    if not extra:
        return default
    cleaned = clean_ignore_patterns(extra)
    if not cleaned:
        return default
    return f"{default}|{cleaned}"


def build_tree_command(
    extra_ignore: str | None = None,
    tree_args: Sequence[str] = (),
    *,
    level: int = TREE_DEFAULT_LEVEL,
    binary: str = "tree",
) -> list[str]:
    """Return the argv for ``tree -L <level> -a -I <patterns> [args...]``."""
    return [
        binary,
        "-L",
        str(level),
        "-a",
        "-I",
        combine_ignore_patterns(extra_ignore),
        *tree_args,
    ]


def run_tree(
    extra_ignore: str | None = None,
    tree_args: Sequence[str] = (),
    *,
    level: int = TREE_DEFAULT_LEVEL,
) -> int:
    """Run ``tree`` in the foreground and return its exit code."""
    command = build_tree_command(extra_ignore, tree_args, level=level)
    logger.debug("running %s", command)
    try:
        completed = subprocess.run(command, check=False)
    except FileNotFoundError as exc:
        raise MissingDependencyError(
            "tree is not available.",
            hint="Install tree with your package manager (e.g. brew install tree).",
        ) from exc
    return completed.returncode
