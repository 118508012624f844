"""Logging configuration for the ``itree`` logger hierarchy.

Library modules only create loggers; this is the one place that attaches
a handler.  Debug output goes to stderr through Rich's ``RichHandler``
when Rich is installed.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

from itree.utils.constants import DEBUG_ENV_VAR

LOGGER_NAME: str = "itree"


def debug_requested(environ: Mapping[str, str] | None = None) -> bool:
    """Return whether ``ITREE_DEBUG`` asks for verbose logging."""
    env = os.environ if environ is None else environ
    value = env.get(DEBUG_ENV_VAR, "").strip().lower()
    return value not in ("", "0", "false", "no")


def _build_handler() -> logging.Handler:
    try:
        from rich.logging import RichHandler

        from itree.cli.console import get_rich_console
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        return handler
    return RichHandler(
        console=get_rich_console(stderr=True),
        show_level=True,
        show_path=False,
        rich_tracebacks=True,
    )


def configure_logging(debug: bool = False) -> logging.Logger:
    """Attach a single handler to the ``itree`` logger.

    Safe to call repeatedly; earlier handlers installed here are replaced.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    level = logging.DEBUG if debug or debug_requested() else logging.WARNING
    handler = _build_handler()
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
