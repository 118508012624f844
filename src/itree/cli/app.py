"""CLI application entry point and command routing for itree.

This module is the **sole error boundary** for the entire application.
It catches :class:`~itree.exceptions.ItreeError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via
Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the command
  modules, the core services and the infrastructure layer.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from itree.cli import exit_codes
from itree.cli.console import console, err_console
from itree.cli.logging_setup import configure_logging
from itree.exceptions import ItreeError, UserCancelledError
from itree.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``itree``                  — interactive tree explorer
    * ``itree doctor``           — environment diagnostics
    * ``itree get-tree``         — ``tree`` with the default ignore set
    * ``itree copy-output``      — run a command, copy its output
    * ``itree copy-silent``      — same, without prompts or preview
    * ``itree copy-pwd``         — copy the working directory path
    * ``itree copy-file``        — copy a file's contents
    * ``itree preview``          — fzf preview helper
    """
    parser = argparse.ArgumentParser(
        prog="itree",
        description=(
            "Interactive tree explorer: pick entries with fzf and copy a "
            "selective tree of them to the clipboard."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (same as ITREE_DEBUG=1).",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    commands.add_parser("explore", help="Run the interactive tree explorer (default).")
    commands.add_parser("doctor", help="Check fzf, tree, clipboard and Python dependencies.")

    get_tree = commands.add_parser(
        "get-tree",
        help="Print a tree of the current directory, skipping common noise.",
    )
    get_tree.add_argument(
        "-I",
        "--ignore",
        dest="ignore",
        metavar="PATTERNS",
        help="Extra '|'-separated patterns to ignore, added to the defaults.",
    )

    copy_output = commands.add_parser(
        "copy-output",
        help="Run a command and copy its output to the clipboard.",
    )
    copy_output.add_argument("cmd", nargs=argparse.REMAINDER, metavar="CMD")

    copy_silent = commands.add_parser(
        "copy-silent",
        help="Run a command and copy its output without prompts or preview.",
    )
    copy_silent.add_argument("cmd", nargs=argparse.REMAINDER, metavar="CMD")

    commands.add_parser("copy-pwd", help="Copy the current directory path.")

    copy_file = commands.add_parser("copy-file", help="Copy a file's contents.")
    copy_file.add_argument("path", type=Path)

    preview = commands.add_parser("preview", help="Preview one explorer entry (used by fzf).")
    preview.add_argument("item")
    preview.add_argument("directory", type=Path)

    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_explore() -> int:
    from itree.cli.explorer import run_explorer

    return run_explorer()


def _handle_doctor() -> int:
    from itree.cli.doctor import run_doctor

    return run_doctor()


def _handle_get_tree(ignore: str | None, tree_args: list[str]) -> int:
    from itree.infra.tree_runner import run_tree

    return run_tree(ignore, tree_args)


def _handle_copy_output(cmd: list[str]) -> int:
    from itree.cli.clipboard_commands import run_copy_output

    if cmd and cmd[0] == "--":
        cmd = cmd[1:]
    return run_copy_output(cmd)


def _handle_copy_silent(cmd: list[str]) -> int:
    from itree.cli.clipboard_commands import run_copy_silent

    if cmd and cmd[0] == "--":
        cmd = cmd[1:]
    return run_copy_silent(cmd)


def _handle_copy_pwd() -> int:
    from itree.cli.clipboard_commands import run_copy_pwd

    return run_copy_pwd()


def _handle_copy_file(path: Path) -> int:
    from itree.cli.clipboard_commands import run_copy_file

    return run_copy_file(path)


def _handle_preview(item: str, directory: Path) -> int:
    from itree.core.preview import build_preview

    for line in build_preview(item, directory):
        print(line)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the itree CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args, extra = parser.parse_known_args(argv)

    # Unknown options are only meaningful as pass-through ``tree`` flags.
    if extra and args.command != "get-tree":
        parser.error(f"unrecognized arguments: {' '.join(extra)}")

    configure_logging(args.debug)
    logger.debug("command=%s", args.command or "explore")

    if args.command in (None, "explore"):
        return _handle_explore()
    if args.command == "doctor":
        return _handle_doctor()
    if args.command == "get-tree":
        return _handle_get_tree(args.ignore, extra)
    if args.command == "copy-output":
        return _handle_copy_output(args.cmd)
    if args.command == "copy-silent":
        return _handle_copy_silent(args.cmd)
    if args.command == "copy-pwd":
        return _handle_copy_pwd()
    if args.command == "copy-file":
        return _handle_copy_file(args.path)
    if args.command == "preview":
        return _handle_preview(args.item, args.directory)

    parser.print_help()
    return exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except UserCancelledError as exc:
        err_console.print(f"[yellow]❌ {exc}[/yellow]")
        sys.exit(exit_codes.GENERAL_ERROR)
    except ItreeError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("unexpected error", exc_info=True)
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
