"""Clipboard commands: ``copy-output``, ``copy-silent``, ``copy-pwd`` and ``copy-file``.

Status goes to stderr so that the commands can sit in a pipeline; only
prompts use the terminal directly.
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from pathlib import Path

from itree.cli import exit_codes
from itree.cli.console import err_console
from itree.core.protocols import ClipboardWriter
from itree.core.renderer import text_stats
from itree.exceptions import ItreeError
from itree.utils.constants import COPY_FILE_WARN_MB, COPY_PREVIEW_LINES

PREVIEW_RULE: str = "─" * 50


def _clipboard() -> ClipboardWriter:
    from itree.infra.clipboard import require_clipboard

    return require_clipboard()


def _show_preview(output: str, limit: int = COPY_PREVIEW_LINES) -> None:
    lines = output.splitlines()
    err_console.plain("")
    err_console.plain("📋 Copied content preview:")
    err_console.plain(PREVIEW_RULE)
    err_console.plain("\n".join(lines[:limit]))
    if len(lines) > limit:
        err_console.plain("...")
        err_console.plain(f"📏 Total: {len(lines)} lines (showing first {limit})")
    err_console.plain(PREVIEW_RULE)


# ---------------------------------------------------------------------------
# copy-output
# ---------------------------------------------------------------------------

def run_copy_output(argv: Sequence[str]) -> int:
    """Run *argv*, copy its combined output, and return its exit code.

    Failed or empty output is only copied after confirmation.
    """
    from itree.cli.prompts import confirm
    from itree.infra.command_runner import run_captured

    if not argv:
        raise ItreeError(
            "Command is required",
            hint="Usage: itree copy-output <command> [args...]",
        )

    clipboard = _clipboard()
    err_console.plain(f"🔄 Executing: {shlex.join(argv)}")
    result = run_captured(argv)

    if not result.succeeded:
        err_console.print(f"[red]❌ Command failed with exit code: {result.exit_code}[/red]")
        err_console.plain("📋 Error output:")
        err_console.plain(result.output)
        if not confirm("❓ Copy error output to clipboard anyway?"):
            err_console.print("[yellow]❌ Operation cancelled[/yellow]")
            return result.exit_code

    if not result.output:
        err_console.print("[yellow]⚠️  Warning: Command produced no output[/yellow]")
        if not confirm("❓ Copy empty result to clipboard?"):
            err_console.print("[yellow]❌ Operation cancelled[/yellow]")
            return exit_codes.GENERAL_ERROR

    clipboard.copy(result.output + "\n")
    err_console.print("[green]✅ Output copied to clipboard successfully![/green]")

    _show_preview(result.output)
    stats = text_stats(result.output)
    err_console.plain(
        f"📊 Stats: {stats.lines} lines, {stats.words} words, "
        f"{stats.characters} characters"
    )
    return result.exit_code


# ---------------------------------------------------------------------------
# copy-silent
# ---------------------------------------------------------------------------

def run_copy_silent(argv: Sequence[str]) -> int:
    """Run *argv* and copy its output without prompts or preview.

    A failing command copies nothing and its exit code is returned.
    """
    from itree.infra.command_runner import run_captured

    if not argv:
        raise ItreeError(
            "Command is required",
            hint="Usage: itree copy-silent <command> [args...]",
        )

    clipboard = _clipboard()
    result = run_captured(argv)
    if not result.succeeded:
        err_console.print("[red]❌ Command failed[/red]")
        return result.exit_code

    clipboard.copy(result.output + "\n")
    err_console.print("[green]✅ Copied to clipboard[/green]")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# copy-pwd
# ---------------------------------------------------------------------------

def run_copy_pwd() -> int:
    """Copy the current working directory path."""
    clipboard = _clipboard()
    current = str(Path.cwd())
    clipboard.copy(current + "\n")
    err_console.print("[green]✅ Current directory path copied to clipboard:[/green]")
    err_console.plain(f"📁 {current}")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# copy-file
# ---------------------------------------------------------------------------

def run_copy_file(path: Path) -> int:
    """Copy the text of *path*; files above the size limit need confirmation."""
    from itree.cli.prompts import confirm

    if not path.is_file():
        raise ItreeError(f"File not found: {path}")
    clipboard = _clipboard()

    try:
        size = path.stat().st_size
    except OSError as exc:
        raise ItreeError(f"Cannot read file: {path}", hint=str(exc)) from exc

    size_mb = size // (1024 * 1024)
    if size_mb > COPY_FILE_WARN_MB:
        err_console.print(
            f"[yellow]⚠️  Warning: File is {size_mb}MB. "
            "This might be too large for clipboard.[/yellow]"
        )
        if not confirm("❓ Continue anyway?"):
            err_console.print("[yellow]❌ Operation cancelled[/yellow]")
            return exit_codes.GENERAL_ERROR

    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ItreeError(f"Cannot read file: {path}", hint=str(exc)) from exc

    clipboard.copy(content)
    line_count = content.count("\n")
    err_console.print("[green]✅ File copied to clipboard:[/green]")
    err_console.plain(f"📄 {path}")
    err_console.plain(f"📊 Stats: {line_count} lines, {size} bytes")
    return exit_codes.SUCCESS
