"""``itree doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising whether
the runtime environment satisfies itree's requirements.

This module lives in the CLI layer — it may import from ``infra`` and
``core``, and it renders via Rich.  No business logic resides here; it
purely collects and displays diagnostic data.
"""

from __future__ import annotations

import importlib.util
import platform
import sys

from itree.cli import exit_codes
from itree.cli.console import console
from itree.infra.clipboard import clipboard_candidates, find_clipboard_command
from itree.infra.tool_detector import ToolStatus, detect_tool
from itree.version import __version__

_OK = "[green]OK[/green]"
_WARN = "[yellow]WARN[/yellow]"
_FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _itree_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the itree version row."""
    return "itree", __version__, _OK


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = _OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _module_check(module: str, *, critical: bool) -> tuple[str, str, str]:
    """Return (label, value, status) for an optional Python dependency."""
    try:
        found = importlib.util.find_spec(module) is not None
    except (ImportError, ValueError):
        found = False
    if found:
        return module, "installed", _OK
    return module, "NOT INSTALLED", _FAIL if critical else _WARN


def _tool_check(name: str, *, critical: bool) -> tuple[str, str, str]:
    """Return (label, value, status) for an external program."""
    status = detect_tool(name)
    if status.found:
        return name, str(status.path) if status.path else "found", _OK
    return name, "not found", _FAIL if critical else _WARN


def _clipboard_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the clipboard utility row."""
    command = find_clipboard_command()
    if command is not None:
        return "clipboard", " ".join(command), _OK
    return "clipboard", "not found", _WARN


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    release = platform.release()
    machine = platform.machine()
    value = f"{system_display} {release} ({machine})"
    return "OS", value, _OK


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nitree doctor")
    print("=" * 60)
    print(f"{'Component':<12} {'Value':<36} {'Status':<8}")
    print("-" * 60)
    for label, value, status in checks:
        print(f"{label:<12} {value:<36} {_status_plain(status):<8}")
    print()


def _missing_tools() -> list[ToolStatus]:
    return [status for status in (detect_tool("fzf"), detect_tool("tree")) if not status.found]


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = [
        _itree_version_check(),
        _python_version_check(),
        _tool_check("fzf", critical=True),
        _tool_check("tree", critical=False),
        _clipboard_check(),
        _module_check("rich", critical=False),
        _module_check("questionary", critical=True),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="itree doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    guidance: list[str] = []
    for tool in _missing_tools():
        if tool.install_commands:
            guidance.append(f"{tool.name} is not installed. Install using one of:")
            guidance.extend(f"  {cmd}" for cmd in tool.install_commands)
    if find_clipboard_command() is None:
        names = ", ".join(candidate[0] for candidate in clipboard_candidates())
        guidance.append(f"No clipboard utility found. Install one of: {names}")

    if guidance:
        if rich_available:
            for line in guidance:
                console.print(line, markup=False, highlight=False)
            console.print()
        else:
            for line in guidance:
                print(line)
            print()

    if has_failure:
        if rich_available:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            print("Some checks failed.")
        return exit_codes.GENERAL_ERROR

    if rich_available:
        console.print("[bold green]All checks passed.[/bold green]")
    else:
        print("All checks passed.")
    return exit_codes.SUCCESS
