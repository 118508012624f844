"""The interactive tree explorer (``itree`` / ``itree explore``).

Runs the session state machine end to end::

    ChooseDisplayMode -> ChooseDepth -> NavigateLoop -> Summarize
        -> Render -> Deliver -> Cleanup

The navigation and rendering steps are delegated to
:class:`~itree.core.explorer_service.ExplorerService`; this module owns
the terminal side (prompts, Rich output) and the scratch files, which
are removed on every exit path.
"""

from __future__ import annotations

import shlex
import sys
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from itree.cli import exit_codes
from itree.cli.console import console, err_console
from itree.core.models import NavigationState, RenderedTree, SelectionSummary
from itree.core.protocols import ClipboardWriter
from itree.exceptions import EmptySelectionError, ItreeError, UserCancelledError
from itree.utils.constants import SAVE_PROMPT_TIMEOUT, SAVED_TREE_PREFIX

RULE_WIDTH: int = 60


def preview_command(directory: Path) -> str:
    """fzf ``--preview`` command that calls back into ``itree preview``."""
    return f"{shlex.quote(sys.executable)} -m itree preview {{}} {shlex.quote(str(directory))}"


# ---------------------------------------------------------------------------
# Presentation helpers
# ---------------------------------------------------------------------------

def _show_summary(summary: SelectionSummary) -> None:
    console.plain("")
    console.print("[bold]🎯 Selection Summary:[/bold]")
    console.plain(f"  📁 Directories: {summary.directories}")
    console.plain(f"  📄 Files: {summary.files}")
    console.plain(f"  📊 Total: {summary.total} items")


def _show_tree(tree: RenderedTree) -> None:
    console.plain("")
    console.print("[bold]📋 Selective Tree Structure:[/bold]")
    console.plain("═" * RULE_WIDTH)
    console.plain(tree.text)
    console.plain("═" * RULE_WIDTH)


def _deliver(
    tree: RenderedTree,
    state: NavigationState,
    clipboard: ClipboardWriter,
    generated_at: datetime,
) -> None:
    """Copy the tree to the clipboard and optionally save it to a file."""
    from itree.cli.prompts import confirm_with_timeout
    from itree.core.renderer import clipboard_payload, saved_tree_filename, text_stats

    payload = clipboard_payload(tree, state.root_directory, generated_at)
    clipboard.copy(payload)
    console.print("[green]✅ Selective tree copied to clipboard with metadata![/green]")

    stats = text_stats(tree.text)
    console.plain(
        f"📊 Output Stats: {stats.lines} lines, {stats.words} words, "
        f"{stats.characters} characters"
    )

    console.plain("")
    if not confirm_with_timeout("💾 Save tree to file?", timeout=SAVE_PROMPT_TIMEOUT):
        return

    target = Path.cwd() / saved_tree_filename(SAVED_TREE_PREFIX, generated_at)
    try:
        target.write_text(payload, encoding="utf-8")
    except OSError as exc:
        raise ItreeError(f"Could not save tree to {target}: {exc}") from exc
    console.plain(f"✅ Tree saved to: {target.name}")


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_explorer(
    root: Path | None = None,
    *,
    clock: Callable[[], datetime] = datetime.now,
) -> int:
    """Run one explorer session rooted at *root* (default: the cwd).

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` after delivery,
        :data:`exit_codes.GENERAL_ERROR` when the user cancelled or
        selected nothing.

    Raises
    ------
    MissingDependencyError
        If fzf or a clipboard utility is not installed.
    RenderFailureError, ClipboardError, FuzzyFinderError
        For failures after navigation; scratch files are still removed.
    """
    from itree.cli.prompts import ask_depth, confirm_retry
    from itree.core.accumulator import SelectionAccumulator
    from itree.core.depth import parse_depth
    from itree.core.explorer_service import ExplorerService
    from itree.infra.clipboard import require_clipboard
    from itree.infra.fzf_selector import FzfSelector
    from itree.infra.scratch import ScratchFiles
    from itree.infra.tool_detector import require_tool

    root_directory = (root if root is not None else Path.cwd()).absolute()

    require_tool("fzf", purpose="the interactive tree")
    clipboard = require_clipboard()
    service = ExplorerService(FzfSelector(), preview_command=preview_command)

    console.print("[bold]🌲 Interactive Tree Explorer[/bold]")
    console.plain(f"📁 Current directory: {root_directory}")
    console.plain("")

    try:
        mode = service.choose_display_mode()
        console.print(f"[green]✅ Selected: {mode.description}[/green]")

        console.plain("")
        depth = parse_depth(ask_depth())
        console.print(f"[green]✅ Using depth: {depth}[/green]")

        state = NavigationState.start(
            root_directory,
            include_files=mode.include_files,
            max_depth=depth,
        )

        console.plain("")
        console.plain("🔄 Starting interactive navigation...")
        with ScratchFiles() as scratch:
            accumulator = SelectionAccumulator()
            state = service.navigate(
                state,
                accumulator,
                confirm_retry=confirm_retry,
                status_callback=console.plain,
                listing_callback=scratch.write_listing,
            )
            accumulator.dump(scratch.selection)

            summary, tree = service.finish(state, accumulator)
            _show_summary(summary)

            console.plain("")
            console.plain("🌲 Generating selective tree...")
            _show_tree(tree)
            _deliver(tree, state, clipboard, clock())
    except UserCancelledError as exc:
        err_console.print(f"[yellow]❌ {exc}[/yellow]")
        return exit_codes.GENERAL_ERROR
    except EmptySelectionError as exc:
        err_console.print(f"[yellow]⚠️  {exc}[/yellow]")
        return exit_codes.GENERAL_ERROR

    return exit_codes.SUCCESS
