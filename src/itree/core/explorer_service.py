"""Core explorer service — drives the navigation and rendering steps.

The service depends on a :class:`~itree.core.protocols.FuzzySelector`
injected at construction time.  It holds no session state of its own:
the :class:`~itree.core.models.NavigationState` and the
:class:`~itree.core.accumulator.SelectionAccumulator` are passed in and
out explicitly.

Session state machine::

    ChooseDisplayMode -> ChooseDepth -> NavigateLoop{Scan -> Present -> Interpret}
        -> Summarize -> Render -> Deliver -> Cleanup

``ChooseDepth``, ``Deliver`` and ``Cleanup`` involve the terminal and
the scratch directory and therefore live in the CLI layer.

Guarantees
----------
* No ``print()`` — progress is reported through *status_callback*.
* Only :class:`~itree.exceptions.ItreeError` subclasses escape.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from itree.core.accumulator import SelectionAccumulator
from itree.core.models import (
    DisplayMode,
    FuzzyOutcome,
    FuzzyResult,
    NavigationState,
    RenderedTree,
    SelectionSummary,
)
from itree.core.navigator import scan
from itree.core.protocols import FuzzySelector
from itree.core.renderer import render_tree, summarize
from itree.exceptions import (
    EmptySelectionError,
    FuzzyFinderError,
    ItreeError,
    RenderFailureError,
    UnreadableDirectoryError,
    UserCancelledError,
)

logger = logging.getLogger(__name__)

MODE_PROMPT: str = "Select content type: "
MODE_HEADER: str = "Choose what to display in the tree"
NAVIGATION_HEADER: str = "Space: select, Enter: confirm, q: quit"
NAVIGATION_BINDINGS: tuple[str, ...] = (
    "space:toggle+down",
    "tab:toggle",
    "q:abort",
    "ctrl-c:abort",
)
PREVIEW_WINDOW: str = "right:50%"

StatusCallback = Callable[[str], None]
RetryPrompt = Callable[[str], bool]
ListingCallback = Callable[[Sequence[str]], None]
PreviewCommand = Callable[[Path], str]


def _ignore_status(_message: str) -> None:
    return None


class ExplorerService:
    """Stateless orchestration of the explorer steps.

    Parameters
    ----------
    selector:
        Any object satisfying the :class:`FuzzySelector` protocol.
    preview_command:
        Builds the fzf ``--preview`` command for a directory, or ``None``
        to run without a preview pane.
    """

    def __init__(
        self,
        selector: FuzzySelector,
        *,
        preview_command: PreviewCommand | None = None,
    ) -> None:
        self._selector: FuzzySelector = selector
        self._preview_command = preview_command

    # ------------------------------------------------------------------
    # ChooseDisplayMode
    # ------------------------------------------------------------------

    def choose_display_mode(self) -> DisplayMode:
        """Ask for folders-only versus folders-and-files.

        Raises
        ------
        UserCancelledError
            If the pick was aborted or came back empty.
        FuzzyFinderError
            If fzf failed.
        """
        result = self._select(
            [mode.value for mode in DisplayMode],
            multi=False,
            prompt=MODE_PROMPT,
            header=MODE_HEADER,
            height="10",
        )
        if result.outcome is FuzzyOutcome.ERROR:
            raise FuzzyFinderError(f"fzf error (exit code: {result.exit_code})")
        if not result.confirmed or not result.selected:
            raise UserCancelledError("Operation cancelled")
        return DisplayMode.from_label(result.selected[0])

    # ------------------------------------------------------------------
    # NavigateLoop
    # ------------------------------------------------------------------

    def present(self, state: NavigationState, labels: Sequence[str]) -> FuzzyResult:
        """Show *labels* in a multi-select fuzzy finder."""
        preview = None
        if self._preview_command is not None:
            preview = self._preview_command(state.current_directory)
        return self._select(
            labels,
            multi=True,
            prompt=f"Navigate ({state.relative_location}): ",
            header=NAVIGATION_HEADER,
            preview=preview,
            preview_window=PREVIEW_WINDOW,
            height="80%",
            bindings=NAVIGATION_BINDINGS,
        )

    @staticmethod
    def interpret(
        result: FuzzyResult,
        state: NavigationState,
        accumulator: SelectionAccumulator,
    ) -> int:
        """Record a confirmed selection; map cancel and error to exceptions.

        Returns the number of newly recorded paths.
        """
        if result.outcome is FuzzyOutcome.CANCELLED:
            raise UserCancelledError("Navigation cancelled")
        if result.outcome is FuzzyOutcome.ERROR:
            raise FuzzyFinderError(f"fzf error (exit code: {result.exit_code})")
        return accumulator.record(result.selected, state.current_directory, state.root_directory)

    def navigate(
        self,
        state: NavigationState,
        accumulator: SelectionAccumulator,
        *,
        confirm_retry: RetryPrompt,
        status_callback: StatusCallback | None = None,
        listing_callback: ListingCallback | None = None,
    ) -> NavigationState:
        """Run the navigation loop and return the final state.

        The loop leaves after the first confirmed selection; descending
        into a picked directory is not wired up.  Scan problems are
        handed to *confirm_retry*: ``True`` rescans, ``False`` aborts.

        Raises
        ------
        UserCancelledError
            On an fzf cancel or when the user declines to retry.
        FuzzyFinderError
            On any other fzf failure.
        """
        status = status_callback or _ignore_status

        while True:
            status(f"🔄 Scanning: {state.current_directory}")
            try:
                labels = scan(state)
            except UnreadableDirectoryError as exc:
                if confirm_retry(f"❌ {exc}"):
                    continue
                raise UserCancelledError("Navigation aborted") from exc

            if not labels:
                if confirm_retry(f"⚠️  No items found in {state.current_directory}"):
                    continue
                raise UserCancelledError("Navigation aborted")

            if listing_callback is not None:
                listing_callback(labels)

            status(f"🎯 Navigate: {state.relative_location}")
            status(f"📍 Current selections: {len(accumulator.selection)} items")
            status(f"📋 Available items: {len(labels)}")

            result = self.present(state, labels)
            self.interpret(result, state, accumulator)
            if result.selected:
                status(f"✅ Added {len(result.selected)} items to selection")
            # One step only: picked directories are recorded, never entered.
            return state

    # ------------------------------------------------------------------
    # Summarize / Render
    # ------------------------------------------------------------------

    @staticmethod
    def finish(
        state: NavigationState,
        accumulator: SelectionAccumulator,
    ) -> tuple[SelectionSummary, RenderedTree]:
        """Summarise and render the accumulated selection.

        Raises
        ------
        EmptySelectionError
            If nothing was selected.
        RenderFailureError
            If none of the selected paths could be rendered.
        """
        selection = accumulator.selection
        if not selection:
            raise EmptySelectionError("No items selected")

        summary = summarize(selection, state.root_directory)
        tree = render_tree(selection, state.root_directory, state.include_files)
        if not tree:
            raise RenderFailureError(
                "Failed to generate selective tree",
                hint="The selected entries no longer exist or are hidden by the display mode.",
            )
        return summary, tree

    # ------------------------------------------------------------------
    # Provider delegation (safe boundary)
    # ------------------------------------------------------------------

    def _select(self, items: Sequence[str], **options: object) -> FuzzyResult:
        """Call the selector and ensure only our exceptions escape."""
        try:
            return self._selector.select(items, **options)  # type: ignore[arg-type]
        except ItreeError:
            raise
        except Exception as exc:
            raise FuzzyFinderError(f"Unexpected fuzzy finder error: {exc}") from exc
