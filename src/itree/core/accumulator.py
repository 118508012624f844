"""Selection accumulator — turns picked labels into root-relative paths."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from itree.core.icons import strip_icon
from itree.core.models import SelectionSet
from itree.utils.constants import PARENT_ENTRY

logger = logging.getLogger(__name__)


class SelectionAccumulator:
    """Collects relative paths across navigation steps.

    De-duplication happens on insert, so recording the same selection
    twice leaves the set unchanged.  The root directory itself is never
    recorded.
    """

    def __init__(self) -> None:
        self._selection = SelectionSet()

    @property
    def selection(self) -> SelectionSet:
        return self._selection

    def record(
        self,
        selected_items: Iterable[str],
        current_directory: Path,
        root_directory: Path,
    ) -> int:
        """Record fuzzy-finder lines picked in *current_directory*.

        Returns the number of paths that were not already in the set.
        """
        prefix = ""
        if current_directory != root_directory:
            prefix = current_directory.relative_to(root_directory).as_posix()

        added = 0
        for item in selected_items:
            name = strip_icon(item)
            if not name or name == PARENT_ENTRY:
                continue
            relative = f"{prefix}/{name}" if prefix else name
            if self._selection.add(relative):
                added += 1
        logger.debug("recorded %d new item(s) from %s", added, current_directory)
        return added

    def dump(self, path: Path) -> None:
        """Write the sorted selection to *path*, one relative path per line."""
        lines = "".join(f"{item}\n" for item in self._selection.sorted())
        path.write_text(lines, encoding="utf-8")
