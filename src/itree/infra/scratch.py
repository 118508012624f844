"""Process-scoped scratch files for an explorer session.

Two files are kept: the current listing and the selection dump.  Names
carry the process id, so concurrent sessions never collide and no
locking is needed.  Both files are removed when the context exits,
whichever way it exits.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path
from types import TracebackType

from itree.exceptions import ItreeError
from itree.utils.constants import SCRATCH_LIST_PREFIX, SCRATCH_SELECTED_PREFIX

logger = logging.getLogger(__name__)


def _touch_first(candidates: Sequence[Path]) -> Path:
    for candidate in candidates:
        try:
            candidate.touch()
        except OSError as exc:
            logger.debug("cannot create scratch file %s: %s", candidate, exc)
            continue
        return candidate
    raise ItreeError(
        "Failed to create a scratch file anywhere",
        hint="Check that the temp directory or the working directory is writable.",
    )


class ScratchFiles:
    """Context manager owning the listing and selection scratch files.

    Usage::

        with ScratchFiles() as scratch:
            scratch.write_listing(labels)
            accumulator.dump(scratch.selection)
    """

    def __init__(
        self,
        *,
        pid: int | None = None,
        temp_dir: Path | None = None,
        fallback_dir: Path | None = None,
    ) -> None:
        self._pid = os.getpid() if pid is None else pid
        self._temp_dir = Path(tempfile.gettempdir()) if temp_dir is None else temp_dir
        self._fallback_dir = Path.cwd() if fallback_dir is None else fallback_dir
        self._listing: Path | None = None
        self._selection: Path | None = None

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> ScratchFiles:
        self.create()
        return self

    def __exit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc: BaseException | None,
        _tb: TracebackType | None,
    ) -> None:
        self.cleanup()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _candidates(self, prefix: str) -> list[Path]:
        name = f"{prefix}_{self._pid}.txt"
        return [self._temp_dir / name, self._fallback_dir / name]

    def create(self) -> None:
        self._listing = _touch_first(self._candidates(SCRATCH_LIST_PREFIX))
        try:
            selection = self._candidates(SCRATCH_SELECTED_PREFIX)
            for stale in selection:
                stale.unlink(missing_ok=True)
            self._selection = _touch_first(selection)
        except BaseException:
            self.cleanup()
            raise

    def cleanup(self) -> None:
        """Remove both files (idempotent)."""
        for path in (self._listing, self._selection):
            if path is None:
                continue
            try:
                path.unlink(missing_ok=True)
            except OSError as exc:
                logger.warning("could not remove scratch file %s: %s", path, exc)
        self._listing = None
        self._selection = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def listing(self) -> Path:
        if self._listing is None:
            raise RuntimeError("scratch files are not active")
        return self._listing

    @property
    def selection(self) -> Path:
        if self._selection is None:
            raise RuntimeError("scratch files are not active")
        return self._selection

    @property
    def paths(self) -> tuple[Path, ...]:
        return tuple(path for path in (self._listing, self._selection) if path is not None)

    def write_listing(self, labels: Sequence[str]) -> None:
        self.listing.write_text("".join(f"{label}\n" for label in labels), encoding="utf-8")
