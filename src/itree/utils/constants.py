"""Tunable defaults shared across layers.

Centralised here so that every layer uses the same well-known values
rather than magic literals scattered across the codebase.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------

IGNORED_NAMES: frozenset[str] = frozenset(
    {"node_modules", "dist", "build", "coverage", ".git", ".DS_Store"}
)
"""Entry names never listed by the navigator (dotfiles are skipped too)."""

DEFAULT_DEPTH: int = 6
"""Depth used when the user input is empty or invalid."""

MAX_DEPTH: int = 10
"""Largest depth accepted from the user."""

PARENT_ENTRY: str = ".."

# ---------------------------------------------------------------------------
# Delivery
# ---------------------------------------------------------------------------

SAVE_PROMPT_TIMEOUT: float = 5.0
"""Seconds to wait for the "save to file?" answer before assuming no."""

SAVED_TREE_PREFIX: str = "selective_tree_"

COPY_PREVIEW_LINES: int = 10
"""Lines echoed back after ``copy-output``."""

COPY_FILE_WARN_MB: int = 10
"""Files larger than this ask for confirmation before copying."""

# ---------------------------------------------------------------------------
# Scratch files
# ---------------------------------------------------------------------------

SCRATCH_LIST_PREFIX: str = "itree_list"
SCRATCH_SELECTED_PREFIX: str = "itree_selected"

# ---------------------------------------------------------------------------
# ``get-tree``
# ---------------------------------------------------------------------------

TREE_DEFAULT_IGNORE: str = "node_modules|.git|.DS_Store|.vscode|.next"
TREE_DEFAULT_LEVEL: int = 8

# ---------------------------------------------------------------------------
# Preview
# ---------------------------------------------------------------------------

PREVIEW_DIRECTORY_LINES: int = 15
PREVIEW_FILE_LINES: int = 20

# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

DEBUG_ENV_VAR: str = "ITREE_DEBUG"
"""Set to a non-empty value other than ``0`` to enable debug logging."""
