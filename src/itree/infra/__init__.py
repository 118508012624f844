"""Infrastructure layer — external program and filesystem integration.

This layer wraps every interaction with fzf, tree, the clipboard
utility, arbitrary commands and the scratch directory.  Raw
``OSError`` / ``subprocess`` failures are caught here and re-raised as
:class:`~itree.exceptions.ItreeError` subclasses.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core and CLI layers.
"""

from itree.infra.clipboard import SystemClipboard, find_clipboard_command, require_clipboard
from itree.infra.command_runner import CommandResult, run_captured
from itree.infra.fzf_selector import FzfSelector
from itree.infra.scratch import ScratchFiles
from itree.infra.tool_detector import ToolStatus, detect_tool, require_tool
from itree.infra.tree_runner import build_tree_command, run_tree

__all__: list[str] = [
    "CommandResult",
    "FzfSelector",
    "ScratchFiles",
    "SystemClipboard",
    "ToolStatus",
    "build_tree_command",
    "detect_tool",
    "find_clipboard_command",
    "require_tool",
    "run_captured",
    "require_clipboard",
    "run_tree",
]
