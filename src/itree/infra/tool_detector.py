"""Infrastructure: external program detection and platform guidance.

Locates the programs itree shells out to (fzf, tree, the clipboard
utility) on the system PATH and provides platform-specific installation
guidance when one is missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from itree.exceptions import MissingDependencyError


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of a PATH probe for one program.

    Attributes
    ----------
    name : str
        Program name that was looked up.
    found : bool
        Whether the program was located on PATH.
    path : Path | None
        Absolute path to the binary, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing the program on the
        current platform.  Empty when it is already present.
    """

    name: str
    found: bool
    path: Path | None
    install_commands: tuple[str, ...]

    @property
    def version_hint(self) -> str:
        if self.found and self.path is not None:
            return f"found at {self.path}"
        return "not found"


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_tool(name: str) -> ToolStatus:
    """Probe the system for *name*.

    Returns a :class:`ToolStatus` regardless of whether the program is
    present — the caller decides whether to abort or merely warn.
    """
    result = shutil.which(name)
    if result is not None:
        return ToolStatus(
            name=name,
            found=True,
            path=Path(result).resolve(),
            install_commands=(),
        )
    return ToolStatus(
        name=name,
        found=False,
        path=None,
        install_commands=platform_install_commands(name),
    )


def require_tool(name: str, *, purpose: str | None = None) -> Path:
    """Locate *name* or raise :class:`MissingDependencyError`."""
    status = detect_tool(name)
    if not status.found or status.path is None:
        hint_lines: list[str] = []
        if status.install_commands:
            hint_lines.append(f"Install {name} using one of:")
            hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
        reason = f" for {purpose}" if purpose else ""
        raise MissingDependencyError(
            f"{name} is required{reason} but was not found on PATH.",
            hint="\n".join(hint_lines) if hint_lines else None,
        )
    return status.path


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

_CLIPBOARD_PACKAGES: dict[str, str] = {
    "wl-copy": "wl-clipboard",
    "xclip": "xclip",
    "xsel": "xsel",
}


def platform_install_commands(name: str) -> tuple[str, ...]:
    """Return install commands for *name* appropriate for the current OS."""
    system = platform.system().lower()
    package = _CLIPBOARD_PACKAGES.get(name, name)
    if system == "windows":
        if name == "clip":
            return ()
        return (
            f"winget install {package}",
            f"choco install {package}",
            f"scoop install {package}",
        )
    if system == "linux":
        return (
            f"sudo apt install {package}",
            f"sudo dnf install {package}",
            f"sudo pacman -S {package}",
        )
    if system == "darwin":
        if name == "pbcopy":
            return ()
        return (f"brew install {package}",)
    return (f"Please install {package} with your system package manager",)
