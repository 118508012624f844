"""itree — interactive tree explorer for the terminal.

Walks a directory with fzf, accumulates the picked entries and copies a
selective tree of them to the clipboard.
"""

from itree.version import __version__

__all__: list[str] = ["__version__"]
