"""Allow ``python -m itree`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m itree`` behaves identically to the ``itree`` console script.
The fzf preview command relies on this form.
"""

from __future__ import annotations

from itree.cli.app import cli

if __name__ == "__main__":
    cli()
