"""Icon lookup shared by the navigator, renderer and preview.

A single table keyed by lower-case extension; anything not in the table
gets :data:`DEFAULT_FILE_ICON`.
"""

from __future__ import annotations

DIRECTORY_ICON: str = "📁"
SYMLINK_ICON: str = "🔗"
DEFAULT_FILE_ICON: str = "📄"

_CODE_ICON = "⚡"
_IMAGE_ICON = "🖼️"

EXTENSION_ICONS: dict[str, str] = {
    # code
    "js": _CODE_ICON,
    "jsx": _CODE_ICON,
    "ts": _CODE_ICON,
    "tsx": _CODE_ICON,
    # scripts
    "sh": _CODE_ICON,
    "bash": _CODE_ICON,
    "zsh": _CODE_ICON,
    "py": "🐍",
    # data / documents
    "json": "📋",
    "md": "📝",
    "markdown": "📝",
    # style
    "css": "🎨",
    "scss": "🎨",
    "sass": "🎨",
    "less": "🎨",
    # markup
    "html": "🌐",
    "htm": "🌐",
    # images
    "png": _IMAGE_ICON,
    "jpg": _IMAGE_ICON,
    "jpeg": _IMAGE_ICON,
    "gif": _IMAGE_ICON,
    "svg": _IMAGE_ICON,
    "webp": _IMAGE_ICON,
}

# Longest first so that multi-codepoint glyphs are matched whole.
_KNOWN_GLYPHS: tuple[str, ...] = tuple(
    sorted(
        {DIRECTORY_ICON, SYMLINK_ICON, DEFAULT_FILE_ICON, *EXTENSION_ICONS.values()},
        key=len,
        reverse=True,
    )
)


def extension_of(name: str) -> str | None:
    """Return the lower-case extension of *name*, or ``None``."""
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem or not ext:
        return None
    return ext.lower()


def icon_for_extension(extension: str | None) -> str:
    if extension is None:
        return DEFAULT_FILE_ICON
    return EXTENSION_ICONS.get(extension.lower(), DEFAULT_FILE_ICON)


def icon_for_name(name: str) -> str:
    """Icon for a regular file called *name*."""
    return icon_for_extension(extension_of(name))


def strip_icon(label: str) -> str:
    """Remove a leading icon glyph (and the following spaces) from *label*."""
    text = label.strip()
    for glyph in _KNOWN_GLYPHS:
        if text.startswith(glyph):
            return text[len(glyph):].lstrip()
    return text
