"""Output location helpers: the default Desktop directory and note file names."""

import logging
import platform
from pathlib import Path
from typing import Optional

from source_notes.errors import OutputDirectoryError

logger = logging.getLogger(__name__)

_DESKTOP_PLATFORMS = ("Windows", "Darwin", "Linux")


def default_output_dir(
    home: Optional[Path] = None,
    system: Optional[str] = None,
) -> Path:
    """Resolve the user's Desktop directory.

    Args:
        home: Home directory override. Defaults to ``Path.home()``.
        system: Platform name override as reported by
            ``platform.system()``.

    Returns:
        Path to an existing Desktop directory.

    Raises:
        OutputDirectoryError: If the platform is not Windows, macOS, or
            Linux, or the Desktop directory does not exist.
    """
    system = system or platform.system()
    if system not in _DESKTOP_PLATFORMS:
        raise OutputDirectoryError(f"Unsupported operating system: {system}")

    desktop = (home or Path.home()) / "Desktop"
    if not desktop.is_dir():
        raise OutputDirectoryError(f"Desktop directory not found: {desktop}")

    logger.debug("Using Desktop output directory %s", desktop)
    return desktop


def resolve_output_dir(*candidates: Optional[str]) -> Path:
    """Pick the first configured output directory, else the Desktop.

    Args:
        *candidates: Directory paths in priority order; None entries are
            skipped.

    Returns:
        The chosen output directory.
    """
    for candidate in candidates:
        if candidate:
            return Path(candidate).expanduser()
    return default_output_dir()


def note_file_name(source_name: str, suffix: str = "源码笔记.md") -> str:
    """Derive a note's file name, e.g. ``Counter.java源码笔记.md``."""
    return f"{source_name}{suffix}"
