"""Atomic persistence of rendered notes."""

import logging
import os
from pathlib import Path

from source_notes.errors import WriteFailureError

logger = logging.getLogger(__name__)


def write_note(content: str, destination: Path) -> Path:
    """Write a note to disk without ever leaving a partial file.

    The content goes to a temporary sibling file first, is flushed and
    fsynced, then renamed over the destination.

    Args:
        content: The Markdown text.
        destination: Final path of the note.

    Returns:
        The destination path.

    Raises:
        WriteFailureError: If the directory cannot be created or the
            file cannot be written or renamed.
    """
    destination = Path(destination)
    tmp = destination.with_name(destination.name + f".tmp-{os.getpid()}")

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, destination)
    except OSError as e:
        if tmp.exists():
            tmp.unlink()
        raise WriteFailureError(f"Could not write {destination}: {e}") from e

    logger.info("Wrote note: %s (%d chars)", destination, len(content))
    return destination
