"""JSON exchange format for declaration trees.

Lets a declaration tree produced by another parser be rendered without
Java sources, and lets ``notes tree`` show what the Java parser saw.
"""

import json
import logging
from pathlib import Path

from source_notes.errors import SourceReadError, UnsupportedFileKindError
from source_notes.parsers.structure import SourceFile

logger = logging.getLogger(__name__)

TREE_EXTENSION = ".json"


def load_tree(file_path: str) -> SourceFile:
    """Load a declaration tree written by :func:`dump_tree`.

    Args:
        file_path: Path to the JSON file.

    Returns:
        The deserialized SourceFile.

    Raises:
        FileNotFoundError: If the file does not exist.
        SourceReadError: If the file cannot be read or decoded.
        UnsupportedFileKindError: If the file is not valid JSON or does
            not describe a source file.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"Could not read {path.name}: {e}") from e

    try:
        data = json.loads(text)
        source_file = SourceFile.from_dict(data)
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        raise UnsupportedFileKindError(
            f"Not a declaration tree: {path.name} ({e})"
        ) from e

    logger.debug("Loaded declaration tree %s (%d types)", path, len(source_file.types))
    return source_file


def dump_tree(source_file: SourceFile) -> str:
    """Serialize a declaration tree to pretty-printed JSON."""
    return json.dumps(source_file.to_dict(), ensure_ascii=False, indent=2)
