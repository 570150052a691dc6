"""Export boundary: load a declaration tree, render the note, save it.

Every recoverable failure is reported through the notifier and turned
into a ``None`` result, so a failed export never crashes the caller.
"""

import logging
from pathlib import Path
from typing import Optional

from source_notes.errors import SourceNotesError, UnsupportedFileKindError
from source_notes.output.markdown import DocumentBuilder
from source_notes.output.writer import write_note
from source_notes.parsers.java_parser import JavaParser
from source_notes.parsers.structure import SourceFile
from source_notes.parsers.tree_json import TREE_EXTENSION, load_tree
from source_notes.utils.config import AppConfig
from source_notes.utils.notifier import LoggingNotifier, Notifier
from source_notes.utils.paths import note_file_name, resolve_output_dir

logger = logging.getLogger(__name__)


class NoteExporter:
    """Turns a Java file or JSON declaration tree into a saved reading note."""

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        notifier: Optional[Notifier] = None,
        output_dir: Optional[str] = None,
    ) -> None:
        """Initialize the exporter.

        Args:
            config: Application configuration. Uses defaults if None.
            notifier: Channel for user-facing messages.
            output_dir: Output directory overriding the configured one.
        """
        self.config = config or AppConfig()
        self.notifier = notifier or LoggingNotifier()
        self.output_dir = output_dir
        self.parser = JavaParser(
            extensions=self.config.parser.extensions,
            encoding=self.config.parser.encoding,
        )
        self.builder = DocumentBuilder(
            config=self.config.document,
            notifier=self.notifier,
        )

    def load(self, file_path: str) -> SourceFile:
        """Load a declaration tree from a Java file or a JSON tree file.

        Raises:
            UnsupportedFileKindError: If the file is neither.
            FileNotFoundError: If the file does not exist.
        """
        if Path(file_path).suffix.lower() == TREE_EXTENSION:
            return load_tree(file_path)
        if self.parser.is_supported(file_path):
            return self.parser.parse_file(file_path)
        raise UnsupportedFileKindError(f"Not a valid Java file: {Path(file_path).name}")

    def render(self, file_path: str) -> str:
        """Load a file and render its note without saving it.

        Raises:
            SourceNotesError: On unsupported or unresolvable input.
            FileNotFoundError: If the file does not exist.
        """
        source_file = self.load(file_path)
        return self.builder.render(source_file).getvalue()

    def export(self, file_path: str) -> Optional[Path]:
        """Render a file's note and write it to the output directory.

        Args:
            file_path: Java source file or JSON declaration tree.

        Returns:
            Path of the written note, or None if the export failed. The
            failure has already been reported through the notifier.
        """
        try:
            source_file = self.load(file_path)
            sink = self.builder.render(source_file)
            out_dir = resolve_output_dir(self.output_dir, self.config.output.output_dir)
            destination = out_dir / note_file_name(
                source_file.name, self.config.output.file_suffix
            )
            write_note(sink.getvalue(), destination)
        except (SourceNotesError, FileNotFoundError) as e:
            logger.warning("Export of %s failed: %s", file_path, e)
            self.notifier.error(str(e))
            return None

        self.notifier.info(f"输出到：{out_dir}")
        return destination
