"""Markdown reading-note generation.

Walks a parsed declaration tree and builds the note: a title, a
preface placeholder, one section per class or interface (nested types
included), and a summary placeholder. Each type section lists its
fields and methods with their Javadoc text and reconstructed source.
"""

import logging
from typing import Iterator, Optional

from source_notes.errors import (
    UnresolvableDeclarationError,
    UnsupportedDeclarationKindError,
)
from source_notes.generators.code_blocks import CodeBlockRenderer
from source_notes.generators.comments import extract_comment
from source_notes.generators.template_manager import TemplateManager
from source_notes.parsers.structure import (
    DeclarationKind,
    FieldMember,
    MethodMember,
    SourceFile,
    TypeDeclaration,
)
from source_notes.utils.config import DocumentConfig
from source_notes.utils.notifier import LoggingNotifier, Notifier

logger = logging.getLogger(__name__)

KIND_SUFFIXES = {
    DeclarationKind.CLASS: "类",
    DeclarationKind.INTERFACE: "接口",
}
FIELDS_HEADING = "属性"
METHODS_HEADING = "方法"


class MarkdownSink:
    """Append-only sequence of Markdown text segments.

    Segments are kept in the order they were appended and are never
    reordered or removed. Once frozen, the sink rejects further appends.
    """

    def __init__(self) -> None:
        self._segments: list[str] = []
        self._frozen = False

    def append(self, segment: str) -> None:
        """Append a segment; empty segments are ignored.

        Raises:
            ValueError: If the sink has been frozen.
        """
        if self._frozen:
            raise ValueError("Cannot append to a frozen MarkdownSink")
        if segment:
            self._segments.append(segment)

    def freeze(self) -> None:
        """Mark the document as complete."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self._segments)

    def getvalue(self) -> str:
        """Return the whole document as one string."""
        return "".join(self._segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)


class DocumentBuilder:
    """Builds a reading note from a declaration tree.

    Headings are fixed per entity: H1 for the file, H2 for every class or
    interface (nested ones included, so headings never go deeper than
    H4), H3 for the fields and methods sections, H4 for each member.
    """

    def __init__(
        self,
        config: Optional[DocumentConfig] = None,
        templates: Optional[TemplateManager] = None,
        notifier: Optional[Notifier] = None,
    ) -> None:
        """Initialize the builder.

        Args:
            config: Document layout settings. Uses defaults if None.
            templates: Template manager for the title, preface, and
                summary. Built from ``config`` if None.
            notifier: Receives notices about skipped declarations.
                Defaults to a logging-only notifier.
        """
        self.config = config or DocumentConfig()
        self.templates = templates or TemplateManager(
            templates_dir=self.config.templates_dir,
            title_prefix=self.config.title_prefix,
        )
        self.notifier = notifier or LoggingNotifier()
        self.code_blocks = CodeBlockRenderer(
            language=self.config.code_language,
            indent=self.config.indent,
        )

    def render(self, source_file: SourceFile) -> MarkdownSink:
        """Render the complete note for a source file.

        The first top-level type decides whether the file can be
        rendered at all; other enum or annotation types are skipped with
        a notice.

        Args:
            source_file: The parsed declaration tree.

        Returns:
            A frozen MarkdownSink holding the note.

        Raises:
            UnresolvableDeclarationError: If the file has no types.
            UnsupportedDeclarationKindError: If the first type is an
                enum or an annotation.
        """
        if not source_file.types:
            raise UnresolvableDeclarationError(
                f"Can't resolve this java file: {source_file.name}"
            )

        primary = source_file.types[0]
        if not primary.kind.is_renderable:
            raise UnsupportedDeclarationKindError(primary.name, primary.kind.value)

        sink = MarkdownSink()
        sink.append(self.templates.render_title(source_file))
        sink.append(self.templates.render_preface(source_file))
        for decl in source_file.types:
            self._append_type(decl, sink)
        sink.append(self.templates.render_summary(source_file))
        sink.freeze()

        logger.debug(
            "Rendered %s: %d types, %d segments",
            source_file.name,
            len(source_file.types),
            len(sink),
        )
        return sink

    def render_type(self, decl: TypeDeclaration) -> str:
        """Render a type section, including its nested types.

        Args:
            decl: The type to render.

        Returns:
            Markdown text for the type.

        Raises:
            UnsupportedDeclarationKindError: If ``decl`` is an enum or an
                annotation.
        """
        sink = MarkdownSink()
        self._append_type(decl, sink, strict=True)
        return sink.getvalue()

    def _append_type(
        self,
        decl: TypeDeclaration,
        sink: MarkdownSink,
        strict: bool = False,
    ) -> None:
        if not decl.kind.is_renderable:
            error = UnsupportedDeclarationKindError(decl.name, decl.kind.value)
            if strict:
                raise error
            self.notifier.info(f"Skipped {decl.name}: {error}")
            return

        sink.append(f"## {decl.name} {KIND_SUFFIXES[decl.kind]}\n")
        sink.append(extract_comment(decl.doc_comment))

        if decl.fields:
            sink.append(f"### {FIELDS_HEADING}\n")
        for field in decl.fields:
            sink.append(self.render_field(field))

        if decl.methods:
            sink.append(f"### {METHODS_HEADING}\n")
        for method in decl.methods:
            sink.append(self.render_method(method))

        for nested in decl.nested_types:
            self._append_type(nested, sink)

    def render_field(self, field: FieldMember) -> str:
        """Render one field: heading, comment, and source block."""
        return (
            f"#### {field.name}\n"
            f"{extract_comment(field.doc_comment)}\n"
            f"{self.code_blocks.render_field(field)}"
        )

    def render_method(self, method: MethodMember) -> str:
        """Render one method: heading, comment if any, and source block."""
        comment = ""
        if method.doc_comment is not None:
            comment = extract_comment(method.doc_comment) + "\n"
        return (
            f"#### {method.name}\n"
            f"{comment}"
            f"{self.code_blocks.render_method(method)}"
        )
