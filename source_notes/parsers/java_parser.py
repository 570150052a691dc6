"""Java parser using tree-sitter.

Extracts type declarations, fields, methods, constructors, nested
types, and Javadoc comments from Java source files into the shared
declaration-tree models.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

import tree_sitter
import tree_sitter_java as tsjava

from source_notes.errors import SourceReadError, UnsupportedFileKindError
from source_notes.parsers.structure import (
    DeclarationKind,
    FieldMember,
    MethodMember,
    SourceFile,
    SourceFragment,
    TypeDeclaration,
)

logger = logging.getLogger(__name__)

_JAVA_LANGUAGE = tree_sitter.Language(tsjava.language())

_TYPE_KINDS = {
    "class_declaration": DeclarationKind.CLASS,
    "record_declaration": DeclarationKind.CLASS,
    "interface_declaration": DeclarationKind.INTERFACE,
    "enum_declaration": DeclarationKind.ENUM,
    "annotation_type_declaration": DeclarationKind.ANNOTATION,
}
_FIELD_TYPES = {"field_declaration", "constant_declaration"}
_METHOD_TYPES = {"method_declaration", "constructor_declaration"}
# Older grammar releases emit a single "comment" node type.
_COMMENT_TYPES = {"block_comment", "comment"}


class JavaParser:
    """Parses Java source files using tree-sitter.

    Only class, interface, and record bodies are walked for members;
    enums and annotations are recorded by name and kind alone.
    """

    def __init__(
        self,
        extensions: Sequence[str] = (".java",),
        encoding: str = "utf-8",
    ) -> None:
        """Initialize the parser.

        Args:
            extensions: File extensions accepted by ``parse_file``.
            encoding: Encoding used to read source files.
        """
        self.extensions = tuple(ext.lower() for ext in extensions)
        self.encoding = encoding
        self._parser = tree_sitter.Parser(_JAVA_LANGUAGE)

    def is_supported(self, file_path: str) -> bool:
        """Check whether a path has a Java source extension."""
        return Path(file_path).suffix.lower() in self.extensions

    def parse_file(self, file_path: str) -> SourceFile:
        """Parse a Java file and extract its declaration tree.

        Args:
            file_path: Path to the Java file to parse.

        Returns:
            A SourceFile describing the file's types.

        Raises:
            UnsupportedFileKindError: If the file is not a Java source file.
            FileNotFoundError: If the file does not exist.
            SourceReadError: If the file cannot be read or decoded.
        """
        path = Path(file_path)
        if not self.is_supported(file_path):
            raise UnsupportedFileKindError(f"Not a valid Java file: {path.name}")
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            source = path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError, LookupError) as e:
            raise SourceReadError(f"Could not read {path.name}: {e}") from e
        source_file = self.parse_source(source, path.name)
        source_file.path = str(path)
        return source_file

    def parse_source(self, source: str, file_name: str = "<string>.java") -> SourceFile:
        """Parse Java source code and extract its declaration tree.

        Args:
            source: Java source code.
            file_name: Name recorded on the resulting SourceFile.

        Returns:
            A SourceFile describing the source's types.
        """
        source = source.replace("\r\n", "\n")
        source_bytes = source.encode("utf-8")
        tree = self._parser.parse(source_bytes)
        root = tree.root_node

        if root.has_error:
            logger.warning("%s contains syntax errors; notes may be incomplete", file_name)

        source_file = SourceFile(name=file_name, line_count=len(source.splitlines()))
        for child in root.children:
            if child.type in _TYPE_KINDS:
                source_file.types.append(self._extract_type(child, source_bytes, 0))

        logger.debug(
            "Parsed %s: %d top-level types",
            file_name,
            len(source_file.types),
        )
        return source_file

    def _extract_type(
        self,
        node: tree_sitter.Node,
        source_bytes: bytes,
        depth: int,
    ) -> TypeDeclaration:
        """Extract a type declaration and, for classes and interfaces, its members.

        Args:
            node: A class, interface, record, enum, or annotation node.
            source_bytes: Source as bytes.
            depth: Nesting depth of this type; 0 for top-level types.

        Returns:
            The extracted TypeDeclaration.
        """
        name_node = node.child_by_field_name("name")
        decl = TypeDeclaration(
            name=self._node_text(name_node, source_bytes) if name_node else "",
            kind=_TYPE_KINDS[node.type],
            doc_comment=self._doc_comment_text(node, source_bytes),
            line_number=node.start_point.row + 1,
        )

        body = node.child_by_field_name("body")
        if body is None or not decl.kind.is_renderable:
            return decl

        for child in body.children:
            if child.type in _FIELD_TYPES:
                decl.fields.append(self._extract_field(child, source_bytes))
            elif child.type in _METHOD_TYPES:
                decl.methods.append(self._extract_method(child, source_bytes, depth))
            elif child.type in _TYPE_KINDS:
                decl.nested_types.append(
                    self._extract_type(child, source_bytes, depth + 1)
                )
        return decl

    def _extract_field(self, node: tree_sitter.Node, source_bytes: bytes) -> FieldMember:
        """Extract a field declaration with its source fragments.

        Fragments mirror the declaration's children, with the whitespace
        between them kept as fragments of their own. When a Javadoc
        precedes the field it leads the sequence, followed by the
        whitespace that separates it from the declaration, if any. No
        fragment is ever empty.

        Args:
            node: A field_declaration or constant_declaration node.
            source_bytes: Source as bytes.

        Returns:
            The extracted FieldMember.
        """
        names = []
        for declarator in node.children_by_field_name("declarator"):
            name_node = declarator.child_by_field_name("name")
            if name_node:
                names.append(self._node_text(name_node, source_bytes))

        fragments: list[SourceFragment] = []
        doc_node = self._doc_comment_node(node, source_bytes)
        if doc_node is not None:
            fragments.append(
                SourceFragment(self._node_text(doc_node, source_bytes), is_doc_comment=True)
            )
            if doc_node.end_byte < node.start_byte:
                fragments.append(
                    SourceFragment(
                        self._slice(source_bytes, doc_node.end_byte, node.start_byte)
                    )
                )

        cursor = node.start_byte
        for child in node.children:
            if child.start_byte > cursor:
                fragments.append(
                    SourceFragment(self._slice(source_bytes, cursor, child.start_byte))
                )
            if child.end_byte > child.start_byte:
                fragments.append(SourceFragment(self._node_text(child, source_bytes)))
            cursor = child.end_byte

        return FieldMember(
            name=", ".join(names),
            doc_comment=self._node_text(doc_node, source_bytes) if doc_node else None,
            fragments=fragments,
            line_number=node.start_point.row + 1,
        )

    def _extract_method(
        self,
        node: tree_sitter.Node,
        source_bytes: bytes,
        depth: int,
    ) -> MethodMember:
        """Extract a method or constructor declaration.

        Args:
            node: A method_declaration or constructor_declaration node.
            source_bytes: Source as bytes.
            depth: Nesting depth of the declaring type.

        Returns:
            The extracted MethodMember.
        """
        modifiers = ""
        throws = None
        for child in node.children:
            if child.type == "modifiers":
                modifiers = self._node_text(child, source_bytes)
            elif child.type == "throws":
                throws = self._node_text(child, source_bytes)

        name_node = node.child_by_field_name("name")
        params_node = node.child_by_field_name("parameters")

        return MethodMember(
            name=self._node_text(name_node, source_bytes) if name_node else "",
            doc_comment=self._doc_comment_text(node, source_bytes),
            modifiers=modifiers,
            type_parameters=self._field_text(node, "type_parameters", source_bytes),
            return_type=self._field_text(node, "type", source_bytes),
            parameter_list=(
                self._node_text(params_node, source_bytes) if params_node else "()"
            ),
            throws=throws,
            body=self._field_text(node, "body", source_bytes),
            nesting_depth=depth,
            line_number=node.start_point.row + 1,
        )

    def _doc_comment_node(
        self, node: tree_sitter.Node, source_bytes: bytes
    ) -> Optional[tree_sitter.Node]:
        """Find the Javadoc comment directly preceding a declaration.

        Args:
            node: The declaration node.
            source_bytes: Source as bytes.

        Returns:
            The ``/** ... */`` comment node, or None.
        """
        prev = node.prev_sibling
        if prev is not None and prev.type in _COMMENT_TYPES:
            if self._node_text(prev, source_bytes).startswith("/**"):
                return prev
        return None

    def _doc_comment_text(
        self, node: tree_sitter.Node, source_bytes: bytes
    ) -> Optional[str]:
        doc_node = self._doc_comment_node(node, source_bytes)
        return self._node_text(doc_node, source_bytes) if doc_node else None

    def _field_text(
        self, node: tree_sitter.Node, field_name: str, source_bytes: bytes
    ) -> Optional[str]:
        child = node.child_by_field_name(field_name)
        return self._node_text(child, source_bytes) if child else None

    def _node_text(self, node: tree_sitter.Node, source_bytes: bytes) -> str:
        """Extract the text content of a tree-sitter node.

        Args:
            node: A tree-sitter Node.
            source_bytes: Source as bytes.

        Returns:
            The text content of the node.
        """
        return self._slice(source_bytes, node.start_byte, node.end_byte)

    @staticmethod
    def _slice(source_bytes: bytes, start: int, end: int) -> str:
        return source_bytes[start:end].decode("utf-8")
