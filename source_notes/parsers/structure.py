"""Data models for representing parsed Java declaration trees.

Defines dataclasses for source files, type declarations, fields,
methods, and the raw source fragments used to rebuild field
declarations. These models form the shared vocabulary between the
parser and the note builder, and double as the JSON exchange format
for declaration trees produced by other tools.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class DeclarationKind(str, Enum):
    """Kinds of type declaration a source file may contain."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    ANNOTATION = "annotation"

    @property
    def is_renderable(self) -> bool:
        """Whether notes can be produced for this kind."""
        return self in (DeclarationKind.CLASS, DeclarationKind.INTERFACE)


@dataclass
class SourceFragment:
    """A piece of literal source text belonging to a declaration.

    Attributes:
        text: The literal source text, whitespace included.
        is_doc_comment: Whether this fragment is the declaration's
            documentation comment.
    """

    text: str
    is_doc_comment: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary.

        Returns:
            Dictionary representation of this fragment.
        """
        return {"text": self.text, "is_doc_comment": self.is_doc_comment}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SourceFragment:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with fragment fields.

        Returns:
            A new SourceFragment instance.
        """
        return cls(
            text=data["text"],
            is_doc_comment=data.get("is_doc_comment", False),
        )


@dataclass
class FieldMember:
    """Represents a parsed field declaration.

    Attributes:
        name: Field name. A declaration introducing several variables
            (``int a, b;``) joins their names with ", ".
        doc_comment: Raw Javadoc text including delimiters, if present.
        fragments: The declaration's source pieces in original order.
        line_number: Starting line number in the source file.
    """

    name: str
    doc_comment: Optional[str] = None
    fragments: list[SourceFragment] = field(default_factory=list)
    line_number: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary.

        Returns:
            Dictionary representation of this field.
        """
        return {
            "name": self.name,
            "doc_comment": self.doc_comment,
            "fragments": [f.to_dict() for f in self.fragments],
            "line_number": self.line_number,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FieldMember:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with field member fields.

        Returns:
            A new FieldMember instance.
        """
        return cls(
            name=data["name"],
            doc_comment=data.get("doc_comment"),
            fragments=[SourceFragment.from_dict(f) for f in data.get("fragments", [])],
            line_number=data.get("line_number", 0),
        )


@dataclass
class MethodMember:
    """Represents a parsed method or constructor.

    Attributes:
        name: Method name.
        doc_comment: Raw Javadoc text including delimiters, if present.
        modifiers: Modifier list text, annotations included. May be empty.
        type_parameters: Generic type parameter text such as ``<T>``.
        return_type: Return type text. None for constructors.
        parameter_list: Parameter list text including parentheses.
        throws: Throws clause text such as ``throws IOException``.
        body: Body text including braces. None for abstract and
            interface methods.
        nesting_depth: 0 for methods of a top-level type, n for methods
            of a type nested n levels deep.
        line_number: Starting line number in the source file.
    """

    name: str
    doc_comment: Optional[str] = None
    modifiers: str = ""
    type_parameters: Optional[str] = None
    return_type: Optional[str] = None
    parameter_list: str = "()"
    throws: Optional[str] = None
    body: Optional[str] = None
    nesting_depth: int = 0
    line_number: int = 0

    @property
    def is_abstract(self) -> bool:
        """Whether the method is declared without a body."""
        return self.body is None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary.

        Returns:
            Dictionary representation of this method.
        """
        return {
            "name": self.name,
            "doc_comment": self.doc_comment,
            "modifiers": self.modifiers,
            "type_parameters": self.type_parameters,
            "return_type": self.return_type,
            "parameter_list": self.parameter_list,
            "throws": self.throws,
            "body": self.body,
            "nesting_depth": self.nesting_depth,
            "line_number": self.line_number,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MethodMember:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with method member fields.

        Returns:
            A new MethodMember instance.
        """
        return cls(
            name=data["name"],
            doc_comment=data.get("doc_comment"),
            modifiers=data.get("modifiers", ""),
            type_parameters=data.get("type_parameters"),
            return_type=data.get("return_type"),
            parameter_list=data.get("parameter_list", "()"),
            throws=data.get("throws"),
            body=data.get("body"),
            nesting_depth=data.get("nesting_depth", 0),
            line_number=data.get("line_number", 0),
        )


@dataclass
class TypeDeclaration:
    """Represents a class, interface, enum, or annotation declaration.

    Attributes:
        name: Simple type name.
        kind: Declaration kind.
        doc_comment: Raw Javadoc text including delimiters, if present.
        fields: Fields in declaration order.
        methods: Methods and constructors in declaration order.
        nested_types: Member types in declaration order.
        line_number: Starting line number in the source file.
    """

    name: str
    kind: DeclarationKind = DeclarationKind.CLASS
    doc_comment: Optional[str] = None
    fields: list[FieldMember] = field(default_factory=list)
    methods: list[MethodMember] = field(default_factory=list)
    nested_types: list[TypeDeclaration] = field(default_factory=list)
    line_number: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary.

        Returns:
            Dictionary representation of this type.
        """
        return {
            "name": self.name,
            "kind": self.kind.value,
            "doc_comment": self.doc_comment,
            "fields": [f.to_dict() for f in self.fields],
            "methods": [m.to_dict() for m in self.methods],
            "nested_types": [t.to_dict() for t in self.nested_types],
            "line_number": self.line_number,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TypeDeclaration:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with type declaration fields.

        Returns:
            A new TypeDeclaration instance.
        """
        return cls(
            name=data["name"],
            kind=DeclarationKind(data.get("kind", "class")),
            doc_comment=data.get("doc_comment"),
            fields=[FieldMember.from_dict(f) for f in data.get("fields", [])],
            methods=[MethodMember.from_dict(m) for m in data.get("methods", [])],
            nested_types=[cls.from_dict(t) for t in data.get("nested_types", [])],
            line_number=data.get("line_number", 0),
        )


@dataclass
class SourceFile:
    """Represents a parsed source file.

    Attributes:
        name: File name with extension, e.g. ``Counter.java``.
        types: Top-level type declarations in declaration order.
        path: Path the file was read from, if any.
        line_count: Total number of lines in the source file.
    """

    name: str
    types: list[TypeDeclaration] = field(default_factory=list)
    path: Optional[str] = None
    line_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary.

        Returns:
            Dictionary representation of this source file.
        """
        return {
            "name": self.name,
            "types": [t.to_dict() for t in self.types],
            "path": self.path,
            "line_count": self.line_count,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SourceFile:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with source file fields.

        Returns:
            A new SourceFile instance.
        """
        return cls(
            name=data["name"],
            types=[TypeDeclaration.from_dict(t) for t in data.get("types", [])],
            path=data.get("path"),
            line_count=data.get("line_count", 0),
        )
