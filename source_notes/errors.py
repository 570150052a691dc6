"""Exception hierarchy for loading, rendering, and saving reading notes.

Every recoverable condition raised by the parser, the note builder, or
the writer derives from :class:`SourceNotesError`, so the export
boundary can report all of them to the user with a single handler.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "SourceNotesError",
    "UnsupportedFileKindError",
    "SourceReadError",
    "TemplateRenderError",
    "UnsupportedDeclarationKindError",
    "UnresolvableDeclarationError",
    "WriteFailureError",
    "OutputDirectoryError",
]


class SourceNotesError(RuntimeError):
    """Base exception for note export failures."""


class UnsupportedFileKindError(SourceNotesError):
    """Raised when the input is not a Java source file or declaration tree."""


class SourceReadError(SourceNotesError):
    """Raised when an input file exists but cannot be read or decoded."""


class TemplateRenderError(SourceNotesError):
    """Raised when a note template is missing or fails to render."""


class UnsupportedDeclarationKindError(SourceNotesError):
    """Raised when a type is an enum or annotation, which have no note layout."""

    def __init__(self, name: str, kind: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Not a class or interface: {name} ({kind})")
        self.name = name
        self.kind = kind


class UnresolvableDeclarationError(SourceNotesError):
    """Raised when a source file yields no type declarations."""


class WriteFailureError(SourceNotesError):
    """Raised when a note cannot be written to its destination."""


class OutputDirectoryError(WriteFailureError):
    """Raised when no usable default output directory can be found."""
