"""Source reconstruction of fields and methods as fenced code blocks."""

import logging

from source_notes.parsers.structure import FieldMember, MethodMember

logger = logging.getLogger(__name__)

FENCE = "```"


class CodeBlockRenderer:
    """Rebuilds declaration text for fields and methods.

    Field blocks reproduce the original source fragments verbatim, minus
    the Javadoc. Method blocks are synthesized from the method's parts
    and indented one unit per nesting level, plus one.
    """

    def __init__(self, language: str = "java", indent: str = "\t") -> None:
        """Initialize the renderer.

        Args:
            language: Language tag written after the opening fence.
            indent: Indentation unit prefixed to method declarations.
        """
        self.language = language
        self.indent = indent

    @property
    def fence_open(self) -> str:
        """The opening fence line, without a trailing newline."""
        return f"{FENCE}{self.language}"

    def render_field(self, field: FieldMember) -> str:
        """Render a field declaration as a fenced code block.

        Fragments are concatenated in source order. Right after the
        opening fence, a fragment that does not start on a new line gets
        one inserted so code never shares the fence line. Empty fragments
        are ignored.

        Args:
            field: The field to render.

        Returns:
            The fenced block, ending in a newline.
        """
        parts = [self.fence_open]
        at_fence_open = True

        for fragment in field.fragments:
            if fragment.is_doc_comment or not fragment.text:
                continue
            if at_fence_open and not fragment.text.startswith("\n"):
                parts.append("\n")
            parts.append(fragment.text)
            at_fence_open = False

        parts.append(f"\n{FENCE}\n")
        return "".join(parts)

    def render_method(self, method: MethodMember) -> str:
        """Render a method declaration as a fenced code block.

        Args:
            method: The method to render.

        Returns:
            The fenced block, ending in a newline.
        """
        indentation = self.indent * (method.nesting_depth + 1)
        return (
            f"{self.fence_open}\n"
            f"{indentation}{self.declaration_line(method)}"
            f"\n{FENCE}\n"
        )

    def declaration_line(self, method: MethodMember) -> str:
        """Build the single-line declaration of a method.

        Abstract and interface methods end with ``;`` instead of a body.

        Args:
            method: The method to describe.

        Returns:
            Declaration text such as ``public int get() { return x; }``.
        """
        signature = f"{method.name}{method.parameter_list}"
        if method.throws:
            signature += f" {method.throws}"

        head = " ".join(
            part
            for part in (
                method.modifiers,
                method.type_parameters,
                method.return_type,
                signature,
            )
            if part
        )
        if method.body is None:
            return f"{head};"
        return f"{head} {method.body}"
