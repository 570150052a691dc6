"""Template manager for the fixed parts of a reading note.

Renders the note title, the preface placeholder, and the summary
placeholder from Jinja2 templates so users can swap in their own
wording without touching the builder.
"""

import logging
from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader, TemplateError

from source_notes.errors import TemplateRenderError
from source_notes.parsers.structure import SourceFile

logger = logging.getLogger(__name__)

_DEFAULT_TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

DEFAULT_TITLE_PREFIX = "【在此处输入标题】："


class TemplateManager:
    """Loads and renders the Jinja2 templates that frame each note."""

    def __init__(
        self,
        templates_dir: Optional[str] = None,
        title_prefix: str = DEFAULT_TITLE_PREFIX,
    ) -> None:
        """Initialize the template manager.

        Args:
            templates_dir: Path to the templates directory. Uses the
                packaged templates if not specified.
            title_prefix: Text placed before the file name in the title.
        """
        self._templates_path = (
            Path(templates_dir) if templates_dir else _DEFAULT_TEMPLATES_DIR
        )
        self.title_prefix = title_prefix

        if not self._templates_path.exists():
            logger.warning("Templates directory not found: %s", self._templates_path)

        self._env = Environment(
            loader=FileSystemLoader(str(self._templates_path)),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        logger.debug("Template manager initialized with: %s", self._templates_path)

    def render_title(self, source_file: SourceFile) -> str:
        """Render the level-1 title line for a note."""
        return self._render(
            "title.md.j2",
            source_file=source_file,
            title_prefix=self.title_prefix,
        )

    def render_preface(self, source_file: SourceFile) -> str:
        """Render the preface placeholder section."""
        return self._render("preface.md.j2", source_file=source_file)

    def render_summary(self, source_file: SourceFile) -> str:
        """Render the summary placeholder section."""
        return self._render("summary.md.j2", source_file=source_file)

    def _render(self, template_name: str, **kwargs: Any) -> str:
        """Render a template with the given context variables.

        Args:
            template_name: Name of the template file to render.
            **kwargs: Template context variables.

        Returns:
            Rendered text, always ending in exactly one newline.

        Raises:
            TemplateRenderError: If the template is missing or fails to
                render.
        """
        try:
            template = self._env.get_template(template_name)
            rendered = template.render(**kwargs).rstrip("\n") + "\n"
        except TemplateError as e:
            raise TemplateRenderError(
                f"Could not render template {template_name} from {self._templates_path}: {e}"
            ) from e
        logger.debug("Rendered template %s (%d chars)", template_name, len(rendered))
        return rendered

    def list_templates(self) -> list[str]:
        """List all available template files.

        Returns:
            List of template file names.
        """
        return self._env.list_templates()
