"""Template manager for loading and rendering Jinja2 templates.

Renders both model prompts (JSDoc, usage examples) and fixed
documents (README, usage-example placeholder) from the templates/
directory.
"""

import logging
from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader

from docs_generator.parsers.structure import Declaration

logger = logging.getLogger(__name__)

_DEFAULT_TEMPLATES_DIR = Path(__file__).parent.parent.parent / "templates"


class TemplateManager:
    """Loads and renders Jinja2 templates for documentation generation."""

    def __init__(self, templates_dir: Optional[str] = None) -> None:
        """Initialize the template manager.

        Args:
            templates_dir: Path to the templates directory. Uses the
                default templates/ directory if not specified.
        """
        self._templates_path = (
            Path(templates_dir) if templates_dir else _DEFAULT_TEMPLATES_DIR
        )

        if not self._templates_path.exists():
            logger.warning("Templates directory not found: %s", self._templates_path)

        self._env = Environment(
            loader=FileSystemLoader(str(self._templates_path)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        logger.debug("Template manager initialized with: %s", self._templates_path)

    def render_jsdoc_prompt(
        self,
        source: str,
        file_path: str,
        language: str = "typescript",
        undocumented: Optional[list[Declaration]] = None,
    ) -> str:
        """Render the JSDoc generation prompt for a source file.

        Args:
            source: Full source text of the file.
            file_path: Path shown to the model for context.
            language: Code fence language tag.
            undocumented: Declarations that have no JSDoc yet.

        Returns:
            Rendered prompt string ready for LLM submission.
        """
        return self._render(
            "jsdoc.j2",
            source=source,
            file_path=file_path,
            language=language,
            undocumented=undocumented or [],
        )

    def render_readme(
        self,
        project_name: str,
        usage_command: str = "docgen run",
        api_key_env: str = "ANTHROPIC_API_KEY",
        contact: str = "[Your Name] at [Your Email]",
    ) -> str:
        """Render the README document for a project.

        Args:
            project_name: Name used as the top-level heading.
            usage_command: Command shown in the Usage section.
            api_key_env: Environment variable shown in Configuration.
            contact: Contact line for the Contact section.

        Returns:
            The README Markdown.
        """
        return self._render(
            "readme.md.j2",
            project_name=project_name,
            usage_command=usage_command,
            api_key_env=api_key_env,
            contact=contact,
        )

    def render_usage_examples_placeholder(self) -> str:
        """Render the placeholder usage-examples document."""
        return self._render("usage_examples.md.j2")

    def render_usage_examples_prompt(
        self,
        source: str,
        file_path: str,
        language: str = "typescript",
    ) -> str:
        """Render the prompt asking the model for usage examples.

        Args:
            source: Full source text of the module.
            file_path: Path shown to the model for context.
            language: Code fence language tag.

        Returns:
            Rendered prompt string ready for LLM submission.
        """
        return self._render(
            "usage_examples_prompt.j2",
            source=source,
            file_path=file_path,
            language=language,
        )

    def _render(self, template_name: str, **kwargs: Any) -> str:
        """Render a template with the given context variables.

        Raises:
            TemplateNotFound: If the template file does not exist.
        """
        template = self._env.get_template(template_name)
        rendered = template.render(**kwargs)
        logger.debug("Rendered template %s (%d chars)", template_name, len(rendered))
        return rendered

    def list_templates(self) -> list[str]:
        """List all available template files."""
        return self._env.list_templates()
