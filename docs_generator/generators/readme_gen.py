"""README generation from the project template."""

import logging
from pathlib import Path
from typing import Optional

from docs_generator.generators.template_manager import TemplateManager
from docs_generator.output.markdown import MarkdownWriter
from docs_generator.utils.config import AppConfig

logger = logging.getLogger(__name__)


class ReadmeGenerator:
    """Renders the README template for a project and writes README.md.

    No model call is involved; the document is fully templated.
    """

    def __init__(
        self,
        template_manager: Optional[TemplateManager] = None,
        config: Optional[AppConfig] = None,
        writer: Optional[MarkdownWriter] = None,
    ) -> None:
        """Initialize the README generator.

        Args:
            template_manager: Template manager for the README template.
            config: Application configuration.
            writer: Writer for the output directory.
        """
        self.templates = template_manager or TemplateManager()
        self.config = config or AppConfig()
        self.writer = writer or MarkdownWriter(output_dir=self.config.output.output_dir)

    def render(self, project_name: str) -> str:
        """Render README content for a project name."""
        return self.templates.render_readme(
            project_name=project_name,
            usage_command=self.config.script.usage_command,
            api_key_env=self.config.api.api_key_env,
        )

    def create(self, project_name: str) -> Path:
        """Render and write README.md.

        Args:
            project_name: Name used as the README title.

        Returns:
            Path to the written README.
        """
        content = self.render(project_name)
        logger.info("Rendered README for %s", project_name)
        return self.writer.write(self.config.output.readme_file, content)
