"""Usage-example document generation.

Writes the placeholder examples document, or asks the model for real
examples when a source file is given.
"""

import logging
from pathlib import Path
from typing import Optional

from docs_generator.exceptions import UpstreamError
from docs_generator.generators.llm_client import LLMClient
from docs_generator.generators.template_manager import TemplateManager
from docs_generator.output.markdown import MarkdownWriter
from docs_generator.parsers.structure import Language
from docs_generator.utils.config import OutputConfig

logger = logging.getLogger(__name__)

_SYSTEM_PROMPT = (
    "You are a technical writer producing usage examples for a code "
    "library. Write clear Markdown with short, runnable snippets. "
    "Return only the Markdown content without any wrapper."
)


class UsageExamplesGenerator:
    """Produces USAGE_EXAMPLES.md."""

    def __init__(
        self,
        llm_client: Optional[LLMClient] = None,
        template_manager: Optional[TemplateManager] = None,
        config: Optional[OutputConfig] = None,
        writer: Optional[MarkdownWriter] = None,
    ) -> None:
        """Initialize the usage-examples generator.

        Args:
            llm_client: LLM client, required only for source-based examples.
            template_manager: Template manager for documents and prompts.
            config: Output configuration.
            writer: Writer for the output directory.
        """
        self.llm = llm_client
        self.templates = template_manager or TemplateManager()
        self.config = config or OutputConfig()
        self.writer = writer or MarkdownWriter(output_dir=self.config.output_dir)

    def create(self, source_path: Optional[str] = None) -> Path:
        """Write the usage-examples document.

        Args:
            source_path: Optional module to generate examples for. Without
                it the placeholder document is written.

        Returns:
            Path to the written document.

        Raises:
            FileNotFoundError: If source_path does not exist.
            ValueError: If source_path is given but no LLM client is set.
            UpstreamError: If the model call fails or returns nothing.
        """
        if source_path is None:
            content = self.templates.render_usage_examples_placeholder()
        else:
            content = self._generate_for(source_path)
        return self.writer.write(self.config.usage_examples_file, content)

    def _generate_for(self, source_path: str) -> str:
        if self.llm is None:
            raise ValueError("An LLM client is required to generate examples")

        path = Path(source_path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {source_path}")

        prompt = self.templates.render_usage_examples_prompt(
            source=path.read_text(encoding="utf-8"),
            file_path=source_path,
            language=Language.from_path(path).fence,
        )
        result = self.llm.generate(prompt, system=_SYSTEM_PROMPT)
        content = result.content.strip()
        if not content:
            raise UpstreamError(f"Model returned no examples for {source_path}")

        logger.info(
            "Generated usage examples for %s (%d tokens)",
            source_path,
            result.usage.total_tokens,
        )
        return f"{content}\n"
