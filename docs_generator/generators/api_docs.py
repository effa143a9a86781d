"""API documentation formatting.

Splits a raw text blob on "## " markers and renders each section back
as a Markdown heading block. Blank lines inside a section are dropped,
so multi-paragraph bodies collapse into a single paragraph.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from docs_generator.output.markdown import MarkdownWriter
from docs_generator.utils.config import OutputConfig

logger = logging.getLogger(__name__)

SECTION_MARKER = "## "


@dataclass
class Section:
    """A titled block of an API document.

    Attributes:
        title: Heading text without the marker.
        body: Section content, possibly empty.
    """

    title: str
    body: str = ""

    def render(self) -> str:
        """Render the section as a Markdown heading block."""
        return f"{SECTION_MARKER}{self.title}\n\n{self.body}\n"


def parse_sections(raw: str) -> list[Section]:
    """Split raw text into sections.

    Every occurrence of the marker starts a new fragment, even mid-line.
    Text before the first marker and blank fragments are discarded.

    Args:
        raw: Unstructured text containing "## " markers.

    Returns:
        Sections in input order.
    """
    sections = []
    # Fragment 0 precedes the first marker and is never a section.
    for fragment in raw.split(SECTION_MARKER)[1:]:
        if not fragment.strip():
            continue
        lines = [line for line in fragment.split("\n") if line.strip()]
        title, content = lines[0], lines[1:]
        sections.append(Section(title=title.strip(), body="\n".join(content).strip()))
    return sections


def format_api_docs(raw: str) -> str:
    """Format raw API notes into a Markdown document.

    Sections are rendered as "## {title}\\n\\n{body}\\n" and separated
    by one blank line. Input without markers yields an empty string.

    Args:
        raw: Unstructured text containing "## " markers.

    Returns:
        The formatted Markdown document.
    """
    return "\n".join(section.render() for section in parse_sections(raw))


class ApiDocsGenerator:
    """Formats API notes and writes them to the API documentation file."""

    def __init__(
        self,
        config: Optional[OutputConfig] = None,
        writer: Optional[MarkdownWriter] = None,
    ) -> None:
        """Initialize the API docs generator.

        Args:
            config: Output configuration. Uses defaults if not provided.
            writer: Writer for the output directory. Built from config
                if not provided.
        """
        self.config = config or OutputConfig()
        self.writer = writer or MarkdownWriter(output_dir=self.config.output_dir)

    def document(self, api_data: str) -> Path:
        """Format API notes and write API_DOCUMENTATION.md.

        Args:
            api_data: Raw text with "## " section markers.

        Returns:
            Path to the written document.
        """
        content = format_api_docs(api_data)
        logger.info(
            "Formatted API documentation: %d sections", len(parse_sections(api_data))
        )
        return self.writer.write(self.config.api_docs_file, content)
