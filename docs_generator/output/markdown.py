"""Markdown artifact output.

Writes generated documents under fixed file names into the configured
output directory. Existing files are overwritten.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class MarkdownWriter:
    """Writes Markdown documents into an output directory."""

    def __init__(self, output_dir: str = ".") -> None:
        """Initialize the Markdown writer.

        Args:
            output_dir: Directory where Markdown files will be written.
        """
        self.output_dir = Path(output_dir)

    def write(self, filename: str, content: str) -> Path:
        """Write a document, replacing any previous version.

        Args:
            filename: File name relative to the output directory.
            content: Document text.

        Returns:
            Path to the written file.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / filename
        path.write_text(content, encoding="utf-8")

        logger.info("Wrote %s (%d chars)", path, len(content))
        return path
