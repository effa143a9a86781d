"""JSDoc generation for JavaScript and TypeScript files.

Sends a source file to the model, strips the Markdown code fences the
model wraps its answer in, and overwrites the file with the result.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from docs_generator.exceptions import UpstreamError
from docs_generator.generators.llm_client import LLMClient
from docs_generator.generators.template_manager import TemplateManager
from docs_generator.parsers.source_scanner import SourceScanner
from docs_generator.parsers.structure import Language

logger = logging.getLogger(__name__)

_SYSTEM_PROMPT = (
    "You are an expert TypeScript and JavaScript developer writing JSDoc "
    "comments. Add accurate JSDoc blocks with @param and @returns tags. "
    "Return only the complete source file without any explanation."
)

# Opening fences may carry a language tag (```typescript, ```ts, ```js).
_FENCE_RE = re.compile(r"```[\w+-]*")


def clean_code_fences(text: str) -> str:
    """Remove Markdown code fence markers from model output.

    Args:
        text: Raw model reply.

    Returns:
        The reply without fence markers, ending in a single newline,
        or an empty string when nothing is left.
    """
    cleaned = _FENCE_RE.sub("", text).strip()
    return f"{cleaned}\n" if cleaned else ""


@dataclass
class JSDocResult:
    """Result of JSDoc generation for one file.

    Attributes:
        file_path: The documented file.
        content: Cleaned source with JSDoc comments.
        input_tokens: Tokens used in the prompt.
        output_tokens: Tokens used in the response.
        written: Whether the file was overwritten.
    """

    file_path: str
    content: str
    input_tokens: int = 0
    output_tokens: int = 0
    written: bool = False


class JSDocGenerator:
    """Adds JSDoc comments to JS/TS source files via the LLM."""

    def __init__(
        self,
        llm_client: LLMClient,
        template_manager: Optional[TemplateManager] = None,
        scanner: Optional[SourceScanner] = None,
    ) -> None:
        """Initialize the JSDoc generator.

        Args:
            llm_client: The LLM client for API calls.
            template_manager: Template manager for prompts.
            scanner: Source scanner used to list undocumented declarations.
        """
        self.llm = llm_client
        self.templates = template_manager or TemplateManager()
        self.scanner = scanner or SourceScanner()

    def generate(self, file_path: str, write: bool = True) -> JSDocResult:
        """Generate JSDoc comments for a file.

        Args:
            file_path: Path to the JS/TS file.
            write: Overwrite the file with the documented source.

        Returns:
            A JSDocResult with the cleaned source.

        Raises:
            FileNotFoundError: If the file does not exist.
            UpstreamError: If the model call fails or returns nothing.
        """
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {file_path}")

        source = path.read_text(encoding="utf-8")
        language = Language.from_path(path)
        scan = self.scanner.scan_source(source, file_path, language)
        logger.info(
            "%s: %d of %d declarations lack JSDoc",
            file_path,
            len(scan.undocumented),
            len(scan.declarations),
        )

        prompt = self.templates.render_jsdoc_prompt(
            source=source,
            file_path=file_path,
            language=language.fence,
            undocumented=scan.undocumented,
        )
        result = self.llm.generate(prompt, system=_SYSTEM_PROMPT)

        content = clean_code_fences(result.content)
        if not content:
            raise UpstreamError(f"Model returned no content for {file_path}")

        if write:
            path.write_text(content, encoding="utf-8")
            logger.info("Wrote JSDoc comments to %s", file_path)

        return JSDocResult(
            file_path=file_path,
            content=content,
            input_tokens=result.usage.input_tokens,
            output_tokens=result.usage.output_tokens,
            written=write,
        )
