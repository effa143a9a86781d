"""Tests for the JSDoc generation pipeline."""

import textwrap
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from docs_generator.exceptions import UpstreamError
from docs_generator.generators.jsdoc_gen import (
    JSDocGenerator,
    JSDocResult,
    clean_code_fences,
)
from docs_generator.generators.llm_client import GenerationResult, LLMClient, TokenUsage

_DOCUMENTED = textwrap.dedent("""\
    /**
     * Adds two numbers.
     * @param {number} a - First operand.
     * @param {number} b - Second operand.
     * @returns {number} The sum.
     */
    export function add(a: number, b: number): number {
        return a + b;
    }
""")


def _mock_llm_client(content: str) -> MagicMock:
    """Create a mocked LLMClient returning the given content."""
    client = MagicMock(spec=LLMClient)
    client.generate.return_value = GenerationResult(
        content=content,
        usage=TokenUsage(input_tokens=120, output_tokens=80),
        model="claude-sonnet-4-20250514",
        stop_reason="end_turn",
    )
    return client


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Create an undocumented TypeScript file."""
    path = tmp_path / "index.ts"
    path.write_text(
        "export function add(a: number, b: number): number {\n"
        "    return a + b;\n"
        "}\n",
        encoding="utf-8",
    )
    return path


class TestCleanCodeFences:
    """Tests for stripping Markdown fences from model output."""

    def test_typescript_fence(self) -> None:
        raw = "```typescript\nconst a = 1;\n```"
        assert clean_code_fences(raw) == "const a = 1;\n"

    def test_bare_fence(self) -> None:
        assert clean_code_fences("```\nlet x;\n```\n") == "let x;\n"

    def test_other_language_tags(self) -> None:
        assert clean_code_fences("```ts\nlet x;\n```") == "let x;\n"
        assert clean_code_fences("```javascript\nlet x;\n```") == "let x;\n"

    def test_no_fences(self) -> None:
        assert clean_code_fences("let x;") == "let x;\n"

    def test_only_fences(self) -> None:
        assert clean_code_fences("```typescript\n```") == ""


class TestJSDocGenerator:
    """Tests for JSDocGenerator.generate."""

    def test_overwrites_file(self, source_file: Path) -> None:
        llm = _mock_llm_client(f"```typescript\n{_DOCUMENTED}```")
        result = JSDocGenerator(llm).generate(str(source_file))

        assert isinstance(result, JSDocResult)
        assert result.written is True
        assert source_file.read_text(encoding="utf-8") == _DOCUMENTED
        assert result.content == _DOCUMENTED
        assert result.input_tokens == 120
        assert result.output_tokens == 80

    def test_dry_generation_keeps_file(self, source_file: Path) -> None:
        original = source_file.read_text(encoding="utf-8")
        llm = _mock_llm_client(_DOCUMENTED)
        result = JSDocGenerator(llm).generate(str(source_file), write=False)

        assert result.written is False
        assert result.content == _DOCUMENTED
        assert source_file.read_text(encoding="utf-8") == original

    def test_prompt_contains_source_and_undocumented(self, source_file: Path) -> None:
        llm = _mock_llm_client(_DOCUMENTED)
        JSDocGenerator(llm).generate(str(source_file))

        prompt = llm.generate.call_args[0][0]
        assert "return a + b;" in prompt
        assert "`add`" in prompt
        assert "typescript" in prompt
        assert "system" in llm.generate.call_args[1]

    def test_missing_file(self, tmp_path: Path) -> None:
        llm = _mock_llm_client(_DOCUMENTED)
        with pytest.raises(FileNotFoundError):
            JSDocGenerator(llm).generate(str(tmp_path / "missing.ts"))
        llm.generate.assert_not_called()

    def test_empty_reply_leaves_file_untouched(self, source_file: Path) -> None:
        original = source_file.read_text(encoding="utf-8")
        llm = _mock_llm_client("```typescript\n```")

        with pytest.raises(UpstreamError):
            JSDocGenerator(llm).generate(str(source_file))
        assert source_file.read_text(encoding="utf-8") == original

    def test_upstream_error_propagates(self, source_file: Path) -> None:
        llm = MagicMock(spec=LLMClient)
        llm.generate.side_effect = UpstreamError("boom")

        with pytest.raises(UpstreamError, match="boom"):
            JSDocGenerator(llm).generate(str(source_file))
