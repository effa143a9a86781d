"""Tests for the HTTP API using FastAPI's TestClient."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from docs_generator.api.app import create_app
from docs_generator.exceptions import UpstreamError
from docs_generator.generators.llm_client import GenerationResult, TokenUsage
from docs_generator.utils.config import AppConfig, OutputConfig


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    path = tmp_path / "out"
    path.mkdir()
    return path


@pytest.fixture
def client(output_dir: Path) -> TestClient:
    """Create a TestClient for an app writing into a temp directory."""
    config = AppConfig(output=OutputConfig(output_dir=str(output_dir)))
    return TestClient(create_app(config))


def _mock_llm(content: str) -> MagicMock:
    llm = MagicMock()
    llm.generate.return_value = GenerationResult(
        content=content,
        usage=TokenUsage(input_tokens=10, output_tokens=20),
        model="claude-sonnet-4-20250514",
    )
    return llm


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestDocumentApi:
    """Tests for POST /document-api."""

    def test_success(self, client: TestClient, output_dir: Path) -> None:
        response = client.post(
            "/document-api", json={"apiData": "## A\ncontent A\n## B\ncontent B"}
        )

        assert response.status_code == 200
        assert response.text == "API documentation generated successfully"
        assert (output_dir / "API_DOCUMENTATION.md").read_text(encoding="utf-8") == (
            "## A\n\ncontent A\n\n## B\n\ncontent B\n"
        )

    def test_missing_field(self, client: TestClient, output_dir: Path) -> None:
        response = client.post("/document-api", json={})

        assert response.status_code == 400
        assert response.text == "apiData is required"
        assert not (output_dir / "API_DOCUMENTATION.md").exists()

    def test_empty_field(self, client: TestClient) -> None:
        response = client.post("/document-api", json={"apiData": ""})
        assert response.status_code == 400

    def test_no_body(self, client: TestClient) -> None:
        response = client.post("/document-api")
        assert response.status_code == 400
        assert response.text == "apiData is required"

    def test_write_failure(self, tmp_path: Path) -> None:
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("x")
        config = AppConfig(output=OutputConfig(output_dir=str(blocker)))
        client = TestClient(create_app(config))

        response = client.post("/document-api", json={"apiData": "## A\nb"})

        assert response.status_code == 500
        assert response.text.startswith("Error generating API documentation: ")


class TestCreateReadme:
    """Tests for POST /create-readme."""

    def test_success(self, client: TestClient, output_dir: Path) -> None:
        response = client.post("/create-readme", json={"projectName": "Demo"})

        assert response.status_code == 200
        assert response.text == "README file created successfully"
        assert (output_dir / "README.md").read_text().startswith("# Demo\n")

    def test_missing_field(self, client: TestClient) -> None:
        response = client.post("/create-readme", json={"name": "Demo"})
        assert response.status_code == 400
        assert response.text == "projectName is required"


class TestGenerateJSDoc:
    """Tests for POST /generate-jsdoc."""

    def test_missing_field(self, client: TestClient) -> None:
        response = client.post("/generate-jsdoc", json={})
        assert response.status_code == 400
        assert response.text == "filePath is required"

    @patch("docs_generator.api.routes.LLMClient")
    def test_success(
        self, mock_llm_cls: MagicMock, client: TestClient, tmp_path: Path
    ) -> None:
        source = tmp_path / "index.ts"
        source.write_text("function main() {}\n")
        mock_llm_cls.return_value = _mock_llm(
            "```typescript\n/** Entry point. */\nfunction main() {}\n```"
        )

        response = client.post("/generate-jsdoc", json={"filePath": str(source)})

        assert response.status_code == 200
        assert response.text == "JSDoc comments generated successfully"
        assert source.read_text() == "/** Entry point. */\nfunction main() {}\n"

    @patch("docs_generator.api.routes.LLMClient")
    def test_missing_file(
        self, mock_llm_cls: MagicMock, client: TestClient, tmp_path: Path
    ) -> None:
        mock_llm_cls.return_value = _mock_llm("unused")
        response = client.post(
            "/generate-jsdoc", json={"filePath": str(tmp_path / "missing.ts")}
        )

        assert response.status_code == 500
        assert response.text.startswith("Error generating JSDoc comments: ")

    @patch("docs_generator.api.routes.LLMClient")
    def test_upstream_failure(
        self, mock_llm_cls: MagicMock, client: TestClient, tmp_path: Path
    ) -> None:
        source = tmp_path / "index.ts"
        source.write_text("function main() {}\n")
        llm = MagicMock()
        llm.generate.side_effect = UpstreamError("Model call failed: overloaded")
        mock_llm_cls.return_value = llm

        response = client.post("/generate-jsdoc", json={"filePath": str(source)})

        assert response.status_code == 500
        assert "overloaded" in response.text
        assert source.read_text() == "function main() {}\n"


class TestGenerateUsageExamples:
    """Tests for POST /generate-usage-examples."""

    def test_placeholder_without_body(
        self, client: TestClient, output_dir: Path
    ) -> None:
        response = client.post("/generate-usage-examples")

        assert response.status_code == 200
        assert response.text == "Usage examples generated successfully"
        assert (output_dir / "USAGE_EXAMPLES.md").read_text().startswith(
            "// Usage example"
        )

    @patch("docs_generator.api.routes.LLMClient")
    def test_from_source(
        self,
        mock_llm_cls: MagicMock,
        client: TestClient,
        output_dir: Path,
        tmp_path: Path,
    ) -> None:
        source = tmp_path / "math.ts"
        source.write_text("export const add = (a: number, b: number) => a + b;\n")
        mock_llm_cls.return_value = _mock_llm("## Add\n\n`add(1, 2)`")

        response = client.post(
            "/generate-usage-examples", json={"sourcePath": str(source)}
        )

        assert response.status_code == 200
        assert (output_dir / "USAGE_EXAMPLES.md").read_text() == "## Add\n\n`add(1, 2)`\n"

    def test_missing_source(self, client: TestClient, tmp_path: Path) -> None:
        with patch.dict("os.environ", {"ANTHROPIC_API_KEY": "test"}):
            response = client.post(
                "/generate-usage-examples",
                json={"sourcePath": str(tmp_path / "missing.ts")},
            )

        assert response.status_code == 500
        assert response.text.startswith("Error generating usage examples: ")
