"""Tests for the README generator."""

from pathlib import Path

import pytest

from docs_generator.generators.readme_gen import ReadmeGenerator
from docs_generator.utils.config import (
    APIConfig,
    AppConfig,
    OutputConfig,
    ScriptConfig,
)


@pytest.fixture
def generator(tmp_path: Path) -> ReadmeGenerator:
    """Create a ReadmeGenerator writing into a temp directory."""
    config = AppConfig(output=OutputConfig(output_dir=str(tmp_path)))
    return ReadmeGenerator(config=config)


class TestRender:
    """Tests for README rendering."""

    def test_title(self, generator: ReadmeGenerator) -> None:
        content = generator.render("Automated Documentation Creator")
        assert content.startswith("# Automated Documentation Creator\n")

    def test_sections(self, generator: ReadmeGenerator) -> None:
        content = generator.render("demo")
        for heading in (
            "## Overview",
            "## Features",
            "## Installation",
            "## Usage",
            "## Configuration",
            "## Contributing",
            "## License",
            "## Contact",
        ):
            assert heading in content

    def test_no_template_indentation(self, generator: ReadmeGenerator) -> None:
        content = generator.render("demo")
        assert "\n    ## " not in content

    def test_script_settings_used(self, tmp_path: Path) -> None:
        config = AppConfig(
            output=OutputConfig(output_dir=str(tmp_path)),
            api=APIConfig(api_key_env="MY_KEY"),
            script=ScriptConfig(usage_command="docgen serve"),
        )
        content = ReadmeGenerator(config=config).render("demo")
        assert "docgen serve" in content
        assert "MY_KEY=your_api_key_here" in content


class TestCreate:
    """Tests for writing README.md."""

    def test_writes_readme(self, generator: ReadmeGenerator, tmp_path: Path) -> None:
        path = generator.create("My Project")

        assert path == tmp_path / "README.md"
        text = path.read_text(encoding="utf-8")
        assert text.startswith("# My Project")
        assert text.endswith("\n")

    def test_overwrites_existing(
        self, generator: ReadmeGenerator, tmp_path: Path
    ) -> None:
        (tmp_path / "README.md").write_text("old content", encoding="utf-8")
        generator.create("New")
        assert "old content" not in (tmp_path / "README.md").read_text()
