"""CLI commands for the Docs Generator.

Provides the Click-based command group 'docgen' with subcommands for
JSDoc comments, READMEs, API documentation, usage examples, the
standalone documentation run, and the HTTP server.
"""

import logging
from typing import Optional

import click
import uvicorn
from jinja2 import TemplateError

from docs_generator import __version__
from docs_generator.api.app import create_app
from docs_generator.exceptions import DocsGeneratorError
from docs_generator.generators.api_docs import ApiDocsGenerator
from docs_generator.generators.jsdoc_gen import JSDocGenerator
from docs_generator.generators.llm_client import LLMClient
from docs_generator.generators.readme_gen import ReadmeGenerator
from docs_generator.generators.usage_examples import UsageExamplesGenerator
from docs_generator.parsers.source_scanner import SourceScanner
from docs_generator.utils.config import AppConfig, load_config
from docs_generator.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def _with_output_dir(config: AppConfig, output_dir: Optional[str]) -> AppConfig:
    """Apply an --output-dir override to the loaded config."""
    if output_dir:
        config.output.output_dir = output_dir
    return config


def _run_jsdoc(config: AppConfig, path: str) -> None:
    """Generate JSDoc for one file, reporting failures as CLI errors."""
    gen = JSDocGenerator(LLMClient(config=config.api))
    try:
        result = gen.generate(path)
    except (DocsGeneratorError, ValueError, OSError, TemplateError) as e:
        raise click.ClickException(f"Error generating JSDoc comments: {e}") from e
    click.echo(
        f"JSDoc comments written to {result.file_path} "
        f"({result.input_tokens + result.output_tokens} tokens)"
    )


@click.group()
@click.version_option(version=__version__, prog_name="docgen")
@click.option(
    "--config",
    "config_path",
    type=click.Path(),
    default=None,
    help="Path to a YAML config file.",
)
@click.pass_context
def docgen(ctx: click.Context, config_path: Optional[str]) -> None:
    """Docs Generator: JSDoc, README, API docs and usage examples."""
    config = load_config(config_path)
    setup_logging(
        level=config.logging.level,
        log_format=config.logging.format,
        log_file=config.logging.file,
    )
    ctx.obj = config


@docgen.command()
@click.option(
    "--source",
    type=click.Path(),
    default=None,
    help="Script to document. Defaults to script.source_path from config.",
)
@click.pass_obj
def run(config: AppConfig, source: Optional[str]) -> None:
    """Run the standalone documentation flow.

    Reads the configured script, asks the model for JSDoc comments,
    and overwrites the script with the documented version.
    """
    path = source or config.script.source_path
    click.echo(f"Documenting {path}")
    _run_jsdoc(config, path)


@docgen.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--dry-run",
    is_flag=True,
    help="List declarations without JSDoc instead of calling the API.",
)
@click.pass_obj
def jsdoc(config: AppConfig, path: str, dry_run: bool) -> None:
    """Generate JSDoc comments for a JavaScript or TypeScript file."""
    if dry_run:
        scan = SourceScanner().scan_file(path)
        for decl in scan.undocumented:
            click.echo(
                f"  Missing: {path}:{decl.line_number} {decl.kind.value} {decl.name}"
            )
        click.echo(
            f"Found {len(scan.undocumented)} of {len(scan.declarations)} "
            "declarations without JSDoc"
        )
        return

    _run_jsdoc(config, path)


@docgen.command()
@click.argument("project_name")
@click.option("--output-dir", type=click.Path(), default=None, help="Output directory.")
@click.pass_obj
def readme(config: AppConfig, project_name: str, output_dir: Optional[str]) -> None:
    """Generate a README.md for a project."""
    config = _with_output_dir(config, output_dir)
    try:
        path = ReadmeGenerator(config=config).create(project_name)
    except (OSError, TemplateError) as e:
        raise click.ClickException(f"Error creating README file: {e}") from e
    click.echo(f"README written to {path}")


@docgen.command("api-docs")
@click.argument("input_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--output-dir", type=click.Path(), default=None, help="Output directory.")
@click.pass_obj
def api_docs(config: AppConfig, input_file, output_dir: Optional[str]) -> None:
    """Format API notes into API_DOCUMENTATION.md.

    Reads sections marked with "## " from INPUT_FILE, or stdin when
    omitted.
    """
    config = _with_output_dir(config, output_dir)
    api_data = input_file.read()
    if not api_data.strip():
        raise click.ClickException("apiData is required")
    try:
        path = ApiDocsGenerator(config=config.output).document(api_data)
    except OSError as e:
        raise click.ClickException(f"Error generating API documentation: {e}") from e
    click.echo(f"API documentation written to {path}")


@docgen.command()
@click.option(
    "--source",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Module to generate examples for. Writes a placeholder if omitted.",
)
@click.option("--output-dir", type=click.Path(), default=None, help="Output directory.")
@click.pass_obj
def examples(
    config: AppConfig, source: Optional[str], output_dir: Optional[str]
) -> None:
    """Generate a USAGE_EXAMPLES.md file."""
    config = _with_output_dir(config, output_dir)
    llm = LLMClient(config=config.api) if source else None
    gen = UsageExamplesGenerator(llm_client=llm, config=config.output)
    try:
        path = gen.create(source)
    except (DocsGeneratorError, ValueError, OSError, TemplateError) as e:
        raise click.ClickException(f"Error generating usage examples: {e}") from e
    click.echo(f"Usage examples written to {path}")


@docgen.command()
@click.option("--host", default=None, help="Bind address. Defaults to server.host.")
@click.option("--port", type=int, default=None, help="Port. Defaults to server.port.")
@click.pass_obj
def serve(config: AppConfig, host: Optional[str], port: Optional[int]) -> None:
    """Start the HTTP API server."""
    host = host or config.server.host
    port = port or config.server.port
    click.echo(f"Docs Generator API is running at http://{host}:{port}")
    uvicorn.run(create_app(config), host=host, port=port, log_config=None)
