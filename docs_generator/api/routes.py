"""Documentation endpoints.

Each POST endpoint runs one generator and answers with a plain-text
status line. Missing inputs answer 400, any failure while producing
the artifact answers 500.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse

from docs_generator.api.models import (
    ApiDocsRequest,
    JSDocRequest,
    ReadmeRequest,
    UsageExamplesRequest,
)
from docs_generator.exceptions import MissingInputError
from docs_generator.generators.api_docs import ApiDocsGenerator
from docs_generator.generators.jsdoc_gen import JSDocGenerator
from docs_generator.generators.llm_client import LLMClient
from docs_generator.generators.readme_gen import ReadmeGenerator
from docs_generator.generators.usage_examples import UsageExamplesGenerator
from docs_generator.utils.config import AppConfig

logger = logging.getLogger(__name__)

router = APIRouter(tags=["docs"])


def get_config(request: Request) -> AppConfig:
    """FastAPI dependency returning the app's configuration."""
    return request.app.state.config


def _require(value: Optional[str], field_name: str) -> str:
    if not value:
        raise MissingInputError(field_name)
    return value


def _failure(action: str, error: Exception) -> HTTPException:
    logger.exception("Error %s", action)
    return HTTPException(status_code=500, detail=f"Error {action}: {error}")


@router.post("/generate-jsdoc", response_class=PlainTextResponse)
def generate_jsdoc(
    body: Optional[JSDocRequest] = None,
    config: AppConfig = Depends(get_config),
) -> str:
    """Add JSDoc comments to a source file in place."""
    file_path = _require(body.file_path if body else None, "filePath")
    try:
        generator = JSDocGenerator(LLMClient(config=config.api))
        generator.generate(file_path)
    except Exception as e:
        raise _failure("generating JSDoc comments", e) from e
    return "JSDoc comments generated successfully"


@router.post("/create-readme", response_class=PlainTextResponse)
def create_readme(
    body: Optional[ReadmeRequest] = None,
    config: AppConfig = Depends(get_config),
) -> str:
    """Write README.md for a project name."""
    project_name = _require(body.project_name if body else None, "projectName")
    try:
        ReadmeGenerator(config=config).create(project_name)
    except Exception as e:
        raise _failure("creating README file", e) from e
    return "README file created successfully"


@router.post("/document-api", response_class=PlainTextResponse)
def document_api(
    body: Optional[ApiDocsRequest] = None,
    config: AppConfig = Depends(get_config),
) -> str:
    """Format API notes into API_DOCUMENTATION.md."""
    api_data = _require(body.api_data if body else None, "apiData")
    try:
        ApiDocsGenerator(config=config.output).document(api_data)
    except Exception as e:
        raise _failure("generating API documentation", e) from e
    return "API documentation generated successfully"


@router.post("/generate-usage-examples", response_class=PlainTextResponse)
def generate_usage_examples(
    body: Optional[UsageExamplesRequest] = None,
    config: AppConfig = Depends(get_config),
) -> str:
    """Write USAGE_EXAMPLES.md, from the model when a source is given."""
    source_path = body.source_path if body else None
    try:
        llm = LLMClient(config=config.api) if source_path else None
        UsageExamplesGenerator(llm_client=llm, config=config.output).create(
            source_path
        )
    except Exception as e:
        raise _failure("generating usage examples", e) from e
    return "Usage examples generated successfully"
