"""HTTP API for the documentation generator.

Usage:
    uvicorn docs_generator.api.app:app --port 3000
"""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse

from docs_generator import __version__
from docs_generator.api import routes
from docs_generator.exceptions import MissingInputError
from docs_generator.utils.config import AppConfig, load_config

logger = logging.getLogger(__name__)


async def _missing_input_handler(
    request: Request, exc: MissingInputError
) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=400)


async def _http_exception_handler(
    request: Request, exc: HTTPException
) -> PlainTextResponse:
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: Application configuration. Loaded from disk if not given.

    Returns:
        The configured FastAPI app.
    """
    app = FastAPI(
        title="Docs Generator API",
        description="Generates JSDoc comments, READMEs, API docs and usage examples",
        version=__version__,
    )
    app.state.config = config or load_config()

    # Errors are answered as plain text, like the success messages.
    app.add_exception_handler(MissingInputError, _missing_input_handler)
    app.add_exception_handler(HTTPException, _http_exception_handler)

    app.include_router(routes.router)

    @app.get("/health")
    def health() -> dict:
        """Health check endpoint."""
        return {"status": "ok", "service": "docs-generator", "version": __version__}

    logger.info(
        "Docs Generator API ready (output dir: %s)",
        app.state.config.output.output_dir,
    )
    return app


app = create_app()
