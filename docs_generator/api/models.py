"""Request models for the HTTP API.

Field names follow the camelCase JSON keys clients send. Every field is
optional at the schema level so that a missing value is reported by the
route as a 400 with a plain message instead of a 422 validation error.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _Request(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class JSDocRequest(_Request):
    """Body of POST /generate-jsdoc."""

    file_path: Optional[str] = Field(
        default=None,
        alias="filePath",
        description="JS/TS file to document in place",
    )


class ReadmeRequest(_Request):
    """Body of POST /create-readme."""

    project_name: Optional[str] = Field(
        default=None,
        alias="projectName",
        description="Project name used as the README title",
    )


class ApiDocsRequest(_Request):
    """Body of POST /document-api."""

    api_data: Optional[str] = Field(
        default=None,
        alias="apiData",
        description='Raw API notes with "## " section markers',
    )


class UsageExamplesRequest(_Request):
    """Body of POST /generate-usage-examples."""

    source_path: Optional[str] = Field(
        default=None,
        alias="sourcePath",
        description="Optional module to generate examples for",
    )
