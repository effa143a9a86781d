"""Custom exceptions for the documentation generator."""


class DocsGeneratorError(Exception):
    """Base exception for documentation generation errors."""

    pass


class MissingInputError(DocsGeneratorError):
    """A required input field was not provided."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"{field_name} is required")


class UpstreamError(DocsGeneratorError):
    """The language model call failed after all retries."""

    pass
