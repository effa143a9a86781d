"""Docs Generator.

An LLM-powered helper that writes JSDoc comments, README files, API
documentation, and usage examples, exposed as a CLI and an HTTP API.
"""

__version__ = "0.1.0"
