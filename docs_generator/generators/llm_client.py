"""Anthropic Messages API client.

Adds a per-minute request budget, retries with exponential backoff for
rate-limit and server errors, and running token usage totals.
"""

import logging
import os
import time
from dataclasses import dataclass
from typing import Optional

import anthropic

from docs_generator.exceptions import UpstreamError
from docs_generator.utils.config import APIConfig

logger = logging.getLogger(__name__)


@dataclass
class TokenUsage:
    """Token usage statistics for a single API call.

    Attributes:
        input_tokens: Number of tokens in the prompt.
        output_tokens: Number of tokens in the response.
    """

    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        """Total tokens consumed."""
        return self.input_tokens + self.output_tokens


@dataclass
class GenerationResult:
    """Result of an LLM generation call.

    Attributes:
        content: The generated text content.
        usage: Token usage statistics.
        model: Model that produced the result.
        stop_reason: Reason the generation stopped.
    """

    content: str
    usage: TokenUsage
    model: str
    stop_reason: Optional[str] = None


class LLMClient:
    """Client for the Anthropic Claude API with rate limiting and retries.

    The API key is read from the environment variable named in the API
    config. Rate-limit and server errors are retried with exponential
    backoff; anything that still fails surfaces as UpstreamError.
    """

    def __init__(self, config: Optional[APIConfig] = None) -> None:
        """Initialize the LLM client.

        Args:
            config: API configuration. Uses defaults if not provided.
        """
        self.config = config or APIConfig()
        self._api_key = os.getenv(self.config.api_key_env, "")
        self._client: Optional[anthropic.Anthropic] = None
        self._last_request_time: float = 0.0
        self._request_interval: float = 60.0 / max(self.config.rate_limit_rpm, 1)
        self._total_usage = TokenUsage()

    @property
    def client(self) -> anthropic.Anthropic:
        """Anthropic SDK client, created on first use.

        Raises:
            ValueError: If the configured key variable is not set.
        """
        if self._client is None:
            if not self._api_key:
                raise ValueError(
                    f"{self.config.api_key_env} environment variable is not set. "
                    "Set it before making API calls."
                )
            self._client = anthropic.Anthropic(api_key=self._api_key)
        return self._client

    @property
    def total_usage(self) -> TokenUsage:
        """Cumulative token usage across all calls."""
        return self._total_usage

    def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> GenerationResult:
        """Send one prompt to the model and return its text reply.

        Args:
            prompt: The user message prompt.
            system: Optional system prompt for context.
            max_tokens: Maximum tokens to generate. Uses config default.
            temperature: Sampling temperature. Uses config default.

        Returns:
            A GenerationResult with the generated content and usage.

        Raises:
            ValueError: If the API key is not set.
            UpstreamError: If the model call fails.
        """
        request: dict = {
            "model": self.config.model,
            "max_tokens": max_tokens or self.config.max_tokens,
            "temperature": self.config.temperature
            if temperature is None
            else temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            request["system"] = system

        try:
            response = self._send(request)
        except anthropic.APIError as e:
            logger.error("Model call failed: %s", e)
            raise UpstreamError(f"Model call failed: {e}") from e

        result = self._to_result(response)
        self._total_usage.input_tokens += result.usage.input_tokens
        self._total_usage.output_tokens += result.usage.output_tokens
        logger.info(
            "Generated %d tokens (input: %d, output: %d)",
            result.usage.total_tokens,
            result.usage.input_tokens,
            result.usage.output_tokens,
        )
        return result

    def _send(self, request: dict) -> anthropic.types.Message:
        """Call the Messages API, retrying transient failures.

        At least one attempt is always made, whatever retry_max_attempts
        says. The error from the final attempt is re-raised.
        """
        attempts = max(self.config.retry_max_attempts, 1)
        for attempt in range(1, attempts + 1):
            self._wait_for_slot()
            try:
                return self.client.messages.create(**request)
            except anthropic.APIStatusError as e:
                if not _is_transient(e) or attempt == attempts:
                    raise
                delay = self.config.retry_base_delay * 2 ** (attempt - 1)
                logger.warning(
                    "Model returned %d (attempt %d/%d), retrying in %.1f seconds",
                    e.status_code,
                    attempt,
                    attempts,
                    delay,
                )
                time.sleep(delay)
        raise AssertionError("unreachable")

    def _wait_for_slot(self) -> None:
        """Sleep until the per-minute request budget allows another call."""
        remaining = self._request_interval - (
            time.monotonic() - self._last_request_time
        )
        if remaining > 0:
            logger.debug("Rate limiting: sleeping %.2f seconds", remaining)
            time.sleep(remaining)
        self._last_request_time = time.monotonic()

    @staticmethod
    def _to_result(response: anthropic.types.Message) -> GenerationResult:
        text = response.content[0].text if response.content else ""
        return GenerationResult(
            content=text,
            usage=TokenUsage(
                input_tokens=response.usage.input_tokens,
                output_tokens=response.usage.output_tokens,
            ),
            model=response.model,
            stop_reason=response.stop_reason,
        )


def _is_transient(error: anthropic.APIStatusError) -> bool:
    """Rate limits and server-side errors are worth another attempt."""
    return isinstance(error, anthropic.RateLimitError) or error.status_code >= 500
