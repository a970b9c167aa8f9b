"""Perplexity chat completions client."""

import logging
from dataclasses import dataclass

import httpx

from nutriscan.domain.llm import ChatCompletion, PromptMessage
from nutriscan.services.llm import (
    ChatCompletionClient,
    LlmConfigurationError,
    LlmRequestError,
)

_logger = logging.getLogger(__name__)


@dataclass
class HttpxPerplexityClient(ChatCompletionClient):
    """HTTPX-backed client for the Perplexity chat completions API."""

    api_key: str | None
    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 30.0

    @classmethod
    def create(
        cls, api_key: str | None, base_url: str, timeout: float = 30.0
    ) -> "HttpxPerplexityClient":
        """Create a client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def complete(
        self,
        *,
        model: str,
        messages: list[PromptMessage],
        temperature: float,
        max_tokens: int,
        default_error: str = "Analysis failed",
    ) -> ChatCompletion:
        """Send a chat completion request and return the first choice."""
        if not self.api_key:
            raise LlmConfigurationError("Perplexity API key is not configured")
        try:
            response = await self.http_client.post(
                f"{self.base_url}/chat/completions",
                headers={"Authorization": f"Bearer {self.api_key}"},
                json={
                    "model": model,
                    "messages": [
                        {"role": message.role, "content": message.content}
                        for message in messages
                    ],
                    "temperature": temperature,
                    "max_tokens": max_tokens,
                },
                timeout=self.timeout,
            )
        except httpx.HTTPError as exc:
            _logger.warning("Perplexity request failed: %s", exc)
            raise LlmRequestError("Could not reach the analysis service") from exc

        try:
            data = response.json()
        except ValueError as exc:
            _logger.error("Failed to parse API response: %s", response.text)
            raise LlmRequestError("Invalid response from server") from exc

        if not isinstance(data, dict):
            _logger.error("Unexpected API response format: %s", data)
            raise LlmRequestError("Invalid response from server")

        if response.is_error:
            message = _error_message(data) or default_error
            _logger.error("API error (status=%s): %s", response.status_code, message)
            raise LlmRequestError(message)

        return ChatCompletion(
            content=_first_message_content(data),
            citations=_citations(data),
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _error_message(data: dict[str, object]) -> str | None:
    """Return ``error.message`` from an error body, if present."""
    error = data.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
    return None


def _first_message_content(data: dict[str, object]) -> str | None:
    """Return ``choices[0].message.content`` when it is a string."""
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    return content if isinstance(content, str) else None


def _citations(data: dict[str, object]) -> tuple[str, ...]:
    """Return the string citations attached to the response."""
    citations = data.get("citations")
    if not isinstance(citations, list):
        return ()
    return tuple(item for item in citations if isinstance(item, str))
