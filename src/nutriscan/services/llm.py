"""Chat completions interface shared by analysis and follow-up chat."""

from typing import Protocol

from nutriscan.domain.llm import ChatCompletion, PromptMessage


class LlmRequestError(RuntimeError):
    """The chat completions request failed or returned an unusable body."""


class LlmConfigurationError(LlmRequestError):
    """The chat completions client is missing required configuration."""


class ChatCompletionClient(Protocol):
    """Interface for chat completion calls."""

    async def complete(
        self,
        *,
        model: str,
        messages: list[PromptMessage],
        temperature: float,
        max_tokens: int,
        default_error: str = "Analysis failed",
    ) -> ChatCompletion:
        """Return the assistant reply for the given messages.

        ``default_error`` is the message raised for a failed request whose
        body carries no error message of its own.
        """
