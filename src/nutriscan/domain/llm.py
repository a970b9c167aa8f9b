"""Models exchanged with the chat completions API."""

from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True)
class PromptMessage:
    """Message sent to the chat completions endpoint."""

    role: Literal["system", "user", "assistant"]
    content: str


@dataclass(frozen=True)
class ChatCompletion:
    """Assistant reply plus any citation URLs returned with it."""

    content: str | None
    citations: tuple[str, ...] = field(default_factory=tuple)
