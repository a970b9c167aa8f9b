"""Follow-up chat models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

ChatSender = Literal["user", "ai"]


class ChatMessage(BaseModel):
    """Single message in a follow-up conversation."""

    model_config = ConfigDict(frozen=True)

    text: str
    sender: ChatSender
