"""Request and response models for the scanner API."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from nutriscan.domain.analysis import AnalysisResult
from nutriscan.domain.chat import ChatMessage
from nutriscan.services.presentation import AnalysisView


class _ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScanResponse(_ApiModel):
    """Text extracted from an uploaded label image."""

    text: str


class AnalyzeRequest(_ApiModel):
    """Label text to analyze."""

    text: str = ""


class AnalyzeResponse(_ApiModel):
    """Parsed analysis plus its render-ready view."""

    analysis: AnalysisResult
    view: AnalysisView


class ChatRequest(_ApiModel):
    """Follow-up question with the analysis it refers to."""

    extracted_text: str = ""
    analysis: AnalysisResult
    history: list[ChatMessage] = Field(default_factory=list)
    question: str


class ChatResponse(_ApiModel):
    """Reply text and the updated conversation."""

    reply: str
    messages: list[ChatMessage]
