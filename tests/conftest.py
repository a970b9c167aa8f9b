"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from nutriscan.config import Settings
from nutriscan.containers import AppContainer
from nutriscan.domain.llm import ChatCompletion, PromptMessage
from nutriscan.services.analysis import AnalysisService
from nutriscan.services.chat import FollowUpChatService
from nutriscan.services.llm import ChatCompletionClient
from nutriscan.services.ocr import OcrEngine, OcrService

SAMPLE_ANALYSIS_TEXT = """Key Nutrients:

Total Fat: 10g
- **Sodium**: 200mg (8% DV)
Calories: 250
Protein: 5 g
Vitamin C: 12.5mg

Health Implications:

- **High sodium** may raise blood pressure.
- Moderate fat content.

Allergens:

- Peanuts
- Soy

Overall Assessment:

A salty snack best eaten in moderation.
"""

SAMPLE_LABEL_TEXT = "Nutrition Facts\nTotal Fat 10g\nSodium 200mg\nContains: peanuts, soy"


@dataclass
class FakeChatClient(ChatCompletionClient):
    """Fake chat completions client returning a fixed reply."""

    completion: ChatCompletion = field(
        default_factory=lambda: ChatCompletion(
            content=SAMPLE_ANALYSIS_TEXT,
            citations=("https://example.com/sodium",),
        )
    )
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def complete(
        self,
        *,
        model: str,
        messages: list[PromptMessage],
        temperature: float,
        max_tokens: int,
        default_error: str = "Analysis failed",
    ) -> ChatCompletion:
        self.calls.append(
            {
                "model": model,
                "messages": messages,
                "temperature": temperature,
                "max_tokens": max_tokens,
                "default_error": default_error,
            }
        )
        if self.error is not None:
            raise self.error
        return self.completion


@dataclass
class FakeOcrEngine(OcrEngine):
    """Fake OCR engine returning static text."""

    text: str = SAMPLE_LABEL_TEXT
    error: Exception | None = None

    async def image_to_text(self, image_bytes: bytes, language: str) -> str:
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def settings() -> Settings:
    return Settings(perplexity_api_key="pplx-key")


@pytest.fixture
def chat_client() -> FakeChatClient:
    return FakeChatClient()


@pytest.fixture
def ocr_engine() -> FakeOcrEngine:
    return FakeOcrEngine()


@pytest.fixture
def container(
    settings: Settings,
    chat_client: FakeChatClient,
    ocr_engine: FakeOcrEngine,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        ocr_service=OcrService(
            engine=ocr_engine,
            language=settings.ocr_language,
            max_upload_bytes=1024,
        ),
        analysis_service=AnalysisService(
            client=chat_client,
            model=settings.perplexity_model,
            temperature=settings.analysis_temperature,
            max_tokens=settings.analysis_max_tokens,
        ),
        chat_service=FollowUpChatService(
            client=chat_client,
            model=settings.perplexity_model,
            max_tokens=settings.chat_max_tokens,
        ),
        close_resources=close_resources,
    )
