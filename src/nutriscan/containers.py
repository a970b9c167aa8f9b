"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutriscan.adapters.perplexity_client import HttpxPerplexityClient
from nutriscan.adapters.tesseract_ocr import TesseractOcrEngine
from nutriscan.config import Settings
from nutriscan.services.analysis import AnalysisService
from nutriscan.services.chat import FollowUpChatService
from nutriscan.services.ocr import OcrService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    ocr_service: OcrService
    analysis_service: AnalysisService
    chat_service: FollowUpChatService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    llm_client = HttpxPerplexityClient.create(
        api_key=resolved_settings.perplexity_api_key,
        base_url=resolved_settings.perplexity_base_url,
        timeout=resolved_settings.request_timeout_seconds,
    )
    ocr_service = OcrService(
        engine=TesseractOcrEngine.create(resolved_settings.tesseract_cmd),
        language=resolved_settings.ocr_language,
        max_upload_bytes=resolved_settings.max_upload_bytes,
    )
    analysis_service = AnalysisService(
        client=llm_client,
        model=resolved_settings.perplexity_model,
        temperature=resolved_settings.analysis_temperature,
        max_tokens=resolved_settings.analysis_max_tokens,
    )
    chat_service = FollowUpChatService(
        client=llm_client,
        model=resolved_settings.perplexity_model,
        temperature=resolved_settings.analysis_temperature,
        max_tokens=resolved_settings.chat_max_tokens,
    )

    async def close_resources() -> None:
        await llm_client.close()

    return AppContainer(
        settings=resolved_settings,
        ocr_service=ocr_service,
        analysis_service=analysis_service,
        chat_service=chat_service,
        close_resources=close_resources,
    )
