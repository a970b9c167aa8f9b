"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from nutriscan.services.ocr import DEFAULT_MAX_UPLOAD_BYTES
from nutriscan.services.presentation import Theme

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    perplexity_api_key: str | None = None
    perplexity_base_url: str = "https://api.perplexity.ai"
    perplexity_model: str = "sonar"
    analysis_temperature: float = 0.7
    analysis_max_tokens: int = 1000
    chat_max_tokens: int = 500
    request_timeout_seconds: float = 30.0
    tesseract_cmd: str | None = None
    ocr_language: str = "eng"
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    chart_theme: Theme = "light"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
