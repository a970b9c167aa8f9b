"""Text extraction from uploaded label images."""

import logging
from dataclasses import dataclass
from typing import Protocol

_logger = logging.getLogger(__name__)

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024


class OcrError(RuntimeError):
    """Text could not be extracted from an image."""


class ImageTooLargeError(ValueError):
    """The uploaded image exceeds the configured size limit."""


class OcrEngine(Protocol):
    """Interface for OCR backends."""

    async def image_to_text(self, image_bytes: bytes, language: str) -> str:
        """Return the text recognized in the image."""


@dataclass
class OcrService:
    """Validates uploads and runs them through the OCR engine."""

    engine: OcrEngine
    language: str = "eng"
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES

    async def extract_text(self, image_bytes: bytes) -> str:
        """Extract label text, possibly empty, from raw image bytes."""
        if len(image_bytes) > self.max_upload_bytes:
            limit_mb = self.max_upload_bytes / (1024 * 1024)
            raise ImageTooLargeError(
                f"Please select an image smaller than {limit_mb:g}MB"
            )
        if not image_bytes:
            raise OcrError("Could not extract text from the image.")
        try:
            text = await self.engine.image_to_text(image_bytes, self.language)
        except Exception as exc:
            _logger.exception("OCR failed")
            raise OcrError("Could not extract text from the image.") from exc
        return text
