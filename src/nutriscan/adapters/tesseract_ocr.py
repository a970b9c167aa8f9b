"""Tesseract OCR engine backed by pytesseract."""

import asyncio
import io
from dataclasses import dataclass

import pytesseract
from PIL import Image

from nutriscan.services.ocr import OcrEngine


@dataclass
class TesseractOcrEngine(OcrEngine):
    """OCR engine that shells out to the Tesseract binary."""

    tesseract_cmd: str | None = None

    @classmethod
    def create(cls, tesseract_cmd: str | None = None) -> "TesseractOcrEngine":
        """Create an engine, optionally overriding the Tesseract binary path."""
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        return cls(tesseract_cmd=tesseract_cmd)

    async def image_to_text(self, image_bytes: bytes, language: str) -> str:
        """Recognize text in a worker thread."""
        return await asyncio.to_thread(_recognize, image_bytes, language)


def _recognize(image_bytes: bytes, language: str) -> str:
    """Decode the image and run Tesseract on it."""
    with Image.open(io.BytesIO(image_bytes)) as image:
        return pytesseract.image_to_string(image.convert("RGB"), lang=language)
