"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, UploadFile, status
from fastapi.responses import HTMLResponse

from nutriscan.api.models import (
    AnalyzeRequest,
    AnalyzeResponse,
    ChatRequest,
    ChatResponse,
    ScanResponse,
)
from nutriscan.api.ui import SCANNER_UI_HTML
from nutriscan.app_logging import configure_logging
from nutriscan.containers import AppContainer
from nutriscan.domain.chat import ChatMessage
from nutriscan.services.chat import CHAT_GREETING
from nutriscan.services.llm import LlmConfigurationError, LlmRequestError
from nutriscan.services.ocr import ImageTooLargeError, OcrError
from nutriscan.services.presentation import Theme, build_analysis_view


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def scanner_ui() -> HTMLResponse:
        """Single-page scanner UI that consumes the API."""
        return HTMLResponse(SCANNER_UI_HTML)

    @app.post("/api/scan")
    async def scan_label(file: UploadFile, request: Request) -> ScanResponse:
        """Run OCR on an uploaded nutrition label image."""
        state_container: AppContainer = request.app.state.container
        image_bytes = await file.read()
        try:
            text = await state_container.ocr_service.extract_text(image_bytes)
        except ImageTooLargeError as exc:
            raise HTTPException(status_code=413, detail=str(exc)) from exc
        except OcrError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        logger.info("Scanned label: filename=%s chars=%s", file.filename, len(text))
        return ScanResponse(text=text)

    @app.post("/api/analyze")
    async def analyze_label(
        payload: AnalyzeRequest, request: Request, theme: Theme | None = None
    ) -> AnalyzeResponse:
        """Analyze label text and return the typed result with its view."""
        state_container: AppContainer = request.app.state.container
        if not payload.text.strip():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="No text provided"
            )
        try:
            analysis = await state_container.analysis_service.analyze(payload.text)
        except LlmRequestError as exc:
            logger.exception("Analysis failed")
            raise HTTPException(
                status_code=_status_for(exc), detail=str(exc)
            ) from exc
        resolved_theme = theme or state_container.settings.chart_theme
        return AnalyzeResponse(
            analysis=analysis,
            view=build_analysis_view(analysis, resolved_theme),
        )

    @app.post("/api/chat")
    async def follow_up(payload: ChatRequest, request: Request) -> ChatResponse:
        """Answer a follow-up question about an analysis."""
        state_container: AppContainer = request.app.state.container
        question = payload.question.strip()
        if not question:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="No question provided"
            )
        history = payload.history or [CHAT_GREETING]
        try:
            reply = await state_container.chat_service.ask(
                extracted_text=payload.extracted_text,
                analysis=payload.analysis,
                history=history,
                question=question,
            )
        except LlmRequestError as exc:
            logger.exception("Follow-up question failed")
            raise HTTPException(
                status_code=_status_for(exc), detail=str(exc)
            ) from exc
        return ChatResponse(
            reply=reply,
            messages=[
                *history,
                ChatMessage(text=question, sender="user"),
                ChatMessage(text=reply, sender="ai"),
            ],
        )

    return app


def _status_for(exc: LlmRequestError) -> int:
    """Map an upstream failure to an HTTP status code."""
    if isinstance(exc, LlmConfigurationError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_502_BAD_GATEWAY
