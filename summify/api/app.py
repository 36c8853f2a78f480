from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, FastAPI, File, Form, HTTPException, Request, UploadFile
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool
from starlette.middleware.cors import CORSMiddleware

from summify.config import Settings, load_settings
from summify.errors import ExtractionError, SummarizationError
from summify.extraction import extract_text
from summify.summarizer import SummaryResult, extract_summary
from summify.utils.analytics import AnalyticsStore, RequestLogRecord
from summify.utils.logging import setup_logging


logger = logging.getLogger("summify.api")


class SummarizeTextRequest(BaseModel):
    text: str = ""
    # Unknown values fall back to "medium" inside the summarizer.
    length: Optional[str] = "medium"


class SummarizeResponse(BaseModel):
    summary: str
    length: str
    sentence_count: int
    selected_count: int
    latency_ms: float


def _format_size(n: int) -> str:
    if n >= 1024 * 1024 and n % (1024 * 1024) == 0:
        return f"{n // (1024 * 1024)}MB"
    if n >= 1024 and n % 1024 == 0:
        return f"{n // 1024}KB"
    return f"{n} bytes"


def _run_summarizer(text: str, length: Optional[str]) -> tuple[SummaryResult, float]:
    start = time.perf_counter()
    try:
        res = extract_summary(text, length)
    except SummarizationError as e:
        logger.info("Rejected summarize request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Summarization failed")
        raise HTTPException(status_code=500, detail=str(e))
    return res, (time.perf_counter() - start) * 1000.0


def _respond(request: Request, res: SummaryResult, latency_ms: float, *, source: str, input_chars: int) -> SummarizeResponse:
    analytics: AnalyticsStore = request.app.state.analytics
    analytics.append_request(
        RequestLogRecord(
            ts=time.time(),
            latency_ms=latency_ms,
            source=source,
            length=res.length.value,
            input_chars=input_chars,
            summary_chars=len(res.summary),
            sentence_count=res.sentence_count,
            selected_count=res.selected_count,
        )
    )
    logger.info(
        "summarize source=%s latency_ms=%.1f sentences=%d selected=%d summary_chars=%d",
        source,
        latency_ms,
        res.sentence_count,
        res.selected_count,
        len(res.summary),
    )
    return SummarizeResponse(
        summary=res.summary,
        length=res.length.value,
        sentence_count=res.sentence_count,
        selected_count=res.selected_count,
        latency_ms=latency_ms,
    )


def _build_router() -> APIRouter:
    router = APIRouter(prefix="/api")

    @router.get("/")
    def root() -> dict[str, str]:
        return {"message": "Summify API"}

    @router.post("/summarize/text", response_model=SummarizeResponse)
    def summarize_text(req: SummarizeTextRequest, request: Request) -> SummarizeResponse:
        settings: Settings = request.app.state.settings
        if not req.text.strip():
            raise HTTPException(status_code=400, detail="Text is required")
        if len(req.text) > settings.api.max_text_chars:
            raise HTTPException(status_code=400, detail="Text is too long")

        res, latency_ms = _run_summarizer(req.text, req.length)
        return _respond(request, res, latency_ms, source="text", input_chars=len(req.text))

    @router.post("/summarize/file", response_model=SummarizeResponse)
    async def summarize_file(
        request: Request,
        file: UploadFile = File(...),
        length: Optional[str] = Form("medium"),
    ) -> SummarizeResponse:
        settings: Settings = request.app.state.settings
        limit = settings.api.max_upload_bytes

        # one byte past the limit marks an oversized upload
        data = await file.read(limit + 1)
        if len(data) > limit:
            raise HTTPException(
                status_code=400,
                detail=f"File is too large. Maximum size is {_format_size(limit)}.",
            )

        try:
            text = await run_in_threadpool(extract_text, data, file.content_type, file.filename)
        except ExtractionError as e:
            logger.info("Rejected upload %s: %s", file.filename, e)
            raise HTTPException(status_code=400, detail=str(e))

        if len(text) > settings.api.max_text_chars:
            raise HTTPException(
                status_code=400,
                detail=f"Text is too long. Maximum length is {settings.api.max_text_chars:,} characters.",
            )

        res, latency_ms = await run_in_threadpool(_run_summarizer, text, length)
        return await run_in_threadpool(_respond, request, res, latency_ms, source="file", input_chars=len(text))

    return router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API with an explicit settings context."""
    settings = settings or load_settings()
    log_dir = Path(settings.logging.log_dir)
    setup_logging(log_dir, settings.logging.level)

    app = FastAPI(title="Summify")
    app.state.settings = settings
    app.state.analytics = AnalyticsStore(
        log_dir=log_dir,
        requests_jsonl=settings.logging.requests_jsonl,
        usage_json=settings.logging.usage_json,
    )
    app.include_router(_build_router())
    app.add_middleware(
        CORSMiddleware,
        allow_credentials=True,
        allow_origins=settings.api.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app
