"""
Extraction Routes

Document acquisition endpoints. Each successful call replaces the active
extraction context, after which chat messages are answered from the
document until the user closes the session with a closure keyword.

Corpus and IDF construction is CPU-bound batch work and runs in the
worker thread pool so it does not block the event loop.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile, status
from starlette.concurrency import run_in_threadpool

from .models import ExtractionResponse, ExtractionStatusResponse, ExtractUrlRequest
from ..config import settings
from ..engine.router import AssistantState
from ..sources.files import extract_document_text
from ..sources.web import WebPageFetcher
from .dependencies import get_assistant_state, get_web_fetcher

logger = logging.getLogger("bothn.extraction")

router = APIRouter(prefix="/extract", tags=["extraction"])

ANALYSIS_DONE_MESSAGE = (
    "Tôi đã phân tích xong nội dung. Bây giờ bạn có thể đặt câu hỏi "
    "hoặc yêu cầu \"tóm tắt\"."
)


async def _analyze(state: AssistantState, text: str, source: str) -> ExtractionResponse:
    context = await run_in_threadpool(state.analyze_document, text)
    logger.info("Extraction context replaced from %s", source)
    return ExtractionResponse(
        reply=ANALYSIS_DONE_MESSAGE,
        source=source,
        sentences=len(context.corpus),
        characters=len(text),
    )


@router.post(
    "/file",
    response_model=ExtractionResponse,
    summary="Analyze an uploaded .txt, .docx or .xlsx file",
    status_code=status.HTTP_200_OK,
)
async def extract_file(
    file: Annotated[UploadFile, File(...)],
    state: Annotated[AssistantState, Depends(get_assistant_state)],
) -> ExtractionResponse:
    content = await file.read()
    filename = file.filename or ""
    text = await run_in_threadpool(
        extract_document_text,
        filename,
        content,
        settings.max_upload_bytes,
    )
    return await _analyze(state, text, filename)


@router.post(
    "/url",
    response_model=ExtractionResponse,
    summary="Analyze the text of a web page",
    status_code=status.HTTP_200_OK,
)
async def extract_url(
    req: ExtractUrlRequest,
    state: Annotated[AssistantState, Depends(get_assistant_state)],
    fetcher: Annotated[WebPageFetcher, Depends(get_web_fetcher)],
) -> ExtractionResponse:
    url = str(req.url)
    text = await fetcher.fetch_text(url)
    return await _analyze(state, text, url)


@router.get(
    "/status",
    response_model=ExtractionStatusResponse,
    summary="Whether a document is currently loaded",
)
async def extraction_status(
    state: Annotated[AssistantState, Depends(get_assistant_state)],
) -> ExtractionStatusResponse:
    context = state.extraction
    if context is None or not context.is_active:
        return ExtractionStatusResponse(active=False)
    return ExtractionStatusResponse(active=True, sentences=len(context.corpus))
