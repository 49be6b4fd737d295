"""
Global Error Handling

This module defines application-wide exception types and handlers for the
assistant server.

Design Goals
------------
- Document acquisition failures map to a status code and a chat message
  the client can show as-is
- Anything else becomes an opaque 500 with the traceback logged
"""

from __future__ import annotations

import logging
from typing import Dict, Any

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger("bothn.errors")


# ---------------------------------------------------------------------
# Document Source Exceptions
# ---------------------------------------------------------------------

class DocumentSourceError(RuntimeError):
    """
    Base error for failures while acquiring document text.

    Attributes
    ----------
    status_code : int
        HTTP status returned to the client.

    user_message : str
        Message shown in the chat window.
    """

    status_code: int = 422
    error_code: str = "document_error"
    user_message: str = "Đã có lỗi xảy ra khi xử lý file."

    def __init__(self, detail: str, user_message: str | None = None) -> None:
        super().__init__(detail)
        if user_message is not None:
            self.user_message = user_message


class UnsupportedDocumentError(DocumentSourceError):
    status_code = 415
    error_code = "unsupported_document"
    user_message = (
        "Xin lỗi, tôi chưa hỗ trợ định dạng file này. "
        "Vui lòng thử file .txt, .docx, hoặc .xlsx."
    )


class DocumentTooLargeError(DocumentSourceError):
    status_code = 413
    error_code = "document_too_large"
    user_message = "Xin lỗi, file này quá lớn để phân tích."


class DocumentFetchError(DocumentSourceError):
    status_code = 502
    error_code = "document_fetch_failed"
    user_message = "Rất tiếc, tôi không thể truy cập hoặc xử lý URL này."


# ---------------------------------------------------------------------
# Public Exception Handlers
# ---------------------------------------------------------------------

async def document_source_exception_handler(
    request: Request,
    exc: DocumentSourceError,
) -> JSONResponse:
    """
    Convert a DocumentSourceError into a JSON error with a chat message.

    The exception text is logged but only the user-facing message is
    returned.
    """
    logger.warning(
        "Document acquisition failed on %s %s: %s",
        request.method,
        request.url.path,
        exc,
    )

    payload: Dict[str, Any] = {
        "error": exc.error_code,
        "detail": exc.user_message,
    }
    return JSONResponse(status_code=exc.status_code, content=payload)


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """
    Last-resort handler. The traceback goes to the log only; the client
    gets a fixed 500 payload.
    """
    logger.exception(
        "Unhandled exception during request: %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )

    payload: Dict[str, Any] = {
        "error": "internal_server_error",
        "detail": "Internal server error",
    }

    return JSONResponse(
        status_code=500,
        content=payload,
    )
