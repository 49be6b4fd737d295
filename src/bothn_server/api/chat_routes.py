"""
Chat Routes: Conversational Interface

This module implements the chat endpoint used by the web client:

1. Validate and trim the incoming message.
2. Handle `@` commands (`@extract`, `@clear`).
3. Hand everything else to the ResponseRouter (abbreviations are expanded
   by the router's pre-processing step).
4. Translate the routing result into a ChatResponse:
   - Reply       -> kind="reply"
   - EndSession  -> kind="end_session" with the session summary card
   - Silent      -> kind="silent"
5. Record the exchange in the session history when a session_id is given.
"""

from fastapi import APIRouter, Depends, Query, status
from typing import Annotated, List, Optional
import re

from .models import (
    Card,
    CardAction,
    ChatHistoryResponse,
    ChatRequest,
    ChatResponse,
    CommandInfo,
)
from ..config import settings
from ..engine.router import EndSession, Reply, ResponseRouter, RouteResult
from ..sessions.store import SessionStore
from .dependencies import get_router, get_session_store

router = APIRouter(prefix="/chat", tags=["chat"])


ILLEGAL_INPUT_RE = re.compile(r"[<>]")

INVALID_INPUT_MESSAGE = "Đầu vào không hợp lệ!"
HISTORY_CLEARED_MESSAGE = "Lịch sử trò chuyện đã được xóa."
FOLLOW_UP_QUESTION = "làm thế nào để học tập hiệu quả"

COMMANDS: List[CommandInfo] = [
    CommandInfo(
        name="@extract",
        description="Trích xuất thông tin từ file/URL",
        icon="fa-file-import",
    ),
    CommandInfo(
        name="@clear",
        description="Xóa lịch sử trò chuyện",
        icon="fa-trash-alt",
    ),
]


# ---------------------------------------------------------------------
# Cards
# ---------------------------------------------------------------------

def extraction_options_card() -> Card:
    return Card(
        kind="extraction_options",
        title="Trích xuất thông tin",
        lines=["Vui lòng chọn nguồn để tôi có thể quét và trả lời câu hỏi của bạn."],
        actions=[
            CardAction(label="Tải lên File", icon="fa-upload", endpoint="/extract/file"),
            CardAction(label="Nhập URL", icon="fa-link", endpoint="/extract/url"),
        ],
    )


def session_summary_card() -> Card:
    return Card(
        kind="session_summary",
        title="Phiên hỏi đáp đã kết thúc",
        lines=[
            "Tôi đã xóa nội dung của tài liệu khỏi bộ nhớ tạm.",
            "Bạn muốn làm gì tiếp theo?",
        ],
        actions=[
            CardAction(
                label="Trích xuất tài liệu khác",
                icon="fa-file-import",
                command="@extract",
            ),
            CardAction(
                label="Hỏi một câu ngẫu nhiên",
                icon="fa-graduation-cap",
                message=FOLLOW_UP_QUESTION,
            ),
        ],
        delay_ms=settings.summary_card_delay_ms,
    )


# ---------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------

def _to_chat_response(result: RouteResult) -> ChatResponse:
    if isinstance(result, Reply):
        return ChatResponse(kind="reply", reply=result.text, source=result.source)
    if isinstance(result, EndSession):
        return ChatResponse(kind="end_session", card=session_summary_card())
    return ChatResponse(kind="silent")


def filter_commands(prefix: Optional[str]) -> List[CommandInfo]:
    """Commands whose name contains the typed text (leading '@' ignored)."""
    term = (prefix or "").lstrip("@").lower()
    return [cmd for cmd in COMMANDS if term in cmd.name.lower()]


# ---------------------------------------------------------------------
# Chat Route
# ---------------------------------------------------------------------

@router.post(
    "/",
    response_model=ChatResponse,
    response_model_exclude_none=True,
    summary="Send a message to the assistant",
    status_code=status.HTTP_200_OK,
)
async def chat(
    req: ChatRequest,
    chat_router: Annotated[ResponseRouter, Depends(get_router)],
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> ChatResponse:
    """
    Answer one user message.

    Parameters
    ----------
    req : ChatRequest
        Contains:
        - message: Raw user text
        - session_id: Optional id under which history is kept
    """
    message = req.message.strip()

    if ILLEGAL_INPUT_RE.search(message):
        return ChatResponse(kind="reply", reply=INVALID_INPUT_MESSAGE)

    if not message:
        return ChatResponse(kind="silent")

    # -------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------
    command = message.lower()
    if command.startswith("@extract"):
        return ChatResponse(kind="reply", card=extraction_options_card())

    if command.startswith("@clear"):
        if req.session_id:
            store.clear(req.session_id)
        return ChatResponse(kind="reply", reply=HISTORY_CLEARED_MESSAGE)

    # -------------------------------------------------------------
    # Routing
    # -------------------------------------------------------------
    response = _to_chat_response(chat_router.route(message))

    if req.session_id and response.kind != "silent":
        store.record_exchange(req.session_id, message, response.reply)

    return response


# ---------------------------------------------------------------------
# History & Commands
# ---------------------------------------------------------------------

@router.get(
    "/history/{session_id}",
    response_model=ChatHistoryResponse,
    summary="Chat history of a session",
)
async def get_history(
    session_id: str,
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> ChatHistoryResponse:
    return ChatHistoryResponse(session_id=session_id, messages=store.get_history(session_id))


@router.delete(
    "/history/{session_id}",
    response_model=ChatHistoryResponse,
    summary="Clear the chat history of a session",
)
async def clear_history(
    session_id: str,
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> ChatHistoryResponse:
    store.clear(session_id)
    return ChatHistoryResponse(session_id=session_id, messages=[])


@router.get(
    "/commands",
    response_model=List[CommandInfo],
    summary="Command suggestions for '@' input",
)
async def list_commands(
    prefix: Annotated[Optional[str], Query(max_length=50)] = None,
) -> List[CommandInfo]:
    return filter_commands(prefix)
