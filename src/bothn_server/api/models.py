"""
API Models for the Assistant Server

This module defines all Pydantic models used for request/response validation
across chat, extraction and health endpoints.

Design Goals
------------
- Strong typing
- Safe defaults (no shared mutable state)
- Explicit reply kinds (reply / end_session / silent)
"""

from __future__ import annotations

from typing import List, Optional, Literal
from pydantic import AnyHttpUrl, BaseModel, Field, ConfigDict


# ---------------------------------------------------------------------
# Chat Models
# ---------------------------------------------------------------------

class ChatMessage(BaseModel):
    """
    Single message in a chat conversation.
    """
    role: Literal["user", "assistant"]
    content: str = Field(..., min_length=1)

    model_config = ConfigDict(extra="forbid")


class ChatRequest(BaseModel):
    """
    Incoming user message.
    """
    message: str = Field(..., max_length=4000)
    session_id: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


class CardAction(BaseModel):
    """
    Button on a card. Exactly one of `command`, `message` or `endpoint`
    says what the client should do when it is pressed.
    """
    label: str
    icon: Optional[str] = None
    command: Optional[str] = None
    message: Optional[str] = None
    endpoint: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


class Card(BaseModel):
    """
    Structured bot message rendered as a card by the client.
    """
    kind: Literal["extraction_options", "session_summary"]
    title: str
    lines: List[str] = Field(default_factory=list)
    actions: List[CardAction] = Field(default_factory=list)
    delay_ms: int = Field(default=0, ge=0)

    model_config = ConfigDict(extra="forbid")


class ChatResponse(BaseModel):
    """
    Outcome of one user message.

    kind
        "reply"        - `reply` holds the bot's answer (and maybe a card)
        "end_session"  - extraction session closed; `card` holds the
                         summary card, there is no text
        "silent"       - nothing to show
    """
    kind: Literal["reply", "end_session", "silent"]
    reply: Optional[str] = None
    source: Optional[str] = None
    card: Optional[Card] = None

    model_config = ConfigDict(extra="forbid")


class ChatHistoryResponse(BaseModel):
    session_id: str
    messages: List[ChatMessage]

    model_config = ConfigDict(extra="forbid")


class CommandInfo(BaseModel):
    """
    Entry of the `@` command catalogue.
    """
    name: str
    description: str
    icon: str

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------
# Extraction Models
# ---------------------------------------------------------------------

class ExtractUrlRequest(BaseModel):
    """
    Request to analyze the text of a web page.
    """
    url: AnyHttpUrl

    model_config = ConfigDict(extra="forbid")


class ExtractionResponse(BaseModel):
    """
    Result of a document analysis.
    """
    reply: str
    source: str
    sentences: int = Field(..., ge=0)
    characters: int = Field(..., ge=0)

    model_config = ConfigDict(extra="forbid")


class ExtractionStatusResponse(BaseModel):
    active: bool
    sentences: int = Field(default=0, ge=0)

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------

class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    knowledge_base_entries: int = Field(..., ge=0)
    intents: int = Field(..., ge=0)
    extraction_active: bool

    model_config = ConfigDict(extra="forbid")
