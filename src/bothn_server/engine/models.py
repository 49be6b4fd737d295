"""
Engine Data Models

Pydantic schemas for the static data the assistant loads at startup:
knowledge-base Q&A pairs, conversational intents and the abbreviation map.
These models are the authoritative format of the JSON files under
`bothn_server/data/`.
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, RootModel


class QAPair(BaseModel):
    """A single knowledge-base entry as written in the data file."""

    question: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)

    model_config = ConfigDict(extra="forbid", frozen=True)


class KnowledgeBaseFile(BaseModel):
    qa_pairs: List[QAPair] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class Intent(BaseModel):
    """
    Static rule mapping trigger substrings to canned responses.

    Patterns are matched against the normalized message, so they are
    expected to be lowercase and free of the stripped punctuation.
    """

    tag: str | None = None
    patterns: List[str] = Field(..., min_length=1)
    responses: List[str] = Field(..., min_length=1)

    model_config = ConfigDict(extra="ignore", frozen=True)


class IntentsFile(BaseModel):
    intents: List[Intent] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class AbbreviationsFile(RootModel[Dict[str, str]]):
    """Flat mapping shorthand -> expansion."""


class KnowledgeEntry(BaseModel):
    """A knowledge-base question after normalization."""

    text: str
    answer: str

    model_config = ConfigDict(extra="forbid", frozen=True)
