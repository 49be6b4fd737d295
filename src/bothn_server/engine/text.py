"""
Text Normalization & Corpus Construction

This module holds the lowest layer of the retrieval engine: turning raw
user or document text into the normalized strings that every other engine
component consumes.

Conventions
-----------
- Normalization is lowercase + deletion of a fixed punctuation set.
  Letters with diacritics are preserved untouched.
- Word splitting is on single spaces only. Runs of whitespace produce
  empty tokens, which callers filter by length.
- Corpus sentences are normalized but NOT stripped; the extraction layer
  strips when it returns a sentence to the user.
"""

from __future__ import annotations

import re
from typing import List


# ---------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------

PUNCTUATION_RE = re.compile(r"[.,/#!$%^&*;:{}=_\-`~()]")
SENTENCE_SPLIT_RE = re.compile(r"[.!?\n]")

MIN_SENTENCE_LENGTH = 10


# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------

def normalize(text: str) -> str:
    """Lowercase `text` and strip the fixed punctuation set."""
    return PUNCTUATION_RE.sub("", text.lower())


def split_words(text: str) -> List[str]:
    """Split on single spaces. Callers collapse whitespace themselves."""
    return text.split(" ")


def build_corpus(text: str) -> List[str]:
    """
    Split a document into normalized sentence-like segments.

    Segments are delimited by '.', '!', '?' and newlines. A segment is kept
    only when its trimmed length exceeds MIN_SENTENCE_LENGTH characters.

    Parameters
    ----------
    text : str
        Raw document text as supplied by a file parser or URL fetcher.

    Returns
    -------
    List[str]
        Normalized sentences in document order. Empty when nothing
        survives the length filter.
    """
    return [
        normalize(segment)
        for segment in SENTENCE_SPLIT_RE.split(text)
        if len(segment.strip()) > MIN_SENTENCE_LENGTH
    ]
