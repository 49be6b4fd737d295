"""
Retrieval & Response Engine

Pure text-processing core of the assistant: normalization, TF-IDF
weighting, cosine similarity, the four response strategies and the
router that orders them.
"""

from .text import normalize, split_words, build_corpus
from .tfidf import (
    DimensionMismatchError,
    compute_idf,
    cosine_similarity,
    vectorize,
    vocabulary_of,
)
from .extraction import ExtractionContext, analyze_document
from .intents import IntentMatcher
from .knowledge_base import KnowledgeBase
from .abbreviations import AbbreviationExpander
from .router import (
    AssistantState,
    EndSession,
    Reply,
    ResponseRouter,
    RouteResult,
    Silent,
)

__all__ = [
    "normalize",
    "split_words",
    "build_corpus",
    "DimensionMismatchError",
    "compute_idf",
    "cosine_similarity",
    "vectorize",
    "vocabulary_of",
    "ExtractionContext",
    "analyze_document",
    "IntentMatcher",
    "KnowledgeBase",
    "AbbreviationExpander",
    "AssistantState",
    "EndSession",
    "Reply",
    "ResponseRouter",
    "RouteResult",
    "Silent",
]
