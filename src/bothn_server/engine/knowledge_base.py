"""
Knowledge-Base Retrieval

Static Q&A store answered by TF-IDF / cosine similarity. The IDF table and
vocabulary are computed once from the normalized questions; every question
vector is computed against the same vocabulary, so all vectors share one
dimensionality for the lifetime of the instance.

Matching rules
--------------
- The best question must score strictly above the minimum similarity
  (0.1 by default); a score exactly equal to it does not match.
- Exact ties keep the earliest question in load order.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .models import KnowledgeEntry, QAPair
from .text import normalize
from .tfidf import IDFTable, Vocabulary, compute_idf, cosine_similarity, vectorize, vocabulary_of

logger = logging.getLogger("bothn.knowledge_base")

DEFAULT_MIN_SIMILARITY = 0.1

NO_ANSWER_MESSAGE = (
    "Hiện tại tôi chưa thể trả lời câu hỏi của bạn. "
    "Bạn có thể thử diễn đạt lại câu hỏi không?"
)


class KnowledgeBase:
    """Immutable question/answer index."""

    def __init__(
        self,
        entries: Iterable[KnowledgeEntry],
        min_similarity: float = DEFAULT_MIN_SIMILARITY,
    ) -> None:
        self._entries: Tuple[KnowledgeEntry, ...] = tuple(entries)
        self._idf: IDFTable = compute_idf([e.text for e in self._entries])
        self._vocabulary: Vocabulary = vocabulary_of(self._idf)
        self._vectors: List[np.ndarray] = [
            vectorize(e.text, self._vocabulary, self._idf) for e in self._entries
        ]
        self.min_similarity = min_similarity

        logger.info(
            "Knowledge base ready: %d questions, vocabulary size %d",
            len(self._entries),
            len(self._vocabulary),
        )

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[QAPair],
        min_similarity: float = DEFAULT_MIN_SIMILARITY,
    ) -> "KnowledgeBase":
        entries = [
            KnowledgeEntry(text=normalize(p.question), answer=p.answer)
            for p in pairs
        ]
        return cls(entries, min_similarity=min_similarity)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def idf(self) -> IDFTable:
        return dict(self._idf)

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    # ------------------------------------------------------------------
    # Retrieval
    # ------------------------------------------------------------------

    def best_match(self, message: str) -> Tuple[Optional[KnowledgeEntry], float]:
        """
        Find the entry most similar to `message`.

        Returns
        -------
        Tuple[Optional[KnowledgeEntry], float]
            The winning entry (None if nothing beats the threshold) and its
            similarity (the threshold itself when there is no winner).
        """
        query = vectorize(normalize(message), self._vocabulary, self._idf)

        best: Optional[KnowledgeEntry] = None
        best_score = self.min_similarity
        for entry, vector in zip(self._entries, self._vectors):
            score = cosine_similarity(query, vector)
            if score > best_score:
                best_score = score
                best = entry
        return best, best_score

    def answer(self, message: str) -> Optional[str]:
        entry, _ = self.best_match(message)
        return entry.answer if entry is not None else None
