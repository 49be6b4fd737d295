"""
Extraction Session

Question answering and summarization over a single user-supplied document.

Lifecycle
---------
inactive -> active -> inactive

- A document source (file parser or URL fetcher) supplies raw text;
  `analyze_document()` builds the corpus and its IDF table in one batch.
- The context is then owned by `AssistantState` (see router.py), which
  swaps it in atomically and clears it when the user sends a closure
  keyword. There is no timeout and no external cancel.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .text import build_corpus, normalize, split_words
from .tfidf import MIN_WORD_LENGTH, compute_idf

logger = logging.getLogger("bothn.extraction")


CLOSURE_KEYWORDS: Tuple[str, ...] = ("thoát", "xong", "cảm ơn", "đủ rồi", "kết thúc")
SUMMARY_KEYWORD = "tóm tắt"

SUMMARY_SIZE = 3
MIN_ANSWER_SCORE = 0.5

SUMMARY_HEADER = "Đây là tóm tắt những điểm chính từ tài liệu:\n- "
NOT_RELEVANT_MESSAGE = (
    "Xin lỗi, tôi không tìm thấy thông tin nào đủ liên quan đến câu hỏi "
    "của bạn trong tài liệu."
)


@dataclass(frozen=True)
class ExtractionContext:
    """Corpus and IDF table of one analyzed document."""

    text: str
    corpus: Tuple[str, ...]
    idf: Dict[str, float] = field(default_factory=dict)

    @property
    def is_active(self) -> bool:
        """A context only answers questions when it produced sentences."""
        return bool(self.corpus)

    # ------------------------------------------------------------------
    # Summarization
    # ------------------------------------------------------------------

    def score_sentence(self, sentence: str) -> float:
        return sum(self.idf.get(word, 0.0) for word in split_words(sentence))

    def top_sentences(self, limit: int = SUMMARY_SIZE) -> List[str]:
        """Highest-scoring sentences, ties kept in document order."""
        ranked = sorted(self.corpus, key=self.score_sentence, reverse=True)
        return ranked[:limit]

    def summarize(self, limit: int = SUMMARY_SIZE) -> str:
        top = [s.strip() for s in self.top_sentences(limit)]
        return SUMMARY_HEADER + "\n- ".join(top)

    # ------------------------------------------------------------------
    # Question answering
    # ------------------------------------------------------------------

    def best_sentence(self, question: str) -> Tuple[str | None, float]:
        """
        Find the sentence sharing the most IDF weight with `question`.

        Each distinct question word (length > 1) that occurs as a substring
        of a sentence adds its IDF weight to that sentence's score. The
        first sentence reaching the maximum wins.
        """
        query_words = dict.fromkeys(
            w for w in split_words(normalize(question)) if len(w) >= MIN_WORD_LENGTH
        )

        best: str | None = None
        max_score = 0.0
        for sentence in self.corpus:
            score = sum(
                self.idf.get(word, 0.0) for word in query_words if word in sentence
            )
            if score > max_score:
                max_score = score
                best = sentence.strip()
        return best, max_score

    def answer(self, question: str) -> str:
        sentence, score = self.best_sentence(question)
        if sentence is not None and score > MIN_ANSWER_SCORE:
            return sentence
        return NOT_RELEVANT_MESSAGE


# ---------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------

def analyze_document(text: str) -> ExtractionContext:
    """Build a fresh extraction context from raw document text."""
    corpus = tuple(build_corpus(text))
    idf = compute_idf(corpus)

    if corpus:
        logger.info(
            "Analyzed document: %d chars, %d sentences, %d distinct words",
            len(text),
            len(corpus),
            len(idf),
        )
    else:
        logger.warning("Analyzed document produced no usable sentences (%d chars)", len(text))

    return ExtractionContext(text=text, corpus=corpus, idf=idf)


def is_closure_message(message: str) -> bool:
    lowered = message.lower()
    return any(keyword in lowered for keyword in CLOSURE_KEYWORDS)


def is_summary_request(message: str) -> bool:
    return SUMMARY_KEYWORD in message.lower()
