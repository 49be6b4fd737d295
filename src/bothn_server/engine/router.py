"""
Response Router

Selects the reply to a user message by trying four strategies in a fixed
priority order. The first applicable strategy wins:

1. Extraction  - question answering / summary over the active document.
                 When a document is active this strategy always answers.
2. Math        - plain arithmetic expressions.
3. Intent      - first-match substring rules with canned responses.
4. Knowledge   - TF-IDF / cosine retrieval over the static Q&A base,
                 falling back to a fixed "cannot answer" message.

Results are tagged: `Reply`, `EndSession` (the user closed the extraction
session; the presentation layer shows a summary card and no text) or
`Silent` (nothing to answer, e.g. a blank message).

State
-----
`AssistantState` owns everything the router reads: the immutable
knowledge base and intents, plus the single process-wide extraction
context. The context is guarded by a re-entrant lock; new contexts are
built outside the lock and swapped in whole, so readers never observe a
partially built context. Two analyses racing each other resolve as
"last to finish wins".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import RLock
from typing import Callable, Literal, Optional, Sequence, Union

from .extraction import (
    ExtractionContext,
    analyze_document,
    is_closure_message,
    is_summary_request,
)
from .intents import IntentMatcher
from .knowledge_base import NO_ANSWER_MESSAGE, KnowledgeBase
from .math_solver import format_math_reply, solve_math

logger = logging.getLogger("bothn.router")


# ---------------------------------------------------------------------
# Route Results
# ---------------------------------------------------------------------

ReplySource = Literal["extraction", "math", "intent", "knowledge_base", "fallback"]


@dataclass(frozen=True)
class Reply:
    text: str
    source: ReplySource


@dataclass(frozen=True)
class EndSession:
    """The extraction session was closed; no textual reply."""


@dataclass(frozen=True)
class Silent:
    """No reply at all."""


RouteResult = Union[Reply, EndSession, Silent]

Preprocessor = Callable[[str], str]


# ---------------------------------------------------------------------
# Assistant State
# ---------------------------------------------------------------------

class AssistantState:
    """
    Process-wide assistant state.

    The knowledge base and intents are fixed at construction. The
    extraction context is replaced wholesale by `analyze_document()` and
    cleared by `end_extraction()`.
    """

    def __init__(self, knowledge_base: KnowledgeBase, intents: IntentMatcher) -> None:
        self.knowledge_base = knowledge_base
        self.intents = intents
        self._extraction: Optional[ExtractionContext] = None
        self._lock = RLock()

    @property
    def extraction(self) -> Optional[ExtractionContext]:
        with self._lock:
            return self._extraction

    def set_extraction(self, context: Optional[ExtractionContext]) -> None:
        with self._lock:
            self._extraction = context

    def analyze_document(self, text: str) -> ExtractionContext:
        """
        Build a context for `text` and make it the active one.

        This is blocking batch work; async callers should run it in a
        worker thread.
        """
        context = analyze_document(text)
        self.set_extraction(context)
        return context

    def end_extraction(self, expected: Optional[ExtractionContext] = None) -> bool:
        """
        Clear the active context.

        When `expected` is given, the context is cleared only if it is still
        the active one, so a document analyzed concurrently is not discarded
        by a closure message aimed at its predecessor.

        Returns
        -------
        bool
            True if a context was cleared.
        """
        with self._lock:
            if self._extraction is None:
                return False
            if expected is not None and self._extraction is not expected:
                return False
            self._extraction = None
            return True


# ---------------------------------------------------------------------
# Router
# ---------------------------------------------------------------------

class ResponseRouter:
    """Applies the response strategies to a message in priority order."""

    def __init__(
        self,
        state: AssistantState,
        preprocessors: Sequence[Preprocessor] = (),
    ) -> None:
        self.state = state
        self._preprocessors = tuple(preprocessors)

    def preprocess(self, message: str) -> str:
        for step in self._preprocessors:
            message = step(message)
        return message

    def route(self, message: str) -> RouteResult:
        message = self.preprocess(message)
        if not message.strip():
            return Silent()

        context = self.state.extraction
        if context is not None and context.is_active:
            return self._route_extraction(context, message)

        value = solve_math(message)
        if value is not None:
            return Reply(format_math_reply(value), "math")

        response = self.state.intents.respond(message)
        if response is not None:
            return Reply(response, "intent")

        answer = self.state.knowledge_base.answer(message)
        if answer is not None:
            return Reply(answer, "knowledge_base")

        return Reply(NO_ANSWER_MESSAGE, "fallback")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _route_extraction(self, context: ExtractionContext, message: str) -> RouteResult:
        if is_closure_message(message):
            if self.state.end_extraction(expected=context):
                logger.info("Extraction session closed by user")
            return EndSession()

        if is_summary_request(message):
            return Reply(context.summarize(), "extraction")

        return Reply(context.answer(message), "extraction")
