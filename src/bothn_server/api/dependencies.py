import random
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from ..config import settings
from ..engine.abbreviations import AbbreviationExpander
from ..engine.intents import IntentMatcher
from ..engine.knowledge_base import KnowledgeBase
from ..engine.loader import load_abbreviations, load_intents, load_qa_pairs
from ..engine.router import AssistantState, ResponseRouter
from ..sessions.store import SessionStore, session_store
from ..sources.web import WebPageFetcher


@lru_cache
def get_assistant_state() -> AssistantState:
    knowledge_base = KnowledgeBase.from_pairs(load_qa_pairs(settings.knowledge_base_path))
    intents = IntentMatcher(
        load_intents(settings.intents_path),
        rng=random.Random(settings.intent_random_seed),
    )
    return AssistantState(knowledge_base, intents)


@lru_cache
def get_abbreviation_expander() -> AbbreviationExpander:
    return AbbreviationExpander(load_abbreviations(settings.abbreviations_path))


def get_router(
    state: Annotated[AssistantState, Depends(get_assistant_state)],
    expander: Annotated[AbbreviationExpander, Depends(get_abbreviation_expander)],
) -> ResponseRouter:
    return ResponseRouter(state, preprocessors=[expander])


def get_session_store() -> SessionStore:
    return session_store


@lru_cache
def get_web_fetcher() -> WebPageFetcher:
    return WebPageFetcher()
