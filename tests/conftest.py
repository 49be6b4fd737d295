import random

import pytest

from bothn_server.engine.abbreviations import AbbreviationExpander
from bothn_server.engine.intents import IntentMatcher
from bothn_server.engine.knowledge_base import KnowledgeBase
from bothn_server.engine.models import Intent, QAPair
from bothn_server.engine.router import AssistantState, ResponseRouter


@pytest.fixture
def qa_pairs():
    return [
        QAPair(question="Con mèo ăn gì?", answer="Mèo ăn cá."),
        QAPair(question="Con chó thích gì?", answer="Chó thích xương."),
    ]


@pytest.fixture
def intents():
    return [
        Intent(tag="greeting", patterns=["xin chào"], responses=["Chào bạn!"]),
        Intent(tag="thanks", patterns=["cảm ơn"], responses=["Không có gì!"]),
    ]


@pytest.fixture
def knowledge_base(qa_pairs):
    return KnowledgeBase.from_pairs(qa_pairs)


@pytest.fixture
def state(knowledge_base, intents):
    return AssistantState(knowledge_base, IntentMatcher(intents, rng=random.Random(0)))


@pytest.fixture
def expander():
    return AbbreviationExpander({"tks": "cảm ơn", "ko": "không"})


@pytest.fixture
def router(state, expander):
    return ResponseRouter(state, preprocessors=[expander])


@pytest.fixture
def cat_dog_text():
    return "Con mèo ngồi trên ghế. Con chó chạy trong sân."
