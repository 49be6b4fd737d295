import pytest

from bothn_server.engine.extraction import (
    NOT_RELEVANT_MESSAGE,
    SUMMARY_HEADER,
    ExtractionContext,
    analyze_document,
    is_closure_message,
    is_summary_request,
)
from bothn_server.engine.tfidf import compute_idf


@pytest.fixture
def cat_dog_context():
    corpus = ("con mèo ngồi trên ghế", "con chó chạy trong sân")
    return ExtractionContext(text="", corpus=corpus, idf=compute_idf(corpus))


# ---------------------------------------------------------------------
# Question answering
# ---------------------------------------------------------------------

def test_answer_returns_matching_sentence(cat_dog_context):
    assert cat_dog_context.answer("mèo") == "con mèo ngồi trên ghế"


def test_answer_tie_keeps_first_sentence(cat_dog_context):
    # "con" is in both sentences: ln(2/3) + 1 ~ 0.59 > 0.5
    assert cat_dog_context.answer("con") == "con mèo ngồi trên ghế"


def test_answer_without_overlap(cat_dog_context):
    assert cat_dog_context.answer("xe máy") == NOT_RELEVANT_MESSAGE


def test_answer_below_score_threshold():
    # a single-sentence document gives every word ln(1/2) + 1 ~ 0.31
    context = analyze_document("Chỉ có một câu duy nhất ở đây.")
    assert context.answer("câu") == NOT_RELEVANT_MESSAGE


def test_answer_strips_sentence(cat_dog_text):
    context = analyze_document(cat_dog_text)
    assert context.corpus[1].startswith(" ")
    assert context.answer("chó") == "con chó chạy trong sân"


def test_query_words_are_deduplicated(cat_dog_context):
    _, score = cat_dog_context.best_sentence("mèo mèo mèo")
    assert score == pytest.approx(1.0)


# ---------------------------------------------------------------------
# Summarization
# ---------------------------------------------------------------------

def test_summary_orders_by_score_with_stable_ties():
    context = ExtractionContext(
        text="",
        corpus=("aa bb", "cc", "aa aa", "dd"),
        idf={"aa": 1.0, "bb": 2.0, "cc": 3.0, "dd": 3.0},
    )
    assert context.top_sentences() == ["aa bb", "cc", "dd"]
    assert context.summarize() == SUMMARY_HEADER + "aa bb\n- cc\n- dd"


def test_summary_counts_repeated_words():
    context = ExtractionContext(
        text="",
        corpus=("aa", "aa aa aa", "bb"),
        idf={"aa": 1.0, "bb": 2.5},
    )
    assert context.top_sentences(limit=1) == ["aa aa aa"]


def test_summary_of_short_document():
    context = analyze_document("Đây là câu duy nhất trong tài liệu.")
    assert context.summarize() == SUMMARY_HEADER + "đây là câu duy nhất trong tài liệu"


# ---------------------------------------------------------------------
# Analysis & keywords
# ---------------------------------------------------------------------

def test_analyze_document(cat_dog_text):
    context = analyze_document(cat_dog_text)
    assert context.text == cat_dog_text
    assert len(context.corpus) == 2
    assert context.is_active
    assert "mèo" in context.idf


def test_analyze_document_without_sentences():
    context = analyze_document("Ngắn.")
    assert context.corpus == ()
    assert context.idf == {}
    assert not context.is_active


@pytest.mark.parametrize("message", ["Cảm ơn nhé", "XONG rồi", "thoát", "đủ rồi", "kết thúc thôi"])
def test_closure_keywords(message):
    assert is_closure_message(message)


def test_non_closure_message():
    assert not is_closure_message("con mèo ở đâu")


def test_summary_keyword():
    assert is_summary_request("Tóm tắt giúp tôi")
    assert not is_summary_request("tóm lại")
