import math

import numpy as np
import pytest

from bothn_server.engine.text import build_corpus
from bothn_server.engine.tfidf import (
    DimensionMismatchError,
    compute_idf,
    cosine_similarity,
    vectorize,
    vocabulary_of,
)


# ---------------------------------------------------------------------
# IDF
# ---------------------------------------------------------------------

def test_idf_of_word_in_every_document():
    corpus = ["con mèo ngồi", "con chó chạy", "con gà gáy"]
    idf = compute_idf(corpus)
    assert idf["con"] == pytest.approx(math.log(3 / 4) + 1)


def test_idf_of_word_in_one_document():
    corpus = ["con mèo ngồi", "con chó chạy", "con gà gáy"]
    idf = compute_idf(corpus)
    assert idf["mèo"] == pytest.approx(math.log(3 / 2) + 1)


def test_idf_single_document_can_drop_below_one():
    idf = compute_idf(["một câu duy nhất"])
    assert idf["câu"] == pytest.approx(math.log(1 / 2) + 1)


def test_idf_counts_substring_occurrences():
    # "an" is also found inside "ban", so two documents contain it
    corpus = ["ban ghe", "an com", "xin chao"]
    idf = compute_idf(corpus)
    assert idf["an"] == pytest.approx(1.0)
    assert idf["ghe"] == pytest.approx(math.log(3 / 2) + 1)


def test_idf_empty_corpus():
    assert compute_idf([]) == {}


def test_idf_skips_single_character_words():
    assert list(compute_idf(["a bb c"])) == ["bb"]


def test_vocabulary_follows_first_appearance():
    idf = compute_idf(["mot hai", "ba hai"])
    assert vocabulary_of(idf) == ("mot", "hai", "ba")


def test_corpus_and_idf_are_deterministic():
    text = "Hôm nay trời rất đẹp. Chúng tôi đi dạo trong công viên."
    first = compute_idf(build_corpus(text))
    second = compute_idf(build_corpus(text))
    assert first == second
    assert list(first) == list(second)


# ---------------------------------------------------------------------
# Vectorization
# ---------------------------------------------------------------------

def test_vectorize_empty_text_is_zero_vector():
    vocabulary = ("mot", "hai", "ba")
    vector = vectorize("", vocabulary, {"mot": 1.0})
    assert vector.shape == (3,)
    assert not vector.any()


def test_vectorize_tf_times_idf():
    vocabulary = ("mot", "hai", "ba")
    vector = vectorize("mot mot hai", vocabulary, {"mot": 2.0, "hai": 1.0, "ba": 5.0})
    np.testing.assert_allclose(vector, [2 / 3 * 2.0, 1 / 3 * 1.0, 0.0])


def test_vectorize_missing_idf_defaults_to_one():
    vector = vectorize("ba", ("mot", "ba"), {})
    np.testing.assert_allclose(vector, [0.0, 1.0])


def test_vectorize_length_matches_vocabulary():
    idf = compute_idf(["con mèo ngồi trên ghế", "con chó chạy trong sân"])
    vocabulary = vocabulary_of(idf)
    assert len(vectorize("mèo nào", vocabulary, idf)) == len(vocabulary)


# ---------------------------------------------------------------------
# Cosine similarity
# ---------------------------------------------------------------------

def test_cosine_of_vector_with_itself():
    v = [0.5, 1.0, 2.0]
    assert cosine_similarity(v, v) == pytest.approx(1.0)


def test_cosine_with_zero_vector():
    assert cosine_similarity([1.0, 2.0], [0.0, 0.0]) == 0.0
    assert cosine_similarity([0.0, 0.0], [0.0, 0.0]) == 0.0


def test_cosine_orthogonal():
    assert cosine_similarity([1.0, 0.0], [0.0, 3.0]) == pytest.approx(0.0)


def test_cosine_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        cosine_similarity([1.0, 2.0], [1.0, 2.0, 3.0])


def test_dimension_mismatch_is_value_error():
    assert issubclass(DimensionMismatchError, ValueError)
