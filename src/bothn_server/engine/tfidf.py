"""
TF-IDF Weighting & Cosine Similarity

This module implements the numeric core of the retrieval engine:

- IDF tables over a corpus of normalized documents
- TF-IDF vectors over a fixed vocabulary
- Cosine similarity between two such vectors

Key Properties
--------------
- All functions are pure and deterministic (no hidden random state).
- The vocabulary is the IDF table's key order, i.e. the order in which
  words first appear in the corpus. Every vector computed against a table
  has exactly len(vocabulary) components.
- Document frequency uses substring containment, not token membership:
  a word counts as present in a document when it occurs anywhere inside
  the document text. Short words therefore also match inside longer ones.
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Dict, Mapping, Sequence, Tuple

import numpy as np

from .text import split_words


IDFTable = Dict[str, float]
Vocabulary = Tuple[str, ...]

MIN_WORD_LENGTH = 2

# Weight used by vectorize() for vocabulary words missing from the table.
DEFAULT_IDF_WEIGHT = 1.0


# ---------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------

class DimensionMismatchError(ValueError):
    """Raised when two vectors of different lengths are compared."""


# ---------------------------------------------------------------------
# IDF
# ---------------------------------------------------------------------

def compute_idf(corpus: Sequence[str]) -> IDFTable:
    """
    Compute inverse document frequency weights over `corpus`.

    idf(w) = ln(N / (1 + df(w))) + 1

    where N is the number of documents and df(w) counts the documents that
    contain `w` as a substring.

    Parameters
    ----------
    corpus : Sequence[str]
        Normalized documents (sentences or knowledge-base questions).

    Returns
    -------
    IDFTable
        Insertion-ordered mapping word -> weight. Empty for an empty corpus.
    """
    doc_count = len(corpus)
    if doc_count == 0:
        return {}

    words = dict.fromkeys(
        w for w in split_words(" ".join(corpus)) if len(w) >= MIN_WORD_LENGTH
    )

    idf: IDFTable = {}
    for word in words:
        containing = sum(1 for doc in corpus if word in doc)
        idf[word] = math.log(doc_count / (1 + containing)) + 1
    return idf


def vocabulary_of(idf: Mapping[str, float]) -> Vocabulary:
    return tuple(idf.keys())


# ---------------------------------------------------------------------
# Vectorization
# ---------------------------------------------------------------------

def vectorize(
    text: str,
    vocabulary: Sequence[str],
    idf: Mapping[str, float],
) -> np.ndarray:
    """
    Build the TF-IDF vector of `text` over `vocabulary`.

    Term frequency is the word's count divided by the total number of
    space-separated tokens in `text`. Vocabulary words absent from `idf`
    are weighted with DEFAULT_IDF_WEIGHT.
    """
    vector = np.zeros(len(vocabulary), dtype=np.float64)
    if not text:
        return vector

    tokens = split_words(text)
    counts = Counter(tokens)
    total = len(tokens)

    for i, word in enumerate(vocabulary):
        count = counts.get(word)
        if count:
            vector[i] = (count / total) * idf.get(word, DEFAULT_IDF_WEIGHT)
    return vector


# ---------------------------------------------------------------------
# Similarity
# ---------------------------------------------------------------------

def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine of the angle between `a` and `b`.

    Returns 0.0 when either vector has zero magnitude.

    Raises
    ------
    DimensionMismatchError
        If the vectors differ in length.
    """
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)

    if va.shape != vb.shape:
        raise DimensionMismatchError(
            f"Cannot compare vectors of length {va.size} and {vb.size}."
        )

    magnitude_a = float(np.linalg.norm(va))
    magnitude_b = float(np.linalg.norm(vb))
    if magnitude_a == 0.0 or magnitude_b == 0.0:
        return 0.0

    return float(np.dot(va, vb) / (magnitude_a * magnitude_b))
