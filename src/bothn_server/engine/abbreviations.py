"""
Abbreviation Expansion

Pre-processing hook that replaces chat shorthand ("ko", "dc", ...) with
full words before a message reaches the response strategies.
"""

from __future__ import annotations

from typing import Mapping

from .text import normalize, split_words


class AbbreviationExpander:
    """Word-by-word replacement driven by a static shorthand map."""

    def __init__(self, abbreviations: Mapping[str, str]) -> None:
        self._abbreviations = {k.lower(): v for k, v in abbreviations.items()}

    def __len__(self) -> int:
        return len(self._abbreviations)

    def __call__(self, message: str) -> str:
        return self.expand(message)

    def expand(self, message: str) -> str:
        """
        Replace every space-separated word whose normalized form is a known
        abbreviation. Unknown words are kept verbatim, punctuation included.
        """
        return " ".join(
            self._abbreviations.get(normalize(word), word)
            for word in split_words(message)
        )
