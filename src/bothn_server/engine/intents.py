"""
Intent Matching

First-match substring rules: intents are scanned in load order, patterns
within an intent in declaration order, and the first pattern contained in
the normalized message decides the intent. There is no scoring across
intents.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence

from .models import Intent
from .text import normalize


class IntentMatcher:
    """Matches messages against a fixed, ordered list of intents."""

    def __init__(
        self,
        intents: Sequence[Intent],
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Parameters
        ----------
        intents : Sequence[Intent]
            Intents in load order.

        rng : Optional[random.Random]
            Source used to pick a response. Inject a seeded instance for
            deterministic replies.
        """
        self._intents = tuple(intents)
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self._intents)

    def find_intent(self, message: str) -> Optional[Intent]:
        normalized = normalize(message)
        for intent in self._intents:
            for pattern in intent.patterns:
                if pattern in normalized:
                    return intent
        return None

    def respond(self, message: str) -> Optional[str]:
        """Return a random response of the first matching intent, or None."""
        intent = self.find_intent(message)
        if intent is None:
            return None
        return self._rng.choice(intent.responses)
