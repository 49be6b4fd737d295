"""
Chat History Store

In-memory chat history keyed by client session id. The browser client
used to keep this in a cookie; the server keeps it in process memory.

- No persistence across restarts.
- Per-session history capped at `max_messages_per_session` (oldest
  messages dropped first).
- Thread-safe via a re-entrant lock; reads return copies.
"""

from __future__ import annotations

from typing import Dict, List, Optional
from threading import RLock

from ..api.models import ChatMessage
from ..config import settings


class SessionStore:
    """
    Maps session ids to ordered lists of ChatMessage objects.
    """

    def __init__(self, max_messages_per_session: Optional[int] = None) -> None:
        self._store: Dict[str, List[ChatMessage]] = {}
        self._lock = RLock()
        self._max_messages_per_session = max_messages_per_session

    def get_history(self, session_id: str) -> List[ChatMessage]:
        """Copy of the session's messages; empty for unknown sessions."""
        with self._lock:
            return list(self._store.get(session_id, []))

    def add_messages(self, session_id: str, new_messages: List[ChatMessage]) -> None:
        """
        Append messages to a session, creating it if needed, then trim the
        history to the configured cap.
        """
        if not new_messages:
            return

        with self._lock:
            history = self._store.setdefault(session_id, [])
            history.extend(new_messages)

            limit = self._max_messages_per_session
            if limit is not None and limit > 0 and len(history) > limit:
                self._store[session_id] = history[len(history) - limit:]

    def record_exchange(
        self,
        session_id: str,
        user_text: str,
        reply_text: Optional[str],
    ) -> None:
        """Store a user message and, when there is one, the bot's reply."""
        messages = [ChatMessage(role="user", content=user_text)]
        if reply_text:
            messages.append(ChatMessage(role="assistant", content=reply_text))
        self.add_messages(session_id, messages)

    def clear(self, session_id: str) -> None:
        with self._lock:
            self._store.pop(session_id, None)

    def clear_all(self) -> None:
        with self._lock:
            self._store.clear()

    def has_session(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._store

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)


# Global singleton used by the application.
session_store = SessionStore(max_messages_per_session=settings.max_messages_per_session)
