"""Session store — maps sender identity to conversation state.

The dialogue engine only talks to the SessionStore interface, so a bounded or
expiring backend can replace the in-memory one without touching dialogue logic.
"""

import logging
from abc import ABC, abstractmethod
from functools import lru_cache

from footform.domain.session_models import Session

logger = logging.getLogger(__name__)


class SessionStore(ABC):
    """Keyed session storage."""

    @abstractmethod
    def get(self, sender_id: str) -> Session | None:
        """Return the sender's session, or None if never seen."""

    @abstractmethod
    def put(self, sender_id: str, session: Session) -> None:
        """Store (or replace) the sender's session."""

    def get_or_create(self, sender_id: str) -> Session:
        """Return the existing session or insert a fresh one."""
        session = self.get(sender_id)
        if session is None:
            session = Session()
            self.put(sender_id, session)
            logger.info("Created session for %s", sender_id)
        return session

    def reset(self, sender_id: str) -> Session:
        """Replace the sender's session with a fresh one and return it."""
        session = Session()
        self.put(sender_id, session)
        logger.info("Reset session for %s", sender_id)
        return session


class InMemorySessionStore(SessionStore):
    """Process-lifetime dict store. No expiry, no capacity bound."""

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def get(self, sender_id: str) -> Session | None:
        return self._sessions.get(sender_id)

    def put(self, sender_id: str, session: Session) -> None:
        self._sessions[sender_id] = session

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, sender_id: object) -> bool:
        return sender_id in self._sessions


@lru_cache
def get_session_store() -> SessionStore:
    """Return the process-wide session store."""
    return InMemorySessionStore()
