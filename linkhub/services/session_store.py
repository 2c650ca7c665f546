# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""In-memory session store with lazy expiry.

Sessions live only in process memory: a restart logs everyone out. The
store is owned by the application (created in the lifespan handler and
kept on ``app.state``) so tests can use isolated instances.
"""

import logging
import secrets
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from linkhub.models.base import utcnow
from linkhub.models.enums import UserRole

logger = logging.getLogger(__name__)

SESSION_DURATION = timedelta(hours=24)

# 32 random bytes, hex encoded (256 bits)
TOKEN_BYTES = 32


@dataclass(frozen=True)
class SessionData:
    """A live login: who it belongs to and until when."""

    user_id: int
    role: UserRole
    expires_at: datetime


class SessionStore:
    """Thread-safe token -> SessionData mapping.

    Expired entries are removed when they are next looked up. A periodic
    ``sweep_expired`` call may reclaim entries that are never looked up
    again, but lookups never depend on it.
    """

    def __init__(
        self,
        duration: timedelta = SESSION_DURATION,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.duration = duration
        self._clock = clock
        self._lock = threading.Lock()
        self._sessions: dict[str, SessionData] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def create(self, user_id: int, role: UserRole) -> str:
        """Create a session and return its token."""
        token = secrets.token_hex(TOKEN_BYTES)
        session = SessionData(
            user_id=user_id,
            role=role,
            expires_at=self._clock() + self.duration,
        )
        with self._lock:
            self._sessions[token] = session
        return token

    def get(self, token: str) -> SessionData | None:
        """Return the session for a token, or None if missing or expired."""
        if not token:
            return None
        now = self._clock()
        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                return None
            if now >= session.expires_at:
                del self._sessions[token]
                return None
            return session

    def delete(self, token: str) -> None:
        """Remove a session. Missing tokens are ignored."""
        with self._lock:
            self._sessions.pop(token, None)

    def sweep_expired(self) -> int:
        """Delete all expired sessions. Returns count of deleted sessions."""
        now = self._clock()
        with self._lock:
            expired = [
                token
                for token, session in self._sessions.items()
                if now >= session.expires_at
            ]
            for token in expired:
                del self._sessions[token]
        if expired:
            logger.info(f"Swept {len(expired)} expired sessions")
        return len(expired)

    def clear(self) -> None:
        """Drop every session."""
        with self._lock:
            self._sessions.clear()
