"""
Server-side session registry.

A session token handed to the browser is a signed envelope around a random
session id. The id is bound to a user id here, so logging out (or a server
restart) invalidates the token even before it expires.
"""

import logging
import secrets
import threading
from datetime import datetime, timedelta, timezone
from typing import Optional

from workconnect.core.config import settings
from workconnect.core.security import create_session_token, decode_session_token

logger = logging.getLogger(__name__)


class SessionManager:
    """Maps opaque session tokens to the id of the user who owns them."""

    def __init__(
        self,
        secret_key: str = settings.SECRET_KEY,
        algorithm: str = settings.ALGORITHM,
        expire_minutes: int = settings.SESSION_EXPIRE_MINUTES,
    ):
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._lifetime = timedelta(minutes=expire_minutes)
        # session id -> (user id, expiry)
        self._bindings: dict[str, tuple[int, datetime]] = {}
        self._lock = threading.Lock()

    @property
    def max_age_seconds(self) -> int:
        return int(self._lifetime.total_seconds())

    def _purge_expired(self, now: datetime) -> None:
        """Drop bindings whose token can no longer resolve. Caller holds the lock."""
        expired = [sid for sid, (_, expires_at) in self._bindings.items() if expires_at <= now]
        for session_id in expired:
            del self._bindings[session_id]
        if expired:
            logger.debug("Purged %d expired sessions", len(expired))

    def establish(self, user_id: int) -> str:
        """Create a new session for ``user_id`` and return its token."""
        session_id = secrets.token_urlsafe(32)
        now = datetime.now(timezone.utc)
        with self._lock:
            self._purge_expired(now)
            self._bindings[session_id] = (user_id, now + self._lifetime)
        return create_session_token(
            session_id, self._secret_key, self._algorithm, self._lifetime
        )

    def resolve(self, token: Optional[str]) -> Optional[int]:
        """Return the user id bound to ``token``, or None if unauthenticated."""
        if not token:
            return None
        session_id = decode_session_token(token, self._secret_key, self._algorithm)
        with self._lock:
            self._purge_expired(datetime.now(timezone.utc))
            if session_id is None:
                return None
            binding = self._bindings.get(session_id)
        return binding[0] if binding is not None else None

    def destroy(self, token: Optional[str]) -> None:
        """Forget the session behind ``token``. Unknown tokens are ignored."""
        if not token:
            return
        # Expired tokens still identify a binding that has to be dropped
        session_id = decode_session_token(
            token, self._secret_key, self._algorithm, verify_exp=False
        )
        if session_id is None:
            return
        with self._lock:
            binding = self._bindings.pop(session_id, None)
        if binding is not None:
            logger.info("Session destroyed for user %s", binding[0])

    def active_count(self) -> int:
        with self._lock:
            self._purge_expired(datetime.now(timezone.utc))
            return len(self._bindings)
