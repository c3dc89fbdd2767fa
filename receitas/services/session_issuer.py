"""
Session issuer: opaque bearer tokens mapped to user ids.

Tokens are UUID4 strings stored in ``sessoes``. They stay valid until the
row is removed, unless ``SESSION_TTL_MINUTES`` is configured.
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

from receitas.config import settings
from receitas.db_handlers import SessionDBHandler
from receitas.exceptions import Unauthorized
from receitas.models import Session
from receitas.utils.auth import new_session_token
from receitas.utils.logger import setup_logger

logger = setup_logger("services.session_issuer")

BEARER_PREFIX = "Bearer "


def token_from_header(authorization: str | None) -> str | None:
    """Strip a literal ``Bearer `` prefix. A missing or blank header means no token."""
    if authorization is None:
        return None
    token = authorization
    if token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX) :]
    token = token.strip()
    return token or None


def is_expired(session: Session, now: datetime | None = None) -> bool:
    if settings.session_ttl_minutes is None:
        return False
    issued_at = session.created_at
    # SQLite hands back naive timestamps, always UTC
    if issued_at.tzinfo is None:
        issued_at = issued_at.replace(tzinfo=UTC)
    now = now or datetime.now(UTC)
    return now - issued_at >= timedelta(minutes=settings.session_ttl_minutes)


class SessionIssuer:
    def __init__(self, session_db_handler: SessionDBHandler | None = None):
        self.sessions = session_db_handler or SessionDBHandler()

    async def issue(self, user_id: UUID) -> str:
        """Persist and return a new token for ``user_id``."""
        token = new_session_token()
        await self.sessions.create({"token": token, "user_id": user_id})
        logger.info(f"Issued session for user {user_id}")
        return token

    async def resolve(self, token: str | None) -> UUID:
        """Return the user id behind ``token`` or raise ``Unauthorized``."""
        if not token:
            raise Unauthorized("Missing bearer token")

        session = await self.sessions.get_by_token(token)
        if session is None:
            raise Unauthorized("Invalid session token")

        if is_expired(session):
            logger.info(f"Rejected expired session of user {session.user_id}")
            raise Unauthorized("Session expired")

        return session.user_id
