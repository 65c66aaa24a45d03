"""Authentication domain services.

Two independent gates admit writers:

- ``SessionAuthService``: admin UI, password login backed by a server-side
  session referenced from a signed cookie.
- ``ApiKeyAuthService``: automation clients, one shared secret per request.

Each produces a ``WriteGrant`` on success.
"""

import hmac
import secrets
from datetime import datetime, timedelta, timezone

import logfire

from blog.config import AuthSettings
from blog.domain.error import (
    ApiKeyMissingError,
    InvalidApiKeyError,
    NotAuthenticatedError,
)
from blog.domain.model.session import AdminSession
from blog.domain.repository import SessionRepository
from blog.domain.value import AuthScheme, SessionId, WriteGrant
from blog.util.error import SessionTokenError
from blog.util.session_token import create_session_token, verify_session_token

from .base import Service


def _secrets_match(presented: str, expected: str) -> bool:
    return hmac.compare_digest(presented.encode("utf-8"), expected.encode("utf-8"))


class SessionAuthService(Service):
    """Domain service for the admin session gate."""

    def __init__(
        self, session_repository: SessionRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize session auth service.

        Args:
            session_repository: Session store
            auth_settings: Authentication settings
        """
        self.session_repository = session_repository
        self.auth_settings = auth_settings

    @property
    def max_age(self) -> timedelta:
        return timedelta(hours=self.auth_settings.session_max_age_hours)

    def token_for(self, session: AdminSession) -> str:
        """Signed cookie value referencing ``session``."""
        return create_session_token(session.id, self.auth_settings)

    def session_id_from_token(self, token: str | None) -> SessionId | None:
        """Session id carried by a cookie value, or None if absent or forged."""
        if not token:
            return None

        try:
            return SessionId(verify_session_token(token, self.auth_settings).sid)
        except SessionTokenError as e:
            logfire.debug("Session cookie rejected", error=str(e))
            return None

    async def get_session(self, token: str | None) -> AdminSession | None:
        """Live session referenced by a cookie value."""
        session_id = self.session_id_from_token(token)
        if session_id is None:
            return None
        return await self.session_repository.find_by_id(session_id)

    async def login(
        self, password: str | None, current_token: str | None = None
    ) -> AdminSession | None:
        """Authenticate with the admin password.

        On success the previous session (if any) is destroyed and a new
        authenticated session is stored. On failure nothing changes.

        Args:
            password: Password from the login form
            current_token: Existing session cookie value, if any

        Returns:
            The new session, or None if the password is wrong
        """
        with logfire.span("session_auth.login"):
            expected = self.auth_settings.admin_password
            if expected is None:
                logfire.warn("Login rejected: no admin password configured")
                return None

            if password is None or not _secrets_match(password, expected):
                logfire.warn("Login rejected: wrong password")
                return None

            current_id = self.session_id_from_token(current_token)
            if current_id is not None:
                await self.session_repository.delete(current_id)

            now = datetime.now(timezone.utc)
            session = AdminSession(
                id=SessionId(secrets.token_urlsafe(32)),
                is_authenticated=True,
                created_at=now,
                expires_at=now + self.max_age,
            )
            await self.session_repository.purge_expired()
            saved = await self.session_repository.save(session)
            logfire.info("Admin logged in", expires_at=saved.expires_at.isoformat())
            return saved

    async def logout(self, token: str | None) -> None:
        """Destroy the session referenced by ``token``; a no-op without one."""
        with logfire.span("session_auth.logout"):
            session_id = self.session_id_from_token(token)
            if session_id is not None:
                await self.session_repository.delete(session_id)
                logfire.info("Admin logged out")

    async def is_authenticated(self, token: str | None) -> bool:
        """Whether the cookie value references a logged-in session."""
        session = await self.get_session(token)
        return bool(session and session.is_authenticated)

    async def require_session(self, token: str | None) -> WriteGrant:
        """Admit a request carrying a logged-in session.

        Raises:
            NotAuthenticatedError: If there is no authenticated session
        """
        if not await self.is_authenticated(token):
            logfire.warn("Session gate rejected request")
            raise NotAuthenticatedError()
        return WriteGrant(scheme=AuthScheme.SESSION)


class ApiKeyAuthService(Service):
    """Domain service for the automation API-key gate."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize API key service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify(self, api_key: str | None) -> WriteGrant:
        """Admit a request presenting the configured API key.

        Args:
            api_key: Value of the x-api-key header

        Raises:
            ApiKeyMissingError: If no key was presented
            InvalidApiKeyError: If the key does not match
        """
        if not api_key:
            logfire.warn("API key gate rejected request: key missing")
            raise ApiKeyMissingError()

        expected = self.auth_settings.api_key
        if expected is None:
            logfire.warn("API key gate rejected request: no key configured")
            raise InvalidApiKeyError()

        if not _secrets_match(api_key, expected):
            logfire.warn("API key gate rejected request: key mismatch")
            raise InvalidApiKeyError()

        return WriteGrant(scheme=AuthScheme.API_KEY)
