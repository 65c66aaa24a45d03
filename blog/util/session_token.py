"""Signed session cookie values.

The cookie carries only the session id; session state lives server-side.
Signing lets a forged or tampered cookie be rejected without a store lookup.
"""

import jwt
from pydantic import BaseModel

from blog.config import AuthSettings
from blog.util.error import SessionTokenError


class SessionTokenPayload(BaseModel):
    """Session cookie payload."""

    sid: str


def create_session_token(session_id: str, settings: AuthSettings) -> str:
    """Sign a session id for use as the cookie value.

    Args:
        session_id: Server-side session id
        settings: Authentication settings

    Returns:
        Encoded token
    """
    return jwt.encode(
        {"sid": session_id},
        settings.session_secret,
        algorithm=settings.session_algorithm,
    )


def verify_session_token(token: str, settings: AuthSettings) -> SessionTokenPayload:
    """Verify a session cookie value and extract the session id.

    Args:
        token: Cookie value
        settings: Authentication settings

    Returns:
        Token payload if the signature is valid

    Raises:
        SessionTokenError: If the token is malformed or the signature is wrong
    """
    try:
        payload = jwt.decode(
            token, settings.session_secret, algorithms=[settings.session_algorithm]
        )
        return SessionTokenPayload(**payload)
    except (jwt.InvalidTokenError, ValueError):
        raise SessionTokenError("Invalid session token")
