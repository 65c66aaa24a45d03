"""Request gates.

A gate admits or rejects a request before it reaches a use case. Each write
route declares exactly one gate as a dependency; FastAPI resolves it before
the request body is validated, so an unauthenticated caller is rejected with
401/403 whatever it sent. The resulting ``WriteGrant`` is passed on to the
use case.
"""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import Request, Security
from fastapi.security import APIKeyHeader

from blog.config import AuthSettings
from blog.domain.error import AuthenticationError
from blog.domain.service import ApiKeyAuthService, SessionAuthService
from blog.domain.value import WriteGrant
from blog.interface.error import auth_error_to_http

API_KEY_HEADER = "x-api-key"

# auto_error=False: a missing key is reported by the gate itself
api_key_header = APIKeyHeader(name=API_KEY_HEADER, auto_error=False)


def read_session_cookie(request: Request, auth_settings: AuthSettings) -> str | None:
    """Raw session cookie value, if the browser sent one."""
    return request.cookies.get(auth_settings.session_cookie_name)


@inject
async def session_gate(
    request: Request,
    session_auth_service: FromDishka[SessionAuthService],
) -> WriteGrant:
    """Admit requests from a logged-in admin session.

    Usage:
        grant: WriteGrant = Depends(session_gate)

    Raises:
        HTTPException: 401 if the session is missing or not authenticated
    """
    token = read_session_cookie(request, session_auth_service.auth_settings)
    try:
        return await session_auth_service.require_session(token)
    except AuthenticationError as e:
        raise auth_error_to_http(e)


@inject
async def api_key_gate(
    api_key_auth_service: FromDishka[ApiKeyAuthService],
    api_key: str | None = Security(api_key_header),
) -> WriteGrant:
    """Admit requests carrying the configured API key.

    Usage:
        grant: WriteGrant = Depends(api_key_gate)

    Raises:
        HTTPException: 401 if the key is missing, 403 if it is wrong
    """
    try:
        return api_key_auth_service.verify(api_key)
    except AuthenticationError as e:
        raise auth_error_to_http(e)
