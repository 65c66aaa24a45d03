"""Interface layer errors."""

from fastapi import HTTPException, status

from blog.domain.error import AuthenticationError, InvalidApiKeyError


def auth_error_to_http(error: AuthenticationError) -> HTTPException:
    """HTTP rejection for a gate failure.

    A missing or failed credential is 401; a wrong API key is 403.
    """
    if isinstance(error, InvalidApiKeyError):
        code = status.HTTP_403_FORBIDDEN
    else:
        code = status.HTTP_401_UNAUTHORIZED
    return HTTPException(status_code=code, detail=str(error))
