"""Logout use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import SessionAuthService


class LogoutRequest(BaseModel):
    """Logout request."""

    session_token: str | None = None


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool


class LogoutUseCase(BaseUseCase):
    """Use case for destroying the admin session."""

    def __init__(self, session_auth_service: SessionAuthService) -> None:
        self.session_auth_service = session_auth_service

    async def execute(self, request: LogoutRequest) -> LogoutResponse:
        """Destroy the session; succeeds even if there was none."""
        await self.session_auth_service.logout(request.session_token)
        return LogoutResponse(success=True)
