"""Get auth status use case."""

from pydantic import BaseModel, ConfigDict, Field

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import SessionAuthService


class GetAuthStatusRequest(BaseModel):
    """Get auth status request."""

    session_token: str | None = None


class GetAuthStatusResponse(BaseModel):
    """Get auth status response."""

    model_config = ConfigDict(populate_by_name=True)

    is_authenticated: bool = Field(serialization_alias="isAuthenticated")


class GetAuthStatusUseCase(BaseUseCase):
    """Use case for checking whether the caller's session is logged in."""

    def __init__(self, session_auth_service: SessionAuthService) -> None:
        self.session_auth_service = session_auth_service

    async def execute(self, request: GetAuthStatusRequest) -> GetAuthStatusResponse:
        """Never raises for a missing, forged or expired cookie."""
        is_authenticated = await self.session_auth_service.is_authenticated(
            request.session_token
        )
        return GetAuthStatusResponse(is_authenticated=is_authenticated)
