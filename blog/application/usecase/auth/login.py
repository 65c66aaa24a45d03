"""Login use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import SessionAuthService


class LoginRequest(BaseModel):
    """Login request."""

    password: str | None
    session_token: str | None = None  # Current cookie value, if any


class LoginResponse(BaseModel):
    """Login response."""

    success: bool
    session_token: str | None = None  # New cookie value on success
    max_age: int | None = None  # Cookie lifetime in seconds


class LoginUseCase(BaseUseCase):
    """Use case for the admin password login."""

    def __init__(self, session_auth_service: SessionAuthService) -> None:
        """Initialize login use case.

        Args:
            session_auth_service: Session auth domain service
        """
        self.session_auth_service = session_auth_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Check the password and open an authenticated session.

        Returns:
            ``success=False`` without a token if the password is wrong
        """
        session = await self.session_auth_service.login(
            request.password, request.session_token
        )
        if session is None:
            return LoginResponse(success=False)

        return LoginResponse(
            success=True,
            session_token=self.session_auth_service.token_for(session),
            max_age=self.session_auth_service.auth_settings.session_max_age_seconds,
        )
