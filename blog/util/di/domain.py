"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import AuthSettings
from blog.domain.repository import PostRepository, SessionRepository
from blog.domain.service import ApiKeyAuthService, PostService, SessionAuthService
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_session_auth_service(
        self, session_repository: SessionRepository, auth_settings: AuthSettings
    ) -> SessionAuthService:
        """Provide admin session gate."""
        return SessionAuthService(
            session_repository=session_repository, auth_settings=auth_settings
        )

    @provide
    def get_api_key_auth_service(self, auth_settings: AuthSettings) -> ApiKeyAuthService:
        """Provide automation API-key gate."""
        return ApiKeyAuthService(auth_settings=auth_settings)
