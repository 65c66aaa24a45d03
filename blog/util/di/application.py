"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.auth import (
    GetAuthStatusUseCase,
    LoginUseCase,
    LogoutUseCase,
)
from blog.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from blog.domain.service import PostService, SessionAuthService
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_login_use_case(
        self, session_auth_service: SessionAuthService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(session_auth_service=session_auth_service)

    @provide
    def get_logout_use_case(
        self, session_auth_service: SessionAuthService
    ) -> LogoutUseCase:
        """Provide logout use case."""
        return LogoutUseCase(session_auth_service=session_auth_service)

    @provide
    def get_auth_status_use_case(
        self, session_auth_service: SessionAuthService
    ) -> GetAuthStatusUseCase:
        """Provide auth status use case."""
        return GetAuthStatusUseCase(session_auth_service=session_auth_service)

    # Post use cases
    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)
