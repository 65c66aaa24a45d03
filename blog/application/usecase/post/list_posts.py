"""List posts use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import PostService

from .common import PostResponse


class ListPostsRequest(BaseModel):
    """List posts request (no filters, no pagination)."""

    pass


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostResponse]


class ListPostsUseCase(BaseUseCase):
    """Use case for the public post listing."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Return every post, newest first."""
        posts = await self.post_service.list_posts()
        return ListPostsResponse(posts=[PostResponse.from_post(p) for p in posts])
