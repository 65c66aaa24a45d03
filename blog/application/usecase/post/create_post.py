"""Create post use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import PostService
from blog.domain.value import WriteGrant

from .common import PostResponse


class CreatePostRequest(BaseModel):
    """Create post request."""

    grant: WriteGrant  # Issued by the gate that admitted the caller
    content: str
    title: str | None = None
    category: str | None = None
    featured: bool = False
    image: str | None = None


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new post from either write surface."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute create post flow.

        Steps:
        1. Derive excerpt, reading time and tags from the submitted fields
        2. Store the post (id, date and author are assigned by the store)

        Args:
            request: Create post request

        Returns:
            The stored post
        """
        with logfire.span(
            "create_post.execute",
            scheme=request.grant.scheme.value,
            title=request.title,
        ):
            post = await self.post_service.create_post(
                content=request.content,
                title=request.title,
                category=request.category,
                featured=request.featured,
                image=request.image,
            )
            return PostResponse.from_post(post)
