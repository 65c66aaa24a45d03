"""Delete post use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import PostService
from blog.domain.value import WriteGrant

from .common import parse_post_id


class DeletePostRequest(BaseModel):
    """Delete post request."""

    grant: WriteGrant
    post_id: str  # Raw path segment


class DeletePostResponse(BaseModel):
    """Delete post response."""

    success: bool


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post. Idempotent."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Delete the post if it exists; succeeds either way."""
        with logfire.span(
            "delete_post.execute",
            scheme=request.grant.scheme.value,
            post_id=request.post_id,
        ):
            post_id = parse_post_id(request.post_id)
            if post_id is not None:
                await self.post_service.delete_post(post_id)

            return DeletePostResponse(success=True)
