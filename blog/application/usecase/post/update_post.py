"""Update post use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.error import NotFoundError
from blog.domain.model.post import PostChanges
from blog.domain.service import PostService
from blog.domain.value import WriteGrant

from .common import PostResponse, parse_post_id


class UpdatePostRequest(BaseModel):
    """Update post request."""

    grant: WriteGrant
    post_id: str  # Raw path segment
    changes: PostChanges


class UpdatePostUseCase(BaseUseCase):
    """Use case for overwriting fields of an existing post.

    Excerpt and reading time are written only if the caller sends them;
    changing ``content`` leaves them as they were.
    """

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> PostResponse:
        """Execute update post flow.

        Args:
            request: Update post request

        Returns:
            The updated post

        Raises:
            NotFoundError: If no post has this id
        """
        with logfire.span(
            "update_post.execute",
            scheme=request.grant.scheme.value,
            post_id=request.post_id,
        ):
            post_id = parse_post_id(request.post_id)
            if post_id is None:
                raise NotFoundError("Post", request.post_id)

            updated = await self.post_service.update_post(post_id, request.changes)
            if updated is None:
                raise NotFoundError("Post", request.post_id)

            return PostResponse.from_post(updated)
