"""Post domain service."""

import logfire

from blog.domain.model.post import Post, PostChanges, PostDraft
from blog.domain.repository import PostRepository
from blog.domain.value import PostId

from .base import Service
from .derived_fields import derive_fields


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def list_posts(self) -> list[Post]:
        """All posts, newest first."""
        with logfire.span("post_service.list_posts"):
            posts = await self.post_repository.find_all()
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def create_post(
        self,
        content: str,
        title: str | None = None,
        category: str | None = None,
        featured: bool = False,
        image: str | None = None,
    ) -> Post:
        """Create a post, deriving its excerpt, reading time and tags.

        The category becomes the post's only tag.

        Args:
            content: Post body
            title: Post title
            category: Post category
            featured: Whether the post is featured
            image: Optional image URL

        Returns:
            Stored post
        """
        with logfire.span(
            "post_service.create_post", title=title, category=category
        ):
            derived = derive_fields(content)
            draft = PostDraft(
                title=title,
                category=category,
                content=content,
                featured=featured,
                image=image,
                excerpt=derived.excerpt,
                read_time=derived.read_time,
                tags=[category] if category is not None else [],
            )

            saved = await self.post_repository.create(draft)
            logfire.info(
                "Post created",
                post_id=str(saved.id),
                read_time=saved.read_time,
            )
            return saved

    async def update_post(self, post_id: PostId, changes: PostChanges) -> Post | None:
        """Overwrite the supplied fields of a post.

        Excerpt and reading time are not recomputed when ``content`` changes.

        Args:
            post_id: Post ID
            changes: Fields to replace

        Returns:
            Updated post, or None if the post does not exist
        """
        fields = sorted(changes.as_update())
        with logfire.span(
            "post_service.update_post", post_id=str(post_id), fields=fields
        ):
            updated = await self.post_repository.update(post_id, changes)

            if updated:
                logfire.info("Post updated", post_id=str(post_id), fields=fields)
            else:
                logfire.warn("Post not found for update", post_id=str(post_id))

            return updated

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post; deleting a missing post is not an error.

        Args:
            post_id: Post ID
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))
