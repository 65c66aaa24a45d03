"""In-memory post repository for testing."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from blog.domain.model.post import Post, PostChanges, PostDraft
from blog.domain.repository.post import PostRepository
from blog.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, default_author: str = "Admin") -> None:
        self._posts: dict[PostId, Post] = {}
        self.default_author = default_author

    async def find_all(self) -> list[Post]:
        """Return every post, newest first."""
        return sorted(self._posts.values(), key=lambda p: p.date, reverse=True)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def create(self, draft: PostDraft) -> Post:
        """Store a new post."""
        post = Post(
            id=PostId(uuid4()),
            date=datetime.now(timezone.utc),
            author=self.default_author,
            **draft.model_dump(),
        )
        self._posts[post.id] = post
        return post

    async def update(self, post_id: PostId, changes: PostChanges) -> Optional[Post]:
        """Overwrite the supplied fields of a post."""
        post = self._posts.get(post_id)
        if post is None:
            return None

        # Posts are immutable
        updated = post.model_copy(update=changes.as_update())
        self._posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._posts.pop(post_id, None)

    async def save(self, post: Post) -> Post:
        """Store a fully built post as-is (test seeding)."""
        self._posts[post.id] = post
        return post
