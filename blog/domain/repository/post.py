"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.post import Post, PostChanges, PostDraft
from blog.domain.value import PostId


class PostRepository(ABC):
    """Repository for posts.

    The repository owns default-value assignment: it generates the post id
    and fills in ``date`` and ``author`` on creation.
    """

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Return every post, newest ``date`` first.

        No pagination and no filtering.
        """
        pass

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, draft: PostDraft) -> Post:
        """Store a new post.

        Args:
            draft: Caller-supplied and derived fields

        Returns:
            The stored post, including id, date and author
        """
        pass

    @abstractmethod
    async def update(self, post_id: PostId, changes: PostChanges) -> Optional[Post]:
        """Replace the supplied fields of a post.

        Args:
            post_id: ID of the post to update
            changes: Fields to overwrite; unset fields are left alone

        Returns:
            Updated post, or None if no post has this id
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post if it exists (hard delete, idempotent).

        Args:
            post_id: The post ID to delete
        """
        pass
