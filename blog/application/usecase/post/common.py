"""Post representation shared by the post use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from blog.domain.model.post import Post
from blog.domain.value import PostId


class PostResponse(BaseModel):
    """Post as returned to API clients.

    Serialized with the blog frontend's keys (``_id``, ``readTime``).
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(serialization_alias="_id")
    title: str | None
    category: str | None
    content: str | None
    featured: bool
    image: str | None
    date: datetime
    author: str
    read_time: str | None = Field(serialization_alias="readTime")
    tags: list[str]
    excerpt: str | None

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls(
            id=str(post.id),
            title=post.title,
            category=post.category,
            content=post.content,
            featured=post.featured,
            image=post.image,
            date=post.date,
            author=post.author,
            read_time=post.read_time,
            tags=list(post.tags),
            excerpt=post.excerpt,
        )


def parse_post_id(raw: str) -> PostId | None:
    """Post id from a path segment, or None if it cannot name any post."""
    try:
        return PostId(UUID(raw))
    except ValueError:
        return None
