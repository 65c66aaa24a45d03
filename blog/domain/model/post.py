"""Post entity.

A post is a flat record. The store assigns ``id``, ``date`` and ``author``;
``excerpt`` and ``read_time`` are derived from ``content`` when the post is
created and are never recomputed afterwards.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, field_validator

from blog.domain.model.common import DomainModel
from blog.domain.value import PostId


class Post(DomainModel):
    """Stored blog post."""

    id: PostId
    title: Optional[str] = None
    category: Optional[str] = None
    content: Optional[str] = None
    featured: bool = False
    image: Optional[str] = None
    date: datetime
    author: str
    read_time: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    excerpt: Optional[str] = None


class PostDraft(DomainModel):
    """Fields of a post that does not exist yet.

    The store fills in the identifier, the date and the author.
    """

    title: Optional[str] = None
    category: Optional[str] = None
    content: Optional[str] = None
    featured: bool = False
    image: Optional[str] = None
    read_time: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    excerpt: Optional[str] = None


class PostChanges(DomainModel):
    """Partial replacement of stored post fields.

    Only explicitly set fields are written (see ``as_update``). Derived
    fields are written verbatim like any other field.
    """

    title: Optional[str] = None
    category: Optional[str] = None
    content: Optional[str] = None
    featured: Optional[bool] = None
    image: Optional[str] = None
    date: Optional[datetime] = None
    author: Optional[str] = None
    read_time: Optional[str] = None
    tags: Optional[list[str]] = None
    excerpt: Optional[str] = None

    @field_validator("featured", "date", "author", "tags")
    @classmethod
    def reject_null(cls, v):
        """These fields may be replaced but not cleared."""
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @field_validator("date")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Naive timestamps are taken to be UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    def as_update(self) -> dict:
        """Fields the caller actually supplied, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)
