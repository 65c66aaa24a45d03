"""Domain model entities for the blog service."""

from blog.domain.model.post import Post, PostChanges, PostDraft
from blog.domain.model.session import AdminSession

__all__ = [
    "AdminSession",
    "Post",
    "PostChanges",
    "PostDraft",
]
