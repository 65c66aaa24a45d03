"""Repository interfaces for the blog domain.

Implementations live in the persistence layer.
"""

from blog.domain.repository.post import PostRepository
from blog.domain.repository.session import SessionRepository

__all__ = [
    "PostRepository",
    "SessionRepository",
]
