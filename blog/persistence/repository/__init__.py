"""PostgreSQL repository implementations."""

from blog.persistence.repository.post import PostgresPostRepository
from blog.persistence.repository.session import PostgresSessionRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresSessionRepository",
]
