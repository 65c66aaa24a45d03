"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository
from .session import InMemorySessionRepository

__all__ = [
    "InMemoryPostRepository",
    "InMemorySessionRepository",
]
