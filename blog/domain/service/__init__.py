"""Domain services."""

from .auth_service import ApiKeyAuthService, SessionAuthService
from .base import Service
from .post_service import PostService

__all__ = [
    "ApiKeyAuthService",
    "PostService",
    "Service",
    "SessionAuthService",
]
