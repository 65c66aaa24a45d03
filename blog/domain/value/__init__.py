"""Domain value objects for the blog service."""

from blog.domain.value.identifiers import PostId, SessionId
from blog.domain.value.types import AuthScheme, DerivedFields, WriteGrant

__all__ = [
    # Identifiers
    "PostId",
    "SessionId",
    # Types
    "AuthScheme",
    "DerivedFields",
    "WriteGrant",
]
