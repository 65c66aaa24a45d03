"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict
from uuid import UUID

from blog.domain.model import AdminSession, Post
from blog.domain.value import PostId, SessionId


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        title=row.get("title"),
        category=row.get("category"),
        content=row.get("content"),
        featured=row["featured"],
        image=row.get("image"),
        date=row["date"],
        author=row["author"],
        read_time=row.get("read_time"),
        tags=list(row.get("tags") or []),
        excerpt=row.get("excerpt"),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion
    """
    return post.model_dump()


def row_to_session(row: Dict[str, Any]) -> AdminSession:
    """Convert database row to AdminSession domain model."""
    return AdminSession(
        id=SessionId(row["id"]),
        is_authenticated=row["is_authenticated"],
        created_at=row["created_at"],
        expires_at=row["expires_at"],
    )


def session_to_dict(session: AdminSession) -> Dict[str, Any]:
    """Convert AdminSession domain model to database dict."""
    return session.model_dump()
