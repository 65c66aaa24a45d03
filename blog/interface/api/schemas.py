"""Request bodies shared by the admin UI and automation routes."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blog.domain.model.post import PostChanges


class CreateBlogAPIRequest(BaseModel):
    """Admin UI post creation.

    Only ``content`` is required: excerpt and reading time are derived from it.
    """

    title: str | None = None
    category: str | None = None
    content: str
    featured: bool = False
    image: str | None = None

    @field_validator("featured", mode="before")
    @classmethod
    def default_when_null(cls, v: Any) -> Any:
        return False if v is None else v


class AdminCreateBlogAPIRequest(BaseModel):
    """Automation post creation.

    Nothing is enforced by the schema; the route answers 400 when
    ``title`` or ``content`` is missing or empty. Numbers and booleans sent
    for a text field are stringified; objects and arrays count as missing.
    ``featured`` takes the truthiness of whatever was sent.
    """

    title: str | None = None
    category: str | None = None
    content: str | None = None
    featured: bool = False
    image: str | None = None

    @field_validator("featured", mode="before")
    @classmethod
    def coerce_truthy(cls, v: Any) -> bool:
        return bool(v)

    @field_validator("title", "category", "content", "image", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str | None:
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return str(v)
        # Objects and arrays count as missing
        return None

    def missing_required(self) -> list[str]:
        """Names of required fields that are absent or empty."""
        return [name for name in ("title", "content") if not getattr(self, name)]


class UpdateBlogAPIRequest(BaseModel):
    """Partial post update, in the frontend's JSON keys.

    Unknown keys (``_id`` included) are ignored. Derived fields are accepted
    and stored verbatim.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str | None = None
    category: str | None = None
    content: str | None = None
    featured: bool | None = None
    image: str | None = None
    date: datetime | None = None
    author: str | None = None
    read_time: str | None = Field(default=None, alias="readTime")
    tags: list[str] | None = None
    excerpt: str | None = None

    @field_validator("featured", "date", "author", "tags")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    def to_changes(self) -> PostChanges:
        """Domain changes containing only the keys the client sent."""
        return PostChanges(**self.model_dump(exclude_unset=True))
