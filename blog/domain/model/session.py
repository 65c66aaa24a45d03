"""Admin session entity."""

from datetime import datetime, timezone

from blog.domain.model.common import DomainModel
from blog.domain.value import SessionId


class AdminSession(DomainModel):
    """Server-side state behind the admin session cookie."""

    id: SessionId
    is_authenticated: bool = False
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        """Whether the session has outlived its last write."""
        return (now or datetime.now(timezone.utc)) >= self.expires_at

