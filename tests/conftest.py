"""Test configuration and fixtures."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire
import pytest

from blog.domain.model.post import Post
from blog.domain.value import PostId

# Keep telemetry local; the app is instrumented at import time
logfire.configure(send_to_logfire=False, console=False)

ADMIN_PASSWORD = "correct-horse-battery"
API_KEY = "automation-key-123"
SESSION_SECRET = "test-session-secret"
ALLOWED_ORIGIN = "http://localhost:5173"


@pytest.fixture(autouse=True)
def test_settings_env(monkeypatch):
    """Settings are read from the environment by the DI container."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("AUTH__ADMIN_PASSWORD", ADMIN_PASSWORD)
    monkeypatch.setenv("AUTH__API_KEY", API_KEY)
    monkeypatch.setenv("AUTH__SESSION_SECRET", SESSION_SECRET)
    monkeypatch.setenv("CORS__ALLOWED_ORIGINS", f'["{ALLOWED_ORIGIN}"]')


def make_post(
    title: str = "Test Post",
    date: datetime | None = None,
    **overrides,
) -> Post:
    """Build a stored post for seeding repositories."""
    fields = {
        "id": PostId(uuid4()),
        "title": title,
        "category": "engineering",
        "content": "Some content",
        "featured": False,
        "image": None,
        "date": date or datetime.now(timezone.utc),
        "author": "Admin",
        "read_time": "1 min read",
        "tags": ["engineering"],
        "excerpt": "Some content...",
    }
    fields.update(overrides)
    return Post(**fields)
