"""Domain value objects for the blog service."""

from enum import Enum

from blog.domain.value.common import ValueObject


class AuthScheme(str, Enum):
    """How a writer proved it may change posts."""

    SESSION = "session"  # Admin UI, cookie session
    API_KEY = "api_key"  # Automation clients, x-api-key header


class WriteGrant(ValueObject):
    """Capability handed out by a gate once a caller is admitted.

    Write use cases require one; only the session and API-key gates create them.
    """

    scheme: AuthScheme


class DerivedFields(ValueObject):
    """Fields computed from post content at creation time."""

    excerpt: str
    read_time: str
