"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class AuthenticationError(DomainError):
    """Base error for rejected credentials."""

    pass


class NotAuthenticatedError(AuthenticationError):
    """Raised when a session-gated operation runs without a logged-in session."""

    def __init__(self) -> None:
        super().__init__("Unauthorized")


class ApiKeyMissingError(AuthenticationError):
    """Raised when an API-key-gated operation is called without a key."""

    def __init__(self) -> None:
        super().__init__("API key missing")


class InvalidApiKeyError(AuthenticationError):
    """Raised when the presented API key does not match the configured one."""

    def __init__(self) -> None:
        super().__init__("Invalid API key")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
