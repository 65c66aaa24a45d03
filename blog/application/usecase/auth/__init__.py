"""Auth use cases."""

from .get_auth_status import (
    GetAuthStatusRequest,
    GetAuthStatusResponse,
    GetAuthStatusUseCase,
)
from .login import LoginRequest, LoginResponse, LoginUseCase
from .logout import LogoutRequest, LogoutResponse, LogoutUseCase

__all__ = [
    "GetAuthStatusRequest",
    "GetAuthStatusResponse",
    "GetAuthStatusUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "LogoutRequest",
    "LogoutResponse",
    "LogoutUseCase",
]
