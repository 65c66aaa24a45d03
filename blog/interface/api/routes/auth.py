"""Admin session routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel, field_validator, model_validator

from blog.application.usecase.auth import (
    GetAuthStatusRequest,
    GetAuthStatusResponse,
    GetAuthStatusUseCase,
    LoginRequest,
    LoginUseCase,
    LogoutRequest,
    LogoutResponse,
    LogoutUseCase,
)
from blog.config import Settings
from blog.interface.api.gates import read_session_cookie

router = APIRouter(prefix="/api", tags=["authentication"], route_class=DishkaRoute)


class LoginAPIRequest(BaseModel):
    """Admin login form.

    A password that is not a string is treated as absent, so the login is
    refused with 401 rather than rejected as malformed.
    """

    password: str | None = None

    @model_validator(mode="before")
    @classmethod
    def ignore_non_object(cls, data: Any) -> Any:
        return data if isinstance(data, dict) else {}

    @field_validator("password", mode="before")
    @classmethod
    def drop_non_string(cls, v: Any) -> str | None:
        return v if isinstance(v, str) else None


class LoginAPIResponse(BaseModel):
    """Login result."""

    success: bool


def _set_session_cookie(
    response: Response, token: str, max_age: int, settings: Settings
) -> None:
    # Production: the frontend is hosted on another site, so the cookie must
    # be SameSite=None, which browsers only accept together with Secure.
    # Development: same-site over plain HTTP.
    response.set_cookie(
        key=settings.auth.session_cookie_name,
        value=token,
        httponly=True,
        secure=settings.is_production,
        samesite="none" if settings.is_production else "lax",
        path="/",
        max_age=max_age,
    )


@router.post("/login", response_model=LoginAPIResponse)
async def login(
    request: Request,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
    body: LoginAPIRequest | None = None,
) -> LoginAPIResponse:
    """Log in to the admin UI with the admin password.

    Returns:
        ``{"success": true}`` with a session cookie, or
        ``{"success": false}`` with status 401
    """
    result = await login_use_case.execute(
        LoginRequest(
            password=body.password if body else None,
            session_token=read_session_cookie(request, settings.auth),
        )
    )

    if not result.success:
        response.status_code = status.HTTP_401_UNAUTHORIZED
        return LoginAPIResponse(success=False)

    _set_session_cookie(response, result.session_token, result.max_age, settings)
    return LoginAPIResponse(success=True)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    request: Request,
    response: Response,
    logout_use_case: FromDishka[LogoutUseCase],
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Destroy the admin session and clear its cookie. Always succeeds."""
    result = await logout_use_case.execute(
        LogoutRequest(session_token=read_session_cookie(request, settings.auth))
    )
    response.delete_cookie(
        key=settings.auth.session_cookie_name,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="none" if settings.is_production else "lax",
    )
    return result


@router.get("/auth/status", response_model=GetAuthStatusResponse)
async def auth_status(
    request: Request,
    get_auth_status_use_case: FromDishka[GetAuthStatusUseCase],
    settings: FromDishka[Settings],
) -> GetAuthStatusResponse:
    """Whether the caller holds a logged-in admin session.

    Safe to call without a cookie; returns ``{"isAuthenticated": false}``.
    """
    return await get_auth_status_use_case.execute(
        GetAuthStatusRequest(session_token=read_session_cookie(request, settings.auth))
    )
