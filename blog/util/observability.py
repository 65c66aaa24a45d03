"""Logfire setup for the blog service.

Application code logs through logfire directly:

    logfire.info("Post created", post_id=str(post.id))

    with logfire.span("post_service.create_post", category=category):
        ...

Never pass the admin password, the API key or a session cookie value as an
attribute.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from blog.config import Settings

SERVICE_NAME = "blog-backend"
SERVICE_VERSION = "1.0.0"


def _should_send(settings: Settings) -> bool:
    # Explicit setting wins, then token presence
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Console-only unless ``OBSERVABILITY__LOGFIRE_TOKEN`` is set; sending can
    be forced either way with ``OBSERVABILITY__SEND_TO_LOGFIRE``.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _surface(path: str) -> str:
    """Request group recorded on the FastAPI span."""
    if path.startswith("/api/admin/"):
        return "automation"
    if path.startswith("/api/"):
        return "web"
    return "system"


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request.

    Headers are not captured: they carry the session cookie and the API key.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        path = request.url.path
        return {
            **attributes,
            "method": request.method,
            "path": path,
            "surface": _surface(path),
        }

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_map_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries on the engine's sync core.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
