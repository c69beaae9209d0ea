"""
Structured logging for TalentLink Accounts.

structlog sits on top of stdlib logging. Development gets coloured console
output; every other environment gets one JSON object per line. Request-scoped
values (request id, user id) travel in contextvars and are merged into each
entry.

    from core.logging import get_logger

    logger = get_logger("auth")
    logger.info("login_success", user_id=user.id)
"""

import logging
import sys
import time
import uuid
from collections.abc import MutableMapping
from functools import lru_cache
from typing import Any

import structlog
from structlog.types import Processor

APP_NAME = "talentlink"


def _use_console_renderer() -> bool:
    from .config import get_settings

    settings = get_settings()
    return settings.debug or settings.env.lower() == "development"


def _tag_app(logger: Any, method_name: str, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    event_dict.setdefault("app", APP_NAME)
    return event_dict


def get_processors() -> list[Processor]:
    """Processor chain; the renderer depends on the environment."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        _tag_app,
    ]

    if _use_console_renderer():
        processors.append(structlog.dev.ConsoleRenderer(exception_formatter=structlog.dev.plain_traceback))
    else:
        processors.extend([structlog.processors.format_exc_info, structlog.processors.JSONRenderer()])
    return processors


@lru_cache(maxsize=1)
def configure_logging(level: str = "INFO") -> None:
    """Configure structlog and the stdlib root logger. Safe to call repeatedly."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=get_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = APP_NAME) -> structlog.stdlib.BoundLogger:
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)  # type: ignore[no-any-return]


def mask_email(email: str | None) -> str:
    """Shorten an email for log output: ``jane.doe@example.com`` -> ``ja***@example.com``."""
    if not email or "@" not in email:
        return "***"
    local, _, domain = email.partition("@")
    return f"{local[:2]}***@{domain}"


def bind_context(**kwargs: Any) -> None:
    """Attach values to every log entry for the rest of the current request."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


class RequestLoggingMiddleware:
    """
    ASGI middleware logging one ``request_started`` and one
    ``request_complete`` entry per HTTP request.

    Completion is logged at info below 400, warning for 4xx and error for 5xx.
    Request context is cleared afterwards so it cannot leak between requests.
    """

    def __init__(self, app):
        self.app = app
        self.logger = get_logger("http")

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        # Provisional id; RequestIDMiddleware (inner) replaces it.
        bind_context(request_id=uuid.uuid4().hex[:8])
        method = scope.get("method", "")
        path = scope.get("path", "")
        started = time.perf_counter()
        self.logger.info("request_started", method=method, path=path)

        status_code = 500

        async def send_wrapper(message):
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message.get("status", 500)
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            if status_code >= 500:
                log = self.logger.error
            elif status_code >= 400:
                log = self.logger.warning
            else:
                log = self.logger.info
            log(
                "request_complete",
                method=method,
                path=path,
                status_code=status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 1),
            )
            clear_context()


__all__ = [
    "configure_logging",
    "get_logger",
    "mask_email",
    "bind_context",
    "clear_context",
    "RequestLoggingMiddleware",
]
