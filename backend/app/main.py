"""
FastAPI application entry point.

Uses structured logging from core.logging module.
Validates security configuration and prepares the database on startup.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.db import db
from core.logging import RequestLoggingMiddleware, configure_logging, get_logger

from .config import Settings, get_settings
from .error_handlers import register_exception_handlers
from .middleware.request_id import RequestIDMiddleware
from .middleware.security import SecurityHeadersMiddleware
from .routers import auth as auth_router

logger = get_logger("api")


class SecurityConfigError(RuntimeError):
    """Raised at startup when production configuration is unsafe."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("Security configuration errors:\n" + "\n".join(f"  - {e}" for e in errors))


def validate_config_on_startup(settings: Settings) -> None:
    """
    Log configuration advisories; refuse to start in production on errors.
    """
    errors, advisories = settings.validate_production_config()
    for advisory in advisories:
        logger.warning("config_warning", message=advisory)

    if errors and settings.is_production:
        for error in errors:
            logger.error("security_config_error", error=error)
        raise SecurityConfigError(errors)

    for error in errors:
        logger.warning("security_config_warning", message=error)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(level="DEBUG" if settings.debug else "INFO")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("app_startup", app_name=settings.app_name, env=settings.env)
        validate_config_on_startup(settings)

        db.initialize(settings.database_url)
        db.create_all_tables()
        health = db.health_check()
        if not health["healthy"]:
            raise RuntimeError(
                f"Database unreachable: {health['error']}. "
                "Check DATABASE_URL configuration and database server status."
            )
        logger.info("database_initialized", latency_ms=health["latency_ms"])

        yield

        logger.info("app_shutdown")

    app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)

    app.add_middleware(SecurityHeadersMiddleware)

    # Credentials are required for the session cookie to cross origins.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
            "X-Request-ID",
        ],
        expose_headers=["X-Request-ID"],
    )

    # Request ID middleware (for tracing)
    app.add_middleware(RequestIDMiddleware)

    # Structured request logging middleware
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    @app.get("/health", tags=["health"])
    def health_check():
        """Liveness probe; no infrastructure details."""
        return {"status": "ok"}

    @app.get("/health/ready", tags=["health"])
    def readiness_check():
        """
        Readiness check endpoint.

        Returns 200 if the database answers, 503 if not.
        """
        database = db.health_check()
        if not database["healthy"]:
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "not_ready", "checks": {"database": False}},
            )
        return {"status": "ready", "checks": {"database": True}}

    app.include_router(auth_router.router, prefix=settings.api_prefix)

    return app


app = create_app()
