"""
Custom exception handlers for FastAPI.

Security:
- Request IDs are logged server-side for tracing but NOT exposed to clients
- Generic error messages for 500 errors to prevent information disclosure
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException

from core.constants import MSG_SERVER_ERROR, MSG_VALIDATION_FAILED
from core.exceptions import AccountError, ValidationFailed
from core.logging import get_logger

from .schemas import validation_errors_to_list

logger = get_logger("backend.errors")


def _get_request_id() -> str:
    """
    Get the current request ID from context.

    Used for server-side logging only - NOT exposed to clients.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("request_id", "-")


def _response_payload(message: str, status_code: int) -> dict:
    """
    Create error response payload.

    Security: Does NOT include request_id to prevent information disclosure.
    """
    return {
        "success": False,
        "message": message,
        "status_code": status_code,
    }


def _server_error_response() -> JSONResponse:
    return JSONResponse(status_code=500, content=_response_payload(MSG_SERVER_ERROR, 500))


def _validation_response(errors: list[dict], message: str = MSG_VALIDATION_FAILED) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={**_response_payload(message, 400), "errors": errors},
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AccountError)
    async def account_error_handler(request: Request, exc: AccountError):
        if isinstance(exc, ValidationFailed):
            logger.info("validation_failed", errors=len(exc.errors), path=request.url.path)
            return _validation_response(exc.errors, exc.message)

        logger.info(
            "account_error",
            error_type=type(exc).__name__,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_response_payload(exc.message, exc.status_code),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = validation_errors_to_list(list(exc.errors()))
        logger.info("request_validation_failed", errors=len(errors), path=request.url.path)
        return _validation_response(errors)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        logger.warning(
            "http_exception",
            detail=exc.detail,
            status_code=exc.status_code,
            request_id=_get_request_id(),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_response_payload(str(exc.detail), exc.status_code),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.error(
            "database_error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            request_id=_get_request_id(),
        )
        return _server_error_response()

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        # Runs outside the request middlewares, after the log context is cleared;
        # the id survives on request.state.
        request_id = getattr(request.state, "request_id", None) or _get_request_id()
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            request_id=request_id,
        )
        response = _server_error_response()
        if request_id != "-":
            response.headers["X-Request-ID"] = request_id
        return response
