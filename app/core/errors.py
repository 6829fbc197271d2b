"""
Error handlers for the FastAPI application.

Every error leaves the API as {"error", "code"} plus an optional "detail".
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from app.config import settings
from app.schemas.errors import ErrorResponse

logger = logging.getLogger(__name__)


def _error(status_code: int, error: str, code: str, detail: str = None) -> JSONResponse:
    body = ErrorResponse(error=error, detail=detail, code=code)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Handle HTTP exceptions (4xx, 5xx errors).

    Args:
        request: The incoming request
        exc: The HTTP exception

    Returns:
        JSONResponse with error details
    """
    logger.warning(f"HTTP {exc.status_code}: {exc.detail} - {request.method} {request.url.path}")
    return _error(exc.status_code, str(exc.detail), "HTTP_ERROR")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handle request validation errors (422 Unprocessable Entity).
    """
    logger.warning(f"Validation error: {exc} - {request.method} {request.url.path}")
    return _error(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Validation error",
        "VALIDATION_ERROR",
        detail=str(exc.errors()),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """
    Handle unexpected exceptions (500 Internal Server Error).
    """
    logger.error(f"Internal error: {exc} - {request.method} {request.url.path}", exc_info=True)
    return _error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        "INTERNAL_ERROR",
        detail=None if settings.is_production else str(exc),
    )
