"""Error handlers for the FastAPI application.

Every error leaves the API in the same envelope:
``{"error": {"message": ..., "status_code": ..., "details": ...}}``.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from core.exceptions import AppException, InfeasibleMealError
from core.logger import get_logger

logger = get_logger("core.error_handlers")


def create_error_response(
    message: str,
    status_code: int = 500,
    details: dict = None,
) -> JSONResponse:
    """Build the standard JSON error envelope.

    Args:
        message: Error message shown to the client.
        status_code: HTTP status code.
        details: Optional error details dictionary.

    Returns:
        JSONResponse carrying the error body.
    """
    error_body = {
        "error": {
            "message": message,
            "status_code": status_code,
        }
    }
    if details:
        error_body["error"]["details"] = details
    return JSONResponse(status_code=status_code, content=error_body)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle application exceptions raised by routers and services."""
    if isinstance(exc, InfeasibleMealError):
        # an empty generation result is an expected outcome, not a fault
        logger.info("No feasible meal for %s %s: %s", request.method, request.url.path, exc.details)
    else:
        logger.warning(
            "Application error: %s [%s %s]",
            exc.message,
            request.method,
            request.url.path
        )
    return create_error_response(
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wrap framework HTTP errors (unknown routes, bad methods) in the envelope."""
    logger.warning("HTTP %s on %s %s", exc.status_code, request.method, request.url.path)
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = f"Endpoint {request.url.path} does not exist"
    else:
        message = str(exc.detail)
    return create_error_response(message=message, status_code=exc.status_code)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Flatten Pydantic validation errors into field/message pairs."""
    errors = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"])
        errors.append({
            "field": field,
            "message": error["msg"],
            "type": error["type"]
        })

    logger.warning(
        "Validation error on %s %s: %s",
        request.method,
        request.url.path,
        errors
    )

    return create_error_response(
        message="Validation error",
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        details={"validation_errors": errors}
    )


async def sqlalchemy_exception_handler(
    request: Request,
    exc: SQLAlchemyError
) -> JSONResponse:
    """Log database errors and hide their internals from clients."""
    logger.error(
        "Database error on %s %s: %s",
        request.method,
        request.url.path,
        str(exc),
        exc_info=True
    )
    return create_error_response(
        message="A database error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        details={"type": "database_error"}
    )


async def generic_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Catch-all for anything the other handlers did not claim."""
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        str(exc),
        exc_info=True
    )
    return create_error_response(
        message="An internal server error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        details={"type": "internal_error"}
    )


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    logger.info("Exception handlers registered")
