"""
Domain Exception Handlers.

Maps the person service error hierarchy onto plain-text HTTP responses:
missing records become 404, rejected emails 400, and database failures 500
with the driver's error text as the body.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from person_service.core.errors import EntityNotFoundError, InvalidEmailError, PersistenceError
from person_service.core.logging_config import get_logger
from person_service.core.monitoring import log_error

logger = get_logger(__name__)


async def not_found_handler(request: Request, exc: EntityNotFoundError) -> PlainTextResponse:
    logger.info(f"{request.method} {request.url.path}: {exc.entity} not found")
    return PlainTextResponse(exc.message, status_code=status.HTTP_404_NOT_FOUND)


async def invalid_email_handler(request: Request, exc: InvalidEmailError) -> PlainTextResponse:
    logger.info(f"{request.method} {request.url.path}: rejected email {exc.email!r}")
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


async def persistence_error_handler(request: Request, exc: PersistenceError) -> PlainTextResponse:
    logger.error(f"{request.method} {request.url.path}: database error: {exc.message}")
    log_error(
        "PersistenceError",
        exc.message,
        {"method": request.method, "path": request.url.path},
    )
    return PlainTextResponse(exc.message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def setup_domain_exception_handlers(app: FastAPI) -> None:
    """
    Register the domain error handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(EntityNotFoundError, not_found_handler)
    app.add_exception_handler(InvalidEmailError, invalid_email_handler)
    app.add_exception_handler(PersistenceError, persistence_error_handler)
    logger.debug("Domain exception handlers registered")
