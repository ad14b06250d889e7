"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware and
exception handlers, and includes all API routers. It serves as the root of
the web server.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from person_service import __version__
from person_service.core.database import close_db, init_db
from person_service.core.errors import DatabaseConnectionError
from person_service.core.logging_config import get_logger, setup_logging
from person_service.core.monitoring import initialize_logfire

from .api import addresses, health, persons
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestLoggingMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Connects to the database and creates missing tables on startup. A database
    that cannot be reached is fatal: the error propagates and the server
    process exits. The connection pool is released on shutdown.
    """
    logger.info("Starting up person service...")
    try:
        await init_db()
    except DatabaseConnectionError as e:
        logger.critical(str(e), exc_info=True)
        raise

    yield

    logger.info("Shutting down person service...")
    await close_db()


app = FastAPI(
    title="Person Service",
    description="""
    Person Service API

    Stores people and the postal addresses they own. Deleting a person
    also deletes its addresses.
    """,
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)
setup_exception_handlers(app)
initialize_logfire(app)

app.include_router(health.router, tags=["health"])
app.include_router(persons.router, prefix="/person")
app.include_router(addresses.router, prefix="/address")


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    uvicorn.run(
        "person_service.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
