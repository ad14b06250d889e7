"""
Exception handlers for the person service.

This package contains custom exception handlers for different error types
and a setup function to register them with the FastAPI application.
"""

from fastapi import FastAPI

from .domain_handlers import setup_domain_exception_handlers
from .global_handler import setup_global_exception_handler


def setup_exception_handlers(app: FastAPI) -> None:
    """Register every exception handler with ``app``."""
    setup_domain_exception_handlers(app)
    setup_global_exception_handler(app)


__all__ = ["setup_exception_handlers"]
