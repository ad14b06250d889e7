"""
Middleware modules for the person service.

This package contains custom middleware for request/response logging.
"""

from .request_logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
