"""
Person Service Server Package.

This package contains the web server implementation for the person service.

Subpackages:
    api: FastAPI route definitions for people, addresses and health.
    core: Server configuration.
    exception_handlers: Mapping of domain errors onto HTTP responses.
    middleware: Request logging and tracing.
    services: Dependency providers used by the routers.
"""
