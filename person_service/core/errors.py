"""Error types for the person service.

Defines a small hierarchy of exceptions raised by the persistence layer and
request handlers. The server maps each of them onto an HTTP status.
"""

from __future__ import annotations


class PersonServiceError(Exception):
    """Base error for all person service exceptions."""


class EntityNotFoundError(PersonServiceError):
    """Raised when a live row with the requested id does not exist."""

    def __init__(self, entity: str, message: str) -> None:
        super().__init__(message)
        self.entity = entity
        self.message = message


class InvalidEmailError(PersonServiceError):
    """Raised when a person's email does not match the accepted pattern."""

    def __init__(self, email: str | None = None) -> None:
        super().__init__("invalid email")
        self.email = email


class PersistenceError(PersonServiceError):
    """Raised when the database rejects a statement.

    The message is the raw driver error text.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DatabaseConnectionError(PersonServiceError):
    """Raised when the database cannot be reached or its schema cannot be created at startup."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Database connection failed: {message}")
