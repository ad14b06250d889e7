"""
Database layer for the person service.

Structure:
- entities/: SQLModel table models (people, addresses)
- repositories/: Async data access layer, one repository per table
- session.py: Global engine and session factory management
- utils.py: Engine, session factory and schema creation helpers
"""

from .base import Base, SoftDeleteModel
from .session import (
    async_session_maker,
    close_db,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "SoftDeleteModel",
    "async_session_maker",
    "close_db",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
]
