"""
Base repository interfaces and utilities.

This module provides the foundational repository patterns used by the
people and address repositories. Built with async SQLAlchemy on top of
SQLModel entities.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import update as sql_update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from person_service.core.errors import EntityNotFoundError, PersistenceError
from person_service.core.logging_config import get_logger

from ..base import SoftDeleteModel, utc_now_naive

logger = get_logger(__name__)

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SoftDeleteModel)

# Integer keys are 32-bit on PostgreSQL; larger ids cannot name a row.
ID_MIN = -(2**31)
ID_MAX = 2**31 - 1


def id_in_range(value: int) -> bool:
    """Whether ``value`` fits the integer key columns."""
    return ID_MIN <= value <= ID_MAX


def driver_message(exc: SQLAlchemyError) -> str:
    """Extract the database driver's own error text from a SQLAlchemy error."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class AsyncBaseRepository(ABC, Generic[EntityType]):
    """Base async repository interface with common CRUD operations using SQLModel."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async SQLModel Session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    @abstractmethod
    async def create(self, entity: EntityType) -> EntityType:
        """Create a new entity record.

        Args:
            entity: SQLModel instance to persist

        Returns:
            Persisted entity with generated fields populated
        """

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        """Get entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            Entity instance or None if not found
        """

    @abstractmethod
    async def update(self, entity: EntityType, changes: Dict[str, Any]) -> EntityType:
        """Apply ``changes`` to an existing entity record.

        Args:
            entity: Persisted SQLModel instance
            changes: Attribute values to overwrite

        Returns:
            Updated entity instance
        """

    @abstractmethod
    async def delete(self, entity_id: int) -> bool:
        """Delete entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            True if deleted, False if not found
        """

    @abstractmethod
    async def list(self) -> List[EntityType]:
        """List every entity.

        Returns:
            List of entity instances
        """


class SoftDeleteRepository(AsyncBaseRepository[EntityType]):
    """CRUD over a soft-deletable table.

    Reads never return rows whose ``deleted_at`` is set, and ``delete`` only
    stamps that column. Every write commits on its own.
    """

    #: Message carried by :class:`EntityNotFoundError` from :meth:`require`.
    not_found_message = "entity not found"

    def live(self):
        """Select statement restricted to rows that are not soft-deleted."""
        return select(self.model).where(self.model.deleted_at.is_(None))

    async def commit(self) -> None:
        """Commit the session, rolling back and raising PersistenceError on failure."""
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            message = driver_message(e)
            logger.warning(f"{self.model.__name__} write rejected by database: {message}")
            raise PersistenceError(message) from e

    async def create(self, entity: EntityType) -> EntityType:
        self.session.add(entity)
        await self.commit()
        await self.session.refresh(entity)
        logger.debug(f"Created {self.model.__name__} id={entity.id}")
        return entity

    async def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        if not id_in_range(entity_id):
            return None
        stmt = self.live().where(self.model.id == entity_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def require(self, entity_id: int) -> EntityType:
        """Get a live entity or raise.

        Raises:
            EntityNotFoundError: No live row has this id.
        """
        entity = await self.get_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.model.__name__, self.not_found_message)
        return entity

    async def update(self, entity: EntityType, changes: Dict[str, Any]) -> EntityType:
        for key, value in changes.items():
            setattr(entity, key, value)
        entity.updated_at = utc_now_naive()
        self.session.add(entity)
        await self.commit()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity_id: int) -> bool:
        if not id_in_range(entity_id):
            return False
        return await self.soft_delete_where(self.model.id == entity_id) > 0

    async def soft_delete_where(self, *criteria) -> int:
        """Stamp ``deleted_at`` on every live row matching ``criteria``.

        Returns:
            Number of rows marked deleted
        """
        now = utc_now_naive()
        stmt = (
            sql_update(self.model)
            .where(self.model.deleted_at.is_(None), *criteria)
            .values(deleted_at=now, updated_at=now)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise PersistenceError(driver_message(e)) from e
        await self.commit()
        return result.rowcount or 0

    async def list(self) -> List[EntityType]:
        stmt = self.live().order_by(self.model.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
