"""
Person repository.

Data access for the ``people`` table, including creation of a person
together with the addresses submitted alongside it.
"""

from __future__ import annotations

from typing import Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from person_service.core.errors import PersistenceError

from ..entities.addresses import Address
from ..entities.persons import Person
from .base import SoftDeleteRepository, driver_message


class PersonRepository(SoftDeleteRepository[Person]):
    """Repository for person data access operations using SQLModel."""

    not_found_message = "no persons found for id"

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async session for database operations
        """
        super().__init__(session, Person)

    async def create_with_addresses(self, person: Person, addresses: Iterable[Address] = ()) -> Person:
        """Insert a person and the addresses it owns in one commit.

        Args:
            person: New person, without an id
            addresses: New addresses; their ``person_id`` is overwritten

        Returns:
            The persisted person
        """
        addresses = list(addresses)
        if not addresses:
            return await self.create(person)

        self.session.add(person)
        try:
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise PersistenceError(driver_message(e)) from e
        for address in addresses:
            address.person_id = person.id
        self.session.add_all(addresses)
        await self.commit()
        await self.session.refresh(person)
        for address in addresses:
            await self.session.refresh(address)
        return person

