"""
Address repository.

Data access for the ``addresses`` table, plus the owner-scoped queries used
when reading or deleting a person.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.addresses import Address
from .base import SoftDeleteRepository, id_in_range


class AddressRepository(SoftDeleteRepository[Address]):
    """Repository for address data access operations using SQLModel."""

    not_found_message = "no address found for id"

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async session for database operations
        """
        super().__init__(session, Address)

    async def list_by_person(self, person_id: int) -> List[Address]:
        """Live addresses owned by a person, oldest first."""
        if not id_in_range(person_id):
            return []
        stmt = self.live().where(Address.person_id == person_id).order_by(Address.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete_by_person(self, person_id: int) -> int:
        """Soft-delete every live address owned by a person.

        Returns:
            Number of addresses marked deleted
        """
        if not id_in_range(person_id):
            return 0
        return await self.soft_delete_where(Address.person_id == person_id)
