"""
Repository Dependencies.

Provides per-request repository instances for API endpoints. Both
repositories of one request share the same AsyncSession.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from person_service.core.database import get_session
from person_service.core.database.repositories import AddressRepository, PersonRepository


def get_person_repository(session: AsyncSession = Depends(get_session)) -> PersonRepository:
    return PersonRepository(session)


def get_address_repository(session: AsyncSession = Depends(get_session)) -> AddressRepository:
    return AddressRepository(session)


PersonRepoDep = Annotated[PersonRepository, Depends(get_person_repository)]
AddressRepoDep = Annotated[AddressRepository, Depends(get_address_repository)]
