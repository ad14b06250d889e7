"""
API endpoints for managing addresses.

Provides CRUD operations for addresses stored in the database.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter

from person_service.core.database.entities import Address
from person_service.core.logging_config import get_logger
from person_service.core.models.io import AddressCreate, AddressRead, AddressUpdate, DeletedResponse
from person_service.server.services.deps import AddressRepoDep

logger = get_logger(__name__)

router = APIRouter(tags=["address"])


@router.get(
    "",
    response_model=List[AddressRead],
    summary="List Addresses",
    description="Retrieve every address that has not been deleted.",
)
async def get_addresses(addresses: AddressRepoDep) -> List[AddressRead]:
    rows = await addresses.list()
    logger.debug(f"Retrieved {len(rows)} addresses")
    return [AddressRead.model_validate(address) for address in rows]


@router.get(
    "/{address_id}",
    response_model=AddressRead,
    summary="Get Address by ID",
    responses={
        200: {"description": "Address found"},
        404: {"description": "No address with this id", "content": {"text/plain": {}}},
    },
)
async def get_address(address_id: int, addresses: AddressRepoDep) -> AddressRead:
    address = await addresses.require(address_id)
    return AddressRead.model_validate(address)


@router.post(
    "",
    response_model=AddressRead,
    summary="Create Address",
    responses={
        200: {"description": "Address created"},
        500: {"description": "Database error", "content": {"text/plain": {}}},
    },
)
async def create_address(payload: AddressCreate, addresses: AddressRepoDep) -> AddressRead:
    """
    Create a new address.

    - **PersonID**: Id of the owning person.
    - **Mobile**: Must not be used by another live address.
    """
    address = await addresses.create(Address(**payload.model_dump()))
    logger.info(f"Created address id={address.id} for person id={address.person_id}")
    return AddressRead.model_validate(address)


@router.put(
    "/{address_id}",
    response_model=AddressRead,
    summary="Update Address",
    description="Partially update an address. Only the fields present in the body are changed.",
    responses={
        200: {"description": "Address updated"},
        404: {"description": "No address with this id", "content": {"text/plain": {}}},
        500: {"description": "Database error", "content": {"text/plain": {}}},
    },
)
async def update_address(address_id: int, payload: AddressUpdate, addresses: AddressRepoDep) -> AddressRead:
    address = await addresses.require(address_id)
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    address = await addresses.update(address, changes)
    logger.info(f"Updated address id={address_id} fields={sorted(changes)}")
    return AddressRead.model_validate(address)


@router.delete(
    "/{address_id}",
    response_model=DeletedResponse,
    summary="Delete Address",
    description="Soft-delete an address. Always answers 200.",
)
async def delete_address(address_id: int, addresses: AddressRepoDep) -> DeletedResponse:
    removed = await addresses.delete(address_id)
    logger.info(f"Delete address id={address_id}: removed={removed}")
    return DeletedResponse(id=str(address_id))
