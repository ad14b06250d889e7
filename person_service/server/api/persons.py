"""
API endpoints for managing people.

Provides CRUD operations for people stored in the database. Reading a single
person also returns the addresses it owns; deleting a person soft-deletes
those addresses as well.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, status

from person_service.core.database.entities import Address, Person
from person_service.core.errors import InvalidEmailError, PersistenceError
from person_service.core.logging_config import get_logger
from person_service.core.models.io import (
    AddressRead,
    DeletedResponse,
    PersonCreate,
    PersonCreateResult,
    PersonRead,
    PersonUpdate,
)
from person_service.core.validation import is_email_valid
from person_service.server.services.deps import AddressRepoDep, PersonRepoDep

logger = get_logger(__name__)

router = APIRouter(tags=["person"])


@router.get(
    "",
    response_model=List[PersonRead],
    summary="List People",
    description="Retrieve every person that has not been deleted. Addresses are not included.",
    response_description="A list of person objects.",
)
async def get_people(persons: PersonRepoDep) -> List[PersonRead]:
    people = await persons.list()
    logger.debug(f"Retrieved {len(people)} people")
    return [PersonRead.model_validate(person) for person in people]


@router.get(
    "/{person_id}",
    response_model=PersonRead,
    summary="Get Person by ID",
    description="Retrieve one person together with the addresses it owns.",
    responses={
        200: {"description": "Person found"},
        404: {"description": "No person with this id", "content": {"text/plain": {}}},
    },
)
async def get_person(person_id: int, persons: PersonRepoDep, addresses: AddressRepoDep) -> PersonRead:
    """
    Get a person by ID.

    - **person_id**: The unique identifier of the person.
    """
    person = await persons.require(person_id)
    owned = await addresses.list_by_person(person_id)

    result = PersonRead.model_validate(person)
    result.addresses = [AddressRead.model_validate(address) for address in owned]
    return result


@router.post(
    "",
    response_model=PersonCreateResult,
    status_code=status.HTTP_200_OK,
    summary="Create Person",
    description="Create a person, and optionally the addresses listed under Addresses.",
    responses={
        200: {"description": "Person created"},
        400: {"description": "Invalid email", "content": {"text/plain": {}}},
        500: {"description": "Database error", "content": {"text/plain": {}}},
    },
)
async def create_person(payload: PersonCreate, persons: PersonRepoDep) -> PersonCreateResult:
    """
    Create a new person.

    - **Email**: Required; must be a lowercase address such as ``jane@example.com``.
    - **Addresses**: Optional list of addresses owned by the new person.
    """
    if not is_email_valid(payload.email):
        raise InvalidEmailError(payload.email)

    person = Person(name=payload.name, skills=payload.skills, email=payload.email)
    new_addresses = [Address(**address.model_dump(exclude={"person_id"})) for address in payload.addresses]
    person = await persons.create_with_addresses(person, new_addresses)
    logger.info(f"Created person id={person.id} with {len(new_addresses)} addresses")

    value = PersonRead.model_validate(person)
    if new_addresses:
        value.addresses = [AddressRead.model_validate(address) for address in new_addresses]
    return PersonCreateResult(value=value)


@router.put(
    "/{person_id}",
    response_model=PersonRead,
    summary="Update Person",
    description="Partially update a person. Only the fields present in the body are changed.",
    responses={
        200: {"description": "Person updated"},
        400: {"description": "Invalid email", "content": {"text/plain": {}}},
        404: {"description": "No person with this id", "content": {"text/plain": {}}},
        500: {"description": "Database error", "content": {"text/plain": {}}},
    },
)
async def update_person(person_id: int, payload: PersonUpdate, persons: PersonRepoDep) -> PersonRead:
    """
    Update a person.

    Keys missing from the body, or sent as null, keep their stored value.
    An email, when given, must pass the same check as on creation.
    """
    person = await persons.require(person_id)

    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    if "email" in changes and not is_email_valid(changes["email"]):
        raise InvalidEmailError(changes["email"])

    person = await persons.update(person, changes)
    logger.info(f"Updated person id={person_id} fields={sorted(changes)}")
    return PersonRead.model_validate(person)


@router.delete(
    "/{person_id}",
    response_model=DeletedResponse,
    summary="Delete Person",
    description="Soft-delete a person and every address it owns. Always answers 200.",
)
async def delete_person(person_id: int, persons: PersonRepoDep, addresses: AddressRepoDep) -> DeletedResponse:
    """
    Delete a person.

    The response echoes the requested id whether or not the person existed.
    A failure to delete the owned addresses is logged and does not stop the
    person itself from being deleted.
    """
    try:
        removed_addresses = await addresses.delete_by_person(person_id)
    except PersistenceError as e:
        logger.error(f"Failed to delete addresses of person id={person_id}: {e.message}")
        removed_addresses = 0
    removed = await persons.delete(person_id)
    logger.info(f"Delete person id={person_id}: person_removed={removed}, addresses_removed={removed_addresses}")
    return DeletedResponse(id=str(person_id))
