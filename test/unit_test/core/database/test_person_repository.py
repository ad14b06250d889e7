"""Unit tests for PersonRepository against in-memory SQLite."""

from __future__ import annotations

import pytest
from sqlmodel import select

from person_service.core.database.entities import Address, Person
from person_service.core.database.repositories import PersonRepository
from person_service.core.errors import EntityNotFoundError, PersistenceError

pytestmark = pytest.mark.asyncio


@pytest.fixture
def repo(session) -> PersonRepository:
    return PersonRepository(session)


class TestPersonRepository:
    async def test_create_assigns_identity_and_timestamps(self, repo):
        person = await repo.create(Person(name="Ada", skills="math", email="ada@example.com"))

        assert person.id is not None
        assert person.created_at is not None
        assert person.updated_at is not None
        assert person.deleted_at is None
        assert person.created_at.tzinfo is None

    async def test_get_by_id_returns_none_when_missing(self, repo):
        assert await repo.get_by_id(123) is None

    async def test_require_raises_not_found(self, repo):
        with pytest.raises(EntityNotFoundError) as exc_info:
            await repo.require(123)

        assert exc_info.value.message == "no persons found for id"
        assert exc_info.value.entity == "Person"

    async def test_update_applies_changes_and_bumps_updated_at(self, repo):
        person = await repo.create(Person(name="Ada", email="ada@example.com"))
        before = person.updated_at

        updated = await repo.update(person, {"name": "Ada L."})

        assert updated.name == "Ada L."
        assert updated.email == "ada@example.com"
        assert updated.updated_at >= before

    async def test_delete_is_soft(self, repo, session_factory):
        person = await repo.create(Person(email="soft@example.com"))

        assert await repo.delete(person.id) is True
        assert await repo.get_by_id(person.id) is None

        async with session_factory() as other:
            stored = (await other.execute(select(Person).where(Person.id == person.id))).scalars().one()
        assert stored.is_deleted

    async def test_delete_missing_returns_false(self, repo):
        assert await repo.delete(999) is False

    async def test_delete_twice_returns_false(self, repo):
        person = await repo.create(Person(email="twice@example.com"))

        assert await repo.delete(person.id) is True
        assert await repo.delete(person.id) is False

    async def test_list_excludes_deleted(self, repo):
        kept = await repo.create(Person(email="kept@example.com"))
        gone = await repo.create(Person(email="gone@example.com"))
        await repo.delete(gone.id)

        people = await repo.list()

        assert [p.id for p in people] == [kept.id]

    async def test_duplicate_live_email_raises_persistence_error(self, repo):
        await repo.create(Person(email="dup@example.com"))

        with pytest.raises(PersistenceError) as exc_info:
            await repo.create(Person(email="dup@example.com"))

        assert "UNIQUE constraint failed" in exc_info.value.message

    async def test_session_usable_after_persistence_error(self, repo):
        await repo.create(Person(email="dup@example.com"))
        with pytest.raises(PersistenceError):
            await repo.create(Person(email="dup@example.com"))

        person = await repo.create(Person(email="fresh@example.com"))

        assert person.id is not None

    async def test_create_with_addresses_links_owner(self, repo, session):
        person = await repo.create_with_addresses(
            Person(email="owner@example.com"),
            [Address(city="X", person_id=999), Address(city="Y")],
        )

        rows = (await session.execute(select(Address).order_by(Address.id))).scalars().all()
        assert [a.city for a in rows] == ["X", "Y"]
        assert all(a.person_id == person.id for a in rows)
        assert all(a.id is not None for a in rows)

    async def test_create_with_addresses_rolls_back_on_conflict(self, repo, session):
        await repo.create(Person(email="taken@example.com"))

        with pytest.raises(PersistenceError):
            await repo.create_with_addresses(Person(email="taken@example.com"), [Address(city="Z")])

        rows = (await session.execute(select(Address))).scalars().all()
        assert rows == []

    @pytest.mark.parametrize("entity_id", [2**31, 2**64, -(2**31) - 1])
    async def test_out_of_range_id_is_not_found(self, repo, entity_id):
        assert await repo.get_by_id(entity_id) is None
        assert await repo.delete(entity_id) is False
        with pytest.raises(EntityNotFoundError):
            await repo.require(entity_id)
