"""
Person entity model.

A person owns any number of addresses. Addresses reference their owner
through ``addresses.person_id``; they are loaded explicitly by the address
repository rather than through an ORM relationship.
"""

from __future__ import annotations

from sqlalchemy import Index, text
from sqlmodel import Field

from ..base import SoftDeleteModel


class Person(SoftDeleteModel, table=True):
    """Persistent person record.

    Table: people
    """

    __tablename__ = "people"
    __table_args__ = (
        # Email is unique among live rows only, so a soft-deleted person does
        # not block re-registering the same address.
        Index(
            "uq_people_email_live",
            "email",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
        {"extend_existing": True},
    )

    name: str = Field(default="", description="Full name")
    skills: str = Field(default="", description="Free-text skills")
    email: str = Field(max_length=100, description="Contact email, lowercase")
