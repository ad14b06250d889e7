"""
Address entity model.

Every address belongs to exactly one person. The foreign key cascades on
update and delete at the database level; the API itself only ever
soft-deletes.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Column, ForeignKey, Index, Integer, text
from sqlmodel import Field

from ..base import SoftDeleteModel


class Address(SoftDeleteModel, table=True):
    """Persistent address record.

    Table: addresses
    """

    __tablename__ = "addresses"
    __table_args__ = (
        Index(
            "uq_addresses_mobile_live",
            "mobile",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
        {"extend_existing": True},
    )

    person_id: Optional[int] = Field(
        default=None,
        sa_column=Column(
            Integer,
            ForeignKey("people.id", onupdate="CASCADE", ondelete="CASCADE"),
            index=True,
            nullable=True,
        ),
    )
    city: str = Field(default="")
    state: str = Field(default="")
    mobile: Optional[str] = Field(default=None, description="Mobile number")
