"""
Base database models and utilities.

This module provides the foundational database components used across
all entities in the database layer using SQLModel.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import ConfigDict
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def utc_now_naive() -> datetime:
    """Get current UTC datetime as naive datetime.

    Returns:
        Current UTC datetime without timezone info
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


class SoftDeleteModel(Base):
    """Identity, timestamp and soft-delete columns shared by every table.

    A row whose ``deleted_at`` is set is treated as gone by every repository
    query, but stays in the table.
    """

    id: Optional[int] = Field(default=None, primary_key=True)
    # Naive UTC timestamps, stored without time zone.
    created_at: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime())
    updated_at: datetime = Field(
        default_factory=utc_now_naive, sa_type=DateTime(), sa_column_kwargs={"onupdate": utc_now_naive}
    )
    deleted_at: Optional[datetime] = Field(default=None, sa_type=DateTime(), index=True)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
