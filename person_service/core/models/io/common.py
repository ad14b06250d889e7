"""Shared I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RecordRead(BaseModel):
    """Identity and timestamp fields present on every stored record."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int = Field(alias="ID")
    created_at: datetime = Field(alias="CreatedAt")
    updated_at: datetime = Field(alias="UpdatedAt")
    deleted_at: Optional[datetime] = Field(default=None, alias="DeletedAt")


class DeletedResponse(BaseModel):
    """Acknowledgement returned by DELETE endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="ID", description="The id from the request path")
