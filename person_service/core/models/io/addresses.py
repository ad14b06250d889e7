"""
Address I/O models for API requests and responses.

These models define the contract between the API and clients for creating,
reading, and updating addresses.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import RecordRead


class AddressRead(RecordRead):
    """Schema for reading an address from API."""

    person_id: Optional[int] = Field(default=None, alias="PersonID", description="Owning person id")
    city: str = Field(default="", alias="City")
    state: str = Field(default="", alias="State")
    mobile: Optional[str] = Field(default=None, alias="Mobile")


class AddressCreate(BaseModel):
    """Schema for creating an address via API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    person_id: Optional[int] = Field(default=None, alias="PersonID", description="Owning person id")
    city: str = Field(default="", alias="City")
    state: str = Field(default="", alias="State")
    mobile: Optional[str] = Field(default=None, alias="Mobile")


class AddressUpdate(BaseModel):
    """Schema for updating an address via API.

    Only the keys present in the request are applied.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    person_id: Optional[int] = Field(default=None, alias="PersonID")
    city: Optional[str] = Field(default=None, alias="City")
    state: Optional[str] = Field(default=None, alias="State")
    mobile: Optional[str] = Field(default=None, alias="Mobile")
