"""
Person I/O models for API requests and responses.

These models define the contract between the API and clients for creating,
reading, and updating people.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .addresses import AddressCreate, AddressRead
from .common import RecordRead


class PersonRead(RecordRead):
    """Schema for reading a person from API.

    ``Addresses`` is only populated when a single person is fetched; it is
    null in listings and write responses.
    """

    name: str = Field(default="", alias="Name")
    skills: str = Field(default="", alias="Skills")
    email: str = Field(alias="Email")
    addresses: Optional[List[AddressRead]] = Field(default=None, alias="Addresses")


class PersonCreate(BaseModel):
    """Schema for creating a person via API.

    Addresses listed here are created together with the person.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(default="", alias="Name")
    skills: str = Field(default="", alias="Skills")
    email: str = Field(default="", alias="Email")
    addresses: List[AddressCreate] = Field(default_factory=list, alias="Addresses")


class PersonUpdate(BaseModel):
    """Schema for updating a person via API.

    Only the keys present in the request are applied.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = Field(default=None, alias="Name")
    skills: Optional[str] = Field(default=None, alias="Skills")
    email: Optional[str] = Field(default=None, alias="Email")


class PersonCreateResult(BaseModel):
    """Result envelope returned by ``POST /person``."""

    model_config = ConfigDict(populate_by_name=True)

    value: PersonRead = Field(alias="Value", description="The inserted person")
    error: Optional[str] = Field(default=None, alias="Error")
    rows_affected: int = Field(default=1, alias="RowsAffected")
