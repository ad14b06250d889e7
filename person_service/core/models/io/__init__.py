"""
I/O models for API requests and responses.

JSON keys use the PascalCase wire names (``ID``, ``Name``, ``PersonID``...);
requests may also use the snake_case attribute names.
"""

from .addresses import AddressCreate, AddressRead, AddressUpdate
from .common import DeletedResponse
from .persons import PersonCreate, PersonCreateResult, PersonRead, PersonUpdate

__all__ = [
    "AddressCreate",
    "AddressRead",
    "AddressUpdate",
    "DeletedResponse",
    "PersonCreate",
    "PersonCreateResult",
    "PersonRead",
    "PersonUpdate",
]
