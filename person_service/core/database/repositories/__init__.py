"""
Repositories for the person service tables.

Each repository wraps one AsyncSession and commits per operation.
"""

from .addresses import AddressRepository
from .base import AsyncBaseRepository, SoftDeleteRepository
from .persons import PersonRepository

__all__ = [
    "AddressRepository",
    "AsyncBaseRepository",
    "PersonRepository",
    "SoftDeleteRepository",
]
