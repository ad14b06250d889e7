"""
Database entities.

Importing this package registers every table with ``SQLModel.metadata``.
"""

from .addresses import Address
from .persons import Person

__all__ = ["Address", "Person"]
