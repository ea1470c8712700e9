"""
Database repository implementations.

SQLModel-backed implementations of the domain repository interfaces.
"""

from .base import BaseRepository
from .resource_repository import SqlResourceRepository
from .ship_repository import SqlShipRepository

__all__ = [
    "BaseRepository",
    "SqlResourceRepository",
    "SqlShipRepository",
]
