"""
Repository Interfaces

Abstract contracts for resource and ship persistence. The infrastructure
layer provides in-memory and SQLModel-backed implementations.
"""

from .resource_repository import ResourceRepository
from .ship_repository import ShipRepository

__all__ = [
    "ResourceRepository",
    "ShipRepository",
]
