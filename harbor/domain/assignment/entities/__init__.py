"""Domain entities for harbor assignments."""

from .resource import Resource
from .ship import Ship

__all__ = ["Resource", "Ship"]
