from .repositories import InMemoryResourceRepository, InMemoryShipRepository

__all__ = ["InMemoryResourceRepository", "InMemoryShipRepository"]
