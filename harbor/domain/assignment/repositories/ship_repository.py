"""
Ship Repository Interface

Defines the contract for ship data access operations.
"""

from abc import ABC, abstractmethod

from ..entities.ship import Ship


class ShipRepository(ABC):
    """Abstract repository interface for Ship entities."""

    @abstractmethod
    def add(self, ship: Ship) -> Ship:
        """
        Store a new ship.

        Args:
            ship: Ship to store. When its id is None the repository allocates
                the next free id.

        Returns:
            The stored ship with its id set

        Raises:
            AlreadyExistsError: If the id is already in use
            RepositoryError: If the storage operation fails
        """
        pass

    @abstractmethod
    def get_by_id(self, ship_id: int) -> Ship | None:
        """Retrieve a ship by its ID, or None if not found."""
        pass

    @abstractmethod
    def get_all(self) -> list[Ship]:
        """Retrieve all ships in insertion order."""
        pass

    @abstractmethod
    def get_by_resource(self, resource_id: int) -> list[Ship]:
        """Retrieve the ships currently assigned to a resource."""
        pass

    @abstractmethod
    def count_by_resource(self, resource_id: int) -> int:
        """Count the ships currently assigned to a resource."""
        pass

    @abstractmethod
    def save(self, ship: Ship) -> Ship:
        """
        Persist changes to an existing ship.

        Raises:
            ShipNotFoundError: If the ship does not exist
            RepositoryError: If the storage operation fails
        """
        pass
