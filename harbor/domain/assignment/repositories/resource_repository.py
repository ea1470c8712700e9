"""
Resource Repository Interface

Defines the contract for dock and hauler data access operations.
"""

from abc import ABC, abstractmethod

from ..entities.resource import Resource
from ..value_objects.enums import ResourceKind


class ResourceRepository(ABC):
    """
    Abstract repository interface for Resource entities.

    Implementations hand out copies, so mutating a returned resource has no
    effect until it is passed back through save().
    """

    @abstractmethod
    def add(self, resource: Resource) -> Resource:
        """
        Store a new resource.

        Args:
            resource: Resource to store. When its id is None the repository
                allocates the next free id.

        Returns:
            The stored resource with its id set

        Raises:
            AlreadyExistsError: If the id is already in use
            RepositoryError: If the storage operation fails
        """
        pass

    @abstractmethod
    def get_by_id(self, resource_id: int) -> Resource | None:
        """
        Retrieve a resource by its ID.

        Returns:
            Resource or None if not found
        """
        pass

    @abstractmethod
    def get_all(self, kind: ResourceKind | None = None) -> list[Resource]:
        """
        Retrieve all resources, optionally restricted to one kind.

        Returns:
            Resources in insertion order
        """
        pass

    @abstractmethod
    def save(self, resource: Resource) -> Resource:
        """
        Persist changes to an existing resource.

        Raises:
            ResourceNotFoundError: If the resource does not exist
            RepositoryError: If the storage operation fails
        """
        pass
