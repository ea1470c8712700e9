"""
Resource registry service.

Creates, reads and updates docks and haulers. Capacity changes are checked
against current occupancy under the resource's lock before they are saved.
"""

from __future__ import annotations

from harbor.core.observability import get_logger
from harbor.domain.assignment.entities import Resource
from harbor.domain.assignment.repositories import ResourceRepository, ShipRepository
from harbor.domain.assignment.services import assignment_rules
from harbor.domain.assignment.services.lock_manager import (
    AssignmentLockManager,
    resource_key,
)
from harbor.domain.assignment.value_objects import ResourceKind
from harbor.domain.shared.exceptions import (
    CapacityViolationError,
    ResourceNotFoundError,
)
from harbor.domain.shared.validation import validate_capacity

from ..dtos.harbor_dtos import ResourceCreate, ResourceUpdate

logger = get_logger(__name__)


class ResourceRegistry:
    """
    Application service for dock and hauler records.

    All writes go through the lock manager so a capacity change and a
    concurrent assignment to the same resource are serialized.
    """

    def __init__(
        self,
        resources: ResourceRepository,
        ships: ShipRepository,
        locks: AssignmentLockManager,
    ) -> None:
        self._resources = resources
        self._ships = ships
        self._locks = locks

    def create(self, request: ResourceCreate) -> Resource:
        """
        Register a new resource.

        Raises:
            ValidationError: If the name is blank or capacity is not positive
            AlreadyExistsError: If an explicit id is already taken
        """
        resource = Resource(
            id=request.id,
            name=request.name,
            location=request.location,
            kind=request.kind,
            capacity=request.capacity,
        )
        resource.ensure_valid()

        key = resource_key(resource.id) if resource.id is not None else None
        with self._locks.hold([key]):
            created = self._resources.add(resource)

        logger.info(
            "resource_created",
            resource_id=created.id,
            kind=created.kind.value,
            capacity=created.capacity,
        )
        return created

    def get(self, resource_id: int) -> Resource:
        """
        Raises:
            ResourceNotFoundError: If the resource does not exist
        """
        resource = self._resources.get_by_id(resource_id)
        if resource is None:
            raise ResourceNotFoundError(resource_id)
        return resource

    def list(self, kind: ResourceKind | None = None) -> list[Resource]:
        return self._resources.get_all(kind=kind)

    def update(self, resource_id: int, request: ResourceUpdate) -> Resource:
        """
        Apply a partial update to a resource.

        Raises:
            ResourceNotFoundError: If the resource does not exist
            ValidationError: If the updated fields break a field rule
            CapacityViolationError: If the new capacity is below occupancy
        """
        changes = request.changes()

        with self._locks.hold([resource_key(resource_id)]):
            current = self.get(resource_id)
            updated = current.model_copy(update=changes)
            updated.ensure_valid()

            if "capacity" in changes and changes["capacity"] != current.capacity:
                try:
                    assignment_rules.ensure_can_shrink(
                        self._resources, self._ships, resource_id, updated.capacity
                    )
                except CapacityViolationError as e:
                    logger.warning(
                        "capacity_change_rejected",
                        resource_id=resource_id,
                        current_capacity=current.capacity,
                        requested_capacity=updated.capacity,
                        occupancy=e.occupancy,
                    )
                    raise

            updated.mark_updated()
            saved = self._resources.save(updated)

        logger.info(
            "resource_updated",
            resource_id=resource_id,
            fields=sorted(changes),
            capacity=saved.capacity,
        )
        return saved

    def occupancy(self, resource_id: int) -> int:
        self.get(resource_id)
        return assignment_rules.occupancy(self._ships, resource_id)

    def validate_capacity_change(self, resource_id: int, new_capacity: int) -> bool:
        """Dry-run of a capacity change; does not modify anything."""
        error = validate_capacity(new_capacity)
        if error is not None:
            raise error
        self.get(resource_id)
        return assignment_rules.can_shrink(
            self._resources, self._ships, resource_id, new_capacity
        )
