"""
Ship registry service.

Creates, reads and updates ships. Every write that points a ship at a
resource is checked by the assignment rules while the target resource's lock
is held, so two accepted assignments can never jointly overfill a resource.
"""

from __future__ import annotations

from harbor.core.observability import get_logger
from harbor.domain.assignment.entities import Ship
from harbor.domain.assignment.repositories import ResourceRepository, ShipRepository
from harbor.domain.assignment.services import assignment_rules
from harbor.domain.assignment.services.lock_manager import (
    AssignmentLockManager,
    resource_key,
    ship_key,
)
from harbor.domain.shared.exceptions import (
    CapacityExceededError,
    ResourceNotFoundError,
    ShipNotFoundError,
)

from ..dtos.harbor_dtos import ShipCreate, ShipUpdate

logger = get_logger(__name__)


class ShipRegistry:
    """Application service for ship records and their assignments."""

    def __init__(
        self,
        resources: ResourceRepository,
        ships: ShipRepository,
        locks: AssignmentLockManager,
    ) -> None:
        self._resources = resources
        self._ships = ships
        self._locks = locks

    def create(self, request: ShipCreate) -> Ship:
        """
        Register a new ship, optionally assigned to a resource.

        Raises:
            ValidationError: If a field rule is broken
            ResourceNotFoundError: If the target resource does not exist
            CapacityExceededError: If the target resource is full
            AlreadyExistsError: If an explicit id is already taken
        """
        ship = Ship(
            id=request.id,
            name=request.name,
            type=request.type,
            assigned_resource_id=request.assigned_resource_id,
        )
        ship.ensure_valid()

        target = ship.assigned_resource_id
        keys = [
            ship_key(ship.id) if ship.id is not None else None,
            resource_key(target) if target is not None else None,
        ]
        with self._locks.hold(keys):
            if target is not None:
                # A ship that is not stored yet holds no slot anywhere
                self._check_assignment(None, target)
            created = self._ships.add(ship)

        logger.info(
            "ship_created",
            ship_id=created.id,
            assigned_resource_id=created.assigned_resource_id,
        )
        return created

    def get(self, ship_id: int) -> Ship:
        """
        Raises:
            ShipNotFoundError: If the ship does not exist
        """
        ship = self._ships.get_by_id(ship_id)
        if ship is None:
            raise ShipNotFoundError(ship_id)
        return ship

    def list(self) -> list[Ship]:
        return self._ships.get_all()

    def list_by_resource(self, resource_id: int) -> list[Ship]:
        """
        Raises:
            ResourceNotFoundError: If the resource does not exist
        """
        if self._resources.get_by_id(resource_id) is None:
            raise ResourceNotFoundError(resource_id)
        return self._ships.get_by_resource(resource_id)

    def update(self, ship_id: int, request: ShipUpdate) -> Ship:
        """
        Apply a partial update to a ship.

        Moving a ship from A to B releases A and acquires B; only B is
        checked. Reassigning a ship to the resource it already occupies
        always succeeds.

        Raises:
            ShipNotFoundError: If the ship does not exist
            ValidationError: If the updated fields break a field rule
            ResourceNotFoundError: If the target resource does not exist
            CapacityExceededError: If the target resource is full
        """
        changes = request.changes()
        target = changes.get("assigned_resource_id")
        keys = [
            ship_key(ship_id),
            resource_key(target) if target is not None else None,
        ]

        with self._locks.hold(keys):
            current = self.get(ship_id)
            updated = current.model_copy(update=changes)
            updated.ensure_valid()

            if target is not None:
                self._check_assignment(ship_id, target)

            updated.mark_updated()
            saved = self._ships.save(updated)

        if current.assigned_resource_id != saved.assigned_resource_id:
            logger.info(
                "ship_reassigned",
                ship_id=ship_id,
                from_resource_id=current.assigned_resource_id,
                to_resource_id=saved.assigned_resource_id,
            )
        else:
            logger.info("ship_updated", ship_id=ship_id, fields=sorted(changes))
        return saved

    def assign(self, ship_id: int, resource_id: int | None) -> Ship:
        """Shorthand for an update that only changes the assignment."""
        return self.update(ship_id, ShipUpdate(assigned_resource_id=resource_id))

    def release(self, ship_id: int) -> Ship:
        return self.assign(ship_id, None)

    def _check_assignment(self, ship_id: int | None, resource_id: int) -> None:
        try:
            assignment_rules.ensure_can_assign(
                self._resources, self._ships, ship_id, resource_id
            )
        except (ResourceNotFoundError, CapacityExceededError) as e:
            logger.warning(
                "assignment_rejected",
                ship_id=ship_id,
                resource_id=resource_id,
                reason=e.error_type.value,
            )
            raise
