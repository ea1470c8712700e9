"""
Assignment Rules

Stateless checks that keep every resource within its capacity. All functions
take the repositories explicitly and hold no state of their own; callers that
commit on the strength of a check must hold the matching locks from
AssignmentLockManager for the duration of check and commit.

A reassignment from resource A to resource B is evaluated as a release from A
followed by an acquire at B. Only B is checked, and the moving ship is not
counted at B because it is not assigned there yet.
"""

from ...shared.exceptions import (
    CapacityExceededError,
    CapacityViolationError,
    ResourceNotFoundError,
)
from ..repositories.resource_repository import ResourceRepository
from ..repositories.ship_repository import ShipRepository
from ..value_objects.decision import AssignmentDecision
from ..value_objects.enums import DecisionReason


def occupancy(ships: ShipRepository, resource_id: int) -> int:
    """Number of ships currently assigned to the resource."""
    return ships.count_by_resource(resource_id)


def evaluate_assignment(
    resources: ResourceRepository,
    ships: ShipRepository,
    ship_id: int | None,
    resource_id: int,
) -> AssignmentDecision:
    """
    Decide whether a ship may be assigned to a resource.

    Args:
        resources: Resource lookup
        ships: Ship lookup used for occupancy and the ship's current assignment
        ship_id: Ship being assigned, or None for a ship not yet stored
        resource_id: Target resource

    Returns:
        AssignmentDecision with the reason and the numbers it was based on
    """
    resource = resources.get_by_id(resource_id)
    if resource is None:
        return AssignmentDecision(
            allowed=False,
            reason=DecisionReason.RESOURCE_NOT_FOUND,
            resource_id=resource_id,
        )

    current = occupancy(ships, resource_id)

    if ship_id is not None:
        ship = ships.get_by_id(ship_id)
        if ship is not None and ship.is_assigned_to(resource_id):
            return AssignmentDecision(
                allowed=True,
                reason=DecisionReason.ALREADY_ASSIGNED,
                resource_id=resource_id,
                occupancy=current,
                capacity=resource.capacity,
            )

    allowed = current < resource.capacity
    return AssignmentDecision(
        allowed=allowed,
        reason=DecisionReason.WITHIN_CAPACITY
        if allowed
        else DecisionReason.RESOURCE_FULL,
        resource_id=resource_id,
        occupancy=current,
        capacity=resource.capacity,
    )


def can_assign(
    resources: ResourceRepository,
    ships: ShipRepository,
    ship_id: int | None,
    resource_id: int,
) -> bool:
    return evaluate_assignment(resources, ships, ship_id, resource_id).allowed


def ensure_can_assign(
    resources: ResourceRepository,
    ships: ShipRepository,
    ship_id: int | None,
    resource_id: int,
) -> AssignmentDecision:
    """
    Enforcing form of evaluate_assignment.

    Raises:
        ResourceNotFoundError: If the resource does not exist
        CapacityExceededError: If the resource is full
    """
    decision = evaluate_assignment(resources, ships, ship_id, resource_id)
    if decision.reason == DecisionReason.RESOURCE_NOT_FOUND:
        raise ResourceNotFoundError(resource_id)
    if not decision.allowed:
        raise CapacityExceededError(
            resource_id=resource_id,
            capacity=decision.capacity or 0,
            occupancy=decision.occupancy,
            ship_id=ship_id,
        )
    return decision


def evaluate_shrink(
    resources: ResourceRepository,
    ships: ShipRepository,
    resource_id: int,
    new_capacity: int,
) -> AssignmentDecision:
    """Decide whether a resource's capacity may be set to new_capacity."""
    resource = resources.get_by_id(resource_id)
    if resource is None:
        return AssignmentDecision(
            allowed=False,
            reason=DecisionReason.RESOURCE_NOT_FOUND,
            resource_id=resource_id,
        )

    current = occupancy(ships, resource_id)
    allowed = current <= new_capacity
    return AssignmentDecision(
        allowed=allowed,
        reason=DecisionReason.WITHIN_CAPACITY
        if allowed
        else DecisionReason.BELOW_OCCUPANCY,
        resource_id=resource_id,
        occupancy=current,
        capacity=new_capacity,
    )


def can_shrink(
    resources: ResourceRepository,
    ships: ShipRepository,
    resource_id: int,
    new_capacity: int,
) -> bool:
    return evaluate_shrink(resources, ships, resource_id, new_capacity).allowed


def ensure_can_shrink(
    resources: ResourceRepository,
    ships: ShipRepository,
    resource_id: int,
    new_capacity: int,
) -> AssignmentDecision:
    """
    Enforcing form of evaluate_shrink.

    Raises:
        ResourceNotFoundError: If the resource does not exist
        CapacityViolationError: If occupancy exceeds the new capacity
    """
    decision = evaluate_shrink(resources, ships, resource_id, new_capacity)
    if decision.reason == DecisionReason.RESOURCE_NOT_FOUND:
        raise ResourceNotFoundError(resource_id)
    if not decision.allowed:
        raise CapacityViolationError(
            resource_id=resource_id,
            new_capacity=new_capacity,
            occupancy=decision.occupancy,
        )
    return decision
