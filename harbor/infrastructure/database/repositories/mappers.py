"""Mapping between domain entities and table rows."""

from harbor.domain.assignment.entities import Resource, Ship
from harbor.domain.assignment.value_objects import ResourceKind

from ..models import ResourceRow, ShipRow


def resource_to_domain(row: ResourceRow) -> Resource:
    return Resource(
        id=row.id,
        name=row.name,
        location=row.location,
        kind=ResourceKind(row.kind),
        capacity=row.capacity,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def resource_to_row(resource: Resource, row: ResourceRow | None = None) -> ResourceRow:
    row = row or ResourceRow(name=resource.name, capacity=resource.capacity)
    row.id = resource.id
    row.name = resource.name
    row.location = resource.location
    row.kind = resource.kind.value
    row.capacity = resource.capacity
    row.created_at = resource.created_at
    row.updated_at = resource.updated_at
    return row


def ship_to_domain(row: ShipRow) -> Ship:
    return Ship(
        id=row.id,
        name=row.name,
        type=row.type,
        assigned_resource_id=row.resource_id,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def ship_to_row(ship: Ship, row: ShipRow | None = None) -> ShipRow:
    row = row or ShipRow(name=ship.name, type=ship.type)
    row.id = ship.id
    row.name = ship.name
    row.type = ship.type
    row.resource_id = ship.assigned_resource_id
    row.created_at = ship.created_at
    row.updated_at = ship.updated_at
    return row
