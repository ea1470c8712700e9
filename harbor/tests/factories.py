"""Helpers for building resources and ships through the registries."""

from harbor.api.deps import HarborServices
from harbor.application.dtos import ResourceCreate, ShipCreate
from harbor.domain.assignment.entities import Resource, Ship
from harbor.domain.assignment.value_objects import ResourceKind


def make_resource(
    services: HarborServices,
    capacity: int,
    name: str = "Pier",
    kind: ResourceKind = ResourceKind.DOCK,
    resource_id: int | None = None,
) -> Resource:
    return services.resource_registry.create(
        ResourceCreate(id=resource_id, name=name, kind=kind, capacity=capacity)
    )


def make_ship(
    services: HarborServices,
    resource_id: int | None = None,
    name: str = "Nautilus",
    ship_type: str = "Cargo",
    ship_id: int | None = None,
) -> Ship:
    return services.ship_registry.create(
        ShipCreate(
            id=ship_id, name=name, type=ship_type, assigned_resource_id=resource_id
        )
    )


def fill(services: HarborServices, resource_id: int, count: int) -> list[Ship]:
    return [
        make_ship(services, resource_id, name=f"Ship {i}") for i in range(count)
    ]
