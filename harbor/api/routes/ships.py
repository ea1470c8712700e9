"""
Ship API Routes.

Endpoints for registering ships and moving them between docks and haulers.
"""

from typing import Any

from fastapi import APIRouter, Body, Query, status

from harbor.api.deps import ShipRegistryDep
from harbor.application.validation import decode_ship_create, decode_ship_update
from harbor.domain.assignment.entities import Ship

router = APIRouter(prefix="/ships", tags=["ships"])


@router.get("", summary="List ships", response_model=list[Ship])
def list_ships(
    registry: ShipRegistryDep,
    resource_id: int | None = Query(
        None, description="Only ships assigned to this resource"
    ),
) -> list[Ship]:
    if resource_id is not None:
        return registry.list_by_resource(resource_id)
    return registry.list()


@router.post(
    "",
    summary="Create ship",
    status_code=status.HTTP_201_CREATED,
    response_model=Ship,
)
def create_ship(registry: ShipRegistryDep, payload: Any = Body(...)) -> Ship:
    request = decode_ship_create(payload).unwrap()
    return registry.create(request)


@router.get("/{ship_id}", summary="Get ship", response_model=Ship)
def get_ship(ship_id: int, registry: ShipRegistryDep) -> Ship:
    return registry.get(ship_id)


@router.patch(
    "/{ship_id}",
    summary="Update ship",
    description="Partially update a ship. Send assigned_resource_id: null to "
    "release it from its resource.",
    response_model=Ship,
)
def update_ship(
    ship_id: int, registry: ShipRegistryDep, payload: Any = Body(...)
) -> Ship:
    request = decode_ship_update(payload).unwrap()
    return registry.update(ship_id, request)
