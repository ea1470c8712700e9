"""
Resource Management API Routes.

Endpoints for registering docks and haulers, changing their capacity and
inspecting which ships occupy them.
"""

from typing import Any

from fastapi import APIRouter, Body, Query, status

from harbor.api.deps import HarborQueriesDep, ResourceRegistryDep, ShipRegistryDep
from harbor.application.validation import (
    decode_resource_create,
    decode_resource_update,
)
from harbor.domain.assignment.entities import Resource, Ship
from harbor.domain.assignment.read_models import ResourceOccupancy
from harbor.domain.assignment.value_objects import ResourceKind

router = APIRouter(prefix="/resources", tags=["resources"])


@router.get(
    "",
    summary="List resources",
    description="Get all docks and haulers in insertion order.",
    response_model=list[Resource],
)
def list_resources(
    registry: ResourceRegistryDep,
    kind: ResourceKind | None = Query(None, description="Filter by resource kind"),
) -> list[Resource]:
    return registry.list(kind=kind)


@router.get(
    "/available",
    summary="Resources with free capacity",
    description="Get resources that can accept at least one more ship.",
    response_model=list[ResourceOccupancy],
)
def list_available_resources(
    queries: HarborQueriesDep,
    kind: ResourceKind | None = Query(None, description="Filter by resource kind"),
) -> list[ResourceOccupancy]:
    return queries.resources_with_free_capacity(kind=kind)


@router.post(
    "",
    summary="Create resource",
    status_code=status.HTTP_201_CREATED,
    response_model=Resource,
)
def create_resource(
    registry: ResourceRegistryDep, payload: Any = Body(...)
) -> Resource:
    request = decode_resource_create(payload).unwrap()
    return registry.create(request)


@router.get("/{resource_id}", summary="Get resource", response_model=Resource)
def get_resource(resource_id: int, registry: ResourceRegistryDep) -> Resource:
    return registry.get(resource_id)


@router.patch(
    "/{resource_id}",
    summary="Update resource",
    description="Partially update a resource. Capacity may not drop below "
    "the number of ships currently assigned to it.",
    response_model=Resource,
)
def update_resource(
    resource_id: int, registry: ResourceRegistryDep, payload: Any = Body(...)
) -> Resource:
    request = decode_resource_update(payload).unwrap()
    return registry.update(resource_id, request)


@router.get(
    "/{resource_id}/occupancy",
    summary="Resource occupancy",
    description="Get a resource with its current ships and free capacity.",
    response_model=ResourceOccupancy,
)
def get_resource_occupancy(
    resource_id: int, queries: HarborQueriesDep
) -> ResourceOccupancy:
    return queries.resource_with_ships(resource_id)


@router.get(
    "/{resource_id}/ships",
    summary="Ships at resource",
    response_model=list[Ship],
)
def list_resource_ships(resource_id: int, ships: ShipRegistryDep) -> list[Ship]:
    return ships.list_by_resource(resource_id)
