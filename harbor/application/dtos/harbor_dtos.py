"""
Data transfer objects for resource and ship requests.

Request DTOs only check shape and types. Business rules such as positive
capacities are applied by the decoders and again by the registries, so the
registries can be driven directly from code without going through HTTP.
"""

from pydantic import BaseModel, ConfigDict, StrictInt

from harbor.domain.assignment.value_objects import ResourceKind


class RequestModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


# Resource requests
class ResourceCreate(RequestModel):
    """Request to register a dock or hauler."""

    id: StrictInt | None = None
    name: str
    location: str | None = None
    kind: ResourceKind = ResourceKind.DOCK
    capacity: StrictInt


class ResourceUpdate(RequestModel):
    """Partial update of a resource; only fields that are set are applied."""

    name: str | None = None
    location: str | None = None
    kind: ResourceKind | None = None
    capacity: StrictInt | None = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


# Ship requests
class ShipCreate(RequestModel):
    """Request to register a ship, optionally already assigned."""

    id: StrictInt | None = None
    name: str
    type: str
    assigned_resource_id: StrictInt | None = None


class ShipUpdate(RequestModel):
    """
    Partial update of a ship.

    Setting assigned_resource_id to None explicitly releases the ship; leaving
    it unset keeps the current assignment.
    """

    name: str | None = None
    type: str | None = None
    assigned_resource_id: StrictInt | None = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)

