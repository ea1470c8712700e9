"""
Read-only queries composed over the resource and ship repositories.

Queries take no locks. A view built while an assignment is being committed
may reflect the state just before or just after it.
"""

from ...shared.exceptions import ResourceNotFoundError
from ..entities.resource import Resource
from ..repositories.resource_repository import ResourceRepository
from ..repositories.ship_repository import ShipRepository
from ..value_objects.enums import ResourceKind
from .resource_occupancy import HarborOverview, ResourceOccupancy


class HarborQueries:
    """Query surface joining resources with their occupants."""

    def __init__(self, resources: ResourceRepository, ships: ShipRepository) -> None:
        self._resources = resources
        self._ships = ships

    def resource_with_ships(self, resource_id: int) -> ResourceOccupancy:
        """
        Return a resource with its current ships and remaining capacity.

        Raises:
            ResourceNotFoundError: If the resource does not exist
        """
        resource = self._resources.get_by_id(resource_id)
        if resource is None:
            raise ResourceNotFoundError(resource_id)
        return self._view(resource)

    def harbor_overview(self, kind: ResourceKind | None = None) -> HarborOverview:
        views = [self._view(resource) for resource in self._resources.get_all(kind)]
        unassigned = [ship for ship in self._ships.get_all() if not ship.is_assigned]
        return HarborOverview(resources=views, unassigned_ships=unassigned)

    def resources_with_free_capacity(
        self, kind: ResourceKind | None = None
    ) -> list[ResourceOccupancy]:
        """Resources that can accept at least one more ship."""
        return [
            view
            for view in (self._view(r) for r in self._resources.get_all(kind))
            if not view.is_full
        ]

    def _view(self, resource: Resource) -> ResourceOccupancy:
        # resource.id is always set for stored resources
        ships = self._ships.get_by_resource(resource.id)  # type: ignore[arg-type]
        return ResourceOccupancy(resource=resource, ships=ships)
