"""
Resource occupancy read models.

Views that join resources with the ships assigned to them. They carry no
state of their own and are recomputed from the repositories on every query.
"""

from pydantic import BaseModel, Field, computed_field

from ..entities.resource import Resource
from ..entities.ship import Ship


class ResourceOccupancy(BaseModel):
    """A resource plus its current occupants."""

    resource: Resource
    ships: list[Ship] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def occupancy(self) -> int:
        return len(self.ships)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def free_capacity(self) -> int:
        return self.resource.capacity - self.occupancy

    @property
    def is_full(self) -> bool:
        return self.free_capacity <= 0

    @property
    def utilization(self) -> float:
        """Share of capacity in use (0.0 to 1.0)."""
        if self.resource.capacity <= 0:
            return 0.0
        return min(1.0, self.occupancy / self.resource.capacity)


class HarborOverview(BaseModel):
    """Occupancy of every resource in the harbor."""

    resources: list[ResourceOccupancy] = Field(default_factory=list)
    unassigned_ships: list[Ship] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_capacity(self) -> int:
        return sum(view.resource.capacity for view in self.resources)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_occupancy(self) -> int:
        return sum(view.occupancy for view in self.resources)
