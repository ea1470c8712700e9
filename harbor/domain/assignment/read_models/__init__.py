from .harbor_queries import HarborQueries
from .resource_occupancy import HarborOverview, ResourceOccupancy

__all__ = ["HarborOverview", "HarborQueries", "ResourceOccupancy"]
