from .resource_registry import ResourceRegistry
from .ship_registry import ShipRegistry

__all__ = ["ResourceRegistry", "ShipRegistry"]
