from .harbor_dtos import ResourceCreate, ResourceUpdate, ShipCreate, ShipUpdate

__all__ = [
    "ResourceCreate",
    "ResourceUpdate",
    "ShipCreate",
    "ShipUpdate",
]
