from .decoders import (
    decode_resource_create,
    decode_resource_update,
    decode_ship_create,
    decode_ship_update,
)

__all__ = [
    "decode_resource_create",
    "decode_resource_update",
    "decode_ship_create",
    "decode_ship_update",
]
