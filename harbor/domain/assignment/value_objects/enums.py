"""Enumerations for the assignment domain."""

from enum import Enum


class ResourceKind(str, Enum):
    """Kinds of capacity-bounded resources in the harbor."""

    DOCK = "dock"
    HAULER = "hauler"


class DecisionReason(str, Enum):
    """Why the rule engine accepted or rejected a proposal."""

    WITHIN_CAPACITY = "within_capacity"
    ALREADY_ASSIGNED = "already_assigned"
    RESOURCE_FULL = "resource_full"
    RESOURCE_NOT_FOUND = "resource_not_found"
    BELOW_OCCUPANCY = "below_occupancy"
