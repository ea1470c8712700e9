"""Value objects for the assignment domain."""

from .decision import AssignmentDecision
from .enums import DecisionReason, ResourceKind

__all__ = [
    "AssignmentDecision",
    "DecisionReason",
    "ResourceKind",
]
