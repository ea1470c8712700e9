"""
Assignment Decision Value Object

Outcome of a rule engine check together with the numbers it was based on.
"""

from pydantic import computed_field

from ...shared.base import ValueObject
from .enums import DecisionReason


class AssignmentDecision(ValueObject):
    """Result of evaluating an assignment or a capacity change."""

    allowed: bool
    reason: DecisionReason
    resource_id: int
    occupancy: int = 0
    capacity: int | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def free_capacity(self) -> int:
        if self.capacity is None:
            return 0
        return max(self.capacity - self.occupancy, 0)

    def __bool__(self) -> bool:
        return self.allowed
