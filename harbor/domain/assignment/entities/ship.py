"""
Ship Domain Entity

A ship may occupy at most one resource at a time. The assignment is a weak
reference by id; the resource does not own the ship.
"""

from ...shared.base import Entity
from ...shared.exceptions import ValidationError
from ...shared.validation import (
    collect_errors,
    validate_identifier,
    validate_required_text,
)


class Ship(Entity):
    """Mobile entity that can be assigned to a dock or hauler."""

    name: str
    type: str
    assigned_resource_id: int | None = None

    def validation_errors(self) -> list[ValidationError]:
        return collect_errors(
            validate_identifier(self.id, "id"),
            validate_required_text(self.name, "name"),
            validate_required_text(self.type, "type"),
            validate_identifier(self.assigned_resource_id, "assigned_resource_id"),
        )

    @property
    def is_assigned(self) -> bool:
        return self.assigned_resource_id is not None

    def is_assigned_to(self, resource_id: int) -> bool:
        return self.assigned_resource_id == resource_id
