"""
Resource Domain Entity

A dock or hauler that can hold a bounded number of ships.
"""

from ...shared.base import Entity
from ...shared.exceptions import ValidationError
from ...shared.validation import (
    collect_errors,
    validate_capacity,
    validate_identifier,
    validate_optional_text,
    validate_required_text,
)
from ..value_objects.enums import ResourceKind


class Resource(Entity):
    """Capacity-bounded container for ships."""

    name: str
    location: str | None = None
    kind: ResourceKind = ResourceKind.DOCK
    capacity: int

    def validation_errors(self) -> list[ValidationError]:
        errors = collect_errors(
            validate_identifier(self.id, "id"),
            validate_required_text(self.name, "name"),
            validate_optional_text(self.location, "location"),
            validate_capacity(self.capacity),
        )
        if not isinstance(self.kind, ResourceKind):
            errors.append(ValidationError("kind", self.kind, "is required", "REQUIRED"))
        return errors

    @property
    def is_dock(self) -> bool:
        return self.kind == ResourceKind.DOCK

    @property
    def is_hauler(self) -> bool:
        return self.kind == ResourceKind.HAULER

    def __str__(self) -> str:
        return f"{self.kind.value} {self.id} ({self.name})"
