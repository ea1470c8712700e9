"""Base classes for domain entities and value objects."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import MultipleValidationError, ValidationError


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ValueObject(BaseModel):
    """Base class for value objects (immutable, defined by their values)."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class Entity(BaseModel, ABC):
    """Base class for entities (have identity, can change over time)."""

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    id: int | None = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime | None = None

    def __eq__(self, other: Any) -> bool:
        """Entities are equal if they have the same ID and type."""
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        return hash((self.__class__.__name__, self.id))

    def mark_updated(self) -> None:
        """Mark the entity as updated."""
        self.updated_at = utc_now()

    @abstractmethod
    def validation_errors(self) -> list[ValidationError]:
        """Check business rules for this entity."""
        pass

    def ensure_valid(self) -> None:
        """Validate the entity and raise if any rule is broken."""
        errors = self.validation_errors()
        if len(errors) == 1:
            raise errors[0]
        if errors:
            raise MultipleValidationError(errors)
