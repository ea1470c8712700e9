"""
Domain Exceptions

Defines custom exceptions for harbor assignment errors with discriminated
error types. Every failure is local and synchronous: the caller corrects the
request and resubmits.
"""

from enum import Enum


class ErrorType(str, Enum):
    """Error type enumeration for discriminated unions."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    CAPACITY_VIOLATION = "capacity_violation"
    ALREADY_EXISTS = "already_exists"
    REPOSITORY = "repository"


class DomainError(Exception):
    """Base class for all domain errors with type discrimination."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict[str, str | dict[str, str | int | bool | None]]:
        """Convert error to dictionary for API responses."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainError):
    """Raised when input is malformed or out of range."""

    def __init__(
        self,
        field_name: str,
        value: str | int | float | bool | None,
        message: str,
        error_code: str | None = None,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        self.field_name = field_name
        self.value = value
        self.error_code = error_code or "VALIDATION_ERROR"

        full_message = f"Validation failed for field '{field_name}': {message}"
        details = details or {}
        details.update(
            {
                "field": field_name,
                "value": str(value) if value is not None else None,
                "error_code": self.error_code,
            }
        )

        super().__init__(full_message, ErrorType.VALIDATION, details)


class MultipleValidationError(ValidationError):
    """Raised when several fields fail validation at once."""

    def __init__(self, validation_errors: list[ValidationError]) -> None:
        self.validation_errors = validation_errors
        messages = [error.message for error in validation_errors]
        combined_message = "Multiple validation errors: " + "; ".join(messages)

        details: dict[str, str | int | bool | None] = {
            "error_count": len(validation_errors),
            "fields": ", ".join(error.field_name for error in validation_errors),
        }

        super().__init__(
            "multiple_fields",
            None,
            combined_message,
            "MULTIPLE_VALIDATION_ERRORS",
            details,
        )

    @property
    def error_count(self) -> int:
        """Get the number of validation errors."""
        return len(self.validation_errors)


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""

    def __init__(self, entity_type: str, entity_id: int) -> None:
        details = {"entity_type": entity_type, "entity_id": entity_id}
        super().__init__(
            f"{entity_type.capitalize()} not found: {entity_id}",
            ErrorType.NOT_FOUND,
            details,
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class ResourceNotFoundError(NotFoundError):
    """Raised when a dock or hauler is not found."""

    def __init__(self, resource_id: int) -> None:
        super().__init__("resource", resource_id)
        self.resource_id = resource_id


class ShipNotFoundError(NotFoundError):
    """Raised when a ship is not found."""

    def __init__(self, ship_id: int) -> None:
        super().__init__("ship", ship_id)
        self.ship_id = ship_id


class CapacityExceededError(DomainError):
    """Raised when an assignment would exceed a resource's capacity."""

    def __init__(
        self, resource_id: int, capacity: int, occupancy: int, ship_id: int | None
    ) -> None:
        details = {
            "resource_id": resource_id,
            "capacity": capacity,
            "occupancy": occupancy,
            "ship_id": ship_id,
        }
        super().__init__(
            f"Resource {resource_id} is full ({occupancy}/{capacity})",
            ErrorType.CAPACITY_EXCEEDED,
            details,
        )
        self.resource_id = resource_id
        self.capacity = capacity
        self.occupancy = occupancy
        self.ship_id = ship_id


class CapacityViolationError(DomainError):
    """Raised when shrinking a capacity would strand existing assignments."""

    def __init__(self, resource_id: int, new_capacity: int, occupancy: int) -> None:
        details = {
            "resource_id": resource_id,
            "new_capacity": new_capacity,
            "occupancy": occupancy,
        }
        super().__init__(
            f"Cannot reduce capacity of resource {resource_id} to {new_capacity}: "
            f"{occupancy} ships are assigned",
            ErrorType.CAPACITY_VIOLATION,
            details,
        )
        self.resource_id = resource_id
        self.new_capacity = new_capacity
        self.occupancy = occupancy


class AlreadyExistsError(DomainError):
    """Raised when creating a record with an id that is already taken."""

    def __init__(self, entity_type: str, entity_id: int) -> None:
        details = {"entity_type": entity_type, "entity_id": entity_id}
        super().__init__(
            f"{entity_type.capitalize()} already exists: {entity_id}",
            ErrorType.ALREADY_EXISTS,
            details,
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class RepositoryError(DomainError):
    """Raised when the storage collaborator fails."""

    def __init__(self, message: str, operation: str | None = None) -> None:
        super().__init__(message, ErrorType.REPOSITORY, {"operation": operation})
        self.operation = operation
