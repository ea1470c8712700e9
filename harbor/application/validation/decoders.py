"""
Request body decoders.

Turn raw request payloads into typed request DTOs. Decoding never raises:
shape errors reported by pydantic and field rule violations are both returned
as a Failure carrying a domain ValidationError.
"""

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from harbor.custom_types import Failure, Result, Success
from harbor.domain.shared.exceptions import MultipleValidationError, ValidationError
from harbor.domain.shared.validation import (
    collect_errors,
    validate_capacity,
    validate_identifier,
    validate_optional_text,
    validate_required_text,
)

from ..dtos.harbor_dtos import ResourceCreate, ResourceUpdate, ShipCreate, ShipUpdate

ModelT = TypeVar("ModelT", bound=BaseModel)

DecodeResult = Result[ModelT, ValidationError]


def _from_pydantic(error: PydanticValidationError) -> ValidationError:
    errors = []
    for detail in error.errors():
        field = ".".join(str(loc) for loc in detail["loc"]) or "body"
        value = detail.get("input")
        if not isinstance(value, str | int | float | bool):
            value = None
        errors.append(ValidationError(field, value, detail["msg"], detail["type"]))
    return _combine(errors)


def _combine(errors: list[ValidationError]) -> ValidationError:
    if len(errors) == 1:
        return errors[0]
    return MultipleValidationError(errors)


def _decode(
    model_class: type[ModelT],
    payload: Any,
    rules: Callable[[ModelT], list[ValidationError]],
) -> DecodeResult:
    if not isinstance(payload, Mapping):
        return Failure(
            ValidationError("body", None, "must be a JSON object", "INVALID_TYPE")
        )

    try:
        model = model_class.model_validate(dict(payload))
    except PydanticValidationError as e:
        return Failure(_from_pydantic(e))

    errors = rules(model)
    if errors:
        return Failure(_combine(errors))
    return Success(model)


def _set_fields(model: BaseModel) -> set[str]:
    return model.model_fields_set


def decode_resource_create(payload: Any) -> DecodeResult:
    return _decode(
        ResourceCreate,
        payload,
        lambda m: collect_errors(
            validate_identifier(m.id, "id"),
            validate_required_text(m.name, "name"),
            validate_optional_text(m.location, "location"),
            validate_capacity(m.capacity),
        ),
    )


def decode_resource_update(payload: Any) -> DecodeResult:
    def rules(m: ResourceUpdate) -> list[ValidationError]:
        fields = _set_fields(m)
        errors = collect_errors(
            validate_required_text(m.name, "name") if "name" in fields else None,
            validate_optional_text(m.location, "location"),
            validate_capacity(m.capacity) if "capacity" in fields else None,
        )
        if "kind" in fields and m.kind is None:
            errors.append(ValidationError("kind", None, "is required", "REQUIRED"))
        return errors

    return _decode(ResourceUpdate, payload, rules)


def decode_ship_create(payload: Any) -> DecodeResult:
    return _decode(
        ShipCreate,
        payload,
        lambda m: collect_errors(
            validate_identifier(m.id, "id"),
            validate_required_text(m.name, "name"),
            validate_required_text(m.type, "type"),
            validate_identifier(m.assigned_resource_id, "assigned_resource_id"),
        ),
    )


def decode_ship_update(payload: Any) -> DecodeResult:
    def rules(m: ShipUpdate) -> list[ValidationError]:
        fields = _set_fields(m)
        return collect_errors(
            validate_required_text(m.name, "name") if "name" in fields else None,
            validate_required_text(m.type, "type") if "type" in fields else None,
            validate_identifier(m.assigned_resource_id, "assigned_resource_id"),
        )

    return _decode(ShipUpdate, payload, rules)
