"""Schema validation — runs a payload through an entity schema and collects every violation.

Invariants:
    - All fields are evaluated; errors are never truncated to the first one
    - Each error names a stable dotted field path (``meals.1.recipeId``)
    - ``value`` is the normalized payload; optional fields the client omitted stay omitted
"""

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ValidationError

from crudhub.domain.exceptions import FieldError

_MESSAGE_PREFIXES = ("Value error, ", "Assertion failed, ")


@dataclass
class ValidationResult:
    """Either a normalized ``value`` or a non-empty list of ``errors``."""

    value: dict[str, Any] | None = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate(schema: type[BaseModel], payload: Any) -> ValidationResult:
    """Validate ``payload`` against ``schema`` without raising."""
    try:
        model = schema.model_validate(payload)
    except ValidationError as exc:
        return ValidationResult(errors=[_to_field_error(e) for e in exc.errors()])
    return ValidationResult(value=model.model_dump(exclude_unset=True))


def _to_field_error(error: dict[str, Any]) -> FieldError:
    path = ".".join(str(part) for part in error["loc"])
    if error["type"] == "missing":
        return FieldError(path, "is required")
    if error["type"] == "extra_forbidden":
        return FieldError(path, "is not allowed")
    message = error["msg"]
    for prefix in _MESSAGE_PREFIXES:
        if message.startswith(prefix):
            message = message[len(prefix):]
    return FieldError(path, message)
