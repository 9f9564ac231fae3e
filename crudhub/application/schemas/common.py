"""Shared field types and response envelopes used by every entity schema."""

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, StringConstraints, field_validator

from crudhub.domain.identifiers import OBJECT_ID_PATTERN


def _as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken as UTC so start/end comparisons never mix kinds."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


ObjectIdStr = Annotated[str, StringConstraints(pattern=OBJECT_ID_PATTERN)]
IsoDateTime = Annotated[datetime, AfterValidator(_as_utc)]
CalendarDate = Annotated[str, StringConstraints(pattern=r"^\d{4}-\d{2}-\d{2}$")]
ShortLabel = Annotated[str, StringConstraints(min_length=2, max_length=30)]


class EntityPayload(BaseModel):
    """Base for create/replace payloads.

    Unknown keys are rejected. Optional fields may be omitted but never sent
    as ``null``.
    """

    model_config = ConfigDict(extra="forbid")

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("must not be null")
        return value


# ── Response envelopes ──────────────────────────────────────────────


class CreatedResponse(BaseModel):
    """Body returned on create: only the new identifier."""

    id: str


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Uniform error body for every entity route."""

    error: str
    details: list[str] | None = None
