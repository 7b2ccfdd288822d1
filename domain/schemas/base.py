"""
Shared pydantic configuration for request and response schemas.

Python code uses snake_case attribute names; the wire format is camelCase.
Both spellings are accepted on input.
"""

from datetime import date, datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _require_number(v):
    # Whole floats such as 5.0 pass; booleans and numeric strings do not.
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ValueError("must be a number")
    return v


def _date_part(v):
    """Accept a full timestamp where a calendar date is expected"""
    if isinstance(v, str) and len(v) > 10:
        try:
            v = datetime.fromisoformat(v.replace("Z", "+00:00"))
        except ValueError:
            return v
    if isinstance(v, datetime):
        if v.tzinfo is not None:
            v = v.astimezone(timezone.utc)
        return v.date()
    return v


def _as_utc(v: datetime) -> datetime:
    """Databases without time zone support hand back naive UTC values"""
    if v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v


NonEmptyStr = Annotated[str, Field(min_length=1)]
PositiveInt = Annotated[int, BeforeValidator(_require_number), Field(gt=0)]
NonNegativeInt = Annotated[int, BeforeValidator(_require_number), Field(ge=0)]
CalendarDate = Annotated[date, BeforeValidator(_date_part)]
UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]

UPDATE_REQUIRES_FIELD = "At least one field must be provided to update."


class CamelModel(BaseModel):
    """Base model with camelCase aliases and ORM attribute loading"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PartialUpdate(CamelModel):
    """
    Base for partial-update inputs.

    A field counts as provided when the caller sent it, even as null; pydantic's
    ``model_fields_set`` is the presence flag. Fields the caller did not send are
    never written.
    """

    def provided_fields(self) -> dict:
        """Fields the caller actually sent, excluding the record id"""
        return self.model_dump(exclude_unset=True, exclude={"id"})

    def has_changes(self) -> bool:
        return bool(self.model_fields_set - {"id"})
