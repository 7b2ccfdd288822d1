"""Pydantic schemas for meal plans and meal plan entries."""

from datetime import date
from typing import Optional

from pydantic import model_validator

from domain.schemas.base import (
    CalendarDate,
    CamelModel,
    NonEmptyStr,
    PartialUpdate,
    UPDATE_REQUIRES_FIELD,
    UtcDatetime,
)


class MealPlanCreate(CamelModel):
    name: Optional[NonEmptyStr] = None
    start_date: Optional[CalendarDate] = None
    end_date: Optional[CalendarDate] = None


class MealPlanChanges(PartialUpdate):
    """Meal plan fields a caller may change; at least one must be sent."""

    name: Optional[NonEmptyStr] = None
    start_date: Optional[CalendarDate] = None
    end_date: Optional[CalendarDate] = None

    @model_validator(mode="after")
    def require_changes(self):
        if not self.has_changes():
            raise ValueError(UPDATE_REQUIRES_FIELD)
        return self


class MealPlanUpdate(MealPlanChanges):
    id: NonEmptyStr


class MealPlanRead(CamelModel):
    id: str
    user_id: str
    name: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    created_at: Optional[UtcDatetime] = None
    updated_at: Optional[UtcDatetime] = None


class MealPlanEntryUpsert(CamelModel):
    """
    Input for creating or replacing a meal plan entry.

    Without ``id`` a new entry is created. With ``id`` the existing entry is
    replaced: every mutable field takes the value sent, and optional fields
    left out become null.
    """

    id: Optional[NonEmptyStr] = None
    meal_plan_id: NonEmptyStr
    date: CalendarDate
    meal_slot: NonEmptyStr
    recipe_id: Optional[NonEmptyStr] = None
    custom_title: Optional[str] = None
    notes: Optional[str] = None

    def entry_fields(self) -> dict:
        """All mutable entry fields, including the ones left out"""
        return self.model_dump(exclude={"id"})


class MealPlanEntryRead(CamelModel):
    id: str
    meal_plan_id: str
    user_id: str
    date: date
    meal_slot: str
    recipe_id: Optional[str] = None
    custom_title: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[UtcDatetime] = None
