"""Pydantic schemas for recipe input validation and responses."""

from typing import Optional

from pydantic import field_validator, model_validator

from domain.schemas.base import (
    CamelModel,
    NonEmptyStr,
    NonNegativeInt,
    PartialUpdate,
    PositiveInt,
    UPDATE_REQUIRES_FIELD,
    UtcDatetime,
)


class RecipeCreate(CamelModel):
    """Input for creating a recipe. Only the title is required."""

    title: NonEmptyStr
    description: Optional[str] = None
    cuisine: Optional[str] = None
    meal_type: Optional[str] = None
    tags: Optional[str] = None
    ingredients: Optional[str] = None
    instructions: Optional[str] = None
    calories: Optional[PositiveInt] = None
    protein_grams: Optional[NonNegativeInt] = None
    carbs_grams: Optional[NonNegativeInt] = None
    fat_grams: Optional[NonNegativeInt] = None


class RecipeChanges(PartialUpdate):
    """Recipe fields a caller may change; at least one must be sent."""

    title: Optional[NonEmptyStr] = None
    description: Optional[str] = None
    cuisine: Optional[str] = None
    meal_type: Optional[str] = None
    tags: Optional[str] = None
    ingredients: Optional[str] = None
    instructions: Optional[str] = None
    calories: Optional[PositiveInt] = None
    protein_grams: Optional[NonNegativeInt] = None
    carbs_grams: Optional[NonNegativeInt] = None
    fat_grams: Optional[NonNegativeInt] = None

    @field_validator("title", mode="before")
    @classmethod
    def title_cannot_be_cleared(cls, v):
        if v is None:
            raise ValueError("title cannot be cleared")
        return v

    @model_validator(mode="after")
    def require_changes(self):
        if not self.has_changes():
            raise ValueError(UPDATE_REQUIRES_FIELD)
        return self


class RecipeUpdate(RecipeChanges):
    """Input for updating a recipe: the id plus the changed fields."""

    id: NonEmptyStr


class RecipeRead(CamelModel):
    """Recipe as returned to the caller"""

    id: str
    user_id: str
    title: str
    description: Optional[str] = None
    cuisine: Optional[str] = None
    meal_type: Optional[str] = None
    tags: Optional[str] = None
    ingredients: Optional[str] = None
    instructions: Optional[str] = None
    calories: Optional[int] = None
    protein_grams: Optional[int] = None
    carbs_grams: Optional[int] = None
    fat_grams: Optional[int] = None
    created_at: Optional[UtcDatetime] = None
    updated_at: Optional[UtcDatetime] = None
