"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.base import CamelModel, PartialUpdate, UPDATE_REQUIRES_FIELD
from domain.schemas.auth_schemas import CurrentUser, ActionContext
from domain.schemas.recipe_schemas import (
    RecipeCreate,
    RecipeChanges,
    RecipeUpdate,
    RecipeRead,
)
from domain.schemas.meal_plan_schemas import (
    MealPlanCreate,
    MealPlanChanges,
    MealPlanUpdate,
    MealPlanRead,
    MealPlanEntryUpsert,
    MealPlanEntryRead,
)

__all__ = [
    "CamelModel",
    "PartialUpdate",
    "UPDATE_REQUIRES_FIELD",
    # Caller identity
    "CurrentUser",
    "ActionContext",
    # Recipe schemas
    "RecipeCreate",
    "RecipeChanges",
    "RecipeUpdate",
    "RecipeRead",
    # Meal plan schemas
    "MealPlanCreate",
    "MealPlanChanges",
    "MealPlanUpdate",
    "MealPlanRead",
    "MealPlanEntryUpsert",
    "MealPlanEntryRead",
]
