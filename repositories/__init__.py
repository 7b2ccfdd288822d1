"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.recipe_repository import RecipeRepository
from repositories.meal_plan_repository import MealPlanRepository, MealPlanEntryRepository

__all__ = [
    "BaseRepository",
    "RecipeRepository",
    "MealPlanRepository",
    "MealPlanEntryRepository",
]
