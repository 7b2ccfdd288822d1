"""Services package - Business logic layer"""

from services.guards import require_user, assert_meal_plan_ownership
from services.recipe_service import RecipeService
from services.meal_plan_service import MealPlanService
from services.meal_plan_entry_service import MealPlanEntryService

__all__ = [
    "require_user",
    "assert_meal_plan_ownership",
    "RecipeService",
    "MealPlanService",
    "MealPlanEntryService",
]
