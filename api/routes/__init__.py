"""API routes package"""

from . import health, recipes, meal_plans, meal_plan_entries

__all__ = ["health", "recipes", "meal_plans", "meal_plan_entries"]
