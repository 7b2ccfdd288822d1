"""
Authorization and ownership guards shared by every operation.
"""

import logging
from sqlalchemy.orm import Session

from app.exceptions import NotFoundError, UnauthorizedError
from domain.models import MealPlan
from domain.schemas.auth_schemas import ActionContext, CurrentUser
from repositories import MealPlanRepository

logger = logging.getLogger("mealplanner.guards")


def require_user(context: ActionContext) -> CurrentUser:
    """Return the signed-in user or raise UnauthorizedError. No I/O."""
    user = context.user if context is not None else None
    if user is None:
        raise UnauthorizedError("You must be signed in to perform this action.")
    return user


def assert_meal_plan_ownership(db: Session, meal_plan_id: str, user_id: str) -> MealPlan:
    """
    Load a meal plan only if it belongs to ``user_id``.

    A plan that does not exist and a plan owned by someone else both raise the
    same NotFoundError, so callers cannot learn which ids exist.
    """
    meal_plan = MealPlanRepository(db).get_by_id_and_user(meal_plan_id, user_id)
    if meal_plan is None:
        logger.warning("Meal plan %s not found for user %s", meal_plan_id, user_id)
        raise NotFoundError("Meal plan not found.")
    return meal_plan
