import logging
import uuid
from datetime import datetime, timezone
from typing import List

from sqlalchemy.orm import Session

from domain.models import MealPlan
from domain.schemas.auth_schemas import ActionContext
from domain.schemas.meal_plan_schemas import MealPlanCreate, MealPlanRead, MealPlanUpdate
from repositories import MealPlanRepository
from services.guards import assert_meal_plan_ownership, require_user

logger = logging.getLogger("mealplanner.meal_plans")


class MealPlanService:
    """Meal plan operations. Mutations go through the ownership guard."""

    @staticmethod
    def create_meal_plan(db: Session, context: ActionContext, payload: MealPlanCreate) -> MealPlanRead:
        user = require_user(context)
        now = datetime.now(timezone.utc)

        meal_plan = MealPlan(
            id=str(uuid.uuid4()),
            user_id=user.id,
            name=payload.name,
            start_date=payload.start_date,
            end_date=payload.end_date,
            created_at=now,
            updated_at=now,
        )
        result = MealPlanRead.model_validate(meal_plan)

        MealPlanRepository(db).create(meal_plan)
        logger.info("Created meal plan %s for user %s", result.id, user.id)
        return result

    @staticmethod
    def update_meal_plan(db: Session, context: ActionContext, payload: MealPlanUpdate) -> MealPlanRead:
        """
        Change name and/or dates of one of the caller's plans.

        Only the fields present in the payload are written. No ordering between
        start and end date is enforced.

        Raises:
            UnauthorizedError: If no user is signed in
            NotFoundError: If the plan does not exist or belongs to someone else
        """
        user = require_user(context)
        existing = assert_meal_plan_ownership(db, payload.id, user.id)

        before = MealPlanRead.model_validate(existing)
        changes = payload.provided_fields()
        changes["updated_at"] = datetime.now(timezone.utc)

        MealPlanRepository(db).update_by_id_and_user(payload.id, user.id, changes)
        logger.info("Updated meal plan %s for user %s", payload.id, user.id)
        return before.model_copy(update=changes)

    @staticmethod
    def delete_meal_plan(db: Session, context: ActionContext, meal_plan_id: str) -> str:
        """
        Delete one of the caller's plans and return its id.

        Entries of the plan are left in place.
        """
        user = require_user(context)
        assert_meal_plan_ownership(db, meal_plan_id, user.id)

        MealPlanRepository(db).delete_by_id_and_user(meal_plan_id, user.id)
        logger.info("Deleted meal plan %s for user %s", meal_plan_id, user.id)
        return meal_plan_id

    @staticmethod
    def list_meal_plans(db: Session, context: ActionContext) -> List[MealPlanRead]:
        user = require_user(context)
        plans = MealPlanRepository(db).list_by_user(user.id)
        return [MealPlanRead.model_validate(p) for p in plans]
