import logging
import uuid
from datetime import datetime, timezone
from typing import List

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from domain.models import MealPlanEntry
from domain.schemas.auth_schemas import ActionContext
from domain.schemas.meal_plan_schemas import MealPlanEntryRead, MealPlanEntryUpsert
from repositories import MealPlanEntryRepository
from services.guards import assert_meal_plan_ownership, require_user

logger = logging.getLogger("mealplanner.meal_plan_entries")


class MealPlanEntryService:
    @staticmethod
    def upsert_meal_plan_entry(
        db: Session, context: ActionContext, payload: MealPlanEntryUpsert
    ) -> MealPlanEntryRead:
        """
        Create a meal plan entry, or replace one when ``payload.id`` is given.

        The target plan must belong to the caller in both branches. When
        replacing, every mutable field is overwritten with the payload value,
        so optional fields left out of the payload are cleared.

        ``recipe_id`` is stored as given; it is not checked against the
        caller's recipes.

        Raises:
            UnauthorizedError: If no user is signed in
            NotFoundError: If the plan, or the entry being replaced, does not
                exist or belongs to someone else
        """
        user = require_user(context)
        assert_meal_plan_ownership(db, payload.meal_plan_id, user.id)

        repo = MealPlanEntryRepository(db)
        values = payload.entry_fields()
        values["user_id"] = user.id

        if payload.id:
            existing = repo.get_by_id_and_user(payload.id, user.id)
            if existing is None:
                logger.warning("Meal plan entry %s not found for user %s", payload.id, user.id)
                raise NotFoundError("Meal plan entry not found.")

            before = MealPlanEntryRead.model_validate(existing)
            repo.update_by_id_and_user(payload.id, user.id, values)
            logger.info(
                "Replaced meal plan entry %s in plan %s", payload.id, payload.meal_plan_id
            )
            return before.model_copy(update=values)

        entry = MealPlanEntry(
            id=str(uuid.uuid4()),
            **values,
            created_at=datetime.now(timezone.utc),
        )
        result = MealPlanEntryRead.model_validate(entry)

        repo.create(entry)
        logger.info(
            "Created meal plan entry %s in plan %s (%s %s)",
            result.id,
            payload.meal_plan_id,
            payload.date,
            payload.meal_slot,
        )
        return result

    @staticmethod
    def delete_meal_plan_entry(db: Session, context: ActionContext, entry_id: str) -> str:
        """Delete one of the caller's entries and return its id."""
        user = require_user(context)
        repo = MealPlanEntryRepository(db)

        if repo.get_by_id_and_user(entry_id, user.id) is None:
            logger.warning("Meal plan entry %s not found for user %s", entry_id, user.id)
            raise NotFoundError("Meal plan entry not found.")

        repo.delete_by_id_and_user(entry_id, user.id)
        logger.info("Deleted meal plan entry %s for user %s", entry_id, user.id)
        return entry_id

    @staticmethod
    def list_meal_plan_entries(
        db: Session, context: ActionContext, meal_plan_id: str
    ) -> List[MealPlanEntryRead]:
        user = require_user(context)
        assert_meal_plan_ownership(db, meal_plan_id, user.id)

        entries = MealPlanEntryRepository(db).list_by_plan_and_user(meal_plan_id, user.id)
        return [MealPlanEntryRead.model_validate(e) for e in entries]
