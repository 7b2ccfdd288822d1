import logging
import uuid
from datetime import datetime, timezone
from typing import List

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from domain.models import Recipe
from domain.schemas.auth_schemas import ActionContext
from domain.schemas.recipe_schemas import RecipeCreate, RecipeRead, RecipeUpdate
from repositories import RecipeRepository
from services.guards import require_user

logger = logging.getLogger("mealplanner.recipes")


class RecipeService:
    @staticmethod
    def create_recipe(db: Session, context: ActionContext, payload: RecipeCreate) -> RecipeRead:
        """
        Create a recipe owned by the caller.

        The id and both timestamps are assigned here; the payload has already
        been validated (non-empty title, positive calories, non-negative macros).

        Raises:
            UnauthorizedError: If no user is signed in
        """
        user = require_user(context)
        now = datetime.now(timezone.utc)

        recipe = Recipe(
            id=str(uuid.uuid4()),
            user_id=user.id,
            **payload.model_dump(),
            created_at=now,
            updated_at=now,
        )
        # Build the response before commit expires the instance
        result = RecipeRead.model_validate(recipe)

        RecipeRepository(db).create(recipe)
        logger.info("Created recipe %s for user %s", result.id, user.id)
        return result

    @staticmethod
    def update_recipe(db: Session, context: ActionContext, payload: RecipeUpdate) -> RecipeRead:
        """
        Apply the fields the caller sent to one of their recipes.

        Fields left out of the payload keep their stored values. The returned
        record is the one read before the write, overlaid with the sent fields
        and the new ``updated_at``; it is not re-read from storage.

        Raises:
            UnauthorizedError: If no user is signed in
            NotFoundError: If the recipe does not exist or belongs to someone else
        """
        user = require_user(context)
        repo = RecipeRepository(db)

        existing = repo.get_by_id_and_user(payload.id, user.id)
        if existing is None:
            logger.warning("Recipe %s not found for user %s", payload.id, user.id)
            raise NotFoundError("Recipe not found.")

        before = RecipeRead.model_validate(existing)
        changes = payload.provided_fields()
        changes["updated_at"] = datetime.now(timezone.utc)

        repo.update_by_id_and_user(payload.id, user.id, changes)
        logger.info(
            "Updated recipe %s for user %s (fields=%s)",
            payload.id,
            user.id,
            sorted(changes),
        )
        return before.model_copy(update=changes)

    @staticmethod
    def delete_recipe(db: Session, context: ActionContext, recipe_id: str) -> str:
        """Delete one of the caller's recipes and return its id."""
        user = require_user(context)
        repo = RecipeRepository(db)

        if repo.get_by_id_and_user(recipe_id, user.id) is None:
            logger.warning("Recipe %s not found for user %s", recipe_id, user.id)
            raise NotFoundError("Recipe not found.")

        repo.delete_by_id_and_user(recipe_id, user.id)
        logger.info("Deleted recipe %s for user %s", recipe_id, user.id)
        return recipe_id

    @staticmethod
    def list_recipes(db: Session, context: ActionContext) -> List[RecipeRead]:
        user = require_user(context)
        recipes = RecipeRepository(db).list_by_user(user.id)
        return [RecipeRead.model_validate(r) for r in recipes]
