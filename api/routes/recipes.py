"""Recipe library routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_action_context, get_db
from api.responses import ErrorResponse, list_response, success_response
from domain.schemas.auth_schemas import ActionContext
from domain.schemas.recipe_schemas import RecipeChanges, RecipeCreate, RecipeUpdate
from services.recipe_service import RecipeService

router = APIRouter(
    prefix="/recipes",
    tags=["Recipes"],
    responses={401: {"model": ErrorResponse}},
)
logger = logging.getLogger("mealplanner.api.recipes")


@router.post("", status_code=status.HTTP_201_CREATED)
def create_recipe(
    payload: RecipeCreate,
    db: Session = Depends(get_db),
    context: ActionContext = Depends(get_action_context),
):
    """Create a recipe in the caller's library"""
    recipe = RecipeService.create_recipe(db, context, payload)
    return success_response(data={"recipe": recipe})


@router.get("")
def list_recipes(
    db: Session = Depends(get_db),
    context: ActionContext = Depends(get_action_context),
):
    """List every recipe the caller owns"""
    return list_response(RecipeService.list_recipes(db, context))


@router.patch("/{recipe_id}", responses={404: {"model": ErrorResponse}})
def update_recipe(
    recipe_id: str,
    changes: RecipeChanges,
    db: Session = Depends(get_db),
    context: ActionContext = Depends(get_action_context),
):
    """
    Update some fields of a recipe.

    Only fields present in the body are changed; send ``null`` to clear an
    optional field. At least one field is required.
    """
    payload = RecipeUpdate(id=recipe_id, **changes.provided_fields())
    recipe = RecipeService.update_recipe(db, context, payload)
    return success_response(data={"recipe": recipe})


@router.delete("/{recipe_id}", responses={404: {"model": ErrorResponse}})
def delete_recipe(
    recipe_id: str,
    db: Session = Depends(get_db),
    context: ActionContext = Depends(get_action_context),
):
    """Delete a recipe. Meal plan entries pointing at it are left as they are."""
    deleted_id = RecipeService.delete_recipe(db, context, recipe_id)
    return success_response(data={"id": deleted_id})
