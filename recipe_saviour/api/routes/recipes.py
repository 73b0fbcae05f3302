from fastapi import APIRouter, HTTPException, Response
import logging

from recipe_saviour.domain.Recipe import Recipe
from recipe_saviour.domain.errors import DuplicateRecipe
from recipe_saviour.infra.Recipe_Repository import RecipeRepository
from recipe_saviour.logic.sharing.formatters import format_recipe
from recipe_saviour.utilities.validators import RecipeInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])
logger = logging.getLogger(__name__)


@router.get("")
@router.get("/")
def list_recipes():
    """Saved recipes, newest first."""
    recipes = sorted(RecipeRepository().list_recipes(), key=lambda r: r.date_saved, reverse=True)
    return {"count": len(recipes), "recipes": [r.to_dict() for r in recipes]}


@router.post("", status_code=201)
@router.post("/", status_code=201)
def save_recipe(payload: RecipeInput):
    recipe = Recipe(
        title=payload.title,
        ingredients=payload.ingredients,
        steps=payload.steps,
        source_url=payload.source_url,
    )
    try:
        RecipeRepository().save(recipe)
    except DuplicateRecipe:
        raise HTTPException(status_code=409, detail="Recipe already saved")
    return recipe.to_dict()


@router.delete("/{recipe_id}")
def delete_recipe(recipe_id: str):
    if not RecipeRepository().delete(recipe_id):
        raise HTTPException(status_code=404, detail="Recipe not found")
    return {"status": "deleted", "id": recipe_id}


@router.get("/{recipe_id}/share", response_class=Response)
def share_recipe(recipe_id: str):
    """Plain-text version of a recipe for share sheets / clipboard."""
    recipe = RecipeRepository().get(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return Response(content=format_recipe(recipe), media_type="text/plain")
