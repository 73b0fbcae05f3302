from fastapi import FastAPI, HTTPException, Response
from typing import List, Optional
import logging

from recipe_saviour.domain.Recipe import Recipe
from recipe_saviour.domain.errors import ExtractionFailed, PageFetchError
from recipe_saviour.infra.Plan_Repository import PlanRepository
from recipe_saviour.infra.Recipe_Repository import RecipeRepository
from recipe_saviour.infra.pdf_utils import generate_pdf_for_plan
from recipe_saviour.logic.extraction.recipe_extractor import extract_recipe
from recipe_saviour.logic.planning.optimizer import plan_meals
from recipe_saviour.logic.sharing.formatters import format_meal_plan, format_shopping_list
from recipe_saviour.logic.shopping.list_builder import build_shopping_list
from recipe_saviour.utilities.network import fetch_page, normalize_url
from recipe_saviour.utilities.validators import ExtractRequest, PlanRequest, RecipeSelection

# Routers
from recipe_saviour.api.routes import plans, recipes

# Logging
logger = logging.getLogger("recipe_saviour")

# Initialize FastAPI app
app = FastAPI(title="Recipe Saviour API")

# Include routers
app.include_router(recipes.router)
app.include_router(plans.router)


def _selected_recipes(recipe_ids: Optional[List[str]]) -> List[Recipe]:
    """Saved recipes for the given ids (all saved recipes when ids is None)."""
    repo = RecipeRepository()
    if recipe_ids is None:
        return repo.list_recipes()
    selected = repo.get_many(recipe_ids)
    if recipe_ids and not selected:
        raise HTTPException(status_code=404, detail="None of the requested recipes exist")
    return selected


# -------------------- API: Extraction --------------------
@app.post('/api/extract')
async def api_extract(payload: ExtractRequest):
    """Fetch (unless HTML is supplied) and extract a recipe. Nothing is saved."""
    if payload.html is not None:
        url, html = payload.url, payload.html
    else:
        try:
            url = normalize_url(payload.url)
            html = await fetch_page(url)
        except PageFetchError as e:
            raise HTTPException(status_code=502, detail=e.message)
    try:
        recipe = extract_recipe(html, url)
    except ExtractionFailed as e:
        raise HTTPException(status_code=422, detail=e.message)
    logger.info("Extracted '%s' (%d ingredients, %d steps) from %s",
                recipe.title, len(recipe.ingredients), len(recipe.steps), url)
    return recipe.to_dict()


# -------------------- API: Shopping List (JSON) --------------------
@app.post('/api/shopping-list')
@app.post('/api/shopping-list/')
def api_shopping_list(payload: RecipeSelection):
    selected = _selected_recipes(payload.recipe_ids)
    items = build_shopping_list(selected)
    return {
        "recipes": [r.title for r in selected],
        "items": [i.to_dict() for i in items],
        "count": len(items),
        "common_count": sum(1 for i in items if i.is_common),
    }


# -------------------- API: Meal planning --------------------
@app.post('/api/plan')
@app.post('/api/plan/')
def api_plan(payload: PlanRequest):
    """Pick meals that share ingredients; equally good plans rotate between calls."""
    saved = RecipeRepository().list_recipes()
    plan_repo = PlanRepository()
    selection = plan_meals(saved, payload.count, previous=plan_repo.get_last_plan())
    if selection.recipes:
        plan_repo.remember_last_plan(r.id for r in selection.recipes)
    items = build_shopping_list(selection.recipes)
    return {
        "plan": selection.to_dict(),
        "items": [i.to_dict() for i in items],
        "count": len(items),
    }


# -------------------- Sharing / export --------------------
@app.post('/api/share/shopping-list', response_class=Response)
def share_shopping_list(payload: RecipeSelection):
    selected = _selected_recipes(payload.recipe_ids)
    text = format_shopping_list(build_shopping_list(selected), selected)
    return Response(content=text, media_type="text/plain")


@app.post('/api/share/plan', response_class=Response)
def share_plan(payload: RecipeSelection):
    selected = _selected_recipes(payload.recipe_ids)
    text = format_meal_plan(selected, build_shopping_list(selected))
    return Response(content=text, media_type="text/plain")


@app.post("/export_pdf")
def export_pdf(payload: RecipeSelection):
    selected = _selected_recipes(payload.recipe_ids)
    pdf_bytes = generate_pdf_for_plan(selected, build_shopping_list(selected))

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": "attachment; filename=meal_plan.pdf"
        },
    )
