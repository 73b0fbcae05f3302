from fastapi import APIRouter, HTTPException

from recipe_saviour.domain.errors import DuplicatePlan
from recipe_saviour.infra.Plan_Repository import PlanRepository
from recipe_saviour.infra.Recipe_Repository import RecipeRepository
from recipe_saviour.utilities.validators import FavouritePlanInput

router = APIRouter(prefix="/api/plans", tags=["plans"])


def _plan_view(plan, recipes_by_id):
    data = plan.to_dict()
    # recipes deleted since the plan was saved are simply dropped from the view
    data["recipes"] = [recipes_by_id[i].to_dict() for i in plan.recipe_ids if i in recipes_by_id]
    return data


@router.get("")
@router.get("/")
def list_plans():
    recipes_by_id = {r.id: r for r in RecipeRepository().list_recipes()}
    plans = PlanRepository().list_plans()
    return {"count": len(plans), "plans": [_plan_view(p, recipes_by_id) for p in plans]}


@router.post("", status_code=201)
@router.post("/", status_code=201)
def save_plan(payload: FavouritePlanInput):
    recipes_by_id = {r.id: r for r in RecipeRepository().list_recipes()}
    unknown = [i for i in payload.recipe_ids if i not in recipes_by_id]
    if unknown:
        raise HTTPException(status_code=404, detail=f"Unknown recipes: {', '.join(unknown)}")
    try:
        plan = PlanRepository().save_plan(payload.recipe_ids)
    except DuplicatePlan:
        raise HTTPException(status_code=409, detail="Meal plan with same recipes already saved")
    return _plan_view(plan, recipes_by_id)


@router.delete("/{plan_id}")
def delete_plan(plan_id: str):
    if not PlanRepository().delete_plan(plan_id):
        raise HTTPException(status_code=404, detail="Meal plan not found")
    return {"status": "deleted", "id": plan_id}
