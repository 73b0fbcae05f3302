import logging
from pathlib import Path
from typing import Iterable, List, Optional

from recipe_saviour.domain.MealPlan import FavouritePlan
from recipe_saviour.domain.errors import DuplicatePlan
from recipe_saviour.infra import paths
from recipe_saviour.infra.json_files import atomic_write_json, read_json_list, store_lock

logger = logging.getLogger(__name__)


class PlanRepository:
    """Favourite meal plans plus the most recently generated plan."""

    def __init__(self, path: Optional[Path] = None, last_plan_path: Optional[Path] = None):
        self.path = Path(path) if path else paths.PLANS_FILE
        self.last_plan_path = Path(last_plan_path) if last_plan_path else paths.LAST_PLAN_FILE

    def list_plans(self) -> List[FavouritePlan]:
        plans = [FavouritePlan.from_dict(entry) for entry in read_json_list(self.path) if isinstance(entry, dict)]
        plans.sort(key=lambda p: p.created_at, reverse=True)
        return plans

    def save_plan(self, recipe_ids: Iterable[str]) -> FavouritePlan:
        """Save a favourite plan.

        Rules:
          - Empty plans are rejected with ValueError.
          - A plan with exactly the same recipes as an existing one raises DuplicatePlan.
        """
        ids = list(dict.fromkeys(recipe_ids))
        if not ids:
            raise ValueError("A meal plan needs at least one recipe")
        with store_lock:
            plans = [FavouritePlan.from_dict(e) for e in read_json_list(self.path) if isinstance(e, dict)]
            if any(p.same_recipes(ids) for p in plans):
                logger.warning("Meal plan with same recipes already saved")
                raise DuplicatePlan(ids)
            plan = FavouritePlan(recipe_ids=ids)
            plans.append(plan)
            atomic_write_json(self.path, [p.to_dict() for p in plans])
        logger.info("Saved meal plan with %d recipes", len(ids))
        return plan

    def delete_plan(self, plan_id: str) -> bool:
        with store_lock:
            plans = [FavouritePlan.from_dict(e) for e in read_json_list(self.path) if isinstance(e, dict)]
            kept = [p for p in plans if p.id != plan_id]
            if len(kept) == len(plans):
                return False
            atomic_write_json(self.path, [p.to_dict() for p in kept])
        logger.info("Deleted meal plan %s", plan_id)
        return True

    def get_last_plan(self) -> frozenset:
        return frozenset(str(i) for i in read_json_list(self.last_plan_path))

    def remember_last_plan(self, recipe_ids: Iterable[str]) -> None:
        with store_lock:
            atomic_write_json(self.last_plan_path, list(recipe_ids))
