from recipe_saviour.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth)
RECIPES_FILE = (DATA_DIR / 'recipes.json').resolve()
PLANS_FILE = (DATA_DIR / 'meal_plans.json').resolve()
LAST_PLAN_FILE = (DATA_DIR / 'last_plan.json').resolve()

__all__ = ['DATA_DIR', 'RECIPES_FILE', 'PLANS_FILE', 'LAST_PLAN_FILE']
