import logging
from pathlib import Path
from typing import List, Optional

from recipe_saviour.domain.Recipe import Recipe
from recipe_saviour.domain.errors import DuplicateRecipe
from recipe_saviour.infra import paths
from recipe_saviour.infra.json_files import atomic_write_json, read_json_list, store_lock

logger = logging.getLogger(__name__)


class RecipeRepository:
    """Saved recipes kept in a JSON file, one entry per source URL."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else paths.RECIPES_FILE

    def list_recipes(self) -> List[Recipe]:
        return [Recipe.from_dict(entry) for entry in read_json_list(self.path) if isinstance(entry, dict)]

    def get(self, recipe_id: str) -> Optional[Recipe]:
        return next((r for r in self.list_recipes() if r.id == recipe_id), None)

    def get_many(self, recipe_ids: List[str]) -> List[Recipe]:
        """Recipes for the given ids, in collection order; unknown ids are ignored."""
        wanted = set(recipe_ids)
        return [r for r in self.list_recipes() if r.id in wanted]

    def is_saved(self, recipe: Recipe) -> bool:
        return any(r.source_url == recipe.source_url for r in self.list_recipes())

    def save(self, recipe: Recipe) -> Recipe:
        with store_lock:
            recipes = self.list_recipes()
            if recipe.source_url and any(r.source_url == recipe.source_url for r in recipes):
                logger.warning("Recipe already saved: %s (%s)", recipe.title, recipe.source_url)
                raise DuplicateRecipe(recipe.source_url)
            recipes.append(recipe)
            atomic_write_json(self.path, [r.to_dict() for r in recipes])
        logger.info("Saved recipe: %s", recipe.title)
        return recipe

    def delete(self, recipe_id: str) -> bool:
        with store_lock:
            recipes = self.list_recipes()
            kept = [r for r in recipes if r.id != recipe_id]
            if len(kept) == len(recipes):
                return False
            atomic_write_json(self.path, [r.to_dict() for r in kept])
        logger.info("Deleted recipe %s", recipe_id)
        return True
