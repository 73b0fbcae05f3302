"""Meal plan entities: the optimizer's transient selection and a saved favourite plan."""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterable
from uuid import uuid4

from recipe_saviour.domain.Recipe import Recipe


@dataclass(frozen=True)
class MealPlanSelection:
    recipes: tuple[Recipe, ...] = ()
    score: int = 0
    strategy: str = "empty"  # single | exact | greedy | empty

    def __post_init__(self):
        object.__setattr__(self, 'recipes', tuple(self.recipes))

    @property
    def recipe_ids(self) -> frozenset[str]:
        return frozenset(r.id for r in self.recipes)

    def __len__(self) -> int:
        return len(self.recipes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "recipe_ids": [r.id for r in self.recipes],
            "recipes": [r.to_dict() for r in self.recipes],
            "score": self.score,
            "strategy": self.strategy,
        }


@dataclass(frozen=True)
class FavouritePlan:
    recipe_ids: tuple[str, ...] = ()
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: str = field(default_factory=lambda: str(uuid4()))

    def __post_init__(self):
        object.__setattr__(self, 'recipe_ids', tuple(self.recipe_ids))

    def same_recipes(self, recipe_ids: Iterable[str]) -> bool:
        return set(self.recipe_ids) == set(recipe_ids)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "FavouritePlan":
        d = dict(data) if isinstance(data, dict) else {}
        kwargs: Dict[str, Any] = {'recipe_ids': [str(i) for i in d.get('recipe_ids', []) or []]}
        created = d.get('created_at')
        if isinstance(created, str) and created:
            try:
                kwargs['created_at'] = datetime.fromisoformat(created)
            except ValueError:
                pass
        if d.get('id'):
            kwargs['id'] = str(d['id'])
        return FavouritePlan(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "recipe_ids": list(self.recipe_ids),
            "created_at": self.created_at.isoformat(),
        }
