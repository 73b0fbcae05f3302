"""Recipe domain entity: title, raw ingredient lines, instruction steps, source URL, save date."""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional
from uuid import uuid4

from recipe_saviour.utilities.constants import DEFAULT_RECIPE_TITLE


def _new_id() -> str:
    return str(uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Recipe:
    title: str = DEFAULT_RECIPE_TITLE
    ingredients: tuple[str, ...] = ()
    steps: tuple[str, ...] = ()
    source_url: str = ""
    date_saved: datetime = field(default_factory=_now)
    id: str = field(default_factory=_new_id)

    def __post_init__(self):
        # Accept any iterable from callers but store tuples so the value stays immutable
        object.__setattr__(self, 'ingredients', tuple(self.ingredients or ()))
        object.__setattr__(self, 'steps', tuple(self.steps or ()))
        if not self.title:
            object.__setattr__(self, 'title', DEFAULT_RECIPE_TITLE)

    def __str__(self) -> str:
        return f"{self.title} - {len(self.ingredients)} ingredients - {len(self.steps)} steps - {self.source_url}"

    @property
    def is_usable(self) -> bool:
        """True when at least one ingredient or step was recovered."""
        return bool(self.ingredients) or bool(self.steps)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Recipe":
        '''Creates a Recipe from its JSON form. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        saved = d.get('date_saved')
        if isinstance(saved, str) and saved:
            try:
                saved = datetime.fromisoformat(saved)
            except ValueError:
                saved = None
        kwargs: Dict[str, Any] = {
            'title': d.get('title') or DEFAULT_RECIPE_TITLE,
            'ingredients': _strings(d.get('ingredients')),
            'steps': _strings(d.get('steps')),
            'source_url': d.get('source_url') or "",
        }
        if isinstance(saved, datetime):
            kwargs['date_saved'] = saved
        if d.get('id'):
            kwargs['id'] = str(d['id'])
        return Recipe(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        '''Converts the Recipe to a dictionary for JSON persistence.'''
        return {
            "id": self.id,
            "title": self.title,
            "ingredients": list(self.ingredients),
            "steps": list(self.steps),
            "source_url": self.source_url,
            "date_saved": self.date_saved.isoformat(),
        }


def _strings(values: Optional[Iterable[Any]]) -> tuple[str, ...]:
    if not values or isinstance(values, str):
        return ()
    return tuple(str(v) for v in values if isinstance(v, str))
