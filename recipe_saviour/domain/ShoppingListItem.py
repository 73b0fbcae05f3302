"""ShoppingListItem: one aggregated line of a shopping list built from several recipes."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ShoppingListItem:
    key: str
    display_text: str
    original_lines: tuple[str, ...] = ()
    recipe_titles: tuple[str, ...] = ()
    quantity: Optional[float] = None
    unit: Optional[str] = None

    @property
    def recipe_count(self) -> int:
        """Number of ingredient lines that were merged into this item."""
        return len(self.original_lines)

    @property
    def is_common(self) -> bool:
        return self.recipe_count > 1

    def __str__(self) -> str:
        if self.is_common:
            return f"{self.display_text} ({self.recipe_count} recipes)"
        return self.display_text

    __repr__ = __str__

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "display_text": self.display_text,
            "original_lines": list(self.original_lines),
            "recipe_titles": list(self.recipe_titles),
            "quantity": self.quantity,
            "unit": self.unit,
            "recipe_count": self.recipe_count,
            "is_common": self.is_common,
        }
