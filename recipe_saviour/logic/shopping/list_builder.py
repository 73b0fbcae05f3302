"""Shopping list builder.

Provides build_shopping_list(recipes) -> List[ShoppingListItem]: ingredient lines
from every recipe are grouped by their normalized key, quantities are summed
where they can be parsed, and shared ingredients are listed first.
"""
from collections import OrderedDict
from typing import Dict, List, Any, Iterable, Optional
import logging
import re

from recipe_saviour.domain.Recipe import Recipe
from recipe_saviour.domain.ShoppingListItem import ShoppingListItem
from recipe_saviour.logic.ingredients.normalizer import (
    is_noun_like,
    normalized_ingredient_key,
    pluralize,
    strip_parenthetical,
    tokenize,
)
from recipe_saviour.logic.ingredients.quantity import format_quantity, parse_amount, parse_quantity, parse_unit
from recipe_saviour.utilities.constants import PREPARATION_DESCRIPTORS

logger = logging.getLogger(__name__)

_FOR_SUFFIX = re.compile(r'\s+for\s+(.*)$', re.I)


def _has_noun(text: str) -> bool:
    return any(is_noun_like(t) for t in tokenize(text))


def clean_display_line(line: str) -> str:
    """Human-facing version of an ingredient line.

    "1 onion (red), finely chopped" -> "1 onion". Trailing clauses are only
    dropped when they hold no ingredient noun, so "salt, pepper" is kept whole.
    """
    text = ' '.join(strip_parenthetical(line or '').split())
    if ',' in text:
        head, tail = text.split(',', 1)
        if head.strip() and not _has_noun(tail):
            text = head
    m = _FOR_SUFFIX.search(text)
    if m and text[:m.start()].strip() and not _has_noun(m.group(1)):
        text = text[:m.start()]
    words = text.strip(' ,;:.-').split()
    while len(words) > 1 and words[-1].lower().strip(',;:.') in PREPARATION_DESCRIPTORS:
        words.pop()
    return ' '.join(words).strip(' ,;:.-') or (line or '').strip()


def base_ingredient_name(line: str) -> str:
    """Ingredient line without its leading quantity and unit tokens."""
    words = (line or '').split()
    if words and parse_amount(words[0]) is not None:
        words = words[1:]
    if words and parse_unit(words[0]) is not None:
        words = words[1:]
    if words and words[0].lower() == 'of':
        words = words[1:]
    return clean_display_line(' '.join(words))


def _pluralize_name(name: str) -> str:
    words = name.split()
    if not words:
        return name
    words[-1] = pluralize(words[-1])
    return ' '.join(words)


def _display_for_group(group: Dict[str, Any]) -> Dict[str, Any]:
    lines: List[str] = group['lines']
    parsed = group['quantities']
    if len(lines) == 1:
        quantity, unit = parsed[0]
        return {'display_text': clean_display_line(lines[0]), 'quantity': quantity, 'unit': unit}

    amounts = [q for q, _ in parsed if q is not None]
    if not amounts:
        return {'display_text': clean_display_line(lines[0]), 'quantity': None, 'unit': None}

    total = sum(amounts)
    unit: Optional[str] = next((u for _, u in parsed if u), None)
    name = base_ingredient_name(lines[0])
    # "3 eggs", "300 g spaghettis"
    if total > 1:
        name = _pluralize_name(name)
    parts = [format_quantity(total)]
    if unit:
        parts.append(unit)
    parts.append(name)
    return {'display_text': ' '.join(p for p in parts if p), 'quantity': total, 'unit': unit}


def build_shopping_list(recipes: Iterable[Recipe]) -> List[ShoppingListItem]:
    """Aggregate the ingredient lines of several recipes into shopping list items.

    Args:
        recipes: Recipes to shop for; they are read, never modified.

    Returns:
        One ShoppingListItem per grouping key, most shared first, then by key.
        Lines without a usable key are left out.
    """
    groups: Dict[str, Dict[str, Any]] = OrderedDict()
    skipped = 0
    for recipe in recipes or []:
        for line in recipe.ingredients:
            key = normalized_ingredient_key(line)
            if not key:
                skipped += 1
                continue
            group = groups.setdefault(key, {'lines': [], 'titles': [], 'quantities': []})
            group['lines'].append(line)
            group['titles'].append(recipe.title)
            group['quantities'].append(parse_quantity(line))

    if skipped:
        logger.debug("%d ingredient lines could not be grouped and were left out", skipped)

    items: List[ShoppingListItem] = []
    for key, group in groups.items():
        display = _display_for_group(group)
        items.append(ShoppingListItem(
            key=key,
            display_text=display['display_text'],
            original_lines=tuple(group['lines']),
            recipe_titles=tuple(group['titles']),
            quantity=display['quantity'],
            unit=display['unit'],
        ))

    items.sort(key=lambda item: (-item.recipe_count, item.key))
    return items


__all__ = ['build_shopping_list', 'clean_display_line', 'base_ingredient_name']
