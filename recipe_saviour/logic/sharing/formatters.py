"""Plain-text share payloads for recipes, shopping lists and meal plans."""
from typing import List, Sequence

from recipe_saviour.domain.Recipe import Recipe
from recipe_saviour.domain.ShoppingListItem import ShoppingListItem

RULE = "─" * 30
FOOTER = "Shared from Recipe Saviour"


def format_recipe(recipe: Recipe) -> str:
    lines: List[str] = [recipe.title, RULE, ""]
    if recipe.ingredients:
        lines.append("INGREDIENTS:")
        lines.extend(f"• {ingredient}" for ingredient in recipe.ingredients)
        lines.append("")
    if recipe.steps:
        lines.append("METHOD:")
        for index, step in enumerate(recipe.steps, start=1):
            lines.append(f"{index}. {step}")
            lines.append("")
    lines.extend([RULE, FOOTER])
    return "\n".join(lines)


def format_shopping_list(items: Sequence[ShoppingListItem], recipes: Sequence[Recipe] = ()) -> str:
    lines: List[str] = ["SHOPPING LIST", RULE, ""]
    if recipes:
        lines.append("For: " + ", ".join(r.title for r in recipes))
        lines.append("")

    common = [i for i in items if i.is_common]
    unique = [i for i in items if not i.is_common]
    if common:
        lines.append("COMMON INGREDIENTS:")
        lines.extend(f"☐ {item.display_text} ({item.recipe_count} recipes)" for item in common)
        lines.append("")
    if unique:
        lines.append("OTHER INGREDIENTS:" if common else "INGREDIENTS:")
        lines.extend(f"☐ {item.display_text}" for item in unique)
        lines.append("")
    lines.extend([RULE, FOOTER])
    return "\n".join(lines)


def format_meal_plan(recipes: Sequence[Recipe], items: Sequence[ShoppingListItem]) -> str:
    lines: List[str] = ["MEAL PLAN", RULE, "", f"MEALS ({len(recipes)}):"]
    lines.extend(f"{index}. {recipe.title}" for index, recipe in enumerate(recipes, start=1))
    lines.append("")
    lines.append(f"SHOPPING LIST ({len(items)} items):")

    common = [i for i in items if i.is_common]
    unique = [i for i in items if not i.is_common]
    if common:
        lines.extend(["", "Shared ingredients:"])
        lines.extend(f"☐ {item.display_text}" for item in common)
    if unique:
        lines.extend(["", "Other ingredients:"])
        lines.extend(f"☐ {item.display_text}" for item in unique)
    lines.extend(["", RULE, FOOTER])
    return "\n".join(lines)


__all__ = ['format_recipe', 'format_shopping_list', 'format_meal_plan']
