"""Recipe extraction from raw HTML.

Two strategies, first success wins:

1. Schema.org JSON-LD blocks (``<script type="application/ld+json">``), the most
   reliable source. Objects may be top level, inside an array, or nested in a
   ``@graph``.
2. A heuristic pass over the page structure: the title comes from ``<h1>`` or
   ``<title>`` and the ingredient / instruction sections are whatever follows a
   heading such as "Ingredients" or "Method" up to the next heading.

Provides extract_recipe(html, source_url) -> Recipe, raising ExtractionFailed.
"""
from __future__ import annotations
import json
import logging
import re
from typing import Any, Iterable, List, Optional

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from recipe_saviour.domain.Recipe import Recipe
from recipe_saviour.domain.errors import ExtractionFailed, MalformedStructuredData
from recipe_saviour.utilities.constants import (
    DEFAULT_RECIPE_TITLE,
    HEADING_TAGS,
    INGREDIENT_HEADINGS,
    INSTRUCTION_HEADINGS,
    LINE_BREAK_TAGS,
)

logger = logging.getLogger(__name__)

_JSON_LD_TYPE = re.compile(r'application/ld\+json', re.I)
_SPACES = re.compile(r'[ \t\r\f\v\xa0]+')


def clean_text(text: Optional[str]) -> str:
    """Collapse runs of spaces (including &nbsp;) and trim."""
    if not text:
        return ""
    return _SPACES.sub(' ', text).strip()


def _clean_lines(values: Iterable[Any]) -> List[str]:
    return [clean_text(v) for v in values if isinstance(v, str) and clean_text(v)]


# --- Structured data (JSON-LD) ---

def parse_json_ld_block(content: Optional[str]) -> Any:
    """Decode one JSON-LD script body, raising MalformedStructuredData on bad input."""
    if not content or not content.strip():
        raise MalformedStructuredData("empty JSON-LD block")
    try:
        return json.loads(content.strip())
    except (json.JSONDecodeError, TypeError) as e:
        raise MalformedStructuredData(str(e)) from e


def _is_recipe_type(declared: Any) -> bool:
    if isinstance(declared, str):
        return 'recipe' in declared.lower()
    if isinstance(declared, list):
        return any(isinstance(t, str) and 'recipe' in t.lower() for t in declared)
    return False


def _instruction_steps(instructions: Any) -> List[str]:
    """Handle a single newline-delimited string, HowToStep objects, plain strings and HowToSections."""
    if isinstance(instructions, str):
        return _clean_lines(instructions.splitlines())
    steps: List[str] = []
    if not isinstance(instructions, list):
        return steps
    for item in instructions:
        if isinstance(item, dict):
            text = item.get('text')
            if isinstance(text, str):
                if clean_text(text):
                    steps.append(clean_text(text))
            elif isinstance(item.get('itemListElement'), list):
                steps.extend(_instruction_steps(item['itemListElement']))
        elif isinstance(item, str) and clean_text(item):
            steps.append(clean_text(item))
    return steps


def _recipe_from_json_ld(node: dict, source_url: str) -> Optional[Recipe]:
    name = node.get('name')
    title = clean_text(name) if isinstance(name, str) else ""
    raw_ingredients = node.get('recipeIngredient')
    ingredients = _clean_lines(raw_ingredients) if isinstance(raw_ingredients, list) else []
    recipe = Recipe(
        title=title or DEFAULT_RECIPE_TITLE,
        ingredients=ingredients,
        steps=_instruction_steps(node.get('recipeInstructions')),
        source_url=source_url,
    )
    return recipe if recipe.is_usable else None


def find_recipe_in_json_ld(node: Any, source_url: str) -> Optional[Recipe]:
    """Depth-first search of a decoded JSON-LD value for the first usable Recipe object."""
    if isinstance(node, dict):
        if _is_recipe_type(node.get('@type')):
            recipe = _recipe_from_json_ld(node, source_url)
            if recipe is not None:
                return recipe
        graph = node.get('@graph')
        if isinstance(graph, list):
            for item in graph:
                recipe = find_recipe_in_json_ld(item, source_url)
                if recipe is not None:
                    return recipe
    elif isinstance(node, list):
        for item in node:
            recipe = find_recipe_in_json_ld(item, source_url)
            if recipe is not None:
                return recipe
    return None


def _extract_from_json_ld(soup: BeautifulSoup, source_url: str) -> Optional[Recipe]:
    for index, script in enumerate(soup.find_all('script', attrs={'type': _JSON_LD_TYPE})):
        try:
            data = parse_json_ld_block(script.string or script.get_text())
        except MalformedStructuredData as e:
            logger.debug("Skipping JSON-LD block %d on %s: %s", index, source_url, e)
            continue
        recipe = find_recipe_in_json_ld(data, source_url)
        if recipe is not None:
            logger.debug("Recipe found in JSON-LD block %d on %s", index, source_url)
            return recipe
    return None


# --- Heuristic HTML fallback ---

def _page_title(soup: BeautifulSoup) -> str:
    for candidate in (soup.find('h1'), soup.find('title')):
        if candidate is not None:
            text = clean_text(candidate.get_text(' '))
            if text:
                return text
    return DEFAULT_RECIPE_TITLE


def _find_heading(soup: BeautifulSoup, keywords: Iterable[str]) -> Optional[Tag]:
    for heading in soup.find_all(list(HEADING_TAGS)):
        text = heading.get_text(' ').lower()
        if any(keyword in text for keyword in keywords):
            return heading
    return None


def _section_elements(heading: Tag):
    """Yield every element after the heading until the next heading of any level."""
    inside = {id(d) for d in heading.descendants}
    for el in heading.next_elements:
        if id(el) in inside:
            continue
        if isinstance(el, Tag) and el.name in HEADING_TAGS:
            return
        yield el


def _is_visible_text(el: Any) -> bool:
    if not isinstance(el, NavigableString) or isinstance(el, Comment):
        return False
    parent = el.parent
    return parent is None or parent.name not in ('script', 'style', 'template')


def extract_section(soup: BeautifulSoup, keywords: Iterable[str]) -> List[str]:
    """Entries of the section introduced by a heading matching one of the keywords.

    List items are preferred; without any, the flattened section text is split on
    line breaks.
    """
    heading = _find_heading(soup, keywords)
    if heading is None:
        return []

    items: List[str] = []
    collected = set()
    chunks: List[str] = []
    for el in _section_elements(heading):
        if isinstance(el, Tag):
            # nested list items are already part of their parent item's text
            if el.name == 'li' and not any(id(p) in collected for p in el.parents):
                collected.add(id(el))
                text = ' '.join(el.get_text(' ').split())
                if text:
                    items.append(text)
            if el.name in LINE_BREAK_TAGS:
                chunks.append('\n')
        elif _is_visible_text(el):
            chunks.append(str(el))

    if items:
        return items
    return _clean_lines(''.join(chunks).splitlines())


def _extract_from_html_structure(soup: BeautifulSoup, source_url: str) -> Optional[Recipe]:
    ingredients = extract_section(soup, INGREDIENT_HEADINGS)
    steps = extract_section(soup, INSTRUCTION_HEADINGS)
    if not ingredients and not steps:
        return None
    return Recipe(
        title=_page_title(soup),
        ingredients=ingredients,
        steps=steps,
        source_url=source_url,
    )


def extract_recipe(html: str, source_url: str = "") -> Recipe:
    """Extract a Recipe from an HTML document; raise ExtractionFailed when nothing usable is found."""
    soup = BeautifulSoup(html or "", 'html.parser')
    recipe = _extract_from_json_ld(soup, source_url)
    if recipe is None:
        recipe = _extract_from_html_structure(soup, source_url)
        if recipe is not None:
            logger.info("Recipe '%s' extracted from page structure (%s)", recipe.title, source_url)
    if recipe is None:
        logger.warning("No recipe found on %s", source_url or "<html>")
        raise ExtractionFailed(source_url)
    return recipe


__all__ = ['extract_recipe', 'extract_section', 'find_recipe_in_json_ld', 'parse_json_ld_block', 'clean_text']
