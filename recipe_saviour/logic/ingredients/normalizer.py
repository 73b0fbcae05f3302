"""Ingredient grouping keys.

Turns a free-text ingredient line into a coarse key so that lines such as
"2 tbsp soy sauce" and "1 tbsp light soy sauce" are treated as the same base
ingredient ("soy sauce"). The shopping list and the meal planner both group
through ``normalized_ingredient_key`` so they always agree on what counts as
the same ingredient.
"""
from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Set

from recipe_saviour.utilities.constants import (
    COMPOUND_TAILS,
    IRREGULAR_PLURALS,
    MEASUREMENT_UNITS,
    NUMBER_WORDS,
    PREPARATION_DESCRIPTORS,
    PURPOSE_WORDS,
    STOP_WORDS,
    UNCOUNTABLE_WORDS,
)

logger = logging.getLogger(__name__)

_SINGULAR_TO_PLURAL = {singular: plural for plural, singular in IRREGULAR_PLURALS.items()}


def strip_parenthetical(text: str) -> str:
    """Remove the first "(...)" pair, e.g. notes like "(optional)"."""
    open_idx = text.find('(')
    if open_idx == -1:
        return text
    close_idx = text.find(')', open_idx + 1)
    if close_idx == -1:
        return text
    return text[:open_idx] + text[close_idx + 1:]


def tokenize(raw: str) -> List[str]:
    text = strip_parenthetical((raw or '').lower())
    text = ''.join(ch for ch in text if ch.isalpha() or ch.isspace())
    return text.split()


def singularize(word: str) -> str:
    if word in IRREGULAR_PLURALS:
        return IRREGULAR_PLURALS[word]
    if word in UNCOUNTABLE_WORDS or len(word) <= 3:
        return word
    if word.endswith('ies') and len(word) > 4:
        return word[:-3] + 'y'  # berries -> berry
    if word.endswith('ves'):
        return word[:-3] + 'f'  # halves -> half
    if word.endswith('es'):
        stem = word[:-2]
        if stem.endswith(('s', 'x', 'z', 'ch', 'sh')):
            return stem  # radishes -> radish, peaches -> peach
    if word.endswith('s') and not word.endswith(('ss', 'us', 'is')):
        return word[:-1]
    return word


def pluralize(word: str) -> str:
    if not word:
        return word
    if word in _SINGULAR_TO_PLURAL:
        return _SINGULAR_TO_PLURAL[word]
    if word.endswith('s'):
        return word
    return word + 's'


def is_filler(token: str) -> bool:
    """Tokens that can never be part of a grouping key."""
    return (
        token in MEASUREMENT_UNITS
        or token in PREPARATION_DESCRIPTORS
        or token in STOP_WORDS
        or token in PURPOSE_WORDS
        or token in NUMBER_WORDS
        or token.isdigit()
    )


def is_noun_like(token: str) -> bool:
    return bool(token) and not is_filler(token)


def _last_resort_noun(tokens: List[str]) -> Optional[str]:
    # e.g. "2 tbsp, for frying" -> "frying": the word after "for" is all that is left
    for i in range(len(tokens) - 1, 0, -1):
        if tokens[i - 1] != 'for':
            continue
        candidate = tokens[i]
        if candidate in MEASUREMENT_UNITS or candidate in STOP_WORDS or candidate in PURPOSE_WORDS:
            continue
        return candidate
    return None


def _qualifier_before(tokens: List[str], index: int) -> Optional[str]:
    # "hot sauce", "whole milk": the descriptor is the only thing telling the tail apart
    for token in reversed(tokens[:index]):
        if token in MEASUREMENT_UNITS or token in NUMBER_WORDS or token.isdigit():
            return None
        if token in STOP_WORDS or token in PURPOSE_WORDS:
            continue
        return token
    return None


def normalized_ingredient_key(raw: str) -> Optional[str]:
    """Return the grouping key of an ingredient line, or None when no core noun survives."""
    tokens = tokenize(raw)
    positions = [i for i, t in enumerate(tokens) if is_noun_like(t)]
    core = [tokens[i] for i in positions]
    if not core:
        fallback = _last_resort_noun(tokens)
        if fallback is None:
            logger.debug("Ingredient line cannot be grouped: %r", raw)
            return None
        core = [fallback]

    core = [singularize(t) for t in core]
    if len(core) == 1 and core[0] in COMPOUND_TAILS and positions:
        qualifier = _qualifier_before(tokens, positions[0])
        if qualifier is not None:
            core.insert(0, qualifier)
    # The head noun sits at the end of the phrase; generic tails keep their qualifier
    width = 3 if core[-1] in COMPOUND_TAILS else 2
    return ' '.join(core[-width:])


def ingredient_key_set(lines: Iterable[str]) -> Set[str]:
    """Distinct grouping keys of a recipe's ingredient lines."""
    keys = set()
    for line in lines:
        key = normalized_ingredient_key(line)
        if key:
            keys.add(key)
    return keys


__all__ = [
    'normalized_ingredient_key', 'ingredient_key_set', 'singularize', 'pluralize',
    'strip_parenthetical', 'tokenize', 'is_filler', 'is_noun_like',
]
