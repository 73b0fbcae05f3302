"""Meal plan optimizer.

Picks ``count`` recipes from a collection so that they share as many
ingredients as possible, which keeps the combined shopping list short.

Overlap between two recipes is the number of grouping keys they have in
common; a plan scores the sum of the overlaps of all its pairs. Small
collections are searched exhaustively, larger ones greedily.
"""
from __future__ import annotations
import logging
from itertools import combinations
from typing import AbstractSet, Iterable, List, Optional, Sequence, Set

from recipe_saviour.domain.MealPlan import MealPlanSelection
from recipe_saviour.domain.Recipe import Recipe
from recipe_saviour.logic.ingredients.normalizer import ingredient_key_set
from recipe_saviour.utilities.constants import EXACT_SEARCH_LIMIT

logger = logging.getLogger(__name__)

OverlapMatrix = List[List[int]]


def overlap_matrix(key_sets: Sequence[Set[str]]) -> OverlapMatrix:
    n = len(key_sets)
    matrix = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            shared = len(key_sets[i] & key_sets[j])
            matrix[i][j] = matrix[j][i] = shared
    return matrix


def subset_score(indices: Iterable[int], overlaps: OverlapMatrix) -> int:
    chosen = list(indices)
    return sum(overlaps[a][b] for a, b in combinations(chosen, 2))


def largest_recipe_index(key_sets: Sequence[Set[str]]) -> int:
    """Index of the recipe with most distinct ingredients (first one on ties)."""
    best = 0
    for i, keys in enumerate(key_sets):
        if len(keys) > len(key_sets[best]):
            best = i
    return best


def exact_selection(
    overlaps: OverlapMatrix,
    count: int,
    ids: Optional[Sequence[str]] = None,
    previous: Optional[AbstractSet[str]] = None,
) -> List[int]:
    """Best size-``count`` subset by exhaustive search.

    When several subsets tie for the best score and ``previous`` (the ids of the
    last plan) is given, the first optimal subset that differs from it wins.
    """
    best_score = -1
    optimal: List[tuple] = []
    for combo in combinations(range(len(overlaps)), count):
        score = subset_score(combo, overlaps)
        if score > best_score:
            best_score = score
            optimal = [combo]
        elif score == best_score:
            optimal.append(combo)
    if not optimal:
        return []
    if previous and ids is not None and len(optimal) > 1:
        for combo in optimal:
            if {ids[i] for i in combo} != set(previous):
                return list(combo)
    return list(optimal[0])


def greedy_selection(overlaps: OverlapMatrix, key_sets: Sequence[Set[str]], count: int) -> List[int]:
    """Grow a plan from the best-connected recipe, one best-fitting recipe at a time."""
    n = len(overlaps)
    if n == 0 or count <= 0:
        return []
    totals = [sum(row) for row in overlaps]
    start = max(range(n), key=lambda i: (totals[i], -i))
    selected = [start]
    remaining = [i for i in range(n) if i != start]
    while len(selected) < count and remaining:
        # higher shared count first, then fewer ingredients, then collection order
        nxt = max(
            remaining,
            key=lambda i: (sum(overlaps[i][s] for s in selected), -len(key_sets[i]), -i),
        )
        selected.append(nxt)
        remaining.remove(nxt)
    return selected


def plan_meals(
    recipes: Sequence[Recipe],
    count: int,
    previous: Optional[AbstractSet[str]] = None,
) -> MealPlanSelection:
    """Choose ``count`` recipes that maximise shared ingredients.

    Args:
        recipes: The whole recipe collection (not modified).
        count: Number of meals wanted; clamped to the collection size.
        previous: Recipe ids of the last generated plan, used to vary between
            equally good plans.

    Returns:
        MealPlanSelection with the chosen recipes in collection order.
    """
    recipes = list(recipes or [])
    target = min(count, len(recipes))
    if target < 1:
        return MealPlanSelection()

    key_sets = [ingredient_key_set(r.ingredients) for r in recipes]
    if target == 1:
        best = largest_recipe_index(key_sets)
        return MealPlanSelection(recipes=(recipes[best],), score=0, strategy="single")

    overlaps = overlap_matrix(key_sets)
    if len(recipes) <= EXACT_SEARCH_LIMIT:
        ids = [r.id for r in recipes]
        chosen = exact_selection(overlaps, target, ids=ids, previous=previous)
        strategy = "exact"
    else:
        chosen = greedy_selection(overlaps, key_sets, target)
        strategy = "greedy"

    score = subset_score(chosen, overlaps)
    logger.info("Planned %d of %d recipes (%s search, score %d)", target, len(recipes), strategy, score)
    return MealPlanSelection(
        recipes=tuple(recipes[i] for i in sorted(chosen)),
        score=score,
        strategy=strategy,
    )


__all__ = ['plan_meals', 'exact_selection', 'greedy_selection', 'overlap_matrix', 'subset_score', 'largest_recipe_index']
