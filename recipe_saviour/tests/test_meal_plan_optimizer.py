import random
import unittest
from recipe_saviour.domain.Recipe import Recipe
from recipe_saviour.logic.ingredients.normalizer import ingredient_key_set
from recipe_saviour.logic.planning.optimizer import (
    exact_selection,
    greedy_selection,
    overlap_matrix,
    plan_meals,
    subset_score,
)

FRUIT = [
    "apple", "banana", "cherry", "date", "fig", "grape", "kiwi", "lemon",
    "lime", "mango", "melon", "nectarine", "orange", "papaya", "pear",
]


class TestPlanMeals(unittest.TestCase):

    def setUp(self):
        self.a = Recipe(title="A", ingredients=["1 chicken", "200 g rice", "1 onion", "2 cloves garlic"])
        # A and B share chicken, rice, onion and garlic; C shares nothing
        self.b = Recipe(title="B", ingredients=["1 chicken", "rice", "1 onion, sliced", "garlic", "1 pepper"])
        self.c = Recipe(title="C", ingredients=["200 g tofu", "1 bunch kale"])

    def test_pair_with_shared_ingredients_wins(self):
        for order in ([self.a, self.b, self.c], [self.c, self.a, self.b], [self.a, self.c, self.b]):
            selection = plan_meals(order, 2)
            self.assertEqual(selection.recipe_ids, {self.a.id, self.b.id})
            self.assertEqual(selection.score, 4)
            self.assertEqual(selection.strategy, "exact")

    def test_single_meal_is_largest_recipe(self):
        selection = plan_meals([self.a, self.b, self.c], 1)
        self.assertEqual([r.title for r in selection.recipes], ["B"])
        self.assertEqual(selection.strategy, "single")

    def test_single_meal_ties_take_first(self):
        first = Recipe(title="First", ingredients=["1 apple", "1 pear"])
        second = Recipe(title="Second", ingredients=["1 lemon", "1 lime"])
        self.assertEqual(plan_meals([first, second], 1).recipes[0].title, "First")

    def test_count_is_clamped(self):
        selection = plan_meals([self.a, self.b, self.c], 10)
        self.assertEqual(len(selection), 3)

    def test_recipes_come_back_in_collection_order(self):
        selection = plan_meals([self.c, self.b, self.a], 2)
        self.assertEqual([r.title for r in selection.recipes], ["B", "A"])

    def test_empty_collection(self):
        selection = plan_meals([], 3)
        self.assertEqual(len(selection), 0)
        self.assertEqual(selection.strategy, "empty")
        self.assertEqual(len(plan_meals([self.a], 0)), 0)

    def test_equal_plans_rotate_with_previous(self):
        r1 = Recipe(title="R1", ingredients=["1 apple", "1 pear"])
        r2 = Recipe(title="R2", ingredients=["1 apple", "1 pear"])
        r3 = Recipe(title="R3", ingredients=["1 apple", "1 pear"])
        first = plan_meals([r1, r2, r3], 2)
        self.assertEqual(first.recipe_ids, {r1.id, r2.id})
        second = plan_meals([r1, r2, r3], 2, previous=first.recipe_ids)
        self.assertEqual(second.recipe_ids, {r1.id, r3.id})
        self.assertEqual(second.score, first.score)

    def test_previous_ignored_when_optimum_is_unique(self):
        selection = plan_meals([self.a, self.b, self.c], 2, previous=frozenset({self.a.id, self.b.id}))
        self.assertEqual(selection.recipe_ids, {self.a.id, self.b.id})

    def test_large_collection_uses_greedy(self):
        fillers = [Recipe(title=f.title(), ingredients=[f"1 {f}"]) for f in FRUIT]
        recipes = fillers[:7] + [self.a] + fillers[7:] + [self.b]
        self.assertGreater(len(recipes), 14)
        selection = plan_meals(recipes, 2)
        self.assertEqual(selection.strategy, "greedy")
        self.assertEqual(selection.recipe_ids, {self.a.id, self.b.id})

    def test_recipes_are_not_modified(self):
        before = [r.to_dict() for r in (self.a, self.b, self.c)]
        plan_meals([self.a, self.b, self.c], 2)
        self.assertEqual([r.to_dict() for r in (self.a, self.b, self.c)], before)


class TestSearchStrategies(unittest.TestCase):

    def test_exact_never_worse_than_greedy(self):
        rng = random.Random(7)
        for _ in range(20):
            key_sets = [set(rng.sample(FRUIT, rng.randint(1, 6))) for _ in range(rng.randint(3, 10))]
            overlaps = overlap_matrix(key_sets)
            for count in range(2, len(key_sets) + 1):
                exact = exact_selection(overlaps, count)
                greedy = greedy_selection(overlaps, key_sets, count)
                self.assertEqual(len(exact), count)
                self.assertEqual(len(greedy), count)
                self.assertGreaterEqual(subset_score(exact, overlaps), subset_score(greedy, overlaps))

    def test_greedy_prefers_smaller_recipe_on_ties(self):
        key_sets = [
            {"chicken", "rice", "onion"},
            {"chicken", "rice", "onion", "garlic", "pepper", "cumin"},
            {"chicken", "rice", "onion", "garlic"},
            {"chicken", "rice", "onion"},
        ]
        overlaps = overlap_matrix(key_sets)
        # 1 and 2 are best connected, then 0 and 3 tie on overlap and size; first wins
        self.assertEqual(greedy_selection(overlaps, key_sets, 3), [1, 2, 0])

    def test_greedy_tie_on_overlap_takes_fewer_ingredients(self):
        key_sets = [
            {"chicken", "rice", "onion"},
            {"chicken", "rice", "onion"},
            {"chicken", "rice", "kale", "leek", "tofu"},
            {"chicken", "rice"},
        ]
        overlaps = overlap_matrix(key_sets)
        # 2 and 3 both add 4 shared keys; 3 has fewer ingredients despite the later index
        self.assertEqual(greedy_selection(overlaps, key_sets, 3), [0, 1, 3])

    def test_overlap_counts_distinct_keys(self):
        a = ingredient_key_set(["2 eggs", "1 egg", "200 g flour"])
        b = ingredient_key_set(["3 eggs", "100 g flour", "milk"])
        self.assertEqual(overlap_matrix([a, b]), [[0, 2], [2, 0]])


if __name__ == '__main__':
    unittest.main()
