import unittest
from recipe_saviour.domain.Recipe import Recipe
from recipe_saviour.logic.ingredients.normalizer import normalized_ingredient_key
from recipe_saviour.logic.shopping.list_builder import (
    base_ingredient_name,
    build_shopping_list,
    clean_display_line,
)


class TestBuildShoppingList(unittest.TestCase):

    def setUp(self):
        self.bolognese = Recipe(title="Bolognese", ingredients=["200 g spaghetti", "1 onion (red), finely chopped", "to taste"])
        self.carbonara = Recipe(title="Carbonara", ingredients=["100 g spaghetti", "2 eggs", "2 carrots"])

    def test_same_ingredient_is_summed(self):
        items = build_shopping_list([self.bolognese, self.carbonara])
        spaghetti = items[0]
        self.assertEqual(spaghetti.key, "spaghetti")
        self.assertEqual(spaghetti.quantity, 300)
        self.assertEqual(spaghetti.unit, "g")
        self.assertEqual(spaghetti.recipe_count, 2)
        self.assertTrue(spaghetti.is_common)
        self.assertEqual(spaghetti.display_text, "300 g spaghettis")
        self.assertEqual(spaghetti.recipe_titles, ("Bolognese", "Carbonara"))
        self.assertEqual(spaghetti.original_lines, ("200 g spaghetti", "100 g spaghetti"))

    def test_shared_first_then_by_key(self):
        items = build_shopping_list([self.bolognese, self.carbonara])
        self.assertEqual([i.key for i in items], ["spaghetti", "carrot", "egg", "onion"])

    def test_ungroupable_lines_are_left_out(self):
        items = build_shopping_list([self.bolognese])
        self.assertNotIn("to taste", [line for i in items for line in i.original_lines])
        self.assertEqual(len(items), 2)

    def test_single_line_is_cleaned(self):
        items = build_shopping_list([self.bolognese])
        onion = next(i for i in items if i.key == "onion")
        self.assertEqual(onion.display_text, "1 onion")
        self.assertEqual(onion.quantity, 1)
        self.assertIsNone(onion.unit)
        self.assertFalse(onion.is_common)

    def test_counted_items_are_pluralized(self):
        omelette = Recipe(title="Omelette", ingredients=["1 egg"])
        pancakes = Recipe(title="Pancakes", ingredients=["2 eggs"])
        egg = build_shopping_list([omelette, pancakes])[0]
        self.assertEqual(egg.quantity, 3)
        self.assertEqual(egg.display_text, "3 eggs")

    def test_first_unit_wins(self):
        a = Recipe(title="A", ingredients=["1 cup rice"])
        b = Recipe(title="B", ingredients=["rice, for serving", "2 cups rice"])
        rice = build_shopping_list([a, b])[0]
        self.assertEqual(rice.quantity, 3)
        self.assertEqual(rice.unit, "cup")
        self.assertEqual(rice.display_text, "3 cup rices")
        self.assertEqual(rice.recipe_count, 3)

    def test_measured_items_are_pluralized_too(self):
        a = Recipe(title="A", ingredients=["2 cups lentil"])
        b = Recipe(title="B", ingredients=["1 cup lentil"])
        self.assertEqual(build_shopping_list([a, b])[0].display_text, "3 cups lentils")

    def test_single_unit_is_not_pluralized(self):
        a = Recipe(title="A", ingredients=["½ cup lentil"])
        b = Recipe(title="B", ingredients=["½ cup lentil"])
        self.assertEqual(build_shopping_list([a, b])[0].display_text, "1 cup lentil")

    def test_summed_display_keeps_its_key(self):
        recipes = [
            Recipe(title="A", ingredients=["2 bay leaves", "1 tbsp hot sauce", "200 ml whole milk", "½ tsp cumin"]),
            Recipe(title="B", ingredients=["1 bay leaf", "2 tbsp hot sauce", "100 ml whole milk", "1 tsp ground cumin"]),
        ]
        items = build_shopping_list(recipes)
        self.assertIn("3 bay leaves", [i.display_text for i in items])
        for item in items:
            self.assertTrue(item.is_common, item.display_text)
            self.assertEqual(normalized_ingredient_key(item.display_text), item.key, item.display_text)

    def test_no_quantities_shows_first_line(self):
        a = Recipe(title="A", ingredients=["Salt, to taste"])
        b = Recipe(title="B", ingredients=["salt"])
        salt = build_shopping_list([a, b])[0]
        self.assertIsNone(salt.quantity)
        self.assertEqual(salt.display_text, "Salt")

    def test_half_quantities_keep_one_decimal(self):
        a = Recipe(title="A", ingredients=["½ tsp cumin"])
        b = Recipe(title="B", ingredients=["1 tsp ground cumin"])
        cumin = build_shopping_list([a, b])[0]
        self.assertEqual(cumin.display_text, "1.5 tsp cumins")

    def test_empty_input(self):
        self.assertEqual(build_shopping_list([]), [])
        self.assertEqual(build_shopping_list([Recipe(title="Empty", steps=["Nothing to buy"])]), [])

    def test_recipes_are_not_modified(self):
        before = self.bolognese.to_dict()
        build_shopping_list([self.bolognese])
        self.assertEqual(self.bolognese.to_dict(), before)


class TestDisplayCleaning(unittest.TestCase):

    def test_parenthetical_and_preparation(self):
        self.assertEqual(clean_display_line("1 onion (red), finely chopped"), "1 onion")
        self.assertEqual(clean_display_line("2 carrots, peeled and diced"), "2 carrots")
        self.assertEqual(clean_display_line("100 g butter, softened"), "100 g butter")

    def test_for_suffix(self):
        self.assertEqual(clean_display_line("Olive oil for frying"), "Olive oil")
        self.assertEqual(clean_display_line("Icing sugar, for dusting"), "Icing sugar")

    def test_trailing_clause_with_ingredient_is_kept(self):
        self.assertEqual(clean_display_line("Salt, pepper"), "Salt, pepper")

    def test_trailing_descriptor_words(self):
        self.assertEqual(clean_display_line("2 tomatoes chopped"), "2 tomatoes")

    def test_base_name(self):
        self.assertEqual(base_ingredient_name("200 g spaghetti"), "spaghetti")
        self.assertEqual(base_ingredient_name("1 cup of flour"), "flour")
        self.assertEqual(base_ingredient_name("2 eggs, beaten"), "eggs")


if __name__ == '__main__':
    unittest.main()
